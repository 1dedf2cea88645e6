from .feedback import (
    Sentiment,
    Role,
    Employee,
    FeedbackItem,
    SentimentCounts,
    TeamRosterEntry,
    FeedbackDraft,
    CurrentUser,
    NavLink,
    DeleteConfirmation,
)

__all__ = [
    "Sentiment",
    "Role",
    "Employee",
    "FeedbackItem",
    "SentimentCounts",
    "TeamRosterEntry",
    "FeedbackDraft",
    "CurrentUser",
    "NavLink",
    "DeleteConfirmation",
]
