from .entities import (
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
from .errors import (
    FeedbackClientError,
    TransportError,
    ServerError,
    ClientValidationError,
    ViewClosedError,
)
from .interfaces import (
    IFeedbackStore,
    ISessionProvider,
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
    "FeedbackClientError",
    "TransportError",
    "ServerError",
    "ClientValidationError",
    "ViewClosedError",
    "IFeedbackStore",
    "ISessionProvider",
]
