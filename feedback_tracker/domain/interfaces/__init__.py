from .feedback_store import IFeedbackStore
from .session_provider import ISessionProvider

__all__ = [
    "IFeedbackStore",
    "ISessionProvider",
]
