from .http_store import HttpFeedbackStore

__all__ = ["HttpFeedbackStore"]
