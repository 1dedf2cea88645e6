from .config import Settings, get_settings
from .gateway import HttpFeedbackStore
from .persistence import InMemoryFeedbackStore, create_demo_store, ConfiguredSessionProvider

__all__ = [
    "Settings",
    "get_settings",
    "HttpFeedbackStore",
    "InMemoryFeedbackStore",
    "create_demo_store",
    "ConfiguredSessionProvider",
]
