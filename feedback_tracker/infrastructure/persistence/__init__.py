from .memory_store import InMemoryFeedbackStore, create_demo_store
from .session import ConfiguredSessionProvider

__all__ = [
    "InMemoryFeedbackStore",
    "create_demo_store",
    "ConfiguredSessionProvider",
]
