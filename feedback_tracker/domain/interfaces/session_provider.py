from abc import ABC, abstractmethod
from typing import Optional

from feedback_tracker.domain.entities import CurrentUser


class ISessionProvider(ABC):
    """Interface for the auth/session context."""

    @abstractmethod
    def current_user(self) -> Optional[CurrentUser]:
        """Signed-in user, or None when signed out."""
        pass

    @abstractmethod
    def logout(self) -> None:
        """End the current session."""
        pass
