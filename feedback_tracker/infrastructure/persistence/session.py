import logging
from typing import Optional

from feedback_tracker.domain import CurrentUser, ISessionProvider, Role
from feedback_tracker.infrastructure.config import Settings


logger = logging.getLogger(__name__)


class ConfiguredSessionProvider(ISessionProvider):
    """Session built from settings; identity issuance happens elsewhere."""

    def __init__(self, settings: Settings):
        self._user: Optional[CurrentUser] = None
        if settings.user_email:
            self._user = CurrentUser(
                email=settings.user_email,
                role=Role(settings.user_role),
                name=settings.user_name or None,
            )

    def current_user(self) -> Optional[CurrentUser]:
        return self._user

    def logout(self) -> None:
        if self._user is not None:
            logger.info(f"Signed out {self._user.email}")
        self._user = None
