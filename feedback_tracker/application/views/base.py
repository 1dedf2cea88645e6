import logging
from typing import Any, Awaitable, FrozenSet, Optional, Set

from feedback_tracker.application.scope import ViewScope


logger = logging.getLogger(__name__)


class BaseView:
    """Common lifetime, in-flight and error state of a view.

    A view owns its local state; nothing here is shared between views.
    """

    name = "view"

    def __init__(self):
        self._scope = ViewScope(self.name)
        self._in_flight: Set[str] = set()
        self.error: Optional[str] = None
        self.mounted = False

    @property
    def busy_actions(self) -> FrozenSet[str]:
        """Trigger keys whose request is still in flight."""
        return frozenset(self._in_flight)

    def is_busy(self, action: str) -> bool:
        return action in self._in_flight

    def unmount(self) -> None:
        """Cancel outstanding requests; their late results are ignored."""
        self._scope.close()
        self.mounted = False

    def _open(self) -> None:
        self._scope.open()
        self.mounted = True

    async def _call(self, awaitable: Awaitable[Any]) -> Any:
        return await self._scope.run(awaitable)

    def _begin(self, action: str) -> bool:
        """Disable a trigger for the duration of its request."""
        if action in self._in_flight:
            logger.debug(f"{self.name}: '{action}' already in flight, ignoring trigger")
            return False
        self._in_flight.add(action)
        return True

    def _end(self, action: str) -> None:
        self._in_flight.discard(action)
