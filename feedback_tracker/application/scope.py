import asyncio
import inspect
import logging
from typing import Any, Awaitable, Set

from feedback_tracker.domain import ViewClosedError


logger = logging.getLogger(__name__)


class ViewScope:
    """Ties asynchronous requests to the lifetime of one view.

    Every awaitable passed to ``run`` becomes a tracked task. ``close`` cancels
    the tasks still outstanding. A result that settles after the scope closed
    is turned into ``ViewClosedError``, even when the scope has been reopened
    since, so callers never write it to state.
    """

    def __init__(self, name: str):
        self._name = name
        self._tasks: Set[asyncio.Task] = set()
        self._closed = False
        self._generation = 0

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        """Number of requests still in flight."""
        return len(self._tasks)

    def open(self) -> None:
        self._closed = False

    def close(self) -> None:
        self._closed = True
        self._generation += 1
        if self._tasks:
            logger.debug(f"Cancelling {len(self._tasks)} request(s) of '{self._name}'")
        for task in list(self._tasks):
            task.cancel()

    async def run(self, awaitable: Awaitable[Any]) -> Any:
        if self._closed:
            if inspect.iscoroutine(awaitable):
                awaitable.close()
            raise ViewClosedError(self._name)

        generation = self._generation
        task = asyncio.ensure_future(awaitable)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

        try:
            result = await task
        except asyncio.CancelledError:
            # Cancelled by close(), not by whoever is awaiting us.
            if generation != self._generation and task.cancelled():
                raise ViewClosedError(self._name) from None
            raise

        if generation != self._generation:
            raise ViewClosedError(self._name)
        return result
