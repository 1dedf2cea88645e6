import logging
from typing import List, Optional

from feedback_tracker.domain import (
    FeedbackClientError,
    FeedbackItem,
    IFeedbackStore,
    ViewClosedError,
)
from feedback_tracker.application.views.base import BaseView


logger = logging.getLogger(__name__)


class EmployeeFeedbackViewer(BaseView):
    """Feedback timeline of the signed-in employee.

    The timeline keeps the order returned by the store. Acknowledging patches
    a single item, and only after the store confirmed the call.
    """

    name = "employee-viewer"

    def __init__(self, store: IFeedbackStore):
        super().__init__()
        self._store = store
        self.timeline: List[FeedbackItem] = []
        self.loading = True

    @property
    def pending_count(self) -> int:
        return sum(1 for item in self.timeline if not item.acknowledged)

    def find(self, feedback_id: int) -> Optional[FeedbackItem]:
        return next((i for i in self.timeline if i.id == feedback_id), None)

    async def mount(self) -> None:
        self._open()
        await self.load()

    async def load(self) -> bool:
        self.loading = True
        self.error = None
        try:
            timeline = await self._call(self._store.fetch_employee_timeline())
        except ViewClosedError:
            return False
        except FeedbackClientError as e:
            self.error = "Failed to load feedback"
            logger.error(f"Error fetching timeline: {e}")
            return False
        finally:
            self.loading = False

        self.timeline = timeline
        return True

    async def acknowledge(self, feedback_id: int) -> bool:
        item = self.find(feedback_id)
        if item is None or item.acknowledged:
            return False
        action = f"acknowledge:{feedback_id}"
        if not self._begin(action):
            return False

        try:
            await self._call(self._store.acknowledge(feedback_id))
        except ViewClosedError:
            return False
        except FeedbackClientError as e:
            logger.error(f"Acknowledge error for feedback {feedback_id}: {e}")
            self.error = "Failed to acknowledge feedback"
            return False
        finally:
            self._end(action)

        self.timeline = [
            i.acknowledge() if i.id == feedback_id else i
            for i in self.timeline
        ]
        return True
