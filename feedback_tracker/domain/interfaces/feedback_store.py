from abc import ABC, abstractmethod
from typing import List, Optional

from feedback_tracker.domain.entities import FeedbackDraft, FeedbackItem, TeamRosterEntry


class IFeedbackStore(ABC):
    """Interface for the remote feedback store.

    Implementations raise ``FeedbackClientError`` subclasses on failure and
    return only after the store has confirmed the operation.
    """

    @abstractmethod
    async def fetch_employee_timeline(self) -> List[FeedbackItem]:
        """Feedback addressed to the signed-in employee, in store order."""
        pass

    @abstractmethod
    async def acknowledge(self, feedback_id: int) -> None:
        """Mark a feedback item as acknowledged by its recipient."""
        pass

    @abstractmethod
    async def fetch_roster(self) -> List[TeamRosterEntry]:
        """Direct reports of the signed-in manager with feedback aggregates."""
        pass

    @abstractmethod
    async def fetch_feedback(self, employee_id: int) -> List[FeedbackItem]:
        """All feedback items for one employee."""
        pass

    @abstractmethod
    async def create_feedback(self, draft: FeedbackDraft) -> Optional[FeedbackItem]:
        """Create a feedback item. Returns the stored item when echoed back."""
        pass

    @abstractmethod
    async def update_feedback(self, feedback_id: int, draft: FeedbackDraft) -> Optional[FeedbackItem]:
        """Replace the content of an existing feedback item."""
        pass

    @abstractmethod
    async def delete_feedback(self, feedback_id: int) -> None:
        """Delete a feedback item."""
        pass
