import logging
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from feedback_tracker.domain import (
    Employee,
    FeedbackDraft,
    FeedbackItem,
    IFeedbackStore,
    Sentiment,
    SentimentCounts,
    ServerError,
    TeamRosterEntry,
)


logger = logging.getLogger(__name__)


class InMemoryFeedbackStore(IFeedbackStore):
    """In-memory implementation of the feedback store.

    Mirrors the REST API: validates payloads, answers 404 for unknown ids and
    recomputes roster aggregates from the stored items on every read.
    """

    def __init__(
        self,
        employees: Optional[List[Employee]] = None,
        current_employee_id: int = 0,
    ):
        self._employees: Dict[int, Employee] = {e.id: e for e in employees or []}
        self._items: Dict[int, FeedbackItem] = {}
        self._next_id = 1
        self._current_employee_id = current_employee_id

    def add_employee(self, employee: Employee) -> None:
        self._employees[employee.id] = employee

    def add_item(self, item: FeedbackItem) -> FeedbackItem:
        """Insert a fully-formed item, keeping its id and timestamps."""
        self._items[item.id] = item
        self._next_id = max(self._next_id, item.id + 1)
        return item

    def get_all(self) -> List[FeedbackItem]:
        return list(self._items.values())

    async def fetch_employee_timeline(self) -> List[FeedbackItem]:
        items = [i for i in self._items.values() if i.employee_id == self._current_employee_id]
        return sorted(items, key=lambda i: i.created_at, reverse=True)

    async def acknowledge(self, feedback_id: int) -> None:
        item = self._get(feedback_id)
        self._items[feedback_id] = item.acknowledge()
        logger.info(f"Feedback {feedback_id} acknowledged")

    async def fetch_roster(self) -> List[TeamRosterEntry]:
        roster = []
        for employee in self._employees.values():
            counts = {s: 0 for s in Sentiment}
            for item in self._items.values():
                if item.employee_id == employee.id:
                    counts[item.sentiment] += 1
            sentiments = SentimentCounts(
                positive=counts[Sentiment.POSITIVE],
                neutral=counts[Sentiment.NEUTRAL],
                negative=counts[Sentiment.NEGATIVE],
            )
            roster.append(TeamRosterEntry(
                employee=employee,
                feedback_count=sentiments.total,
                sentiments=sentiments,
            ))
        return roster

    async def fetch_feedback(self, employee_id: int) -> List[FeedbackItem]:
        if employee_id not in self._employees:
            raise ServerError(404, "Employee not found")
        items = [i for i in self._items.values() if i.employee_id == employee_id]
        return sorted(items, key=lambda i: i.created_at, reverse=True)

    async def create_feedback(self, draft: FeedbackDraft) -> Optional[FeedbackItem]:
        self._validate(draft)
        item = FeedbackItem(
            id=self._next_id,
            employee_id=draft.employee_id,
            strengths=draft.strengths,
            areas_to_improve=draft.areas_to_improve,
            sentiment=draft.sentiment,
        )
        self._next_id += 1
        self._items[item.id] = item
        logger.info(f"Feedback {item.id} created for employee {draft.employee_id}")
        return item

    async def update_feedback(self, feedback_id: int, draft: FeedbackDraft) -> Optional[FeedbackItem]:
        existing = self._get(feedback_id)
        self._validate(draft)
        item = FeedbackItem(
            id=existing.id,
            employee_id=draft.employee_id,
            strengths=draft.strengths,
            areas_to_improve=draft.areas_to_improve,
            sentiment=draft.sentiment,
            acknowledged=existing.acknowledged,
            created_at=existing.created_at,
        )
        self._items[feedback_id] = item
        logger.info(f"Feedback {feedback_id} updated")
        return item

    async def delete_feedback(self, feedback_id: int) -> None:
        self._get(feedback_id)
        del self._items[feedback_id]
        logger.info(f"Feedback {feedback_id} deleted")

    def _get(self, feedback_id: int) -> FeedbackItem:
        item = self._items.get(feedback_id)
        if item is None:
            raise ServerError(404, "Feedback not found")
        return item

    def _validate(self, draft: FeedbackDraft) -> None:
        if draft.employee_id not in self._employees:
            raise ServerError(404, "Employee not found")
        if not draft.strengths.strip():
            raise ServerError(400, "Strengths are required")
        if not draft.areas_to_improve.strip():
            raise ServerError(400, "Areas to improve are required")


def create_demo_store(current_employee_id: int = 1) -> InMemoryFeedbackStore:
    """Store seeded with a small team, used when the mock store is enabled."""
    store = InMemoryFeedbackStore(
        employees=[
            Employee(id=1, name="Alice Johnson", email="alice@example.com"),
            Employee(id=2, name="Bob Smith", email="bob@example.com"),
            Employee(id=3, name="Carol White", email="carol@example.com"),
        ],
        current_employee_id=current_employee_id,
    )
    now = datetime.now()
    seed = [
        (1, "Clear communication in sprint reviews", "Delegate more of the release work", Sentiment.POSITIVE, True, 20),
        (1, "Reliable delivery on the billing migration", "Document design decisions earlier", Sentiment.NEUTRAL, False, 6),
        (2, "Strong debugging skills", "Missed two deadlines this quarter", Sentiment.NEGATIVE, False, 3),
    ]
    for idx, (employee_id, strengths, areas, sentiment, acknowledged, days_ago) in enumerate(seed, start=1):
        store.add_item(FeedbackItem(
            id=idx,
            employee_id=employee_id,
            strengths=strengths,
            areas_to_improve=areas,
            sentiment=sentiment,
            acknowledged=acknowledged,
            created_at=now - timedelta(days=days_ago),
        ))
    return store
