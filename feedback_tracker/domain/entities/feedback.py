from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Dict, Optional


class Sentiment(str, Enum):
    """Tone classification attached to one feedback item."""
    POSITIVE = "POSITIVE"
    NEUTRAL = "NEUTRAL"
    NEGATIVE = "NEGATIVE"

    @property
    def label(self) -> str:
        """Display form, e.g. 'Positive'."""
        return self.value.title()

    @classmethod
    def parse(cls, value: str) -> "Sentiment":
        """Parse a wire value, case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(
                f"Invalid sentiment {value!r}. Must be one of: {[s.value for s in cls]}"
            ) from None


class Role(str, Enum):
    """Role of the signed-in user."""
    MANAGER = "Manager"
    EMPLOYEE = "Employee"


@dataclass(frozen=True)
class Employee:
    """Domain entity representing an employee. Owned by the remote store."""
    id: int
    name: str
    email: str


@dataclass(frozen=True)
class FeedbackItem:
    """Domain entity representing one piece of feedback for an employee."""
    id: int
    employee_id: int
    strengths: str
    areas_to_improve: str
    sentiment: Sentiment
    acknowledged: bool = False
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def status_label(self) -> str:
        return "Acknowledged" if self.acknowledged else "Pending"

    def acknowledge(self) -> "FeedbackItem":
        """Return an acknowledged copy. There is no reverse transition."""
        return replace(self, acknowledged=True)


@dataclass(frozen=True)
class SentimentCounts:
    """Per-sentiment breakdown of an employee's feedback."""
    positive: int = 0
    neutral: int = 0
    negative: int = 0

    @property
    def total(self) -> int:
        return self.positive + self.neutral + self.negative

    def to_dict(self) -> Dict[str, int]:
        return {
            Sentiment.POSITIVE.value: self.positive,
            Sentiment.NEUTRAL.value: self.neutral,
            Sentiment.NEGATIVE.value: self.negative,
        }


@dataclass(frozen=True)
class TeamRosterEntry:
    """An employee plus server-computed feedback aggregates."""
    employee: Employee
    feedback_count: int = 0
    sentiments: SentimentCounts = field(default_factory=SentimentCounts)


@dataclass(frozen=True)
class FeedbackDraft:
    """Validated create/update payload built by the feedback editor."""
    employee_id: int
    strengths: str
    areas_to_improve: str
    sentiment: Sentiment

    def to_payload(self) -> dict:
        """Exact request body expected by POST/PUT /feedback."""
        return {
            "employee_id": self.employee_id,
            "strengths": self.strengths,
            "areasToImprove": self.areas_to_improve,
            "sentiment": self.sentiment.value,
        }


@dataclass(frozen=True)
class CurrentUser:
    """Identity of the signed-in user, supplied by the session provider."""
    email: str
    role: Role
    name: Optional[str] = None


@dataclass(frozen=True)
class NavLink:
    label: str
    path: str
    icon: Optional[str] = None


@dataclass(frozen=True)
class DeleteConfirmation:
    """Pending confirmation step before a feedback item is deleted."""
    feedback_id: int
    title: str = "Delete feedback"
    message: str = "Are you sure you want to delete this feedback?"
    confirm_label: str = "Delete"
    cancel_label: str = "Cancel"
