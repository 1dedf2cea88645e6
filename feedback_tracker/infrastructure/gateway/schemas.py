"""Wire models for the feedback REST API.

The API mixes snake_case and camelCase keys, so aliases are declared
explicitly and population by field name stays enabled for tests.
"""
from datetime import datetime
from typing import List

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from feedback_tracker.domain import (
    Employee,
    FeedbackItem,
    Sentiment,
    SentimentCounts,
    TeamRosterEntry,
)


class EmployeeWire(BaseModel):
    id: int
    name: str
    email: str

    def to_domain(self) -> Employee:
        return Employee(id=self.id, name=self.name, email=self.email)


class FeedbackItemWire(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    employee_id: int = Field(validation_alias=AliasChoices("employee_id", "employeeId"))
    strengths: str
    areas_to_improve: str = Field(validation_alias=AliasChoices("areasToImprove", "areas_to_improve"))
    sentiment: Sentiment
    acknowledged: bool = False
    created_at: datetime = Field(validation_alias=AliasChoices("createdAt", "created_at"))

    @field_validator("sentiment", mode="before")
    @classmethod
    def _parse_sentiment(cls, value):
        return Sentiment.parse(value)

    def to_domain(self) -> FeedbackItem:
        return FeedbackItem(
            id=self.id,
            employee_id=self.employee_id,
            strengths=self.strengths,
            areas_to_improve=self.areas_to_improve,
            sentiment=self.sentiment,
            acknowledged=self.acknowledged,
            created_at=self.created_at,
        )


class SentimentCountsWire(BaseModel):
    POSITIVE: int = Field(default=0, ge=0)
    NEUTRAL: int = Field(default=0, ge=0)
    NEGATIVE: int = Field(default=0, ge=0)

    def to_domain(self) -> SentimentCounts:
        return SentimentCounts(
            positive=self.POSITIVE,
            neutral=self.NEUTRAL,
            negative=self.NEGATIVE,
        )


class TeamRosterEntryWire(BaseModel):
    employee: EmployeeWire
    feedback_count: int = Field(default=0, ge=0)
    sentiments: SentimentCountsWire = Field(default_factory=SentimentCountsWire)

    def to_domain(self) -> TeamRosterEntry:
        return TeamRosterEntry(
            employee=self.employee.to_domain(),
            feedback_count=self.feedback_count,
            sentiments=self.sentiments.to_domain(),
        )


class RosterResponseWire(BaseModel):
    team: List[TeamRosterEntryWire]


class TimelineResponseWire(BaseModel):
    timeline: List[FeedbackItemWire]
