from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class EventStatus(str, Enum):
    DRAFT = "draft"
    PENDING = "pending"
    PUBLISHED = "published"
    CANCELLED = "cancelled"


class EventRecord(BaseModel):
    """One show as read from the events table.

    ``occurs_at`` is naive and already in the venue's local time.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    title: str
    occurs_at: datetime
    venue: str
    description: str | None = None
    status: EventStatus = EventStatus.PUBLISHED

    @field_validator("occurs_at")
    @classmethod
    def validate_naive_local_time(cls, value: datetime) -> datetime:
        if value.tzinfo is not None:
            raise ValueError("event occurs_at must be a naive local timestamp")
        return value
