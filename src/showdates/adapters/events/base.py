from __future__ import annotations

from datetime import datetime
from typing import Protocol

from ...domain.models import EventRecord


class EventSourceError(RuntimeError):
    """Raised when upcoming events cannot be loaded from the database."""


class EventSource(Protocol):
    def get_upcoming_events(self, now: datetime | None = None) -> list[EventRecord]:
        """Return published events from the start of today, oldest first."""
