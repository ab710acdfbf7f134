from __future__ import annotations

import sqlite3
from datetime import datetime, time
from pathlib import Path

from pydantic import ValidationError

from ...domain.models import EventRecord, EventStatus
from ...storage.db import format_db_timestamp, open_readonly_db
from .base import EventSourceError

UPCOMING_EVENTS_QUERY = """
SELECT title, date, venue, description, status
FROM events
WHERE status = ?
AND date >= ?
ORDER BY date ASC
"""


def _row_to_event(row: sqlite3.Row) -> EventRecord:
    return EventRecord(
        title=row["title"],
        occurs_at=datetime.fromisoformat(row["date"]),
        venue=row["venue"],
        description=row["description"],
        status=row["status"],
    )


class SqliteEventSource:
    def __init__(self, *, db_path: Path) -> None:
        self._db_path = Path(db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def get_upcoming_events(self, now: datetime | None = None) -> list[EventRecord]:
        reference = now or datetime.now()
        day_start = datetime.combine(reference.date(), time.min)

        try:
            with open_readonly_db(self._db_path) as connection:
                rows = connection.execute(
                    UPCOMING_EVENTS_QUERY,
                    (EventStatus.PUBLISHED.value, format_db_timestamp(day_start)),
                ).fetchall()
        except sqlite3.Error as exc:
            raise EventSourceError(f"Unable to query events database: {self._db_path}") from exc

        try:
            return [_row_to_event(row) for row in rows]
        except (ValidationError, ValueError, TypeError) as exc:
            raise EventSourceError(f"Malformed event row in database: {self._db_path}") from exc
