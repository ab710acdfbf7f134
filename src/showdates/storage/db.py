from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator

EVENTS_TABLE_SCHEMA = """
CREATE TABLE IF NOT EXISTS events (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    date TEXT NOT NULL,
    venue TEXT NOT NULL,
    description TEXT,
    status TEXT NOT NULL DEFAULT 'draft'
);
CREATE INDEX IF NOT EXISTS idx_events_status_date ON events (status, date);
"""

# Lexicographic order of this format matches chronological order.
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_db_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


def _prepare_db_path(db_path: Path) -> Path:
    normalized = Path(db_path)
    normalized.parent.mkdir(parents=True, exist_ok=True)
    return normalized


def connect(db_path: Path) -> sqlite3.Connection:
    normalized = _prepare_db_path(db_path)
    connection = sqlite3.connect(normalized)
    connection.row_factory = sqlite3.Row
    return connection


def connect_readonly(db_path: Path) -> sqlite3.Connection:
    """Open an existing database without creating or modifying anything.

    A missing file raises ``sqlite3.OperationalError``.
    """
    uri = f"{Path(db_path).resolve().as_uri()}?mode=ro"
    connection = sqlite3.connect(uri, uri=True)
    connection.row_factory = sqlite3.Row
    return connection


def ensure_schema(connection: sqlite3.Connection) -> None:
    connection.executescript(EVENTS_TABLE_SCHEMA)
    connection.commit()


@contextmanager
def open_db(db_path: Path) -> Iterator[sqlite3.Connection]:
    connection = connect(db_path)
    try:
        ensure_schema(connection)
        yield connection
    finally:
        connection.close()


@contextmanager
def open_readonly_db(db_path: Path) -> Iterator[sqlite3.Connection]:
    connection = connect_readonly(db_path)
    try:
        yield connection
    finally:
        connection.close()


def initialize_database(db_path: Path) -> None:
    with open_db(db_path):
        return


def insert_event(
    db_path: Path,
    *,
    title: str,
    occurs_at: datetime,
    venue: str,
    description: str | None = None,
    status: str = "draft",
) -> int:
    with open_db(db_path) as connection:
        cursor = connection.execute(
            """
            INSERT INTO events (title, date, venue, description, status)
            VALUES (?, ?, ?, ?, ?)
            """,
            (title, format_db_timestamp(occurs_at), venue, description, status),
        )
        connection.commit()
        return int(cursor.lastrowid)
