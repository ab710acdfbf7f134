from .db import format_db_timestamp, initialize_database, insert_event, open_db

__all__ = [
    "format_db_timestamp",
    "initialize_database",
    "insert_event",
    "open_db",
]
