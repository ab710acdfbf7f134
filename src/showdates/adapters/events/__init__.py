from .base import EventSource, EventSourceError
from .sqlite import SqliteEventSource

__all__ = [
    "EventSource",
    "EventSourceError",
    "SqliteEventSource",
]
