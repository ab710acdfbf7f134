from __future__ import annotations

from datetime import datetime
from types import MappingProxyType

FRENCH_MONTHS = MappingProxyType(
    {
        1: "janvier",
        2: "février",
        3: "mars",
        4: "avril",
        5: "mai",
        6: "juin",
        7: "juillet",
        8: "août",
        9: "septembre",
        10: "octobre",
        11: "novembre",
        12: "décembre",
    }
)

# Sunday is 0.
FRENCH_WEEKDAYS = MappingProxyType(
    {
        0: "Dimanche",
        1: "Lundi",
        2: "Mardi",
        3: "Mercredi",
        4: "Jeudi",
        5: "Vendredi",
        6: "Samedi",
    }
)


def _clock(value: datetime) -> str:
    return f"{value.hour:02d}h{value.minute:02d}"


def format_short_date(value: datetime) -> str:
    """Return ``15 février 2025 - 20h00``."""
    month_name = FRENCH_MONTHS[value.month]
    return f"{value.day} {month_name} {value.year} - {_clock(value)}"


def format_long_date(value: datetime) -> str:
    """Return ``Vendredi 14 février 2025 à 20h00``."""
    weekday_name = FRENCH_WEEKDAYS[value.isoweekday() % 7]
    month_name = FRENCH_MONTHS[value.month]
    return f"{weekday_name} {value.day} {month_name} {value.year} à {_clock(value)}"
