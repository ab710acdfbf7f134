from .dates import FRENCH_MONTHS, FRENCH_WEEKDAYS, format_long_date, format_short_date
from .escaping import escape_html, escape_json

__all__ = [
    "FRENCH_MONTHS",
    "FRENCH_WEEKDAYS",
    "escape_html",
    "escape_json",
    "format_long_date",
    "format_short_date",
]
