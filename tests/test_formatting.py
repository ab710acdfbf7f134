from __future__ import annotations

from datetime import datetime

import pytest

from showdates.formatting import (
    FRENCH_MONTHS,
    FRENCH_WEEKDAYS,
    escape_html,
    escape_json,
    format_long_date,
    format_short_date,
)

EXPECTED_MONTHS = [
    "janvier",
    "février",
    "mars",
    "avril",
    "mai",
    "juin",
    "juillet",
    "août",
    "septembre",
    "octobre",
    "novembre",
    "décembre",
]


def test_short_date_matches_quebec_format() -> None:
    assert format_short_date(datetime(2025, 2, 15, 20, 0)) == "15 février 2025 - 20h00"


@pytest.mark.parametrize("month", range(1, 13))
def test_short_date_uses_french_month_name(month: int) -> None:
    rendered = format_short_date(datetime(2025, month, 3, 19, 30))
    assert rendered == f"3 {EXPECTED_MONTHS[month - 1]} 2025 - 19h30"


def test_clock_is_zero_padded() -> None:
    assert format_short_date(datetime(2025, 7, 1, 5, 0)).endswith(" - 05h00")
    assert format_short_date(datetime(2025, 7, 1, 0, 7)).endswith(" - 00h07")


def test_long_date_includes_weekday() -> None:
    assert format_long_date(datetime(2025, 2, 14, 20, 0)) == "Vendredi 14 février 2025 à 20h00"


@pytest.mark.parametrize(
    ("day", "weekday"),
    [
        (16, "Dimanche"),
        (17, "Lundi"),
        (18, "Mardi"),
        (19, "Mercredi"),
        (20, "Jeudi"),
        (21, "Vendredi"),
        (22, "Samedi"),
    ],
)
def test_long_date_covers_every_weekday(day: int, weekday: str) -> None:
    rendered = format_long_date(datetime(2025, 2, day, 9, 5))
    assert rendered == f"{weekday} {day} février 2025 à 09h05"


def test_weekday_table_starts_on_sunday() -> None:
    assert FRENCH_WEEKDAYS[0] == "Dimanche"
    assert FRENCH_WEEKDAYS[6] == "Samedi"
    assert len(FRENCH_WEEKDAYS) == 7


def test_date_ignores_seconds() -> None:
    assert format_short_date(datetime(2025, 12, 31, 23, 59, 59)) == "31 décembre 2025 - 23h59"


def test_month_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        FRENCH_MONTHS[1] = "january"  # type: ignore[index]


def test_escape_html_escapes_ampersand_first() -> None:
    assert escape_html("<a>&</a>") == "&lt;a&gt;&amp;&lt;/a&gt;"


def test_escape_html_quotes_and_apostrophes() -> None:
    assert escape_html('L\'Olympia "Montréal"') == "L&#39;Olympia &quot;Montréal&quot;"


@pytest.mark.parametrize("value", [None, ""])
def test_escape_handles_missing_text(value: str | None) -> None:
    assert escape_html(value) == ""
    assert escape_json(value) == ""


def test_escape_json_quotes_and_newline() -> None:
    assert escape_json('He said "hi"\n') == 'He said \\"hi\\"\\n'


def test_escape_json_backslash_first() -> None:
    assert escape_json("C:\\shows\t\r") == "C:\\\\shows\\t\\r"


def test_escape_json_other_control_characters() -> None:
    assert escape_json("a\x01b") == "a\\u0001b"
