from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Literal, Sequence

from jinja2 import Environment, FileSystemLoader

from .domain.models import EventRecord
from .formatting import escape_html, escape_json, format_long_date, format_short_date
from .storage.db import format_db_timestamp

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "web" / "templates"

OutputFormat = Literal["html", "text", "json"]

TEXT_HEADER = "PROCHAINS SPECTACLES\n===================\n\n"
UNAVAILABLE_TEXT = "Erreur lors du chargement des événements.\n"
UNAVAILABLE_JSON_MESSAGE = "Erreur de base de données"

# Escaping is applied explicitly through the escape_html filter.
templates = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
)
templates.filters["escape_html"] = escape_html


def _build_html_event_rows(
    events: Sequence[EventRecord],
    date_formatter: Callable,
) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for event in events:
        description = event.description
        rows.append(
            {
                "date_label": date_formatter(event.occurs_at),
                "title": event.title,
                "venue": event.venue,
                "description": description if description and description.strip() else None,
            }
        )
    return rows


def render_events_html(
    events: Sequence[EventRecord],
    *,
    date_formatter: Callable = format_short_date,
) -> str:
    """Render the dates section as an HTML fragment.

    An empty sequence renders the "no events" block instead of the list.
    """
    rows = _build_html_event_rows(events, date_formatter)
    return templates.get_template("events.html").render(events=rows)


def render_events_text(events: Sequence[EventRecord]) -> str:
    lines = [f"• {format_short_date(event.occurs_at)} - {event.venue}\n" for event in events]
    return TEXT_HEADER + "".join(lines)


def _json_member(name: str, value: str | None) -> str:
    return f'      "{name}": "{escape_json(value)}"'


def render_events_json(events: Sequence[EventRecord]) -> str:
    items: list[str] = []
    for event in events:
        members = [
            _json_member("title", event.title),
            _json_member("date", format_db_timestamp(event.occurs_at)),
            _json_member("venue", event.venue),
            _json_member("description", event.description),
            _json_member("formatted_date", format_short_date(event.occurs_at)),
        ]
        items.append("    {\n" + ",\n".join(members) + "\n    }")

    if not items:
        return '{\n  "events": []\n}'
    return '{\n  "events": [\n' + ",\n".join(items) + "\n  ]\n}"


def render_unavailable_html() -> str:
    return templates.get_template("unavailable.html").render()


def render_unavailable_text() -> str:
    return UNAVAILABLE_TEXT


def render_unavailable_json() -> str:
    return f'{{"error": "{escape_json(UNAVAILABLE_JSON_MESSAGE)}"}}'


def render_page(body_html: str, *, title: str, social_handle: str | None = None) -> str:
    """Wrap an already rendered fragment in a standalone French HTML page."""
    return templates.get_template("page.html").render(
        body_html=body_html,
        title=title,
        social_handle=social_handle,
    )


RENDERERS: dict[OutputFormat, Callable[[Sequence[EventRecord]], str]] = {
    "html": render_events_html,
    "text": render_events_text,
    "json": render_events_json,
}

UNAVAILABLE_RENDERERS: dict[OutputFormat, Callable[[], str]] = {
    "html": render_unavailable_html,
    "text": render_unavailable_text,
    "json": render_unavailable_json,
}

DATE_FORMATTERS: dict[str, Callable] = {
    "short": format_short_date,
    "long": format_long_date,
}
