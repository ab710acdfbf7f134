"""Entry point for ``python -m showdates``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .adapters.events import EventSourceError, SqliteEventSource
from .rendering import DATE_FORMATTERS, RENDERERS, UNAVAILABLE_RENDERERS, render_events_html
from .settings import load_settings

LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m showdates",
        description="Print upcoming published shows.",
    )
    parser.add_argument(
        "--format",
        choices=sorted(RENDERERS),
        default="html",
        help="Output dialect (default: html).",
    )
    parser.add_argument(
        "--date-style",
        choices=sorted(DATE_FORMATTERS),
        default="short",
        help="Date form used by the html dialect (default: short).",
    )
    parser.add_argument(
        "--db-path",
        type=Path,
        help="Events database (defaults to SHOWDATES_DB_PATH from the settings).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Return 0 when events were rendered, 1 when the fallback was printed."""

    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    db_path = args.db_path
    if db_path is None:
        db_path = load_settings().db_path

    source = SqliteEventSource(db_path=db_path)
    try:
        events = source.get_upcoming_events()
    except EventSourceError as exc:
        LOGGER.warning("Upcoming events could not be loaded: %s", exc)
        sys.stdout.write(UNAVAILABLE_RENDERERS[args.format]())
        return 1

    if args.format == "html":
        output = render_events_html(events, date_formatter=DATE_FORMATTERS[args.date_style])
    else:
        output = RENDERERS[args.format](events)
    sys.stdout.write(output)
    if not output.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
