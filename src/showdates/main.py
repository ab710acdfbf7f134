from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from .adapters.events import EventSource, EventSourceError, SqliteEventSource
from .domain.models import EventRecord
from .rendering import (
    DATE_FORMATTERS,
    RENDERERS,
    UNAVAILABLE_RENDERERS,
    render_events_html,
    render_events_json,
    render_events_text,
    render_page,
    render_unavailable_html,
    render_unavailable_json,
    render_unavailable_text,
)
from .settings import AppSettings, load_settings

LOGGER = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json; charset=utf-8"

MEDIA_TYPES = {
    "html": "text/html; charset=utf-8",
    "text": "text/plain; charset=utf-8",
    "json": JSON_MEDIA_TYPE,
}


def _get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def _get_event_source(request: Request) -> EventSource:
    return request.app.state.event_source


def _load_events(request: Request) -> list[EventRecord] | None:
    source = _get_event_source(request)
    try:
        return source.get_upcoming_events()
    except EventSourceError as exc:
        LOGGER.warning("Upcoming events could not be loaded: %s", exc)
        return None


def _render_fragment(settings: AppSettings, events: list[EventRecord]) -> str:
    date_formatter = DATE_FORMATTERS[settings.yaml.display.fragment_date_style]
    return render_events_html(events, date_formatter=date_formatter)


@asynccontextmanager
async def lifespan(application: FastAPI):
    settings = load_settings()

    application.state.settings = settings
    application.state.event_source = SqliteEventSource(db_path=settings.db_path)
    application.state.started_at_utc = datetime.now(timezone.utc)
    LOGGER.info("Serving upcoming events from %s", settings.db_path)

    yield


app = FastAPI(title="Showdates", version="0.1.0", lifespan=lifespan)


@app.get("/", response_class=HTMLResponse)
async def events_page(request: Request) -> HTMLResponse:
    settings = _get_settings(request)
    events = _load_events(request)
    if events is None:
        body_html = render_unavailable_html()
    else:
        date_formatter = DATE_FORMATTERS[settings.yaml.display.page_date_style]
        body_html = render_events_html(events, date_formatter=date_formatter)

    return HTMLResponse(
        render_page(
            body_html,
            title=settings.yaml.site.title,
            social_handle=settings.yaml.site.social_handle,
        )
    )


@app.get("/events")
async def events_fragment(request: Request, format: str = "html") -> Response:
    output_format = format.strip().lower()
    if output_format not in RENDERERS:
        raise HTTPException(status_code=400, detail=f"Unsupported format: {format}")

    media_type = MEDIA_TYPES[output_format]
    events = _load_events(request)
    if events is None:
        status_code = 500 if output_format == "json" else 200
        return Response(
            UNAVAILABLE_RENDERERS[output_format](),
            status_code=status_code,
            media_type=media_type,
        )

    if output_format == "html":
        content = _render_fragment(_get_settings(request), events)
    else:
        content = RENDERERS[output_format](events)
    return Response(content, media_type=media_type)


@app.get("/events.txt", response_class=PlainTextResponse)
async def events_text(request: Request) -> PlainTextResponse:
    events = _load_events(request)
    if events is None:
        return PlainTextResponse(render_unavailable_text())
    return PlainTextResponse(render_events_text(events))


@app.get("/api/events")
async def events_json(request: Request) -> Response:
    events = _load_events(request)
    if events is None:
        return Response(render_unavailable_json(), status_code=500, media_type=JSON_MEDIA_TYPE)
    return Response(render_events_json(events), media_type=JSON_MEDIA_TYPE)


@app.get("/health", response_class=JSONResponse)
async def health(request: Request) -> JSONResponse:
    settings = _get_settings(request)
    return JSONResponse(
        {
            "status": "ok",
            "service": "showdates",
            "environment": settings.env.showdates_env,
            "db_path": str(settings.db_path),
            "started_at_utc": request.app.state.started_at_utc.isoformat(),
            "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        }
    )
