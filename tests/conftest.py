from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable

import pytest

from showdates.domain.models import EventRecord
from showdates.settings import load_settings


@pytest.fixture
def make_event() -> Callable[..., EventRecord]:
    def _make_event(
        title: str = "Le Spectacle",
        occurs_at: datetime = datetime(2025, 2, 15, 20, 0),
        venue: str = "Théâtre Corona",
        description: str | None = None,
    ) -> EventRecord:
        return EventRecord(
            title=title,
            occurs_at=occurs_at,
            venue=venue,
            description=description,
            status="published",
        )

    return _make_event


@pytest.fixture
def corrupt_db(tmp_path: Path) -> Path:
    path = tmp_path / "corrupt.db"
    path.write_bytes(b"this is not a sqlite database" * 64)
    return path


@pytest.fixture
def settings_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    config_path = tmp_path / "showdates.yaml"
    config_path.write_text(
        "site:\n"
        "  title: \"Sam Hébert - Prochains Spectacles\"\n"
        "  social_handle: \"@samheberthumoriste\"\n"
        "display:\n"
        "  page_date_style: long\n"
        "  fragment_date_style: short\n",
        encoding="utf-8",
    )
    db_path = tmp_path / "data" / "showdates.db"
    monkeypatch.setenv("SHOWDATES_ENV", "test")
    monkeypatch.setenv("SHOWDATES_CONFIG_PATH", str(config_path))
    monkeypatch.setenv("SHOWDATES_DB_PATH", str(db_path))
    load_settings.cache_clear()
    yield {"config_path": config_path, "db_path": db_path}
    load_settings.cache_clear()
