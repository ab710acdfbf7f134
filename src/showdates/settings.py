from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class SiteSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = "Prochains spectacles"
    social_handle: str | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError("site.title must not be empty")
        return text

    @field_validator("social_handle")
    @classmethod
    def validate_social_handle(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        return text or None


class DisplaySettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    page_date_style: Literal["short", "long"] = "long"
    fragment_date_style: Literal["short", "long"] = "short"


class ShowdatesYamlSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    site: SiteSettings = Field(default_factory=SiteSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


class EnvSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    showdates_env: Literal["dev", "test", "prod"] = "dev"
    showdates_config_path: Path = Path("config/showdates.yaml")
    showdates_db_path: Path = Path("data/showdates.db")


class AppSettings(BaseModel):
    env: EnvSettings
    yaml: ShowdatesYamlSettings
    project_root: Path
    config_path: Path
    db_path: Path


def _resolve_project_path(path: Path) -> Path:
    if path.is_absolute():
        return path
    return (PROJECT_ROOT / path).resolve()


def _load_yaml_settings(path: Path) -> ShowdatesYamlSettings:
    if not path.exists():
        raise FileNotFoundError(f"Showdates config file not found: {path}")

    raw_config = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ValueError("Showdates config must be a YAML mapping/object at the top level")
    return ShowdatesYamlSettings.model_validate(raw_config)


@lru_cache(maxsize=1)
def load_settings() -> AppSettings:
    env = EnvSettings()
    config_path = _resolve_project_path(env.showdates_config_path)
    db_path = _resolve_project_path(env.showdates_db_path)
    yaml_settings = _load_yaml_settings(config_path)
    return AppSettings(
        env=env,
        yaml=yaml_settings,
        project_root=PROJECT_ROOT,
        config_path=config_path,
        db_path=db_path,
    )
