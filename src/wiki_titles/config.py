"""Configuration settings for wiki-titles."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WIKI_TITLES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # JSON file with {"items": {code: title}, "monsters": {type: title}}
    title_overrides_path: Path | None = None

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Path | None = None  # Appended to, in addition to the console

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value


class TitleOverrides(BaseModel):
    """Human-chosen page titles, keyed by stable machine identifier.

    Consulted by the classifier before falling back to display names.
    """

    items: dict[str, str] = Field(
        default_factory=dict,
        description="Item code -> page title",
    )
    monsters: dict[str, str] = Field(
        default_factory=dict,
        description="Monster type -> page title",
    )

    @classmethod
    def from_file(cls, path: Path) -> TitleOverrides:
        """Load overrides from a JSON file."""
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls.model_validate(data)


def load_title_overrides(path: Path | None = None) -> TitleOverrides:
    """Load overrides from ``path`` or the configured path, else empty overrides."""
    path = path or settings.title_overrides_path
    if path is None:
        return TitleOverrides()
    return TitleOverrides.from_file(path)


settings = Settings()
