"""Tests for settings and title overrides."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from wiki_titles import config
from wiki_titles.config import Settings, TitleOverrides, load_title_overrides


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("WIKI_TITLES_LOG_LEVEL", raising=False)
        monkeypatch.delenv("WIKI_TITLES_TITLE_OVERRIDES_PATH", raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.title_overrides_path is None
        assert settings.log_file is None

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("WIKI_TITLES_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("WIKI_TITLES_TITLE_OVERRIDES_PATH", str(tmp_path / "o.json"))
        settings = Settings(_env_file=None)
        assert settings.log_level == "DEBUG"
        assert settings.title_overrides_path == tmp_path / "o.json"

    @pytest.mark.parametrize("raw", ["info", " Info ", "INFO"])
    def test_log_level_case_insensitive(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        monkeypatch.setenv("WIKI_TITLES_LOG_LEVEL", raw)
        assert Settings(_env_file=None).log_level == "INFO"

    def test_unknown_log_level_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WIKI_TITLES_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestTitleOverrides:
    def test_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "overrides.json"
        path.write_text(
            json.dumps({"items": {"fuelcell": "Fuel Cell (item)"}, "monsters": {"poptop": "Poptop"}}),
            encoding="utf-8",
        )

        overrides = TitleOverrides.from_file(path)

        assert overrides.items == {"fuelcell": "Fuel Cell (item)"}
        assert overrides.monsters == {"poptop": "Poptop"}

    def test_sections_are_optional(self, tmp_path: Path) -> None:
        path = tmp_path / "overrides.json"
        path.write_text(json.dumps({"items": {"a": "A"}}), encoding="utf-8")
        assert TitleOverrides.from_file(path).monsters == {}

    def test_invalid_values(self, tmp_path: Path) -> None:
        path = tmp_path / "overrides.json"
        path.write_text(json.dumps({"items": {"a": ["not", "a", "title"]}}), encoding="utf-8")
        with pytest.raises(ValidationError):
            TitleOverrides.from_file(path)


class TestLoadTitleOverrides:
    def test_no_path_configured(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config.settings, "title_overrides_path", None)
        assert load_title_overrides() == TitleOverrides()

    def test_configured_path(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        path = tmp_path / "overrides.json"
        path.write_text(json.dumps({"monsters": {"poptop": "Poptop (creature)"}}), encoding="utf-8")
        monkeypatch.setattr(config.settings, "title_overrides_path", path)

        assert load_title_overrides().monsters == {"poptop": "Poptop (creature)"}

    def test_explicit_path_wins(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        path = tmp_path / "explicit.json"
        path.write_text(json.dumps({"items": {"a": "A"}}), encoding="utf-8")
        monkeypatch.setattr(config.settings, "title_overrides_path", tmp_path / "missing.json")

        assert load_title_overrides(path).items == {"a": "A"}
