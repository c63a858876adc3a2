"""Tests for settings."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from entity_search.config import Settings, get_settings


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.max_hops == 2
        assert settings.boost == {"name": 3.0, "aliases": 2.0, "description": 1.5}
        assert settings.index_path == Path("build") / "search-index.json"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("ENTITY_SEARCH_MAX_HOPS", "3")
        monkeypatch.setenv("ENTITY_SEARCH_BUILD_DIR", "out")
        monkeypatch.setenv("ENTITY_SEARCH_BOOST", '{"name": 5}')

        settings = Settings(_env_file=None)
        assert settings.max_hops == 3
        assert settings.index_path == Path("out") / "search-index.json"
        assert settings.boost == {"name": 5.0}

    def test_cached(self):
        assert get_settings() is get_settings()


class TestLogLevel:
    def test_default(self):
        assert Settings(_env_file=None).log_level == "WARNING"

    def test_case_insensitive(self):
        assert Settings(_env_file=None, log_level="info").log_level == "INFO"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("ENTITY_SEARCH_LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="LOUD")
