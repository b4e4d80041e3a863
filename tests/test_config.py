"""Tests for configuration and config directories."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from linesieve.config import configured_search_type, get_config_dir, get_sessions_dir, load_config, save_config
from linesieve.errors import BadFilterDefinitionError
from linesieve.models import CASE_SENSITIVE, REGEX, AppConfig

if TYPE_CHECKING:
    from pathlib import Path


class TestConfigDir:
    def test_env_override(self, config_dir: Path) -> None:
        assert get_config_dir() == config_dir

    def test_sessions_dir_created(self, config_dir: Path) -> None:
        sessions = get_sessions_dir()
        assert sessions == config_dir / "sessions"
        assert sessions.is_dir()


class TestLoadConfig:
    def test_defaults_when_missing(self, config_dir: Path) -> None:
        config = load_config()
        assert config.default_search_type == "CaseS"
        assert config.log_level == "WARNING"

    def test_roundtrip(self, config_dir: Path) -> None:
        save_config(AppConfig(default_search_type="RegEx", log_level="DEBUG"))
        assert (config_dir / "config.toml").exists()
        config = load_config()
        assert config.default_search_type == "RegEx"
        assert config.log_level == "DEBUG"

    def test_corrupt_file_gives_defaults(self, config_dir: Path) -> None:
        config_dir.mkdir(parents=True)
        (config_dir / "config.toml").write_text("not = [valid toml")
        assert load_config() == AppConfig()

    def test_wrong_type_gives_defaults(self, config_dir: Path) -> None:
        config_dir.mkdir(parents=True)
        (config_dir / "config.toml").write_text("log_level = [1, 2]\n")
        assert load_config() == AppConfig()

    def test_unknown_search_type_reset(self, config_dir: Path, caplog: pytest.LogCaptureFixture) -> None:
        save_config(AppConfig(default_search_type="Fuzzy", log_level="DEBUG"))
        with caplog.at_level(logging.WARNING, logger="linesieve.config"):
            config = load_config()
        assert config.default_search_type == "CaseS"
        assert config.log_level == "DEBUG"
        assert "unknown search type 'Fuzzy'" in caplog.text

    def test_search_type_name_case_insensitive(self, config_dir: Path) -> None:
        save_config(AppConfig(default_search_type="regex"))
        assert configured_search_type(load_config()) is REGEX

    def test_unknown_log_level_reset(self, config_dir: Path, caplog: pytest.LogCaptureFixture) -> None:
        save_config(AppConfig(default_search_type="RegEx", log_level="LOUD"))
        with caplog.at_level(logging.WARNING, logger="linesieve.config"):
            config = load_config()
        assert config.log_level == "WARNING"
        assert config.default_search_type == "RegEx"
        assert "LOUD" in caplog.text


class TestConfiguredSearchType:
    def test_default(self) -> None:
        assert configured_search_type(AppConfig()) is CASE_SENSITIVE

    def test_unknown_name(self) -> None:
        with pytest.raises(BadFilterDefinitionError):
            configured_search_type(AppConfig(default_search_type="Fuzzy"))
