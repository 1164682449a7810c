"""Tests de configuración y logging."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from core import config
from core.config import AppSettings, write_user_env_vars
from core.logging_config import configure_logging


class TestAppSettings:
    def test_defaults(self) -> None:
        settings = AppSettings(_env_file=None)

        assert settings.api_key is None
        assert settings.api_scheme == "https"
        assert settings.api_host == "api.lemonsqueezy.com"
        assert settings.default_page_size == 10

    def test_reads_prefixed_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LEMONSQUEEZY_API_KEY", "sk_env")
        monkeypatch.setenv("LEMONSQUEEZY_DEFAULT_PAGE_SIZE", "50")

        settings = AppSettings(_env_file=None)

        assert settings.api_key is not None
        assert settings.api_key.get_secret_value() == "sk_env"
        assert settings.default_page_size == 50

    def test_api_key_is_masked(self) -> None:
        settings = AppSettings(_env_file=None, api_key="sk_hidden")

        assert "sk_hidden" not in repr(settings)
        assert "sk_hidden" not in str(settings.model_dump())

    def test_reads_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("LEMONSQUEEZY_API_HOST=api.example.test\n", encoding="utf-8")

        settings = AppSettings(_env_file=env_file)

        assert settings.api_host == "api.example.test"

    @pytest.mark.parametrize("page_size", [0, 101])
    def test_page_size_bounds(self, page_size: int) -> None:
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, default_page_size=page_size)

    def test_scheme_must_be_http_or_https(self) -> None:
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, api_scheme="ftp")

    def test_log_level_is_normalized(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LEMONSQUEEZY_LOG_LEVEL", " debug ")

        assert AppSettings(_env_file=None).log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LEMONSQUEEZY_LOG_LEVEL", "verbose")

        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)


@pytest.mark.skipif(sys.platform.startswith("win") or sys.platform == "darwin", reason="XDG layout only")
class TestUserEnvFile:
    def test_write_and_update(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        path = write_user_env_vars({"LEMONSQUEEZY_API_KEY": "one"})
        write_user_env_vars({"LEMONSQUEEZY_API_HOST": "api.example.test"})

        assert path == tmp_path / "lemonsqueezy" / ".env"
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("#")
        assert "LEMONSQUEEZY_API_HOST=api.example.test" in lines
        assert "LEMONSQUEEZY_API_KEY=one" in lines

    def test_parse_env_lines_skips_noise(self) -> None:
        parsed = config._parse_env_lines('# comment\n\nNOEQUALS\nA = "1"\nB=\'two\'\n')
        assert parsed == {"A": "1", "B": "two"}


class TestConfigureLogging:
    def test_invalid_level(self) -> None:
        with pytest.raises(ValueError):
            configure_logging("LOUD")

    def test_sets_root_level(self) -> None:
        root = logging.getLogger()
        previous_handlers, previous_level = root.handlers[:], root.level
        try:
            configure_logging("info")
            assert root.level == logging.INFO
            assert len(root.handlers) == 1
            assert logging.getLogger("httpx").level == logging.WARNING
        finally:
            root.handlers = previous_handlers
            root.setLevel(previous_level)
