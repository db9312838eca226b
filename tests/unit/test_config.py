"""Unit tests for settings and logging configuration."""

import logging

import pytest
from pydantic import ValidationError

from envbind.core.config import Settings, get_settings, reset_settings
from envbind.core.factory import FetcherFactory
from envbind.core.logging_config import configure_logging
from envbind.core.tags import parse_tag
from envbind.strategies.fetchers import TextFetcher


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self):
        settings = Settings()

        assert settings.tag_name == "conf"
        assert settings.log_level == "WARNING"
        assert settings.log_json is False

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("ENVBIND_TAG_NAME", "env")
        monkeypatch.setenv("ENVBIND_LOG_LEVEL", "debug")
        monkeypatch.setenv("ENVBIND_LOG_JSON", "true")

        settings = Settings()

        assert settings.tag_name == "env"
        assert settings.log_level == "DEBUG"
        assert settings.log_json is True

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_singleton(self, monkeypatch):
        """Test that get_settings caches until reset_settings is called."""
        first = get_settings()
        monkeypatch.setenv("ENVBIND_TAG_NAME", "env")

        assert get_settings() is first
        reset_settings()
        assert get_settings().tag_name == "env"


class TestLogging:
    """Test suite for configure_logging."""

    @pytest.fixture(autouse=True)
    def restore_logger(self):
        package_logger = logging.getLogger("envbind")
        handlers, level = list(package_logger.handlers), package_logger.level
        yield
        package_logger.handlers = handlers
        package_logger.setLevel(level)

    def test_configures_package_logger(self):
        logger = configure_logging(Settings(log_level="DEBUG"))

        assert logger.name == "envbind"
        assert logger.level == logging.DEBUG
        assert any(isinstance(h, logging.StreamHandler) for h in logger.handlers)

    def test_idempotent(self):
        configure_logging(Settings())
        logger = configure_logging(Settings(log_json=True))

        stream_handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
        assert len(stream_handlers) == 1

    def test_debug_records_do_not_leak_values(self, caplog):
        """Test that fetcher selection is logged without the variable's value."""
        caplog.set_level(logging.DEBUG, logger="envbind")
        factory = FetcherFactory(environ={"API_TOKEN": "s3cr3t"})

        annotation = factory.annotate("token", str, parse_tag("API_TOKEN"))
        fetcher = factory.get_fetcher(annotation)

        assert isinstance(fetcher, TextFetcher)
        assert fetcher.fetch() == "s3cr3t"
        assert "TextFetcher" in caplog.text
        assert "s3cr3t" not in caplog.text
