"""Shared pytest fixtures."""

import pytest

from envbind.core.config import reset_settings

TEST_VARIABLES = ("FIELDA", "FIELDB", "FIELDC", "FIELDD", "FIELDE", "FIELDF", "FIELDG", "FIELDH")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Unset the variables used by the tests and drop cached settings."""
    for name in TEST_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    for name in ("ENVBIND_TAG_NAME", "ENVBIND_LOG_LEVEL", "ENVBIND_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
