"""Core configuration, errors and the populate engine."""

from envbind.core.config import Settings, get_settings, reset_settings
from envbind.core.exceptions import EnvBindError, ParseError, UnsupportedTypeError, UsageError

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "EnvBindError",
    "ParseError",
    "UnsupportedTypeError",
    "UsageError",
]
