"""Populate dataclasses from environment variables.

Fields are bound to variables with a tag naming the variable, an
optional default and, for timestamps, a format::

    @dataclass
    class Config:
        name: str = env_field("APP_NAME,default=foo", default="")
        started: datetime | None = env_field("STARTED,default=now", default=None)

    config = populate(Config())
"""

import logging

from envbind.core.exceptions import EnvBindError, ParseError, UnsupportedTypeError, UsageError
from envbind.core.populate import populate
from envbind.core.tags import Tag, env_field, parse_tag

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "populate",
    "env_field",
    "parse_tag",
    "Tag",
    "EnvBindError",
    "ParseError",
    "UnsupportedTypeError",
    "UsageError",
]
