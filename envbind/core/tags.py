"""Field tag parsing.

A tag names the environment variable behind a field, followed by
optional ``key=value`` options::

    "PORT,default=8080"
    "STARTED,format=%d %b %y %H:%M,default=01 May 20 11:11"

The tags ``""`` and ``"-"`` mark a field as skipped.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any

from envbind.core.config import get_settings
from envbind.core.exceptions import UsageError

SKIP_TAGS = frozenset({"", "-"})


@dataclass(frozen=True)
class ParsedTag:
    """Options extracted from a tag string.

    Attributes:
        variable_name: The trimmed first token.
        has_default: Whether a ``default`` option was present.
        default_value: The default literal, kept verbatim.
        format: The ``format`` option, kept verbatim.
    """

    variable_name: str
    has_default: bool = False
    default_value: str = ""
    format: str = ""


class Tag:
    """Tag marker for use inside ``Annotated``.

    Example:
        ```python
        @dataclass
        class ServerConfig:
            port: Annotated[int, Tag("PORT,default=8080")] = 0
        ```
    """

    def __init__(self, spec: str) -> None:
        self.spec = spec

    def __repr__(self) -> str:
        return f"Tag({self.spec!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Tag) and other.spec == self.spec

    def __hash__(self) -> int:
        return hash(self.spec)


def is_skip_tag(tag: str | None) -> bool:
    """Return True if the tag is missing or marks the field as skipped."""
    return tag is None or tag in SKIP_TAGS


def parse_tag(tag: str) -> ParsedTag:
    """Split a tag into the variable name and its options.

    The first comma-separated token is the variable name. Each further
    token is split on its first ``=``, so default literals may contain
    ``=`` themselves. Keys other than ``default`` and ``format``, and
    tokens without ``=``, are ignored.

    Args:
        tag: The raw tag string, already known not to be a skip tag.

    Returns:
        The parsed tag.

    Raises:
        UsageError: If the variable name is empty.
    """
    name, *options = tag.split(",")
    variable_name = name.strip()
    if not variable_name:
        raise UsageError(f"Tag {tag!r} does not name an environment variable")

    has_default = False
    default_value = ""
    fmt = ""
    for option in options:
        key, sep, value = option.partition("=")
        if not sep:
            continue
        match key.strip():
            case "default":
                has_default = True
                default_value = value
            case "format":
                fmt = value

    return ParsedTag(
        variable_name=variable_name,
        has_default=has_default,
        default_value=default_value,
        format=fmt,
    )


def env_field(spec: str, *, tag_name: str | None = None, **kwargs: Any) -> Any:
    """Declare a dataclass field bound to an environment variable.

    Wraps `dataclasses.field`, storing ``spec`` in the field metadata
    under the configured tag name.

    Args:
        spec: The tag string, e.g. ``"FIELDB,default=10"``.
        tag_name: Metadata key. Defaults to ``Settings.tag_name``.
        **kwargs: Forwarded to `dataclasses.field` (``default``,
            ``default_factory``, ``repr``...).

    Returns:
        A dataclass field specifier.
    """
    key = tag_name or get_settings().tag_name
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[key] = spec
    return dataclasses.field(metadata=metadata, **kwargs)
