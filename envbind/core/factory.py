"""Fetcher factory.

Maps a field's declared type onto one of the registered `TypeTag`
values and builds the matching fetcher. The registry is fixed:
supporting a new type means adding a `TypeTag` member, a fetcher
class, and one entry in each table below.
"""

import logging
import types
import typing
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Annotated, Any, Union

import httpx

from envbind.core.exceptions import UnsupportedTypeError
from envbind.core.tags import ParsedTag
from envbind.interfaces.fetcher import BaseFetcher, FieldAnnotation, TypeTag
from envbind.strategies.fetchers import (
    BooleanFetcher,
    DurationFetcher,
    FloatFetcher,
    IntegerFetcher,
    TextFetcher,
    TimestampFetcher,
    URLFetcher,
)

logger = logging.getLogger(__name__)

# Exact types only: bool must not resolve to int
TYPE_TAGS: dict[type, TypeTag] = {
    str: TypeTag.TEXT,
    int: TypeTag.INTEGER,
    bool: TypeTag.BOOLEAN,
    float: TypeTag.FLOAT,
    datetime: TypeTag.TIMESTAMP,
    timedelta: TypeTag.DURATION,
    httpx.URL: TypeTag.URL,
}

FETCHERS: dict[TypeTag, type[BaseFetcher]] = {
    TypeTag.TEXT: TextFetcher,
    TypeTag.INTEGER: IntegerFetcher,
    TypeTag.BOOLEAN: BooleanFetcher,
    TypeTag.FLOAT: FloatFetcher,
    TypeTag.TIMESTAMP: TimestampFetcher,
    TypeTag.DURATION: DurationFetcher,
    TypeTag.URL: URLFetcher,
}


def type_name(hint: Any) -> str:
    """Return a readable name for a type hint."""
    if isinstance(hint, type):
        return hint.__name__
    return str(hint).replace("typing.", "")


def unwrap_optional(hint: Any) -> tuple[Any, bool]:
    """Strip ``Annotated`` and one level of ``Optional``.

    Args:
        hint: A resolved type hint, e.g. ``Optional[int]`` or ``int | None``.

    Returns:
        A ``(base_type, is_optional)`` pair. Unions of several non-None
        members are returned unchanged and will not resolve to a fetcher.
    """
    if typing.get_origin(hint) is Annotated:
        hint = typing.get_args(hint)[0]

    if typing.get_origin(hint) in (Union, types.UnionType):
        members = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(members) == 1 and len(members) < len(typing.get_args(hint)):
            inner = members[0]
            if typing.get_origin(inner) is Annotated:
                inner = typing.get_args(inner)[0]
            return inner, True

    return hint, False


class FetcherFactory:
    """Factory for creating fetchers from field annotations.

    Example:
        ```python
        factory = FetcherFactory()
        annotation = factory.annotate("port", int | None, parse_tag("PORT,default=8080"))
        fetcher = factory.get_fetcher(annotation)
        port = fetcher.fetch()
        ```
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """Initialize the factory.

        Args:
            environ: Mapping fetchers read from. If None, uses ``os.environ``.
        """
        self._environ = environ

    def annotate(self, field_name: str, hint: Any, parsed: ParsedTag) -> FieldAnnotation:
        """Combine a parsed tag and a declared type into a `FieldAnnotation`.

        Args:
            field_name: Name of the field, used in the error message.
            hint: The field's resolved type hint.
            parsed: The field's parsed tag.

        Returns:
            The field annotation.

        Raises:
            UnsupportedTypeError: If no fetcher handles the base type.
        """
        base, is_optional = unwrap_optional(hint)
        if not isinstance(base, type) or base not in TYPE_TAGS:
            raise UnsupportedTypeError(field_name, type_name(base))

        return FieldAnnotation(
            variable_name=parsed.variable_name,
            has_default=parsed.has_default,
            default_value=parsed.default_value,
            format=parsed.format,
            is_optional=is_optional,
            base_type_name=type_name(base),
            field_name=field_name,
        )

    def get_fetcher(self, annotation: FieldAnnotation) -> BaseFetcher:
        """Build the fetcher for an annotation.

        Args:
            annotation: The parsed field annotation.

        Returns:
            A fetcher ready to `fetch`.

        Raises:
            UnsupportedTypeError: If the type has no registered fetcher.
        """
        type_tag = _TAGS_BY_NAME.get(annotation.base_type_name)
        if type_tag is None:
            raise UnsupportedTypeError(
                annotation.field_name or annotation.variable_name, annotation.base_type_name
            )

        fetcher_cls = FETCHERS[type_tag]
        logger.debug(f"Using {fetcher_cls.__name__} for {annotation.variable_name}")
        return fetcher_cls.from_annotation(annotation, environ=self._environ)


_TAGS_BY_NAME: dict[str, TypeTag] = {
    type_name(py_type): tag for py_type, tag in TYPE_TAGS.items()
}
