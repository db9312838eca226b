"""Populate dataclass instances from environment variables.

Walks the fields of a dataclass instance in declaration order, reads
each field's tag, picks the fetcher for the field's type and writes the
converted value back. The first error aborts the walk; fields written
before it keep their new values.
"""

import dataclasses
import inspect
import logging
import sys
import types
import typing
from collections.abc import Mapping
from typing import Annotated, Any, TypeVar, Union

from envbind.core.config import get_settings
from envbind.core.exceptions import UsageError
from envbind.core.factory import FetcherFactory
from envbind.core.tags import Tag, is_skip_tag, parse_tag

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _check_target(target: Any) -> None:
    if isinstance(target, type):
        raise UsageError(
            f"populate() needs a dataclass instance, got the class {target.__name__}"
        )
    if not dataclasses.is_dataclass(target):
        raise UsageError(
            f"populate() needs a dataclass instance, got {type(target).__name__}"
        )
    if type(target).__dataclass_params__.frozen:
        raise UsageError(f"Cannot populate frozen dataclass {type(target).__name__}")


def _resolve_hints(cls: type) -> dict[str, Any] | None:
    """Resolve all field hints at once, or None if any of them cannot be."""
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except NameError as e:
        logger.debug(f"Resolving type hints of {cls.__name__} field by field: {e}")
        return None


def _resolve_field_hint(cls: type, field: dataclasses.Field) -> Any:
    """Evaluate one field's string annotation the way get_type_hints does.

    Raises:
        NameError: If the annotation refers to a name that is not defined.
        SyntaxError: If the annotation is not a valid expression.
    """
    if not isinstance(field.type, str):
        return field.type

    # Inherited fields resolve in the namespace of the class declaring them
    owner = next(
        (base for base in cls.__mro__ if field.name in inspect.get_annotations(base)),
        cls,
    )
    module = sys.modules.get(owner.__module__)
    globalns = vars(module) if module is not None else {}
    return eval(field.type, globalns, dict(vars(owner)))  # noqa: S307


def _field_tag(field: dataclasses.Field, hint: Any, tag_name: str) -> str | None:
    """Return the tag of a field from its metadata or an ``Annotated`` marker."""
    if tag_name in field.metadata:
        return field.metadata[tag_name]

    candidates = [hint]
    if typing.get_origin(hint) in (Union, types.UnionType):
        # Optional[Annotated[X, Tag(...)]]
        candidates.extend(typing.get_args(hint))
    for candidate in candidates:
        if typing.get_origin(candidate) is not Annotated:
            continue
        for extra in typing.get_args(candidate)[1:]:
            if isinstance(extra, Tag):
                return extra.spec
    return None


def _is_settable(field: dataclasses.Field) -> bool:
    return not field.name.startswith("_")


def populate(
    target: T,
    *,
    environ: Mapping[str, str] | None = None,
    tag_name: str | None = None,
) -> T:
    """Fill the tagged fields of a dataclass instance from the environment.

    Example:
        ```python
        @dataclass
        class Config:
            name: str = env_field("FIELDA,default=foo", default="")
            port: int = env_field("FIELDB,default=10", default=0)
            timeout: timedelta | None = env_field("TIMEOUT,default=6m2s", default=None)

        config = populate(Config())
        ```

    Args:
        target: The dataclass instance to fill in place.
        environ: Mapping to read variables from. If None, uses ``os.environ``.
        tag_name: Field metadata key holding tags. If None, uses
            ``Settings.tag_name``.

    Returns:
        The same instance, for chaining.

    Raises:
        UsageError: If target is not a mutable dataclass instance, a tag
            does not name a variable, or a tagged field's type annotation
            cannot be resolved.
        UnsupportedTypeError: If a tagged field's type has no fetcher.
        ParseError: If a value cannot be converted to its field type.
    """
    _check_target(target)

    tag_name = tag_name or get_settings().tag_name
    factory = FetcherFactory(environ)
    hints = _resolve_hints(type(target))

    for field in dataclasses.fields(target):
        if hints is not None:
            hint = hints.get(field.name, field.type)
        else:
            try:
                hint = _resolve_field_hint(type(target), field)
            except (NameError, AttributeError, SyntaxError, TypeError) as e:
                if is_skip_tag(field.metadata.get(tag_name)):
                    logger.debug(f"Skipping field {field.name} with unresolvable type")
                    continue
                raise UsageError(
                    f"Cannot resolve the type {field.type!r} of field {field.name!r}: {e}"
                ) from e

        tag = _field_tag(field, hint, tag_name)
        if is_skip_tag(tag):
            continue

        annotation = factory.annotate(field.name, hint, parse_tag(tag))
        fetcher = factory.get_fetcher(annotation)

        if not _is_settable(field):
            logger.debug(f"Skipping unexported field {field.name}")
            continue

        setattr(target, field.name, fetcher.fetch())

    return target
