"""Abstract base class for environment value fetchers.

The Strategy Pattern gives every supported field type its own
conversion routine while sharing the read-and-default step.
"""

import enum
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from envbind.core.exceptions import ParseError


class TypeTag(enum.Enum):
    """Semantic field types with a registered fetcher."""

    TEXT = "text"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    FLOAT = "float"
    TIMESTAMP = "timestamp"
    DURATION = "duration"
    URL = "url"


@dataclass(frozen=True)
class FieldAnnotation:
    """Parsed annotation of a single record field.

    Attributes:
        variable_name: Name of the environment variable to read.
        has_default: Whether a ``default=`` option was given.
        default_value: The default literal, empty when there is none.
        format: Layout for timestamp fields, empty otherwise.
        is_optional: Whether the field is declared as ``Optional[X]``.
        base_type_name: Name of ``X`` with the optional wrapper stripped.
        field_name: Name of the record field the annotation belongs to.
    """

    variable_name: str
    has_default: bool = False
    default_value: str = ""
    format: str = ""
    is_optional: bool = False
    base_type_name: str = ""
    field_name: str = ""


class BaseFetcher(ABC):
    """Abstract base class for environment fetching strategies.

    Concrete fetchers implement `convert`, turning the raw string into
    the target type. `fetch` handles the environment lookup and the
    default substitution, which are the same for every type.

    Example:
        ```python
        class IntegerFetcher(BaseFetcher):
            type_tag = TypeTag.INTEGER

            def convert(self, raw: str) -> int:
                return int(raw)
        ```
    """

    type_tag: TypeTag

    def __init__(
        self,
        variable_name: str,
        *,
        is_optional: bool = False,
        has_default: bool = False,
        default: str = "",
        environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            variable_name: Environment variable to read.
            is_optional: Whether the target field is ``Optional[X]``.
            has_default: Whether ``default`` should replace an empty value.
            default: The default literal.
            environ: Mapping to read from. Defaults to ``os.environ``.
        """
        self._variable_name = variable_name
        self._is_optional = is_optional
        self._has_default = has_default
        self._default = default
        self._environ = environ

    @classmethod
    def from_annotation(
        cls,
        annotation: FieldAnnotation,
        environ: Mapping[str, str] | None = None,
    ) -> "BaseFetcher":
        """Build a fetcher from a parsed field annotation."""
        return cls(
            annotation.variable_name,
            is_optional=annotation.is_optional,
            has_default=annotation.has_default,
            default=annotation.default_value,
            environ=environ,
        )

    @property
    def variable_name(self) -> str:
        return self._variable_name

    @property
    def is_optional(self) -> bool:
        return self._is_optional

    @property
    def has_default(self) -> bool:
        return self._has_default

    @property
    def default(self) -> str:
        return self._default

    def raw_value(self) -> str:
        """Return the variable's value, or the default when it is empty.

        An unset variable and one set to the empty string are treated alike.
        """
        environ = os.environ if self._environ is None else self._environ
        value = environ.get(self._variable_name, "")
        if value == "" and self._has_default:
            value = self._default
        return value

    def fetch(self) -> Any:
        """Read the variable and convert it to the target type.

        ``Optional[X]`` fields receive the same value as a plain ``X``
        field; the optional flag only records how the field was declared.

        Returns:
            The converted value.

        Raises:
            ParseError: If the value cannot be converted.
        """
        return self.convert(self.raw_value())

    @abstractmethod
    def convert(self, raw: str) -> Any:
        """Convert a raw string into the target type.

        Args:
            raw: The environment value or the substituted default.

        Returns:
            The converted value.

        Raises:
            ParseError: If the string is not valid for this type.
        """
        ...

    def _fail(self, raw: str, reason: str) -> ParseError:
        return ParseError(
            variable=self._variable_name,
            value=raw,
            type_name=self.type_tag.value,
            reason=reason,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(variable_name={self._variable_name!r}, "
            f"is_optional={self._is_optional}, has_default={self._has_default})"
        )
