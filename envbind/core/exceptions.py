"""Exceptions raised while populating records from the environment."""


class EnvBindError(Exception):
    """Base class for all envbind errors."""

    pass


class UsageError(EnvBindError, TypeError):
    """Raised when populate is called with something it cannot populate.

    Covers targets that are not dataclass instances, frozen dataclasses
    and malformed field tags.
    """

    pass


class UnsupportedTypeError(EnvBindError, TypeError):
    """Raised when an annotated field has a type without a fetcher."""

    def __init__(self, field_name: str, type_name: str) -> None:
        self.field_name = field_name
        self.type_name = type_name
        super().__init__(
            f"envbind does not (yet) support variables of type: {type_name} "
            f"(field {field_name!r})"
        )


class ParseError(EnvBindError, ValueError):
    """Raised when an environment value cannot be converted to its field type."""

    def __init__(self, variable: str, value: str, type_name: str, reason: str = "") -> None:
        self.variable = variable
        self.value = value
        self.type_name = type_name
        self.reason = reason
        message = f"Cannot parse {variable}={value!r} as {type_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
