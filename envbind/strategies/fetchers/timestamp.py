"""Timestamp fetcher.

Values are parsed with ``datetime.strptime`` using the field's
``format`` option. Without a format, ISO 8601 is expected.
The literal ``now`` yields the current local time.
"""

import logging
from collections.abc import Mapping
from datetime import datetime

from envbind.interfaces.fetcher import BaseFetcher, FieldAnnotation, TypeTag

logger = logging.getLogger(__name__)

NOW_LITERAL = "now"


class TimestampFetcher(BaseFetcher):
    """Fetcher for ``datetime`` fields.

    Attributes:
        format: ``strftime``-style layout, e.g. ``"%d %b %y %H:%M"``.
    """

    type_tag = TypeTag.TIMESTAMP

    def __init__(self, variable_name: str, *, format: str = "", **kwargs: object) -> None:
        """Initialize the timestamp fetcher.

        Args:
            variable_name: Environment variable to read.
            format: Layout passed to ``datetime.strptime``.
            **kwargs: Forwarded to `BaseFetcher`.
        """
        super().__init__(variable_name, **kwargs)
        self._format = format

    @classmethod
    def from_annotation(
        cls,
        annotation: FieldAnnotation,
        environ: Mapping[str, str] | None = None,
    ) -> "TimestampFetcher":
        return cls(
            annotation.variable_name,
            format=annotation.format,
            is_optional=annotation.is_optional,
            has_default=annotation.has_default,
            default=annotation.default_value,
            environ=environ,
        )

    @property
    def format(self) -> str:
        return self._format

    def convert(self, raw: str) -> datetime:
        """Parse a timestamp with the configured layout.

        Args:
            raw: The timestamp string, or ``"now"``.

        Returns:
            The parsed datetime.

        Raises:
            ParseError: If the string does not match the layout.
        """
        if raw == NOW_LITERAL:
            return datetime.now()

        try:
            if not self._format:
                return datetime.fromisoformat(raw)
            return datetime.strptime(raw, self._format)
        except ValueError as e:
            logger.debug(f"Timestamp for {self.variable_name} does not match {self._format!r}")
            raise self._fail(raw, str(e)) from e
