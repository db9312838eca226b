"""Integer fetcher.

Parses base-10 integers into the signed 64-bit range. Python's ``int()``
is more permissive (it accepts surrounding whitespace and ``_``
separators), so the syntax is checked up front.
"""

import re

from envbind.interfaces.fetcher import BaseFetcher, TypeTag

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

INT_MIN = -(2**63)
INT_MAX = 2**63 - 1


class IntegerFetcher(BaseFetcher):
    """Fetcher for ``int`` fields."""

    type_tag = TypeTag.INTEGER

    def convert(self, raw: str) -> int:
        """Parse a signed base-10 integer.

        Args:
            raw: The string to parse, e.g. ``"888"`` or ``"-12"``.

        Returns:
            The parsed integer.

        Raises:
            ParseError: If the string is not an integer or is out of range.
        """
        if not _INTEGER_RE.fullmatch(raw):
            raise self._fail(raw, "invalid syntax")

        value = int(raw, 10)
        if not INT_MIN <= value <= INT_MAX:
            raise self._fail(raw, "value out of range")
        return value
