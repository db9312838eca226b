"""Duration fetcher.

Parses composite duration strings such as ``"6m2s"``, ``"1.5h"`` or
``"-300ms"`` into ``timedelta`` objects. Each component is a decimal
number with a unit suffix. Nanoseconds are truncated to the
microsecond resolution of ``timedelta``.
"""

import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation

from envbind.interfaces.fetcher import BaseFetcher, TypeTag

# Unit sizes in nanoseconds
UNITS: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5 micro sign
    "μs": 1_000,  # U+03BC greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}

_COMPONENT_RE = re.compile(r"([0-9]*(?:\.[0-9]*)?)(ns|us|µs|μs|ms|s|m|h)")

MAX_NANOSECONDS = 2**63 - 1


def parse_duration(text: str) -> timedelta:
    """Parse a duration string.

    Args:
        text: A string like ``"1h2m30s"``. A bare ``"0"`` is accepted.

    Returns:
        The equivalent timedelta.

    Raises:
        ValueError: If the string is malformed, uses an unknown unit or
            exceeds the signed 64-bit nanosecond range.
    """
    body = text
    sign = 1
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]

    if body == "0":
        return timedelta(0)
    if not body:
        raise ValueError(f"invalid duration {text!r}")

    total_ns = Decimal(0)
    pos = 0
    while pos < len(body):
        match = _COMPONENT_RE.match(body, pos)
        if match is None:
            raise ValueError(f"invalid duration {text!r}")
        number, unit = match.groups()
        if number in ("", "."):
            raise ValueError(f"invalid duration {text!r}")
        try:
            total_ns += Decimal(number) * UNITS[unit]
        except InvalidOperation as e:
            raise ValueError(f"invalid duration {text!r}") from e
        pos = match.end()

    # Signed 64-bit nanoseconds, roughly 292 years
    if total_ns > MAX_NANOSECONDS + (1 if sign < 0 else 0):
        raise ValueError(f"invalid duration {text!r}: out of range")

    return timedelta(microseconds=sign * int(total_ns // 1_000))


class DurationFetcher(BaseFetcher):
    """Fetcher for ``timedelta`` fields."""

    type_tag = TypeTag.DURATION

    def convert(self, raw: str) -> timedelta:
        try:
            return parse_duration(raw)
        except ValueError as e:
            raise self._fail(raw, str(e)) from e
