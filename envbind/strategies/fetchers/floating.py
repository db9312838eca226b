"""Floating-point fetcher.

Besides plain numbers, the literal ``random`` yields a pseudo-random
value in ``[0, 1)`` generated at load time.
"""

import math
import random
import time

from envbind.interfaces.fetcher import BaseFetcher, TypeTag

RANDOM_LITERAL = "random"
INF_LITERALS = frozenset({"inf", "infinity"})

_rng = random.Random(time.time_ns())


class FloatFetcher(BaseFetcher):
    """Fetcher for ``float`` fields."""

    type_tag = TypeTag.FLOAT

    def convert(self, raw: str) -> float:
        """Parse a float, or draw one for the ``random`` literal.

        Args:
            raw: A decimal or exponent literal such as ``"3.14"`` or ``"1e-3"``.

        Returns:
            The parsed float.

        Raises:
            ParseError: If the string is not a number, or a finite literal
                overflows to infinity.
        """
        if raw == RANDOM_LITERAL:
            return _rng.random()

        # float() tolerates padding and digit separators
        if raw != raw.strip() or "_" in raw:
            raise self._fail(raw, "invalid syntax")
        try:
            value = float(raw)
        except ValueError as e:
            raise self._fail(raw, "invalid syntax") from e

        if math.isinf(value) and raw.lstrip("+-").lower() not in INF_LITERALS:
            raise self._fail(raw, "value out of range")
        return value
