"""Boolean fetcher."""

from envbind.interfaces.fetcher import BaseFetcher, TypeTag

TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class BooleanFetcher(BaseFetcher):
    """Fetcher for ``bool`` fields.

    Accepts the canonical spellings ``1 t T TRUE true True`` and
    ``0 f F FALSE false False``. Anything else, including ``yes``/``no``
    and the empty string, is rejected.
    """

    type_tag = TypeTag.BOOLEAN

    def convert(self, raw: str) -> bool:
        if raw in TRUE_VALUES:
            return True
        if raw in FALSE_VALUES:
            return False
        raise self._fail(raw, "invalid syntax")
