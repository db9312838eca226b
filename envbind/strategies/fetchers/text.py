"""Text fetcher.

Strings are taken verbatim, so this fetcher never fails.
"""

from envbind.interfaces.fetcher import BaseFetcher, TypeTag


class TextFetcher(BaseFetcher):
    """Fetcher for ``str`` fields."""

    type_tag = TypeTag.TEXT

    def convert(self, raw: str) -> str:
        return raw
