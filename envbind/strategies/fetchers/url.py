"""URL fetcher.

Values are parsed into ``httpx.URL`` objects, which expose the scheme,
host, port, path and query of the reference.
"""

import httpx

from envbind.interfaces.fetcher import BaseFetcher, TypeTag


class URLFetcher(BaseFetcher):
    """Fetcher for ``httpx.URL`` fields.

    Relative references such as ``"/api/v1"`` are accepted, as are
    absolute URLs. Malformed input (bad port, invalid IPv6 host,
    control characters) raises `ParseError`.
    """

    type_tag = TypeTag.URL

    def convert(self, raw: str) -> httpx.URL:
        try:
            return httpx.URL(raw)
        except httpx.InvalidURL as e:
            raise self._fail(raw, str(e)) from e
