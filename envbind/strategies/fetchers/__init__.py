"""Concrete fetcher implementations."""

from envbind.strategies.fetchers.boolean import BooleanFetcher
from envbind.strategies.fetchers.duration import DurationFetcher, parse_duration
from envbind.strategies.fetchers.floating import FloatFetcher
from envbind.strategies.fetchers.integer import IntegerFetcher
from envbind.strategies.fetchers.text import TextFetcher
from envbind.strategies.fetchers.timestamp import TimestampFetcher
from envbind.strategies.fetchers.url import URLFetcher

__all__ = [
    "BooleanFetcher",
    "DurationFetcher",
    "FloatFetcher",
    "IntegerFetcher",
    "TextFetcher",
    "TimestampFetcher",
    "URLFetcher",
    "parse_duration",
]
