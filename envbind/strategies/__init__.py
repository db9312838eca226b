"""Concrete strategy implementations."""

from envbind.strategies.fetchers import (
    BooleanFetcher,
    DurationFetcher,
    FloatFetcher,
    IntegerFetcher,
    TextFetcher,
    TimestampFetcher,
    URLFetcher,
)

__all__ = [
    "BooleanFetcher",
    "DurationFetcher",
    "FloatFetcher",
    "IntegerFetcher",
    "TextFetcher",
    "TimestampFetcher",
    "URLFetcher",
]
