"""Abstract base classes for fetching strategies."""

from envbind.interfaces.fetcher import BaseFetcher, FieldAnnotation, TypeTag

__all__ = [
    "BaseFetcher",
    "FieldAnnotation",
    "TypeTag",
]
