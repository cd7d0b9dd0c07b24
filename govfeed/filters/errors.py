"""Errors raised while classifying and describing feeds."""

from __future__ import annotations


class FeedFilterError(Exception):
    """Base class for feed filter errors."""


class UnrecognizedFeedError(FeedFilterError):
    """Raised when a feed path matches no entry in the routing table."""

    def __init__(self, path: str) -> None:
        """Initialise with the unrecognised path."""
        self.path = path
        super().__init__(f"Feed not recognised: {path!r}")


class UnknownDimensionError(FeedFilterError):
    """Raised when an option set is requested for an unknown dimension."""

    def __init__(self, dimension: str) -> None:
        """Initialise with the unknown dimension name."""
        self.dimension = dimension
        super().__init__(f"Unknown filter dimension {dimension!r}")


class UnknownFilterKeyError(FeedFilterError):
    """Raised when a query parameter key maps to no filter dimension."""

    def __init__(self, key: str) -> None:
        """Initialise with the unknown parameter key."""
        self.key = key
        super().__init__(f"Unknown filter key {key!r}")
