"""Exception hierarchy raised by the event_listing data layer."""

from __future__ import annotations


class EventListingError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(EventListingError, EnvironmentError):
    """Required configuration is missing; raised at startup."""


class ValidationError(EventListingError, ValueError):
    """A document failed normalization and must not be persisted."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class ReferentialError(EventListingError):
    """A document references another document that does not exist."""


class UniquenessError(EventListingError):
    """The storage layer rejected a write because of a unique index."""

    def __init__(self, message: str, key: dict | None = None) -> None:
        super().__init__(message)
        self.key = key or {}


__all__ = [
    "EventListingError",
    "ConfigurationError",
    "ValidationError",
    "ReferentialError",
    "UniquenessError",
]
