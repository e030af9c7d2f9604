"""Service layer modules grouping business logic by concern.

This module provides convenience re-exports so that callers can simply do for
example `from event_listing.services import validate_event` without having to
know which underlying module provides the symbol.
"""

from .validation import (  # noqa: F401
    ValidationOutcome,
    normalize_event,
    validate_event,
    normalize_booking,
    validate_booking,
)
from .storage import EventRepository, BookingRepository  # noqa: F401

__all__ = [
    "ValidationOutcome",
    "normalize_event",
    "validate_event",
    "normalize_booking",
    "validate_booking",
    "EventRepository",
    "BookingRepository",
]
