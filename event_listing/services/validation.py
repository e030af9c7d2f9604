"""Normalize-then-validate routines run by the write path before every save.

``normalize_event`` and ``normalize_booking`` mutate the document in place and
raise on bad input. ``validate_event`` and ``validate_booking`` wrap them and
return a :class:`ValidationOutcome` so callers can branch on the result
instead of catching.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from bson import ObjectId
from pymongo.asynchronous.collection import AsyncCollection

from ..errors import EventListingError, ReferentialError, ValidationError
from ..models import Booking, Event
from ..utils import is_blank, is_email, normalize_date, normalize_time, slugify

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationOutcome(Generic[T]):
    """Either a normalized document or the error that rejected it."""

    document: T | None = None
    error: EventListingError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the normalized document or raise the recorded error."""
        if self.error is not None:
            raise self.error
        return self.document  # type: ignore[return-value]


# ---------------------------------------------------------------------------
# Event
# ---------------------------------------------------------------------------

def normalize_event(event: Event) -> Event:
    """Check required fields and normalize slug, date and time of *event*."""
    for name in Event.REQUIRED_STRINGS:
        if is_blank(getattr(event, name)):
            raise ValidationError(f"{name} is required and must be non-empty", field=name)

    for name in Event.REQUIRED_LISTS:
        value: Any = getattr(event, name)
        if not isinstance(value, list) or not value:
            raise ValidationError(f"{name} is required and must be a non-empty list", field=name)
        if not all(isinstance(item, str) for item in value):
            raise ValidationError(f"{name} must only contain strings", field=name)

    event.title = event.title.strip()
    if event.title_changed():
        event.slug = slugify(event.title)

    event.date = normalize_date(event.date)
    event.time = normalize_time(event.time)
    return event


def validate_event(event: Event) -> ValidationOutcome[Event]:
    try:
        return ValidationOutcome(document=normalize_event(event))
    except ValidationError as exc:
        logger.info("Rejected event %r: %s", event.title, exc)
        return ValidationOutcome(error=exc)


# ---------------------------------------------------------------------------
# Booking
# ---------------------------------------------------------------------------

def normalize_booking(booking: Booking) -> Booking:
    """Check the email shape and coerce ``event_id`` to an :class:`ObjectId`."""
    if isinstance(booking.email, str):
        booking.email = booking.email.strip()
    if not is_email(booking.email):
        raise ValidationError("Invalid email", field="email")

    event_id = booking.event_id
    if isinstance(event_id, str) and ObjectId.is_valid(event_id):
        event_id = ObjectId(event_id)
    if not isinstance(event_id, ObjectId):
        raise ValidationError(f"Invalid event id: {booking.event_id!r}", field="event_id")
    booking.event_id = event_id
    return booking


async def validate_booking(
    booking: Booking, events: AsyncCollection
) -> ValidationOutcome[Booking]:
    """Normalize *booking* and make sure the event it references exists."""
    try:
        normalize_booking(booking)
    except ValidationError as exc:
        logger.info("Rejected booking for %r: %s", booking.event_id, exc)
        return ValidationOutcome(error=exc)

    found = await events.find_one({"_id": booking.event_id}, projection={"_id": 1})
    if found is None:
        logger.info("Rejected booking: event %s does not exist", booking.event_id)
        return ValidationOutcome(
            error=ReferentialError(f"Referenced event {booking.event_id} does not exist")
        )
    return ValidationOutcome(document=booking)


__all__ = [
    "ValidationOutcome",
    "normalize_event",
    "validate_event",
    "normalize_booking",
    "validate_booking",
]
