"""Domain models and the entity registry."""

from .registry import ModelSpec, register_model, get_model  # noqa: F401
from .event import Event, EVENT_MODEL  # noqa: F401
from .booking import Booking, BOOKING_MODEL  # noqa: F401

__all__ = [
    "ModelSpec",
    "register_model",
    "get_model",
    "Event",
    "EVENT_MODEL",
    "Booking",
    "BOOKING_MODEL",
]
