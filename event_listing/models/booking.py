"""Definition of the `Booking` dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping

from bson import ObjectId
from pymongo import ASCENDING, IndexModel

from ..config import BOOKINGS_COLLECTION
from .registry import ModelSpec, register_model


@dataclass(slots=True)
class Booking:
    """A seat request for an existing event."""

    event_id: ObjectId | str | None = None
    email: str = ""
    id: ObjectId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_new(self) -> bool:
        return self.id is None

    def to_document(self) -> Dict[str, Any]:
        doc: Dict[str, Any] = {
            "event_id": self.event_id,
            "email": self.email,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
        if self.id is not None:
            doc["_id"] = self.id
        return doc

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Booking":
        return cls(
            event_id=doc.get("event_id"),
            email=doc.get("email", ""),
            id=doc.get("_id"),
            created_at=doc.get("created_at"),
            updated_at=doc.get("updated_at"),
        )


BOOKING_MODEL = register_model(
    ModelSpec(
        name="Booking",
        collection=BOOKINGS_COLLECTION,
        document_cls=Booking,
        indexes=(IndexModel([("event_id", ASCENDING)], name="event_id"),),
    )
)

__all__ = ["Booking", "BOOKING_MODEL"]
