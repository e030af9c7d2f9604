"""Persistence layer: validated writes and plain reads against MongoDB."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from bson import ObjectId
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import DuplicateKeyError

from ..clients.mongodb_client import ConnectionManager
from ..errors import ReferentialError, UniquenessError
from ..models import Booking, Event, get_model
from ..utils import get_current_timestamp
from .validation import validate_booking, validate_event

logger = logging.getLogger(__name__)


class _Repository:
    model_name: str = ""

    def __init__(self, connections: ConnectionManager) -> None:
        self._connections = connections

    async def _collection(self, model_name: str | None = None) -> AsyncCollection:
        db = await self._connections.get_database()
        return db[get_model(model_name or self.model_name).collection]

    async def ensure_indexes(self) -> None:
        """Create the indexes declared on the registered model."""
        spec = get_model(self.model_name)
        if not spec.indexes:
            return
        collection = await self._collection()
        names = await collection.create_indexes(list(spec.indexes))
        logger.info("Ensured indexes on %s: %s", spec.collection, ", ".join(names))

    @staticmethod
    def _stamp(doc: Dict[str, Any], is_new: bool) -> Dict[str, Any]:
        now = get_current_timestamp()
        if is_new:
            doc["created_at"] = now
        doc["updated_at"] = now
        return doc


class EventRepository(_Repository):
    """Reads and writes documents of the ``events`` collection."""

    model_name = "Event"

    async def save(self, event: Event) -> Event:
        """Normalize *event* and insert or replace it.

        Raises :class:`ValidationError` before any I/O when the event is
        invalid, :class:`UniquenessError` when the slug is already taken and
        :class:`ReferentialError` when an update finds no stored event.
        """
        validate_event(event).unwrap()
        doc = self._stamp(event.to_document(), event.is_new)
        collection = await self._collection()

        try:
            if event.is_new:
                result = await collection.insert_one(doc)
                event.id = result.inserted_id
            else:
                result = await collection.replace_one({"_id": event.id}, doc)
                if result.matched_count == 0:
                    raise ReferentialError(f"Event {event.id} no longer exists")
        except DuplicateKeyError as exc:
            logger.warning("Slug collision for event %r (slug=%s)", event.title, event.slug)
            raise UniquenessError(
                f"An event with slug {event.slug!r} already exists",
                key=(exc.details or {}).get("keyValue"),
            ) from exc

        event.created_at = doc["created_at"]
        event.updated_at = doc["updated_at"]
        event.mark_persisted()
        logger.info("Stored event %s with _id=%s", event.slug, event.id)
        return event

    async def list(self) -> List[Event]:
        collection = await self._collection()
        docs = await collection.find({}).to_list()
        return [Event.from_document(doc) for doc in docs]

    async def find_by_slug(self, slug: str) -> Event | None:
        collection = await self._collection()
        doc = await collection.find_one({"slug": slug})
        return Event.from_document(doc) if doc is not None else None


class BookingRepository(_Repository):
    """Reads and writes documents of the ``bookings`` collection."""

    model_name = "Booking"

    async def save(self, booking: Booking) -> Booking:
        """Validate *booking* against the events collection and insert it."""
        events = await self._collection("Event")
        outcome = await validate_booking(booking, events)
        outcome.unwrap()

        doc = self._stamp(booking.to_document(), is_new=True)
        collection = await self._collection()
        result = await collection.insert_one(doc)
        booking.id = result.inserted_id
        booking.created_at = doc["created_at"]
        booking.updated_at = doc["updated_at"]
        logger.info("Stored booking for event %s with _id=%s", booking.event_id, booking.id)
        return booking

    async def for_event(self, event_id: ObjectId | str) -> List[Booking]:
        if isinstance(event_id, str) and ObjectId.is_valid(event_id):
            event_id = ObjectId(event_id)
        collection = await self._collection()
        docs = await collection.find({"event_id": event_id}).to_list()
        return [Booking.from_document(doc) for doc in docs]


__all__ = ["EventRepository", "BookingRepository"]
