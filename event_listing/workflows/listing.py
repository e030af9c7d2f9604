"""Entry point used by the presentation layer.

`bootstrap()` is called once at startup. It fails with
:class:`ConfigurationError` when no connection string is configured, before
any request can be served, and returns the :class:`EventListingApp` that
every request handler shares.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from bson import ObjectId

from ..logging_config import logging as _  # noqa: F401  # ensure config applied early
from ..clients.mongodb_client import ConnectionManager, Connector, open_client
from ..errors import ValidationError
from ..models import Booking, Event
from ..services.storage import BookingRepository, EventRepository

logger = logging.getLogger(__name__)


@dataclass
class EventListingApp:
    """Owns the shared connection and exposes create/read operations."""

    connections: ConnectionManager
    events: EventRepository
    bookings: BookingRepository

    @classmethod
    def from_connections(cls, connections: ConnectionManager) -> "EventListingApp":
        return cls(
            connections=connections,
            events=EventRepository(connections),
            bookings=BookingRepository(connections),
        )

    async def create_event(self, fields: Mapping[str, Any]) -> Event:
        """Validate raw *fields* and store them as a new event."""
        return await self.events.save(Event.from_fields(fields))

    async def update_event(self, event: Event) -> Event:
        """Re-validate and store an already persisted *event*."""
        if event.is_new:
            raise ValidationError("update_event() needs an event that was saved before", field="id")
        return await self.events.save(event)

    async def create_booking(self, event_id: ObjectId | str, email: str) -> Booking:
        return await self.bookings.save(Booking(event_id=event_id, email=email))

    async def list_events(self) -> List[Event]:
        return await self.events.list()

    async def get_event(self, slug: str) -> Event | None:
        return await self.events.find_by_slug(slug)

    async def featured_events(self, limit: int | None = None) -> List[Dict[str, str]]:
        """Card data for the landing page's featured events section."""
        events = await self.list_events()
        if limit is not None:
            events = events[:limit]
        return [event.card() for event in events]

    async def bookings_for(self, event_id: ObjectId | str) -> List[Booking]:
        return await self.bookings.for_event(event_id)

    async def close(self) -> None:
        await self.connections.close()


async def bootstrap(
    connections: ConnectionManager | None = None,
    *,
    connector: Connector = open_client,
) -> EventListingApp:
    """Build the application, connect, and make sure the indexes exist."""
    if connections is None:
        connections = ConnectionManager.from_config(connector=connector)

    app = EventListingApp.from_connections(connections)
    await app.events.ensure_indexes()
    await app.bookings.ensure_indexes()
    logger.info("Event listing data layer ready (database=%s)", connections.db_name)
    return app


__all__ = ["EventListingApp", "bootstrap"]
