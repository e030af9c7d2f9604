"""Process-wide accessor for the MongoDB connection.

A single :class:`ConnectionManager` is built at startup and handed to every
consumer. It opens at most one connection attempt at a time: callers that
arrive while an attempt is in flight wait on that same attempt, and a failed
attempt is forgotten so the next caller can retry.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from typing import Awaitable, Callable

from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from ..config import MONGODB_DB_NAME, MONGODB_SERVER_SELECTION_TIMEOUT_MS, MONGODB_URI
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

Connector = Callable[[str], Awaitable[AsyncMongoClient]]


class ConnectionState(enum.Enum):
    UNCONNECTED = "unconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


async def open_client(uri: str) -> AsyncMongoClient:
    """Open an :class:`pymongo.AsyncMongoClient` and make sure the server answers."""
    client: AsyncMongoClient = AsyncMongoClient(
        uri, serverSelectionTimeoutMS=MONGODB_SERVER_SELECTION_TIMEOUT_MS
    )
    try:
        await client.admin.command("ping")
    except Exception:
        await client.close()
        raise
    return client


class ConnectionManager:
    """Memoizes one live MongoDB client for the lifetime of the process."""

    def __init__(
        self,
        uri: str | None,
        db_name: str = MONGODB_DB_NAME,
        *,
        connector: Connector = open_client,
    ) -> None:
        if not uri:
            raise ConfigurationError(
                "MONGODB_URI is not set in environment variables"
            )
        self._uri = uri
        self._db_name = db_name
        self._connector = connector
        self._client: AsyncMongoClient | None = None
        self._pending: asyncio.Task[AsyncMongoClient] | None = None
        self.attempts = 0

    @classmethod
    def from_config(cls, *, connector: Connector = open_client) -> "ConnectionManager":
        """Build the manager from :mod:`event_listing.config`; fails fast if unset."""
        return cls(MONGODB_URI, MONGODB_DB_NAME, connector=connector)

    @property
    def state(self) -> ConnectionState:
        if self._client is not None:
            return ConnectionState.CONNECTED
        if self._pending is not None:
            return ConnectionState.CONNECTING
        return ConnectionState.UNCONNECTED

    @property
    def db_name(self) -> str:
        return self._db_name

    async def get_connection(self) -> AsyncMongoClient:
        """Return the shared client, connecting on first use."""
        if self._client is not None:
            return self._client

        if self._pending is None:
            self.attempts += 1
            logger.info("Connecting to MongoDB (attempt %d)", self.attempts)
            self._pending = asyncio.create_task(self._establish())

        # A waiter that gets cancelled must not cancel the shared attempt.
        return await asyncio.shield(self._pending)

    async def get_database(self) -> AsyncDatabase:
        """Return the configured database on the shared client."""
        client = await self.get_connection()
        return client[self._db_name]

    async def close(self) -> None:
        """Close the live client (if any) and return to the unconnected state.

        An attempt still in flight is waited for first so the client it opens
        is closed too.
        """
        pending = self._pending
        if pending is not None:
            try:
                await asyncio.shield(pending)
            except Exception as exc:
                logger.info("In-flight MongoDB connection failed during close: %s", exc)

        client, self._client = self._client, None
        if client is not None:
            await client.close()
            logger.info("Closed MongoDB connection")

    async def _establish(self) -> AsyncMongoClient:
        try:
            client = await self._connector(self._uri)
        except Exception as exc:
            logger.error("MongoDB connection attempt failed: %s", exc)
            raise
        else:
            self._client = client
            logger.info("Connected to MongoDB database %s", self._db_name)
            return client
        finally:
            self._pending = None


__all__ = ["ConnectionManager", "ConnectionState", "open_client"]
