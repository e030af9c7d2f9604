"""Convenience re-exports for the database connection accessor."""

from .mongodb_client import ConnectionManager, ConnectionState, open_client  # noqa: F401

__all__ = [
    "ConnectionManager",
    "ConnectionState",
    "open_client",
]
