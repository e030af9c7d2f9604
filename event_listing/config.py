"""Centralised configuration for event_listing.

Environment variables are loaded once and all related constants are
grouped by concern for easier maintenance.
"""

from __future__ import annotations

import os
from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# Core credentials (from environment)
# The lower-case `mongo_uri` name is still honoured for older .env files.
# ---------------------------------------------------------------------------
MONGODB_URI: str | None = os.getenv("MONGODB_URI") or os.getenv("mongo_uri")

# ---------------------------------------------------------------------------
# Database settings
# ---------------------------------------------------------------------------
MONGODB_DB_NAME: str = os.getenv("MONGODB_DB_NAME", "event_listing")
MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = int(
    os.getenv("MONGODB_SERVER_SELECTION_TIMEOUT_MS", "5000")
)
EVENTS_COLLECTION: str = "events"
BOOKINGS_COLLECTION: str = "bookings"

# ---------------------------------------------------------------------------
# Miscellaneous
# ---------------------------------------------------------------------------
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # credentials
    "MONGODB_URI",
    # database
    "MONGODB_DB_NAME",
    "MONGODB_SERVER_SELECTION_TIMEOUT_MS",
    "EVENTS_COLLECTION",
    "BOOKINGS_COLLECTION",
    # misc
    "LOG_LEVEL",
]
