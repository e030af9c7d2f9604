"""Top-level package for the event-listing project.

This package exposes the startup helper so a presentation layer can do
`from event_listing import bootstrap; app = await bootstrap()`.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("event-listing")
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .errors import (  # noqa: E402
    ConfigurationError,
    ValidationError,
    ReferentialError,
    UniquenessError,
)
from .workflows.listing import EventListingApp, bootstrap  # noqa: E402  # convenience re-export

__all__ = [
    "bootstrap",
    "EventListingApp",
    "ConfigurationError",
    "ValidationError",
    "ReferentialError",
    "UniquenessError",
    "__version__",
]
