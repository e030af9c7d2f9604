from .listing import EventListingApp, bootstrap  # noqa: F401

__all__ = ["EventListingApp", "bootstrap"]
