"""Definition of the `Event` dataclass used throughout the project."""

from __future__ import annotations

from dataclasses import dataclass, field, fields as dataclass_fields
from datetime import datetime
from typing import Any, ClassVar, Dict, List, Mapping, Tuple

from bson import ObjectId
from pymongo import ASCENDING, IndexModel

from ..config import EVENTS_COLLECTION
from .registry import ModelSpec, register_model


@dataclass(slots=True)
class Event:
    """A listed event as supplied by the caller and stored in ``events``."""

    title: str = ""
    description: str = ""
    overview: str = ""
    image: str = ""
    venue: str = ""
    location: str = ""
    date: str = ""
    time: str = ""
    mode: str = ""
    audience: str = ""
    agenda: List[str] = field(default_factory=list)
    organizer: str = ""
    tags: List[str] = field(default_factory=list)
    slug: str = ""
    id: ObjectId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    # Title as last written to the store; None until the first save.
    persisted_title: str | None = field(default=None, repr=False, compare=False)

    REQUIRED_STRINGS: ClassVar[Tuple[str, ...]] = (
        "title",
        "description",
        "overview",
        "image",
        "venue",
        "location",
        "date",
        "time",
        "mode",
        "audience",
        "organizer",
    )
    REQUIRED_LISTS: ClassVar[Tuple[str, ...]] = ("agenda", "tags")
    CARD_FIELDS: ClassVar[Tuple[str, ...]] = ("title", "image", "slug", "location", "date", "time")

    @property
    def is_new(self) -> bool:
        return self.id is None

    def title_changed(self) -> bool:
        """Return ``True`` if the title differs from what was last persisted."""
        return self.is_new or self.title != self.persisted_title

    def mark_persisted(self) -> None:
        self.persisted_title = self.title

    def card(self) -> Dict[str, str]:
        """Return the subset of fields shown on the landing-page event card."""
        return {name: getattr(self, name) for name in self.CARD_FIELDS}

    def to_document(self) -> Dict[str, Any]:
        """Return the MongoDB document for this event (without ``_id`` when new)."""
        doc: Dict[str, Any] = {
            name: getattr(self, name)
            for name in (*self.REQUIRED_STRINGS, *self.REQUIRED_LISTS, "slug")
        }
        doc["created_at"] = self.created_at
        doc["updated_at"] = self.updated_at
        if self.id is not None:
            doc["_id"] = self.id
        return doc

    @classmethod
    def from_fields(cls, values: Mapping[str, Any]) -> "Event":
        """Build a new, unsaved event from raw caller input.

        Unknown keys and store-managed keys (slug, id, timestamps) are ignored.
        Missing fields come through as ``None`` so validation reports them.
        """
        names = (*cls.REQUIRED_STRINGS, *cls.REQUIRED_LISTS)
        return cls(**{name: values.get(name) for name in names})

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Event":
        """Rebuild an event read back from MongoDB."""
        known = {f.name for f in dataclass_fields(cls)} - {"id", "persisted_title"}
        event = cls(**{k: v for k, v in doc.items() if k in known})
        event.id = doc.get("_id")
        event.mark_persisted()
        return event


EVENT_MODEL = register_model(
    ModelSpec(
        name="Event",
        collection=EVENTS_COLLECTION,
        document_cls=Event,
        indexes=(IndexModel([("slug", ASCENDING)], unique=True, name="slug_unique"),),
    )
)

__all__ = ["Event", "EVENT_MODEL"]
