"""Module-scoped registry of persisted entity types.

Each entity is registered once per process under its name. Registering the
same name again returns the entry that is already there, so re-importing a
model module never produces a second definition.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Tuple

from pymongo import IndexModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ModelSpec:
    """Where an entity lives and which indexes its collection needs."""

    name: str
    collection: str
    document_cls: type
    indexes: Tuple[IndexModel, ...] = ()


_MODELS: Dict[str, ModelSpec] = {}


def register_model(spec: ModelSpec) -> ModelSpec:
    """Register *spec* unless a model with the same name already exists."""
    existing = _MODELS.get(spec.name)
    if existing is not None:
        logger.debug("Model %s already registered, reusing it", spec.name)
        return existing
    _MODELS[spec.name] = spec
    return spec


def get_model(name: str) -> ModelSpec:
    """Return the registered model called *name*."""
    try:
        return _MODELS[name]
    except KeyError:
        raise KeyError(f"Model {name!r} is not registered") from None


__all__ = ["ModelSpec", "register_model", "get_model"]
