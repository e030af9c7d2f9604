"""String helpers shared by the validators."""

from __future__ import annotations

import re
from typing import Final, Any

_NON_ALNUM: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9]+")
_EMAIL: Final[re.Pattern[str]] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def slugify(text: str) -> str:
    """Create a URL-friendly slug from *text*.

    Lower-cases and trims the input, collapses every run of characters outside
    ``[a-z0-9]`` into a single hyphen and strips hyphens from both ends, so
    ``"  PyCon 2025: Day #1 "`` becomes ``"pycon-2025-day-1"``.
    """
    cleaned: str = _NON_ALNUM.sub("-", text.lower().strip())
    return cleaned.strip("-")


def is_blank(value: Any) -> bool:
    """Return ``True`` unless *value* is a string with visible characters."""
    return not isinstance(value, str) or not value.strip()


def is_email(value: Any) -> bool:
    """Basic ``local@domain.tld`` shape check."""
    return isinstance(value, str) and _EMAIL.match(value) is not None

__all__ = ["slugify", "is_blank", "is_email"]
