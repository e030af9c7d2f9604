"""Utility functions for the event listing project.

Re-exports the text helpers and datetime utilities so that imports like
`from ..utils import slugify` or `from ..utils import normalize_time`
work as expected.
"""

from .text_cleaning import slugify, is_blank, is_email  # noqa: F401
from .datetime_utils import (  # noqa: F401
    get_current_timestamp,
    normalize_date,
    normalize_time,
    to_canonical_string,
)

__all__ = [
    "slugify",
    "is_blank",
    "is_email",
    "get_current_timestamp",
    "normalize_date",
    "normalize_time",
    "to_canonical_string",
]
