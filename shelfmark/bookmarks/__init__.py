"""Bookmark input records for Shelfmark."""

from .record import Bookmark, month_key

__all__ = [
    "Bookmark",
    "month_key",
]
