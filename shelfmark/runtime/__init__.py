"""Runtime helpers for Shelfmark."""

from .deadline import Deadline, deadline_expired

__all__ = [
    "Deadline",
    "deadline_expired",
]
