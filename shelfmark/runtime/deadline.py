"""Cooperative deadline and cancellation contract for long engine loops."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class Deadline:
    """Optional expiry plus a cancel flag, checked between outer iterations.

    Engine loops never raise on expiry; they stop and return the partial
    result computed so far.
    """

    _expires_at: float | None
    _clock: Callable[[], float]
    _cancelled: bool

    def __init__(
        self,
        *,
        expires_at: float | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        """Create deadline at an absolute clock value, or unbounded when None."""
        self._expires_at = expires_at
        self._clock = clock or time.monotonic
        self._cancelled = False

    @classmethod
    def after(
        cls,
        seconds: float,
        *,
        clock: Callable[[], float] | None = None,
    ) -> Deadline:
        """Build deadline expiring ``seconds`` from now on the given clock."""
        resolved_clock = clock or time.monotonic
        return cls(expires_at=resolved_clock() + seconds, clock=resolved_clock)

    @classmethod
    def from_timeout(cls, seconds: float | None) -> Deadline | None:
        """Return a deadline for an optional timeout, or None when unset."""
        if seconds is None:
            return None
        return cls.after(seconds)

    def cancel(self) -> None:
        """Mark the deadline expired regardless of remaining time."""
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        """Return whether cancel() was called."""
        return self._cancelled

    def expired(self) -> bool:
        """Return whether work guarded by this deadline should stop."""
        if self._cancelled:
            return True
        if self._expires_at is None:
            return False
        return self._clock() >= self._expires_at

    def remaining(self) -> float | None:
        """Return seconds left, 0.0 once expired, or None when unbounded."""
        if self._cancelled:
            return 0.0
        if self._expires_at is None:
            return None
        return max(0.0, self._expires_at - self._clock())


def deadline_expired(deadline: Deadline | None) -> bool:
    """Return whether an optional deadline has expired."""
    return deadline is not None and deadline.expired()
