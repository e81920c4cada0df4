"""Kernel time – Clock protocol + implementations.

Schedule scores, loop start times and shutdown signals are all epoch
seconds, so ``timestamp()`` is the method the driver calls on every
iteration; ``now()`` is for callers building ``execute_at`` values.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...
    def timestamp(self) -> float: ...


class SystemClock:
    """Wall clock, always timezone-aware UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def timestamp(self) -> float:
        return self.now().timestamp()


class FrozenClock:
    """Clock that only moves when told to.

    Accepts an aware ``datetime`` or epoch seconds.
    """

    def __init__(self, fixed: datetime | float) -> None:
        if not isinstance(fixed, datetime):
            fixed = datetime.fromtimestamp(fixed, tz=UTC)
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def timestamp(self) -> float:
        return self._fixed.timestamp()

    def advance(self, **kwargs: float) -> float:
        """Move forward by ``timedelta(**kwargs)``; returns the new timestamp."""
        self._fixed += timedelta(**kwargs)
        return self.timestamp()


__all__ = ["Clock", "FrozenClock", "SystemClock"]
