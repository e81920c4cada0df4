"""Application dispatch – cooperative shutdown signals.

A shutdown signal is a persisted timestamp meaning "stop every loop that
started before this moment". It is advice polled by the dispatch loop at
its checkpoints, never a lock: loops started after the signal keep running
until a newer signal is issued.
"""
from __future__ import annotations

import abc
import asyncio
import os
from pathlib import Path

from mp_hermes.kernel.store import BackingStore
from mp_hermes.kernel.time import Clock, SystemClock
from mp_hermes.observability.logging import get_logger

_log = get_logger(__name__)

DEFAULT_SHUTDOWN_KEY = "hermes_shutdown"


def should_shutdown(signal_at: float | None, loop_start: float, now: float) -> bool:
    """Decide whether a loop started at *loop_start* must stop at *now*.

    The signal applies once it was issued at or after the loop started and
    has already taken effect; a future-dated signal does not apply yet.
    """
    if signal_at is None:
        return False
    return loop_start <= signal_at <= now


class Shutdown(abc.ABC):
    """Port: persist and query the shutdown timestamp."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or SystemClock()

    @abc.abstractmethod
    async def read_signal(self) -> float | None:
        """Return the stored shutdown timestamp, or ``None`` if none is set."""
        ...

    @abc.abstractmethod
    async def signal_shutdown(self, at: float | None = None) -> bool:
        """Store *at* (default: now) as the shutdown timestamp."""
        ...

    async def should_shutdown(self, loop_start: float) -> bool:
        signal_at = await self.read_signal()
        return should_shutdown(signal_at, loop_start, self._clock.timestamp())


class NoShutdown(Shutdown):
    """Never signals; the default when a driver has no shutdown configured."""

    async def read_signal(self) -> float | None:
        return None

    async def signal_shutdown(self, at: float | None = None) -> bool:
        return False


class StoreShutdown(Shutdown):
    """Shutdown timestamp kept under a single key of the backing store."""

    def __init__(
        self,
        store: BackingStore,
        key: str = DEFAULT_SHUTDOWN_KEY,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(clock)
        self._store = store
        self.key = key

    async def read_signal(self) -> float | None:
        raw = await self._store.get(self.key)
        if raw is None:
            return None
        try:
            return float(raw)
        except ValueError:
            _log.warning("shutdown_signal_unreadable", key=self.key, value=raw)
            return None

    async def signal_shutdown(self, at: float | None = None) -> bool:
        at = self._clock.timestamp() if at is None else at
        await self._store.set(self.key, repr(float(at)))
        _log.info("shutdown_signalled", key=self.key, at=at)
        return True


class SharedFileShutdown(Shutdown):
    """Shutdown timestamp carried by the modification time of a shared file.

    Useful when workers share a filesystem but not a store, e.g. a deploy
    hook touching ``/var/run/app/restart``.
    """

    def __init__(self, path: str | os.PathLike[str], clock: Clock | None = None) -> None:
        super().__init__(clock)
        self.path = Path(path)

    def _sync_mtime(self) -> float | None:
        try:
            return self.path.stat().st_mtime
        except FileNotFoundError:
            return None

    def _sync_touch(self, at: float) -> None:
        self.path.touch(exist_ok=True)
        os.utime(self.path, (at, at))

    async def read_signal(self) -> float | None:
        return await asyncio.to_thread(self._sync_mtime)

    async def signal_shutdown(self, at: float | None = None) -> bool:
        at = self._clock.timestamp() if at is None else at
        await asyncio.to_thread(self._sync_touch, at)
        _log.info("shutdown_signalled", path=str(self.path), at=at)
        return True


__all__ = [
    "DEFAULT_SHUTDOWN_KEY",
    "NoShutdown",
    "SharedFileShutdown",
    "Shutdown",
    "StoreShutdown",
    "should_shutdown",
]
