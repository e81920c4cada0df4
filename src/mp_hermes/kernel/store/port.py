"""Kernel store – BackingStore port.

The dispatch driver needs only a handful of set / sorted-set / string
primitives. ``spop`` and ``zrem`` must be atomic in the backing store: two
consumers popping the same key never receive the same member.
"""
from __future__ import annotations

import abc


class BackingStore(abc.ABC):
    """Port: key-value / set oriented store shared by all workers."""

    @abc.abstractmethod
    async def sadd(self, key: str, member: str) -> int:
        """Add *member* to the set at *key*; return the number of new members."""
        ...

    @abc.abstractmethod
    async def spop(self, key: str) -> str | None:
        """Atomically remove and return a random member, or ``None`` when empty."""
        ...

    @abc.abstractmethod
    async def zadd(self, key: str, score: float, member: str) -> int:
        """Add *member* with *score* to the sorted set at *key*."""
        ...

    @abc.abstractmethod
    async def zrangebyscore(
        self,
        key: str,
        min_score: float,
        max_score: float,
        offset: int = 0,
        count: int | None = None,
    ) -> list[str]:
        """Return members with ``min_score <= score <= max_score``, ascending."""
        ...

    @abc.abstractmethod
    async def zrem(self, key: str, member: str) -> int:
        """Remove *member* from the sorted set; return 1 if it was present."""
        ...

    @abc.abstractmethod
    async def get(self, key: str) -> str | None: ...

    @abc.abstractmethod
    async def set(self, key: str, value: str) -> None: ...

    async def close(self) -> None:
        """Release connections held by the store (no-op by default)."""


__all__ = ["BackingStore"]
