"""Application dispatch – ScheduleStore for delayed messages."""
from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

from mp_hermes.kernel.messaging import JsonMessageSerializer, Message, MessageSerializer
from mp_hermes.kernel.store import BackingStore
from mp_hermes.observability.logging import get_logger

_log = get_logger(__name__)

DEFAULT_SCHEDULE_KEY = "hermes_schedule"


class ScheduleStore:
    """Sorted set of serialized messages scored by their ``execute_at``.

    Promotion is two store operations: ``ZREM`` then a re-submit through the
    driver's normal send path. Nothing makes the pair atomic, so a worker
    crash in between loses the entry. Only the caller whose ``ZREM`` actually
    removed the member re-submits it.
    """

    def __init__(
        self,
        store: BackingStore,
        key: str = DEFAULT_SCHEDULE_KEY,
        serializer: MessageSerializer | None = None,
    ) -> None:
        self._store = store
        self.key = key
        self.serializer: MessageSerializer = serializer or JsonMessageSerializer()

    async def enqueue(self, message: Message, at: float | None = None) -> None:
        score = at if at is not None else message.execute_at
        if score is None:
            raise ValueError(f"Message {message.id} has no execution time to schedule at")
        await self._store.zadd(self.key, score, self.serializer.serialize(message))
        _log.debug("message_scheduled", message_id=message.id, execute_at=score)

    async def promote_due(
        self,
        now: float,
        resubmit: Callable[[Message], Awaitable[Any]],
        limit: int = 1,
    ) -> list[Message]:
        """Move up to *limit* due entries out of the schedule via *resubmit*."""
        members = await self._store.zrangebyscore(self.key, float("-inf"), now, offset=0, count=limit)
        promoted: list[Message] = []
        for member in members:
            if not await self._store.zrem(self.key, member):
                # another worker promoted it first
                continue
            message = self.serializer.deserialize(member)
            await resubmit(message)
            promoted.append(message)
            _log.debug("message_promoted", message_id=message.id, execute_at=message.execute_at)
        return promoted

    async def pending(self, now: float | None = None) -> int:
        """Count scheduled entries, or only those due by *now* when given."""
        upper = float("inf") if now is None else now
        return len(await self._store.zrangebyscore(self.key, float("-inf"), upper))


__all__ = ["DEFAULT_SCHEDULE_KEY", "ScheduleStore"]
