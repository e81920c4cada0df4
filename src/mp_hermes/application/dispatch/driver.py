"""Application dispatch – Driver port and the set-based SetDriver.

``SetDriver`` keeps one unordered set per priority and one sorted set of
delayed messages. Each ``wait`` iteration walks these checkpoints in order:

1. shutdown signal applies        -> stop
2. max processed items reached    -> stop
3. promote at most one due scheduled message
4. pop from the highest-priority non-empty queue
5. deliver to the callback, or idle-sleep for ``refresh_interval``

Delivery is at-most-once: a popped message is gone from the store before
the callback runs.
"""
from __future__ import annotations

import abc
import asyncio
import inspect
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any

from mp_hermes.application.dispatch.cutoff import MaxItemsCutoff
from mp_hermes.application.dispatch.registry import DEFAULT_PRIORITY, PriorityRegistry
from mp_hermes.application.dispatch.schedule import DEFAULT_SCHEDULE_KEY, ScheduleStore
from mp_hermes.application.dispatch.shutdown import NoShutdown, Shutdown
from mp_hermes.application.dispatch.state import LoopState, StopReason
from mp_hermes.kernel.messaging import JsonMessageSerializer, Message, MessageSerializer
from mp_hermes.kernel.store import BackingStore
from mp_hermes.kernel.time import Clock, SystemClock
from mp_hermes.observability.logging import get_logger

_log = get_logger(__name__)

DEFAULT_QUEUE_KEY = "hermes"

Callback = Callable[[Message, int], Any]


class Driver(abc.ABC):
    """Port consumed by the dispatcher layer that maps messages to handlers."""

    @abc.abstractmethod
    async def send(self, message: Message, priority: int = DEFAULT_PRIORITY) -> bool: ...

    @abc.abstractmethod
    def setup_priority_queue(self, name: str, priority: int) -> None: ...

    @abc.abstractmethod
    async def wait(self, callback: Callback, priorities: Iterable[int] | None = None) -> None:
        """Deliver messages to *callback* until shutdown or the item cap."""
        ...


class SetDriver(Driver):
    """Dispatch driver over backing-store sets.

    The store connection is managed by the caller. Pass ``refresh_interval=0``
    to poll without sleeping between empty scans.
    """

    def __init__(
        self,
        store: BackingStore,
        key: str = DEFAULT_QUEUE_KEY,
        refresh_interval: float = 1,
        schedule_key: str = DEFAULT_SCHEDULE_KEY,
        *,
        max_process_items: int = 0,
        serializer: MessageSerializer | None = None,
        shutdown: Shutdown | None = None,
        clock: Clock | None = None,
    ) -> None:
        if refresh_interval < 0:
            raise ValueError(f"refresh_interval must be >= 0, got {refresh_interval}")
        self._store = store
        self._refresh_interval = refresh_interval
        self._clock: Clock = clock or SystemClock()
        self._serializer: MessageSerializer = serializer or JsonMessageSerializer()
        self._registry = PriorityRegistry()
        self._registry.register(DEFAULT_PRIORITY, key)
        self._schedule = ScheduleStore(store, schedule_key, self._serializer)
        self._cutoff = MaxItemsCutoff(max_process_items)
        self._shutdown: Shutdown = shutdown or NoShutdown(self._clock)
        self._start_time: float | None = None
        self._state = LoopState.STOPPED
        self._stop_reason: StopReason | None = None

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def setup_priority_queue(self, name: str, priority: int) -> None:
        self._registry.register(priority, name)

    def set_serializer(self, serializer: MessageSerializer) -> None:
        self._serializer = serializer
        self._schedule.serializer = serializer

    def set_shutdown(self, shutdown: Shutdown, start_time: float | datetime | None = None) -> None:
        """Install *shutdown*; *start_time* pins the loop start used to judge signals."""
        self._shutdown = shutdown
        if isinstance(start_time, datetime):
            start_time = start_time.timestamp()
        self._start_time = start_time

    def set_max_process_items(self, count: int) -> None:
        self._cutoff.max_items = count

    @property
    def store(self) -> BackingStore:
        return self._store

    @property
    def registry(self) -> PriorityRegistry:
        return self._registry

    @property
    def schedule(self) -> ScheduleStore:
        return self._schedule

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def stop_reason(self) -> StopReason | None:
        """Reason the last ``wait`` returned; ``None`` if it raised or never ran."""
        return self._stop_reason

    @property
    def processed(self) -> int:
        return self._cutoff.processed

    # ------------------------------------------------------------------
    # Producer side
    # ------------------------------------------------------------------

    async def send(self, message: Message, priority: int = DEFAULT_PRIORITY) -> bool:
        key = self._registry.resolve(priority)
        if message.is_delayed(self._clock.timestamp()):
            await self._schedule.enqueue(message)
        else:
            await self._store.sadd(key, self._serializer.serialize(message))
            _log.debug("message_sent", message_id=message.id, priority=priority, queue=key)
        return True

    # ------------------------------------------------------------------
    # Consumer loop
    # ------------------------------------------------------------------

    async def wait(self, callback: Callback, priorities: Iterable[int] | None = None) -> None:
        self._registry.freeze()
        queues = self._registry.ordered(priorities)
        loop_start = self._start_time if self._start_time is not None else self._clock.timestamp()
        self._cutoff.reset()
        self._stop_reason = None
        _log.info(
            "dispatch_loop_started",
            queues=[key for _, key in queues],
            max_process_items=self._cutoff.max_items,
        )

        try:
            while True:
                self._state = LoopState.RUNNING
                if await self._shutdown.should_shutdown(loop_start):
                    self._stop(StopReason.SHUTDOWN)
                    return
                if not self._cutoff.should_process_next():
                    self._stop(StopReason.MAX_ITEMS)
                    return

                self._state = LoopState.PROMOTING
                await self._schedule.promote_due(self._clock.timestamp(), self.send, limit=1)

                self._state = LoopState.SCANNING
                popped = await self._pop(queues)
                if popped is not None:
                    priority, raw = popped
                    self._state = LoopState.DELIVERING
                    message = self._serializer.deserialize(raw)
                    result = callback(message, priority)
                    if inspect.isawaitable(result):
                        await result
                    self._cutoff.increment()
                    continue

                self._state = LoopState.IDLE_SLEEP
                if self._refresh_interval:
                    if await self._shutdown.should_shutdown(loop_start):
                        self._stop(StopReason.SHUTDOWN)
                        return
                    await asyncio.sleep(self._refresh_interval)
                else:
                    await asyncio.sleep(0)
        finally:
            self._state = LoopState.STOPPED

    async def _pop(self, queues: list[tuple[int, str]]) -> tuple[int, str] | None:
        for priority, key in queues:
            raw = await self._store.spop(key)
            if raw:
                return priority, raw
        return None

    def _stop(self, reason: StopReason) -> None:
        self._stop_reason = reason
        _log.info("dispatch_loop_stopped", reason=reason.value, processed=self._cutoff.processed)


__all__ = ["DEFAULT_QUEUE_KEY", "Callback", "Driver", "SetDriver"]
