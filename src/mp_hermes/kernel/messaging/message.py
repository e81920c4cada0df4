"""Kernel messaging – Message value object and serializer port."""
from __future__ import annotations

import abc
import dataclasses
from datetime import UTC, datetime
from typing import Any, TypeAlias
from uuid import uuid4

MessageId: TypeAlias = str


def _now_ts() -> float:
    return datetime.now(UTC).timestamp()


@dataclasses.dataclass(frozen=True)
class Message:
    """A unit of work handed to the dispatch driver.

    ``execute_at`` is an absolute epoch timestamp (fractional seconds); a
    message whose ``execute_at`` lies in the future is parked in the schedule
    store until it becomes due.

    Example::

        msg = Message("email.send", {"to": "a@example.com"})
        later = Message("report.build", execute_at=time.time() + 60)
    """

    type: str
    payload: dict[str, Any] | None = None
    id: MessageId = dataclasses.field(default_factory=lambda: str(uuid4()))
    created: float = dataclasses.field(default_factory=_now_ts)
    execute_at: float | None = None
    retries: int = 0

    def is_delayed(self, now: float) -> bool:
        """``True`` when the message must wait in the schedule store at *now*."""
        return self.execute_at is not None and self.execute_at > now


class MessageSerializer(abc.ABC):
    """Port: convert a :class:`Message` to an opaque string and back."""

    @abc.abstractmethod
    def serialize(self, message: Message) -> str: ...

    @abc.abstractmethod
    def deserialize(self, data: str | bytes) -> Message: ...


__all__ = ["Message", "MessageId", "MessageSerializer"]
