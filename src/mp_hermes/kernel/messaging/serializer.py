"""Kernel messaging – JSON message serializer.

Wire layout::

    {"message": {"id": ..., "type": ..., "created": ..., "payload": ...,
                 "execute_at": ..., "retries": ...}}
"""
from __future__ import annotations

import json
from typing import Any

from mp_hermes.kernel.errors import SerializeError
from mp_hermes.kernel.messaging.message import Message, MessageSerializer


def _number(raw: Any, field: str) -> float:
    # bool is an int subclass; reject it explicitly
    if isinstance(raw, bool) or not isinstance(raw, int | float):
        raise SerializeError(f"Field '{field}' must be a number, got {type(raw).__name__}")
    return float(raw)


class JsonMessageSerializer(MessageSerializer):
    """Default serializer; every failure surfaces as :class:`SerializeError`."""

    def serialize(self, message: Message) -> str:
        if message.payload is not None and not isinstance(message.payload, dict):
            raise SerializeError(
                f"Cannot serialize message {message.id}: payload must be a dict",
                payload_type=type(message.payload).__name__,
            )
        body = {
            "message": {
                "id": message.id,
                "type": message.type,
                "created": message.created,
                "payload": message.payload,
                "execute_at": message.execute_at,
                "retries": message.retries,
            }
        }
        try:
            encoded = json.dumps(body, allow_nan=False, separators=(",", ":"))
        except (TypeError, ValueError) as exc:
            raise SerializeError(
                f"Cannot serialize message {message.id}",
                payload_type=type(message.payload).__name__,
                cause=exc,
            ) from exc
        # json coerces non-str keys and tuples; refuse anything that would not come back equal
        if json.loads(encoded)["message"]["payload"] != message.payload:
            raise SerializeError(
                f"Cannot serialize message {message.id}: payload does not survive a JSON round-trip",
                payload_type=type(message.payload).__name__,
            )
        return encoded

    def deserialize(self, data: str | bytes) -> Message:
        try:
            if isinstance(data, bytes):
                data = data.decode("utf-8")
            decoded = json.loads(data)
        except (UnicodeDecodeError, ValueError) as exc:
            raise SerializeError("Cannot deserialize message: malformed input", cause=exc) from exc

        if not isinstance(decoded, dict) or not isinstance(decoded.get("message"), dict):
            raise SerializeError("Cannot deserialize message: missing 'message' object")
        raw = decoded["message"]

        msg_type = raw.get("type")
        if not isinstance(msg_type, str):
            raise SerializeError("Cannot deserialize message: 'type' must be a string")
        payload = raw.get("payload")
        if payload is not None and not isinstance(payload, dict):
            raise SerializeError(
                "Cannot deserialize message: 'payload' must be an object",
                payload_type=type(payload).__name__,
            )
        msg_id = raw.get("id")
        if not isinstance(msg_id, str):
            raise SerializeError("Cannot deserialize message: 'id' must be a string")
        retries = raw.get("retries", 0)
        if isinstance(retries, bool) or not isinstance(retries, int):
            raise SerializeError("Cannot deserialize message: 'retries' must be an integer")

        execute_at = raw.get("execute_at")
        return Message(
            type=msg_type,
            payload=payload,
            id=msg_id,
            created=_number(raw.get("created"), "created"),
            execute_at=None if execute_at is None else _number(execute_at, "execute_at"),
            retries=retries,
        )


__all__ = ["JsonMessageSerializer"]
