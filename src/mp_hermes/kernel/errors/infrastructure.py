"""Infrastructure errors – encoding failures at the storage boundary."""

from __future__ import annotations

from typing import Any

from mp_hermes.kernel.errors.base import HermesError


class InfrastructureError(HermesError):
    """Infrastructure / I/O failure that is not a caller mistake."""

    default_code = "infrastructure_error"


class SerializeError(InfrastructureError):
    """Failed to serialize a message or deserialize a stored entry."""

    default_code = "serialize_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = ["InfrastructureError", "SerializeError"]
