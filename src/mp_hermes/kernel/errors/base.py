"""Root error class for the mp-hermes error hierarchy."""

from __future__ import annotations

from typing import Any


class HermesError(Exception):
    """Root of every error the driver raises on its own behalf.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra context for log processors, e.g. a message id or key.
        cause: Original exception that triggered this error.
    """

    default_code: str = "hermes_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Flatten into structlog-friendly key/values."""
        payload: dict[str, Any] = {"error_code": self.code, "error": self.message, **self.detail}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["HermesError"]
