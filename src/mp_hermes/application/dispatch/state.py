"""Application dispatch – loop states and stop reasons."""
from __future__ import annotations

from enum import Enum


class LoopState(str, Enum):
    """Checkpoints of one dispatch iteration; ``STOPPED`` is terminal."""

    RUNNING = "running"
    PROMOTING = "promoting"
    SCANNING = "scanning"
    DELIVERING = "delivering"
    IDLE_SLEEP = "idle_sleep"
    STOPPED = "stopped"


class StopReason(str, Enum):
    """Why ``wait`` returned normally."""

    SHUTDOWN = "shutdown"
    MAX_ITEMS = "max_items"


__all__ = ["LoopState", "StopReason"]
