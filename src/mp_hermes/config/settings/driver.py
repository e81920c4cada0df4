"""Config settings – DriverSettings."""
from __future__ import annotations

import dataclasses

from mp_hermes.config.settings.base import Settings
from mp_hermes.kernel.errors import InvalidSettingValueError


@dataclasses.dataclass
class DriverSettings(Settings):
    """Connection and loop knobs read from ``HERMES_*`` variables.

    ``refresh_interval`` is in seconds (0 busy-polls); ``max_process_items``
    of 0 leaves ``wait`` unbounded.
    """

    _prefix: dataclasses.ClassVar[str] = "HERMES"

    redis_url: str = "redis://localhost:6379/0"
    queue_key: str = "hermes"
    schedule_key: str = "hermes_schedule"
    shutdown_key: str = "hermes_shutdown"
    refresh_interval: float = 1.0
    max_process_items: int = 0

    def _validate(self) -> None:
        for name in ("queue_key", "schedule_key", "shutdown_key"):
            if not getattr(self, name):
                raise InvalidSettingValueError(name, getattr(self, name), "must not be empty")
        if self.refresh_interval < 0:
            raise InvalidSettingValueError("refresh_interval", self.refresh_interval, "must be >= 0")
        if self.max_process_items < 0:
            raise InvalidSettingValueError("max_process_items", self.max_process_items, "must be >= 0")


__all__ = ["DriverSettings"]
