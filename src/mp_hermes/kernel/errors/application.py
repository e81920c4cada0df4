"""Application-layer errors – misuse of the driver surface and bad config."""

from __future__ import annotations

from typing import Any

from mp_hermes.kernel.errors.base import HermesError


class ApplicationError(HermesError):
    """Caller-side error raised synchronously by the driver."""

    default_code = "application_error"


class UnknownPriorityError(ApplicationError):
    """A priority was referenced that has no registered queue."""

    default_code = "unknown_priority"

    def __init__(self, priority: int, **kwargs: Any) -> None:
        super().__init__(f"Unknown priority {priority}", detail={"priority": priority}, **kwargs)
        self.priority = priority


class RegistryFrozenError(ApplicationError):
    """The priority registry was modified after the dispatch loop started."""

    default_code = "registry_frozen"


class ConfigError(ApplicationError):
    """Driver settings could not be loaded."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting is present but unusable (wrong type, negative interval, empty key)."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = [
    "ApplicationError",
    "ConfigError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RegistryFrozenError",
    "UnknownPriorityError",
]
