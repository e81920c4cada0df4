"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    HermesError
    ├── ApplicationError       (application.py)
    │   ├── UnknownPriorityError
    │   ├── RegistryFrozenError
    │   └── ConfigError
    │       ├── MissingRequiredSettingError
    │       └── InvalidSettingValueError
    └── InfrastructureError    (infrastructure.py)
        └── SerializeError

Backing-store transport failures are not wrapped; they surface as the
store client's own exceptions.
"""

from mp_hermes.kernel.errors.application import (
    ApplicationError,
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    RegistryFrozenError,
    UnknownPriorityError,
)
from mp_hermes.kernel.errors.base import HermesError
from mp_hermes.kernel.errors.infrastructure import InfrastructureError, SerializeError

__all__ = [
    "ApplicationError",
    "ConfigError",
    "HermesError",
    "InfrastructureError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RegistryFrozenError",
    "SerializeError",
    "UnknownPriorityError",
]
