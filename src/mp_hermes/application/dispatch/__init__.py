"""Application dispatch – priority polling driver, schedule, shutdown, cutoff."""
from mp_hermes.application.dispatch.cutoff import MaxItemsCutoff
from mp_hermes.application.dispatch.driver import DEFAULT_QUEUE_KEY, Callback, Driver, SetDriver
from mp_hermes.application.dispatch.registry import (
    DEFAULT_PRIORITY,
    PRIORITY_HIGH,
    PRIORITY_LOW,
    PRIORITY_MEDIUM,
    PriorityRegistry,
)
from mp_hermes.application.dispatch.schedule import DEFAULT_SCHEDULE_KEY, ScheduleStore
from mp_hermes.application.dispatch.shutdown import (
    DEFAULT_SHUTDOWN_KEY,
    NoShutdown,
    SharedFileShutdown,
    Shutdown,
    StoreShutdown,
    should_shutdown,
)
from mp_hermes.application.dispatch.state import LoopState, StopReason

__all__ = [
    "Callback",
    "DEFAULT_PRIORITY",
    "DEFAULT_QUEUE_KEY",
    "DEFAULT_SCHEDULE_KEY",
    "DEFAULT_SHUTDOWN_KEY",
    "Driver",
    "LoopState",
    "MaxItemsCutoff",
    "NoShutdown",
    "PRIORITY_HIGH",
    "PRIORITY_LOW",
    "PRIORITY_MEDIUM",
    "PriorityRegistry",
    "ScheduleStore",
    "SetDriver",
    "SharedFileShutdown",
    "Shutdown",
    "StopReason",
    "StoreShutdown",
    "should_shutdown",
]
