"""Redis adapter – build a fully wired driver from settings."""
from __future__ import annotations

from typing import Any

from mp_hermes.adapters.redis.store import RedisStore
from mp_hermes.application.dispatch import SetDriver, StoreShutdown
from mp_hermes.config.settings import DriverSettings
from mp_hermes.kernel.time import Clock


def build_redis_driver(
    settings: DriverSettings | None = None,
    *,
    clock: Clock | None = None,
    **redis_kwargs: Any,
) -> SetDriver:
    """Create a :class:`SetDriver` on Redis with a store-backed shutdown signal.

    Example::

        driver = build_redis_driver(EnvSettingsLoader().load(DriverSettings))
        driver.setup_priority_queue("hermes_high", PRIORITY_HIGH)
        await driver.wait(handle)
        await driver.store.close()
    """
    settings = settings or DriverSettings()
    store = RedisStore(settings.redis_url, **redis_kwargs)
    driver = SetDriver(
        store,
        settings.queue_key,
        settings.refresh_interval,
        settings.schedule_key,
        max_process_items=settings.max_process_items,
        clock=clock,
    )
    driver.set_shutdown(StoreShutdown(store, settings.shutdown_key, clock))
    return driver


__all__ = ["build_redis_driver"]
