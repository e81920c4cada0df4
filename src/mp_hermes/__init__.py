"""
mp_hermes – priority job/message dispatch driver.

Import path convention::

    from mp_hermes.kernel.messaging import Message
    from mp_hermes.application.dispatch import SetDriver, PRIORITY_HIGH
    from mp_hermes.adapters.redis import RedisStore, build_redis_driver
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
