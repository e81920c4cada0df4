"""Redis adapter – backing store and driver factory."""
from mp_hermes.adapters.redis.factory import build_redis_driver
from mp_hermes.adapters.redis.store import RedisStore

__all__ = ["RedisStore", "build_redis_driver"]
