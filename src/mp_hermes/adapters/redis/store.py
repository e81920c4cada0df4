"""Redis adapter – RedisStore."""
from __future__ import annotations

import math
from typing import Any

from mp_hermes.kernel.store import BackingStore


def _require_redis() -> Any:
    try:
        import redis.asyncio as aioredis
        return aioredis
    except ImportError as exc:
        raise ImportError("Install 'mp-hermes[redis]' to use the Redis adapter") from exc


def _decode(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def _bound(score: float) -> str:
    if math.isinf(score):
        return "-inf" if score < 0 else "+inf"
    return repr(float(score))


class RedisStore(BackingStore):
    """:class:`BackingStore` over ``redis.asyncio``.

    ``SPOP`` and ``ZREM`` are single Redis commands and therefore atomic
    across every worker sharing the server.
    """

    def __init__(self, url: str | None = None, *, client: Any = None, **kwargs: Any) -> None:
        if client is None:
            if url is None:
                raise ValueError("RedisStore needs either a url or a client")
            client = _require_redis().from_url(url, **kwargs)
        self._client = client

    async def sadd(self, key: str, member: str) -> int:
        return int(await self._client.sadd(key, member))

    async def spop(self, key: str) -> str | None:
        return _decode(await self._client.spop(key))

    async def zadd(self, key: str, score: float, member: str) -> int:
        return int(await self._client.zadd(key, {member: score}))

    async def zrangebyscore(
        self,
        key: str,
        min_score: float,
        max_score: float,
        offset: int = 0,
        count: int | None = None,
    ) -> list[str]:
        if count is None:
            raw = await self._client.zrangebyscore(key, _bound(min_score), _bound(max_score))
        else:
            raw = await self._client.zrangebyscore(
                key, _bound(min_score), _bound(max_score), start=offset, num=count
            )
        return [_decode(member) for member in raw]  # type: ignore[misc]

    async def zrem(self, key: str, member: str) -> int:
        return int(await self._client.zrem(key, member))

    async def get(self, key: str) -> str | None:
        return _decode(await self._client.get(key))

    async def set(self, key: str, value: str) -> None:
        await self._client.set(key, value)

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisStore"]
