from __future__ import annotations

import logging
import typing as t

import redis
from redis.exceptions import RedisError

from .base import NOT_FOUND, TransientStore

_logger = logging.getLogger(__name__)


class RedisTransientStore(TransientStore):
    """Redis-backed transient store.

    - Entries are stored at key: `{prefix}:{key}` (cache keys cannot contain ':')
    - TTLs use `SET ... EX`; a TTL of 0 is a plain `SET` with no expiry
    - `flush()` issues `FLUSHDB` and is only enabled with `allow_flush=True`,
      since it wipes every key in the database, not just this prefix
    """

    def __init__(
        self,
        url: str = "redis://localhost:6379/0",
        *,
        prefix: str = "transient",
        client: t.Optional[t.Any] = None,
        allow_flush: bool = False,
    ) -> None:
        self._url = url
        self._prefix = prefix.rstrip(":")
        self._allow_flush = allow_flush
        # Payloads are bytes, so responses must not be decoded
        self._redis = client if client is not None else redis.Redis.from_url(url, decode_responses=False)

    def _key(self, key: str) -> str:
        return f"{self._prefix}:{key}" if self._prefix else key

    def get(self, key: str) -> t.Any:
        try:
            raw = self._redis.get(self._key(key))
        except RedisError as exc:
            _logger.warning("Redis GET failed for %s: %s", key, exc)
            return NOT_FOUND
        if raw is None:
            return NOT_FOUND
        return raw

    def set(self, key: str, payload: bytes, ttl_seconds: int = 0) -> bool:
        try:
            if ttl_seconds > 0:
                ok = self._redis.set(self._key(key), payload, ex=ttl_seconds)
            else:
                ok = self._redis.set(self._key(key), payload)
        except RedisError as exc:
            _logger.warning("Redis SET failed for %s: %s", key, exc)
            return False
        return bool(ok)

    def delete(self, key: str) -> bool:
        try:
            removed = self._redis.delete(self._key(key))
        except RedisError as exc:
            _logger.warning("Redis DEL failed for %s: %s", key, exc)
            return False
        return bool(removed)

    def exists(self, key: str) -> bool:
        try:
            return bool(self._redis.exists(self._key(key)))
        except RedisError as exc:
            _logger.warning("Redis EXISTS failed for %s: %s", key, exc)
            return False

    @property
    def can_flush(self) -> bool:
        return self._allow_flush

    def flush(self) -> bool:
        if not self._allow_flush:
            return False
        try:
            return bool(self._redis.flushdb())
        except RedisError as exc:
            _logger.warning("Redis FLUSHDB failed: %s", exc)
            return False

    def is_healthy(self) -> bool:
        try:
            return bool(self._redis.ping())
        except RedisError:
            return False

    def close(self) -> None:  # pragma: no cover - convenience
        try:
            self._redis.close()
        except RedisError as exc:
            _logger.debug("Redis close failed: %s", exc)
