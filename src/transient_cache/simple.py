from __future__ import annotations

import typing as t
from collections.abc import Mapping, Sequence

from .exceptions import InvalidIterableError
from .expiration import Expiration
from .pool import CacheItemPool
from .validation import validate_iterable, validate_key


class SimpleCache:
    """Key/value cache built on a `CacheItemPool`.

    Every operation goes through the pool and its items, so key rules, TTL
    handling and serialization are the pool's. When no pool is given, a
    default `CacheItemPool()` is created once here.
    """

    def __init__(self, pool: t.Optional[CacheItemPool] = None) -> None:
        self._pool = pool if pool is not None else CacheItemPool()

    @property
    def pool(self) -> CacheItemPool:
        return self._pool

    def get(self, key: str, default: t.Any = None) -> t.Any:
        item = self._pool.get_item(key)
        return item.get() if item.is_hit() else default

    def set(self, key: str, value: t.Any, ttl: Expiration = None) -> bool:
        """Store `value` under `key`; `ttl` is seconds, a relative duration or None."""
        item = self._pool.get_item(key)
        item.set(value)
        item.expires_after(ttl)
        return self._pool.save(item)

    def delete(self, key: str) -> bool:
        return self._pool.delete_item(key)

    def clear(self) -> bool:
        return self._pool.clear()

    def has(self, key: str) -> bool:
        """Whether `key` is currently stored.

        Only suitable for cache warming: another writer can remove the entry
        between this call and a subsequent `get()`.
        """
        return self._pool.has_item(key)

    def get_multiple(self, keys: t.Iterable[str], default: t.Any = None) -> t.Dict[str, t.Any]:
        return {key: self.get(key, default) for key in validate_iterable(keys)}

    def set_multiple(
        self,
        values: t.Union[t.Mapping[str, t.Any], t.Iterable[t.Tuple[str, t.Any]]],
        ttl: Expiration = None,
    ) -> bool:
        validate_iterable(values)
        pairs = list(values.items()) if isinstance(values, Mapping) else list(values)
        for pair in pairs:
            if isinstance(pair, (str, bytes, bytearray)) or not isinstance(pair, Sequence) or len(pair) != 2:
                raise InvalidIterableError(f"expected (key, value) pairs, got {pair!r}")
            validate_key(pair[0])
        results = [self.set(key, value, ttl) for key, value in pairs]
        return all(results)

    def delete_multiple(self, keys: t.Iterable[str]) -> bool:
        keys = [validate_key(key) for key in validate_iterable(keys)]
        results = [self.delete(key) for key in keys]
        return all(results)
