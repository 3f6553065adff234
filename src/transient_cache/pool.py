from __future__ import annotations

import logging
import typing as t

from .exceptions import SerializationError
from .expiration import NO_EXPIRATION, normalize_expiration, to_store_ttl
from .item import CacheItem
from .monitoring.metrics import cache_deletes_total, cache_writes_total
from .serialization import PickleSerializer, Serializer
from .storage.base import TransientStore
from .storage.memory import InMemoryTransientStore
from .validation import validate_iterable, validate_key

_logger = logging.getLogger(__name__)


class CacheItemPool:
    """Factory and batch facade over a transient store.

    Items come back unresolved and read the store lazily. Saves are written
    through immediately: the store gains nothing from batching, so deferred
    saves are plain saves and `commit()` has nothing to do.
    """

    def __init__(self, store: t.Optional[TransientStore] = None, serializer: t.Optional[Serializer] = None) -> None:
        self._store = store if store is not None else InMemoryTransientStore()
        self._serializer = serializer if serializer is not None else PickleSerializer()

    @property
    def store(self) -> TransientStore:
        return self._store

    @property
    def serializer(self) -> Serializer:
        return self._serializer

    def get_item(self, key: str) -> CacheItem:
        validate_key(key)
        return CacheItem(key, self._store, self._serializer)

    def get_items(self, keys: t.Iterable[str] = ()) -> t.Dict[str, CacheItem]:
        keys = [validate_key(key) for key in validate_iterable(keys)]
        return {key: CacheItem(key, self._store, self._serializer) for key in keys}

    def has_item(self, key: str) -> bool:
        """Probe the store for `key` without resolving an item.

        The answer can be stale by the time a later `get_item()` reads the store;
        use `CacheItem.is_hit()` when the value itself is needed.
        """
        validate_key(key)
        return self._store.exists(key)

    def clear(self) -> bool:
        # Transient stores cannot enumerate keys, so only a global flush can clear
        if not self._store.can_flush:
            return False
        return self._store.flush()

    def delete_item(self, key: str) -> bool:
        validate_key(key)
        return self._delete(key)

    def delete_items(self, keys: t.Iterable[str]) -> bool:
        keys = [validate_key(key) for key in validate_iterable(keys)]
        # every delete is attempted even after a failure
        results = [self._delete(key) for key in keys]
        return all(results)

    def save(self, item: CacheItem) -> bool:
        if not isinstance(item, CacheItem):
            _logger.warning("Refusing to save foreign item type %s", type(item).__name__)
            cache_writes_total.inc(result="failed")
            return False

        key = item.get_key()
        ttl = normalize_expiration(item.get_expiration())
        if ttl is not NO_EXPIRATION and ttl <= 0:
            # A TTL of 0 would read as "never expires" to the store
            _logger.debug("Item %s already expired, removing", key)
            self._store.delete(key)
            cache_writes_total.inc(result="expired")
            return True

        try:
            payload = self._serializer.dumps(item.get())
        except SerializationError as exc:
            _logger.warning("Cannot serialize value for %s: %s", key, exc)
            cache_writes_total.inc(result="failed")
            return False

        ok = self._store.set(key, payload, to_store_ttl(ttl))
        _logger.debug("Saved %s (ttl=%s, ok=%s)", key, ttl, ok)
        cache_writes_total.inc(result="ok" if ok else "failed")
        return ok

    def save_deferred(self, item: CacheItem) -> bool:
        return self.save(item)

    def commit(self) -> bool:
        return True

    def _delete(self, key: str) -> bool:
        ok = self._store.delete(key)
        _logger.debug("Deleted %s (ok=%s)", key, ok)
        cache_deletes_total.inc(result="ok" if ok else "failed")
        return ok
