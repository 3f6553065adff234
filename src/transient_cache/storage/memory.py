from __future__ import annotations

import time
import typing as t
from collections import OrderedDict

from .base import NOT_FOUND, TransientStore


class InMemoryTransientStore(TransientStore):
    """Process-local transient store with per-entry TTL and optional LRU bound.

    Intended for dev/test and single-process use. Expired entries are dropped
    lazily on access.
    """

    def __init__(self, max_size: t.Optional[int] = None, clock: t.Callable[[], float] = time.time) -> None:
        # key -> (expires_at or None, payload)
        self._store: "OrderedDict[str, tuple[t.Optional[float], bytes]]" = OrderedDict()
        self._max_size = max_size
        self._clock = clock

    def _live_entry(self, key: str) -> t.Optional["tuple[t.Optional[float], bytes]"]:
        item = self._store.get(key)
        if item is None:
            return None
        expires_at, _ = item
        if expires_at is not None and expires_at <= self._clock():
            self._store.pop(key, None)
            return None
        return item

    def get(self, key: str) -> t.Any:
        item = self._live_entry(key)
        if item is None:
            return NOT_FOUND
        # mark as recently used
        self._store.move_to_end(key)
        return item[1]

    def set(self, key: str, payload: bytes, ttl_seconds: int = 0) -> bool:
        expires_at = self._clock() + ttl_seconds if ttl_seconds > 0 else None
        self._store[key] = (expires_at, payload)
        self._store.move_to_end(key)
        if self._max_size is not None and self._max_size > 0:
            while len(self._store) > self._max_size:
                # evict LRU
                self._store.popitem(last=False)
        return True

    def delete(self, key: str) -> bool:
        if self._live_entry(key) is None:
            return False
        del self._store[key]
        return True

    def exists(self, key: str) -> bool:
        return self._live_entry(key) is not None

    @property
    def can_flush(self) -> bool:
        return True

    def flush(self) -> bool:
        self._store.clear()
        return True

    def __len__(self) -> int:
        return len(self._store)
