from __future__ import annotations

import enum
import logging
import typing as t
from datetime import datetime

from .exceptions import SerializationError
from .expiration import Expiration, check_deadline, check_duration
from .monitoring.metrics import cache_lookups_total
from .serialization import Serializer
from .storage.base import NOT_FOUND, TransientStore

_logger = logging.getLogger(__name__)


class ItemState(str, enum.Enum):
    UNRESOLVED = "unresolved"
    HIT = "hit"
    MISS = "miss"


class CacheItem:
    """A single cache slot bound to one key.

    The item reads the store at most once, on the first call to `get()` or
    `is_hit()`, and keeps that answer for its lifetime. It is a snapshot, not
    a live view. `set()` marks an unresolved item as a hit without touching the
    store; nothing is written until the item is handed to a pool's `save()`.

    Items are created by `CacheItemPool.get_item()`, which validates the key.
    """

    def __init__(self, key: str, store: TransientStore, serializer: Serializer) -> None:
        self._key = key
        self._store = store
        self._serializer = serializer
        self._state = ItemState.UNRESOLVED
        self._value: t.Any = None
        self._expiration: Expiration = None

    def __repr__(self) -> str:
        return f"CacheItem(key={self._key!r}, state={self._state.value})"

    @property
    def state(self) -> ItemState:
        return self._state

    def get_key(self) -> str:
        return self._key

    def get(self) -> t.Any:
        """Return the cached value, or None on a miss.

        None is also a legitimate cached value; use `is_hit()` to tell them apart.
        """
        self._resolve()
        return self._value

    def is_hit(self) -> bool:
        self._resolve()
        return self._state is ItemState.HIT

    def set(self, value: t.Any) -> "CacheItem":
        if self._state is ItemState.UNRESOLVED:
            self._state = ItemState.HIT
        self._value = value
        return self

    def expires_at(self, expiration: t.Optional[datetime]) -> "CacheItem":
        self._expiration = check_deadline(expiration)
        return self

    def expires_after(self, time: Expiration) -> "CacheItem":
        """Expire `time` from now: seconds as int, a relative duration, or None."""
        self._expiration = check_duration(time)
        return self

    def get_expiration(self) -> Expiration:
        return self._expiration

    def _resolve(self) -> None:
        if self._state is not ItemState.UNRESOLVED:
            return

        payload = self._store.get(self._key)
        if payload is NOT_FOUND:
            self._miss()
            return

        try:
            value = self._serializer.loads(payload)
        except SerializationError as exc:
            _logger.warning("Discarding undecodable payload for %s: %s", self._key, exc)
            self._miss()
            return

        # A decoded False only counts if it really was an encoded False
        if value is False and not self._serializer.is_serialized_false(payload):
            self._miss()
            return

        self._state = ItemState.HIT
        self._value = value
        cache_lookups_total.inc(result="hit")

    def _miss(self) -> None:
        self._state = ItemState.MISS
        cache_lookups_total.inc(result="miss")
