from __future__ import annotations

import typing as t
from abc import ABC, abstractmethod

# What a store returns for a missing or expired key. It is the literal False,
# so stored payloads must never be False themselves.
NOT_FOUND: t.Final = False


class TransientStore(ABC):
    """Expiring key/value storage the cache is layered on.

    Payloads are opaque bytes produced by a serializer. A TTL of 0 means the
    entry never expires. Implementations report failures through their return
    values and do not raise for backend errors.
    """

    @abstractmethod
    def get(self, key: str) -> t.Any:  # pragma: no cover - interface
        """Return the stored payload, or NOT_FOUND."""
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, payload: bytes, ttl_seconds: int = 0) -> bool:  # pragma: no cover - interface
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> bool:  # pragma: no cover - interface
        """Remove `key`; False when nothing was removed or the backend failed."""
        raise NotImplementedError

    def exists(self, key: str) -> bool:
        return self.get(key) is not NOT_FOUND

    @property
    def can_flush(self) -> bool:
        return False

    def flush(self) -> bool:
        """Drop every entry in the store. Only meaningful when can_flush is True."""
        return False
