from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a caller passes an argument the cache cannot accept."""


class InvalidKeyError(InvalidArgumentError):
    """Raised when a cache key is not a legal value."""


class InvalidIterableError(InvalidArgumentError):
    """Raised when a bulk operation receives something it cannot iterate."""


class SerializationError(Exception):
    """Raised by serializers when a value or payload cannot be converted."""
