"""transient_cache

Item-pool and simple key/value cache interfaces layered on an expiring
key/value ("transient") store. Values are serialized before storage so that
a cached False survives the store's use of False as its "absent" marker.
"""

from .exceptions import (
    InvalidArgumentError,
    InvalidIterableError,
    InvalidKeyError,
    SerializationError,
)
from .expiration import NO_EXPIRATION, normalize_expiration
from .item import CacheItem, ItemState
from .pool import CacheItemPool
from .serialization import JsonSerializer, PickleSerializer, Serializer
from .simple import SimpleCache
from .storage import (
    NOT_FOUND,
    InMemoryTransientStore,
    RedisTransientStore,
    TransientStore,
)
from .utils.config import CacheConfig, StoreConfig, create_cache, create_pool
from .validation import validate_key

__all__ = [
    "SimpleCache",
    "CacheItemPool",
    "CacheItem",
    "ItemState",
    "TransientStore",
    "InMemoryTransientStore",
    "RedisTransientStore",
    "NOT_FOUND",
    "Serializer",
    "PickleSerializer",
    "JsonSerializer",
    "CacheConfig",
    "StoreConfig",
    "create_pool",
    "create_cache",
    "validate_key",
    "normalize_expiration",
    "NO_EXPIRATION",
    "InvalidArgumentError",
    "InvalidKeyError",
    "InvalidIterableError",
    "SerializationError",
]

__version__ = "0.1.0"
