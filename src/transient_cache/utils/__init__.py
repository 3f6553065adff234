"""Configuration helpers for building stores, pools and caches."""

from .config import CacheConfig, StoreConfig, create_cache, create_pool, create_serializer, create_store

__all__ = [
    "CacheConfig",
    "StoreConfig",
    "create_store",
    "create_serializer",
    "create_pool",
    "create_cache",
]
