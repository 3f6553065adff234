from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..pool import CacheItemPool
from ..serialization import SERIALIZERS, Serializer
from ..simple import SimpleCache
from ..storage import InMemoryTransientStore, RedisTransientStore, TransientStore


@dataclass
class StoreConfig:
    type: str = "memory"  # memory | redis
    url: str = "redis://localhost:6379/0"
    prefix: str = "transient"
    max_size: Optional[int] = None  # memory only
    allow_flush: bool = False  # redis only; FLUSHDB wipes the whole database


@dataclass
class CacheConfig:
    store: StoreConfig = dataclasses.field(default_factory=StoreConfig)
    serializer: str = "pickle"  # pickle | json

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CacheConfig":
        return cls(
            store=StoreConfig(**data.get("store", {})),
            serializer=data.get("serializer", "pickle"),
        )


def create_store(config: StoreConfig) -> TransientStore:
    if config.type == "memory":
        return InMemoryTransientStore(max_size=config.max_size)
    if config.type == "redis":
        return RedisTransientStore(config.url, prefix=config.prefix, allow_flush=config.allow_flush)
    raise ValueError(f"unknown store type: {config.type!r}")


def create_serializer(name: str) -> Serializer:
    try:
        return SERIALIZERS[name]()
    except KeyError:
        raise ValueError(f"unknown serializer: {name!r}") from None


def create_pool(config: Optional[CacheConfig] = None) -> CacheItemPool:
    config = config or CacheConfig()
    return CacheItemPool(store=create_store(config.store), serializer=create_serializer(config.serializer))


def create_cache(config: Optional[CacheConfig] = None) -> SimpleCache:
    return SimpleCache(create_pool(config))
