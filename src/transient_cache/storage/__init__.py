from .base import NOT_FOUND, TransientStore
from .memory import InMemoryTransientStore
from .redis_adapter import RedisTransientStore

__all__ = ["NOT_FOUND", "TransientStore", "InMemoryTransientStore", "RedisTransientStore"]
