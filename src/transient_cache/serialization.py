from __future__ import annotations

import json
import pickle
import typing as t
from abc import ABC, abstractmethod

from .exceptions import SerializationError


class Serializer(ABC):
    """Encodes application values into the byte payloads handed to the store.

    Every value goes through a serializer, including ``False``: the store uses
    a bare ``False`` to mean "absent", so it must never carry one as data.
    """

    name: str = ""

    @abstractmethod
    def dumps(self, value: t.Any) -> bytes:  # pragma: no cover - interface
        raise NotImplementedError

    @abstractmethod
    def loads(self, payload: bytes) -> t.Any:  # pragma: no cover - interface
        raise NotImplementedError

    def serialized_false(self) -> bytes:
        return self.dumps(False)

    def is_serialized_false(self, payload: t.Any) -> bool:
        """Whether `payload` is exactly this codec's encoding of False.

        Stores with decoded responses hand back `str`; those compare as UTF-8.
        """
        if isinstance(payload, str):
            payload = payload.encode("utf-8")
        return payload == self.serialized_false()


class PickleSerializer(Serializer):
    """Default codec; round-trips any picklable value.

    Only point this at stores you trust: unpickling runs arbitrary code.
    """

    name = "pickle"

    def __init__(self, protocol: int = pickle.DEFAULT_PROTOCOL) -> None:
        # Pinned so the encoding of False stays stable for this instance
        self._protocol = protocol

    def dumps(self, value: t.Any) -> bytes:
        try:
            return pickle.dumps(value, protocol=self._protocol)
        except (pickle.PicklingError, TypeError, AttributeError, RecursionError) as exc:
            raise SerializationError(f"cannot pickle {type(value).__name__}: {exc}") from exc

    def loads(self, payload: bytes) -> t.Any:
        try:
            return pickle.loads(payload)
        except (pickle.UnpicklingError, EOFError, ValueError, TypeError, AttributeError, ImportError, IndexError) as exc:
            raise SerializationError(f"cannot unpickle payload: {exc}") from exc


class JsonSerializer(Serializer):
    """JSON codec for stores shared with non-Python readers."""

    name = "json"

    def dumps(self, value: t.Any) -> bytes:
        try:
            return json.dumps(value, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"cannot encode {type(value).__name__} as JSON: {exc}") from exc

    def loads(self, payload: bytes) -> t.Any:
        if isinstance(payload, str):
            payload = payload.encode("utf-8")
        try:
            return json.loads(payload)
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"cannot decode JSON payload: {exc}") from exc


SERIALIZERS: t.Dict[str, t.Type[Serializer]] = {
    PickleSerializer.name: PickleSerializer,
    JsonSerializer.name: JsonSerializer,
}
