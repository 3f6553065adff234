from __future__ import annotations

import re
import typing as t
from collections.abc import Iterable

from .exceptions import InvalidIterableError, InvalidKeyError

MAX_KEY_LENGTH = 167
RESERVED_CHARACTERS = "{}()/\\@:"

_RESERVED_RE = re.compile(r"[{}()/\\@:]")


def validate_key(key: t.Any) -> str:
    """Check that `key` can address a transient.

    Keys must be non-empty strings of at most 167 bytes (UTF-8) that avoid
    ``{}()/\\@:``. Returns the key unchanged so callers can validate inline.
    """
    if not isinstance(key, str):
        raise InvalidKeyError(f"key must be a string, got {type(key).__name__}")
    if key == "":
        raise InvalidKeyError("key must be at least 1 character")
    # measured in bytes; the limit comes from the store's key column
    if len(key.encode("utf-8")) > MAX_KEY_LENGTH:
        raise InvalidKeyError(f"key must be at most {MAX_KEY_LENGTH} bytes")
    if _RESERVED_RE.search(key):
        raise InvalidKeyError(f'key must not contain characters "{RESERVED_CHARACTERS}"')
    return key


def validate_iterable(value: t.Any) -> t.Iterable[t.Any]:
    # str/bytes iterate per character, which is never what a bulk caller meant
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Iterable):
        raise InvalidIterableError(f"expected an iterable of keys, got {type(value).__name__}")
    return value
