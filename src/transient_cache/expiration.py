"""Conversion of expiration expressions into store TTLs.

An expiration is one of:

- ``None``: no expiration, the entry lives as long as the store allows
- ``int``: seconds from now
- ``datetime``: absolute deadline (naive values are local time)
- a relative duration such as ``timedelta`` or ``dateutil.relativedelta``

Relative durations are resolved by adding them to the current time, so
calendar-relative values ("1 month") follow the actual calendar.
"""

from __future__ import annotations

import typing as t
from datetime import datetime, timezone

from .exceptions import InvalidArgumentError

Expiration = t.Any

NO_EXPIRATION: t.Optional[int] = None

# 0 tells the store the entry never expires
STORE_NO_EXPIRATION = 0


def check_deadline(deadline: t.Any) -> t.Optional[datetime]:
    if deadline is None or isinstance(deadline, datetime):
        return deadline
    raise InvalidArgumentError(f"expiration deadline must be a datetime or None, got {type(deadline).__name__}")


def check_duration(duration: t.Any) -> Expiration:
    if duration is None:
        return None
    if isinstance(duration, bool):
        raise InvalidArgumentError("expiration duration must not be a bool")
    if isinstance(duration, int):
        return duration
    try:
        datetime.now(timezone.utc) + duration
    except TypeError as exc:
        raise InvalidArgumentError(
            f"expiration duration must be an int, a relative duration or None, got {type(duration).__name__}"
        ) from exc
    return duration


def normalize_expiration(expiration: Expiration, now: t.Optional[datetime] = None) -> t.Optional[int]:
    """Return whole seconds until `expiration`, or NO_EXPIRATION for None."""
    if expiration is None:
        return NO_EXPIRATION
    if isinstance(expiration, bool):
        raise InvalidArgumentError("expiration must not be a bool")
    if isinstance(expiration, int):
        return max(0, expiration)

    if now is None:
        now = datetime.now(timezone.utc)
    if isinstance(expiration, datetime):
        deadline = expiration
    else:
        try:
            deadline = now + expiration
        except TypeError as exc:
            raise InvalidArgumentError(f"unsupported expiration type {type(expiration).__name__}") from exc
    return max(0, int(deadline.timestamp()) - int(now.timestamp()))


def to_store_ttl(seconds: t.Optional[int]) -> int:
    return STORE_NO_EXPIRATION if seconds is NO_EXPIRATION else seconds
