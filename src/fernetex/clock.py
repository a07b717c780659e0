"""Conversion of caller-supplied times to Unix seconds."""

import math
import time
from datetime import UTC, datetime

from fernetex.constants import MAX_TIMESTAMP
from fernetex.exceptions import InvalidTimestampError

TimeLike = int | float | datetime | str | None


def to_unix_seconds(now: TimeLike = None) -> int:
    """Normalize *now* to whole seconds since the epoch.

    Accepts ``None`` (system clock), a number of seconds, a ``datetime``
    (naive values are taken as UTC) or an ISO-8601 string such as
    ``1985-10-26T01:20:00-07:00``.
    """
    if now is None:
        seconds = int(time.time())
    elif isinstance(now, bool):
        raise InvalidTimestampError()
    elif isinstance(now, int | float):
        if not math.isfinite(now):
            raise InvalidTimestampError()
        seconds = int(now)
    elif isinstance(now, datetime):
        seconds = _datetime_to_seconds(now)
    elif isinstance(now, str):
        try:
            parsed = datetime.fromisoformat(now)
        except ValueError as e:
            raise InvalidTimestampError(f"invalid ISO-8601 timestamp: {now!r}") from e
        seconds = _datetime_to_seconds(parsed)
    else:
        raise InvalidTimestampError()

    if not 0 <= seconds <= MAX_TIMESTAMP:
        raise InvalidTimestampError()
    return seconds


def _datetime_to_seconds(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return int(value.timestamp())
