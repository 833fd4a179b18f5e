from __future__ import annotations

from datetime import datetime, timezone

from ..core.constants import MINUTES_PER_DAY, MINUTES_PER_HOUR, TIME_SEPARATOR
from ..core.exceptions import ConfigError


def now_utc() -> datetime:
    """Wall-clock instant in UTC.

    Services call this only when no explicit ``now`` is passed in.
    """
    return datetime.now(timezone.utc)


def minute_of_day(value: datetime) -> int:
    """Minutes since 00:00 UTC for the given instant.

    Naive datetimes are taken as UTC already.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.hour * MINUTES_PER_HOUR + value.minute


def _two_digits(token: str) -> bool:
    return len(token) == 2 and token.isascii() and token.isdigit()


def parse_hhmm(value: str, *, end_of_day: bool = False) -> int:
    """Parse a fixed ``HH:MM`` string into minute-of-day.

    With ``end_of_day`` the value ``24:00`` is also accepted and maps to 1440,
    so a shift can end exactly at midnight without wrapping.
    """
    if not isinstance(value, str):
        raise ConfigError(f"Invalid time value {value!r}: expected an HH:MM string")

    parts = value.split(TIME_SEPARATOR)
    if len(parts) != 2 or not all(_two_digits(p) for p in parts):
        raise ConfigError(f"Invalid time value {value!r}: expected HH:MM")

    hours, minutes = int(parts[0]), int(parts[1])
    total = hours * MINUTES_PER_HOUR + minutes
    if end_of_day and (hours, minutes) == (24, 0):
        return MINUTES_PER_DAY
    if hours > 23 or minutes > 59:
        raise ConfigError(f"Invalid time value {value!r}: out of range")
    return total


def format_minutes(value: int) -> str:
    hours, minutes = divmod(int(value), MINUTES_PER_HOUR)
    return f"{hours:02d}{TIME_SEPARATOR}{minutes:02d}"
