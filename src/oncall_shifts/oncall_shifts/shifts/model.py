from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import format_minutes


@dataclass(frozen=True)
class ShiftTime:
    """Raw shift record as written in configuration (``HH:MM`` strings)."""

    start: str
    end: str
    name: str


@dataclass(frozen=True)
class Shift:
    """On-call shift with start/end stored as minutes of the day (UTC).

    A shift whose end is not after its start wraps past midnight.
    """

    start: int
    end: int
    name: str

    @property
    def wraps_midnight(self) -> bool:
        return self.end <= self.start

    def is_active(self, now_minute: int) -> bool:
        if self.start < self.end:
            return self.start <= now_minute < self.end
        return now_minute >= self.start or now_minute < self.end

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "start": self.start,
            "end": self.end,
            "start_time": format_minutes(self.start),
            "end_time": format_minutes(self.end),
            "wraps_midnight": self.wraps_midnight,
        }


@dataclass(frozen=True)
class NextShift:
    shift: Shift
    minutes_until_start: int
