from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import minute_of_day, now_utc, parse_hhmm
from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import EmptyScheduleError
from .model import NextShift, Shift
from .repository import ShiftTimeRepository


class ShiftScheduleService:
    """Looks up the active on-call shift and the next one on a 24h UTC clock.

    Shifts are expected in configuration order, sorted by start time and
    covering the whole day. That ordering is not validated here.
    """

    def __init__(self, shift_times: ShiftTimeRepository):
        self._shift_times = shift_times

    def load_shifts(self) -> list[Shift]:
        return [
            Shift(start=parse_hhmm(st.start), end=parse_hhmm(st.end, end_of_day=True), name=st.name)
            for st in self._shift_times.list_shift_times()
        ]

    def get_current_shift(self, *, now: datetime | None = None) -> tuple[list[Shift], int]:
        """Return all shifts and the index of the active one, or -1.

        When several shifts match, the highest index wins.
        """
        now_minute = minute_of_day(now or now_utc())
        shifts = self.load_shifts()

        current = -1
        for i, shift in enumerate(shifts):
            if shift.is_active(now_minute):
                current = i
        return shifts, current

    def get_next_shift(self, shifts: Sequence[Shift], current_index: int, *, now: datetime | None = None) -> NextShift:
        if not shifts:
            raise EmptyScheduleError("Shift schedule is empty")

        now_minute = minute_of_day(now or now_utc())
        next_shift = shifts[(int(current_index) + 1) % len(shifts)]

        minutes = next_shift.start - now_minute
        # next start already passed today, so it begins tomorrow
        if now_minute > next_shift.start:
            minutes += MINUTES_PER_DAY
        return NextShift(shift=next_shift, minutes_until_start=minutes)

    def current_and_next(self, *, now: datetime | None = None) -> tuple[list[Shift], int, Optional[NextShift]]:
        now = now or now_utc()
        shifts, current = self.get_current_shift(now=now)
        if not shifts:
            return shifts, current, None
        return shifts, current, self.get_next_shift(shifts, current, now=now)
