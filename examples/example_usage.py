"""Example: use the service layer directly (no Flask).

Prints the active on-call shift and how long until the next one starts.
"""

import importlib

from config import get_settings_module

from src.oncall_shifts.oncall_shifts.common.datetime_utils import format_minutes
from src.oncall_shifts.oncall_shifts.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    service = container.shift_schedule_service

    shifts, current, upcoming = service.current_and_next()
    if current >= 0:
        print(f"On call now: {shifts[current].name}")
    else:
        print("No shift is active right now")
    if upcoming:
        print(
            f"Next: {upcoming.shift.name} at {format_minutes(upcoming.shift.start)} UTC "
            f"(in {upcoming.minutes_until_start} min)"
        )


if __name__ == "__main__":
    main()
