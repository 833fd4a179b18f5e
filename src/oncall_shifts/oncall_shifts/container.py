from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType

from .shifts.json_shift_repository import JsonShiftRepository
from .shifts.repository import ShiftTimeRepository
from .shifts.service import ShiftScheduleService
from .shifts.settings_shift_repository import SettingsShiftRepository


@dataclass(frozen=True)
class Container:
    shift_times_repo: ShiftTimeRepository
    shift_schedule_service: ShiftScheduleService


def build_container(*, settings: ModuleType) -> Container:
    shifts_file = getattr(settings, "SHIFTS_FILE", None)
    if shifts_file:
        shift_times_repo: ShiftTimeRepository = JsonShiftRepository(shifts_file)
    else:
        shift_times_repo = SettingsShiftRepository(settings)

    return Container(
        shift_times_repo=shift_times_repo,
        shift_schedule_service=ShiftScheduleService(shift_times_repo),
    )
