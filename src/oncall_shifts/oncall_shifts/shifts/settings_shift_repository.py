from __future__ import annotations

from types import ModuleType
from typing import Sequence

from ..core.exceptions import ConfigError
from .model import ShiftTime
from .repository import ShiftTimeRepository, to_shift_times


class SettingsShiftRepository(ShiftTimeRepository):
    """Reads the ``SHIFT_TIMES`` list declared in a settings module."""

    def __init__(self, settings: ModuleType):
        self._settings = settings

    def list_shift_times(self) -> Sequence[ShiftTime]:
        source = getattr(self._settings, "__name__", "settings")
        records = getattr(self._settings, "SHIFT_TIMES", None)
        if records is None:
            raise ConfigError(f"{source}: SHIFT_TIMES is not configured")
        return to_shift_times(records, source=source)
