from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from ..common.validators import require_field, require_mapping
from ..core.constants import SHIFT_TIMES_KEY
from ..core.exceptions import ConfigError
from .model import ShiftTime
from .repository import ShiftTimeRepository, to_shift_times


class JsonShiftRepository(ShiftTimeRepository):
    """Reads shift records from a JSON file.

    Expected layout::

        {"shift_times": [{"start": "08:00", "end": "16:00", "name": "Day"}, ...]}

    The file is read on every call; nothing is cached.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def list_shift_times(self) -> Sequence[ShiftTime]:
        source = str(self._path)
        try:
            with self._path.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except OSError as e:
            raise ConfigError(f"Cannot read shift config {source}: {e}") from e
        except ValueError as e:
            raise ConfigError(f"Invalid JSON in shift config {source}: {e}") from e

        document = require_mapping(data, source)
        records = require_field(document, SHIFT_TIMES_KEY, where=source)
        return to_shift_times(records, source=source)
