from __future__ import annotations

from typing import Any, Protocol, Sequence

from ..common.validators import require_field, require_list, require_mapping
from .model import ShiftTime


class ShiftTimeRepository(Protocol):
    def list_shift_times(self) -> Sequence[ShiftTime]:
        """Return raw shift records in configuration order.

        Raises ConfigError when the source cannot be read.
        """

        raise NotImplementedError


def to_shift_times(records: Any, *, source: str) -> list[ShiftTime]:
    """Convert deserialized ``{start, end, name}`` records into ShiftTime values."""
    items = require_list(records, f"{source}: shift_times")

    shift_times: list[ShiftTime] = []
    for i, raw in enumerate(items):
        where = f"{source}: shift #{i + 1}"
        record = require_mapping(raw, where)
        shift_times.append(
            ShiftTime(
                start=require_field(record, "start", where=where),
                end=require_field(record, "end", where=where),
                name=str(require_field(record, "name", where=where)),
            )
        )
    return shift_times
