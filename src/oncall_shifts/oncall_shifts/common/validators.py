from __future__ import annotations

from typing import Any, Mapping

from ..core.exceptions import ConfigError


def require_mapping(value: Any, field_name: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise ConfigError(f"{field_name} must be an object")
    return value


def require_list(value: Any, field_name: str) -> list:
    if not isinstance(value, (list, tuple)):
        raise ConfigError(f"{field_name} must be a list")
    return list(value)


def require_field(record: Mapping, field_name: str, *, where: str) -> Any:
    """Look up a field by name, ignoring case (``Start`` and ``start`` both match)."""
    wanted = field_name.lower()
    for key, value in record.items():
        if isinstance(key, str) and key.lower() == wanted:
            return value
    raise ConfigError(f"{where}: missing '{field_name}'")
