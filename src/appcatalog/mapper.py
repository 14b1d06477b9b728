"""
Key mapping between database column names and external record keys.

Columns use the word-separated convention (``icon_url``); records handed to
the API use compact camelCase keys (``iconUrl``). The translation table is
built once from the declared tables, so every known field maps through an
explicit entry; unknown keys fall back to pydantic's alias generators.
"""

from collections.abc import Mapping
from typing import Any

from pydantic.alias_generators import to_camel, to_snake

from .dbmodels import target_metadata

# table name -> {column name: external key}
FIELD_MAPS: dict[str, dict[str, str]] = {
    table.name: {column.name: to_camel(column.name) for column in table.columns}
    for table in target_metadata.sorted_tables
}

_EXTERNAL_KEYS: dict[str, str] = {
    column: key for field_map in FIELD_MAPS.values() for column, key in field_map.items()
}
_INTERNAL_KEYS: dict[str, str] = {key: column for column, key in _EXTERNAL_KEYS.items()}


def external_key(key: str) -> str:
    """Return the external (camelCase) spelling of a column name."""
    mapped = _EXTERNAL_KEYS.get(key)
    if mapped is not None:
        return mapped
    if key in _INTERNAL_KEYS:
        return key
    return to_camel(key)


def internal_key(key: str) -> str:
    """Return the column (snake_case) spelling of an external key."""
    mapped = _INTERNAL_KEYS.get(key)
    if mapped is not None:
        return mapped
    if key in _EXTERNAL_KEYS:
        return key
    return to_snake(key)


def to_external_case(record: Mapping[str, Any]) -> dict[str, Any]:
    """Rename every key of a flat record to the external convention.

    Values are passed through untouched; nested values are not visited.
    """
    return {external_key(key): value for key, value in record.items()}


def to_internal_case(record: Mapping[str, Any]) -> dict[str, Any]:
    """Rename every key of a flat record to the column convention."""
    return {internal_key(key): value for key, value in record.items()}
