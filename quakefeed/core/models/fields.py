"""Feed column catalogue and keyed field access."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Column order of the USGS summary CSV header.
CANONICAL_FIELDS: tuple[str, ...] = (
    "time",
    "latitude",
    "longitude",
    "depth",
    "mag",
    "magType",
    "nst",
    "gap",
    "dmin",
    "rms",
    "net",
    "id",
    "updated",
    "place",
    "type",
    "horizontalError",
    "depthError",
    "magError",
    "magNst",
    "status",
    "locationSource",
    "magSource",
)

REQUIRED_NUMERIC_FIELDS: frozenset[str] = frozenset({"latitude", "longitude", "depth", "mag", "rms"})
OPTIONAL_NUMERIC_FIELDS: frozenset[str] = frozenset(
    {"nst", "gap", "dmin", "horizontalError", "depthError", "magError", "magNst"}
)
INTEGER_FIELDS: frozenset[str] = frozenset({"nst", "magNst"})
REQUIRED_STRING_FIELDS: frozenset[str] = frozenset({"id", "time"})
STRING_FIELDS: frozenset[str] = frozenset(CANONICAL_FIELDS) - REQUIRED_NUMERIC_FIELDS - OPTIONAL_NUMERIC_FIELDS

# Feed column name -> python attribute name.
COLUMN_TO_ATTRIBUTE: dict[str, str] = {
    "magType": "mag_type",
    "horizontalError": "horizontal_error",
    "depthError": "depth_error",
    "magError": "mag_error",
    "magNst": "mag_nst",
    "locationSource": "location_source",
    "magSource": "mag_source",
}


def field_value(item: Any, key: str) -> Any:
    """Resolve ``key`` on a mapping, a record exposing ``get_field`` or a plain object.

    Missing keys resolve to ``None``.
    """

    if isinstance(item, Mapping):
        return item.get(key)
    getter = getattr(item, "get_field", None)
    if callable(getter):
        return getter(key)
    return getattr(item, key, None)


__all__ = [
    "CANONICAL_FIELDS",
    "COLUMN_TO_ATTRIBUTE",
    "INTEGER_FIELDS",
    "OPTIONAL_NUMERIC_FIELDS",
    "REQUIRED_NUMERIC_FIELDS",
    "REQUIRED_STRING_FIELDS",
    "STRING_FIELDS",
    "field_value",
]
