"""Row mapping from parsed CSV rows to :class:`EarthquakeRecord`."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

from loguru import logger

from quakefeed.core.exceptions import FieldCoercionError
from quakefeed.core.models.earthquake import EarthquakeRecord
from quakefeed.core.models.fields import (
    CANONICAL_FIELDS,
    COLUMN_TO_ATTRIBUTE,
    INTEGER_FIELDS,
    OPTIONAL_NUMERIC_FIELDS,
    REQUIRED_NUMERIC_FIELDS,
    REQUIRED_STRING_FIELDS,
    STRING_FIELDS,
)

_CANONICAL = frozenset(CANONICAL_FIELDS)


def _row_id(row: Mapping[str, Any]) -> str | None:
    value = row.get("id")
    return None if value is None else str(value)


def _coerce_required_number(row: Mapping[str, Any], field: str) -> float:
    value = row.get(field)
    if isinstance(value, bool):
        raise FieldCoercionError(f"{field} must be numeric, got {value!r}", field, value, _row_id(row))
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            number = float(value.strip())
        except ValueError as e:
            raise FieldCoercionError(
                f"{field} must be numeric, got {value!r}", field, value, _row_id(row)
            ) from e
    else:
        raise FieldCoercionError(f"{field} is required", field, value, _row_id(row))
    if not math.isfinite(number):
        raise FieldCoercionError(f"{field} must be a finite number, got {value!r}", field, value, _row_id(row))
    return number


def _loose_float(value: Any) -> float:
    """Numeric parse that yields NaN instead of failing."""

    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return math.nan


def _coerce_optional_number(value: Any, *, integer: bool) -> int | float | None:
    # 0 is a value here, only absent and empty cells are null
    if value is None or value == "":
        return None
    number = _loose_float(value)
    if integer and math.isfinite(number):
        return int(number)
    return number


def _coerce_string(row: Mapping[str, Any], field: str) -> str | None:
    value = row.get(field)
    if value is None or value == "":
        if field in REQUIRED_STRING_FIELDS:
            raise FieldCoercionError(f"{field} is required", field, value, _row_id(row))
        return None
    return str(value)


def map_row(row: Mapping[str, Any]) -> EarthquakeRecord:
    """Convert one parsed CSV row into an :class:`EarthquakeRecord`.

    Required numeric columns must hold numbers; optional numeric columns are
    ``None`` when empty or absent and otherwise parsed, possibly to NaN.
    Columns outside the feed header are copied unchanged into ``extra``.

    Raises:
        FieldCoercionError: when a required column is missing or malformed.
    """

    values: dict[str, Any] = {}
    for column in CANONICAL_FIELDS:
        attribute = COLUMN_TO_ATTRIBUTE.get(column, column)
        if column in REQUIRED_NUMERIC_FIELDS:
            values[attribute] = _coerce_required_number(row, column)
        elif column in OPTIONAL_NUMERIC_FIELDS:
            values[attribute] = _coerce_optional_number(row.get(column), integer=column in INTEGER_FIELDS)
        elif column in STRING_FIELDS:
            values[attribute] = _coerce_string(row, column)

    extra = {key: value for key, value in row.items() if key not in _CANONICAL}
    if extra:
        values["extra"] = extra

    return EarthquakeRecord(**values)


def map_rows(rows: Iterable[Mapping[str, Any]]) -> list[EarthquakeRecord]:
    """Map every row, aborting on the first row that fails coercion."""

    try:
        records = [map_row(row) for row in rows]
    except FieldCoercionError as e:
        logger.bind(stage="map", error_code=e.error_code).error("Error during CSV to EarthquakeRecord transformation: {}", e)
        raise
    logger.bind(stage="map").debug("Mapped {} records", len(records))
    return records


__all__ = ["map_row", "map_rows"]
