"""Data models module."""

from quakefeed.core.models.earthquake import EarthquakeRecord
from quakefeed.core.models.fields import (
    CANONICAL_FIELDS,
    INTEGER_FIELDS,
    OPTIONAL_NUMERIC_FIELDS,
    REQUIRED_NUMERIC_FIELDS,
    REQUIRED_STRING_FIELDS,
    STRING_FIELDS,
    field_value,
)
from quakefeed.core.models.query import EarthquakeFilters, EarthquakeQuery, QueryBuilder

__all__ = [
    "CANONICAL_FIELDS",
    "EarthquakeFilters",
    "EarthquakeQuery",
    "EarthquakeRecord",
    "INTEGER_FIELDS",
    "OPTIONAL_NUMERIC_FIELDS",
    "QueryBuilder",
    "REQUIRED_NUMERIC_FIELDS",
    "REQUIRED_STRING_FIELDS",
    "STRING_FIELDS",
    "field_value",
]
