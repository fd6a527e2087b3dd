"""Error code catalogue shared by the exception hierarchy."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Stable error codes surfaced to callers and log records."""

    GENERAL = "GENERAL_ERROR"
    FETCH = "FETCH_ERROR"
    CSV_PARSE = "CSV_PARSE_ERROR"
    FIELD_COERCION = "FIELD_COERCION_ERROR"
    INVALID_QUERY = "INVALID_QUERY"


__all__ = ["ErrorCode"]
