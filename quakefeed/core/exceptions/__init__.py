"""Exception handling module."""

from quakefeed.core.exceptions.base import (
    CsvParseError,
    CsvRowError,
    FetchError,
    FieldCoercionError,
    InvalidQueryError,
    QuakeFeedError,
)
from quakefeed.core.exceptions.codes import ErrorCode

__all__ = [
    "QuakeFeedError",
    "FetchError",
    "CsvParseError",
    "CsvRowError",
    "FieldCoercionError",
    "InvalidQueryError",
    "ErrorCode",
]
