"""Type-aware comparison and stable sorting by field name."""

from __future__ import annotations

import math
import unicodedata
from collections.abc import Sequence
from datetime import date, datetime
from functools import cmp_to_key
from typing import Any, TypeVar

from loguru import logger

from quakefeed.core.models.fields import field_value

T = TypeVar("T")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _collation_key(text: str) -> tuple[str, str, str]:
    # base letters first, then accents, then lowercase before uppercase
    folded = text.casefold()
    base = "".join(ch for ch in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(ch))
    return base, folded, text.swapcase()


def _sign(delta: float) -> int:
    # NaN compares as equal
    if math.isnan(delta):
        return 0
    return (delta > 0) - (delta < 0)


def compare_values(key: str, a: Any, b: Any) -> int:
    """Compare the ``key`` values of two items.

    Missing values sort last and numbers compare numerically. Strings
    collate ignoring case and accents, with lowercase first on ties, so the
    order does not depend on the process locale. Dates and datetimes compare
    chronologically. Any other pairing compares equal and is logged as
    heterogeneous data.
    """

    value_a = field_value(a, key)
    value_b = field_value(b, key)

    if value_a is None and value_b is None:
        return 0
    if value_a is None:
        return 1
    if value_b is None:
        return -1

    if _is_number(value_a) and _is_number(value_b):
        return _sign(value_a - value_b)

    if isinstance(value_a, str) and isinstance(value_b, str):
        key_a, key_b = _collation_key(value_a), _collation_key(value_b)
        return (key_a > key_b) - (key_a < key_b)

    both_datetimes = isinstance(value_a, datetime) and isinstance(value_b, datetime)
    both_dates = type(value_a) is date and type(value_b) is date
    if both_datetimes or both_dates:
        try:
            return (value_a > value_b) - (value_a < value_b)
        except TypeError:
            pass

    logger.bind(stage="sort").warning(
        "Attempting to compare unsupported types ({} vs {}) for key {!r}. Treating as equal.",
        type(value_a).__name__,
        type(value_b).__name__,
        key,
    )
    return 0


def sort_records(items: Sequence[T], key: str | None) -> Sequence[T]:
    """Return ``items`` sorted ascending by ``key``.

    Without a key the very same sequence object is returned so callers can
    detect the no-op; otherwise a new list is built and the input is left
    untouched. The sort is stable.
    """

    if not key:
        return items
    return sorted(items, key=cmp_to_key(lambda a, b: compare_values(key, a, b)))


def sorted_view(data: Sequence[T] | None, sort_key: str | None) -> Sequence[T]:
    """Client-side table re-sort; missing data yields an empty list."""

    if data is None:
        return []
    return sort_records(data, sort_key)


__all__ = ["compare_values", "sort_records", "sorted_view"]
