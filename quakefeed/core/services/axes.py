"""Discovery of plottable numeric axes."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def _as_mapping(item: Any) -> Mapping[str, Any]:
    if isinstance(item, Mapping):
        return item
    as_row = getattr(item, "as_row", None)
    if callable(as_row):
        return as_row()
    return vars(item)


def numeric_keys(items: Sequence[Any]) -> list[str]:
    """Keys whose value in the first item is a number, in field order."""

    if not items:
        return []
    first = _as_mapping(items[0])
    return [
        key
        for key, value in first.items()
        if isinstance(value, (int, float)) and not isinstance(value, bool)
    ]


def default_axes(items: Sequence[Any]) -> tuple[str | None, str | None]:
    """Pick the first two numeric keys as (x, y); a single key only fills x."""

    keys = numeric_keys(items)
    if len(keys) >= 2:
        return keys[0], keys[1]
    if len(keys) == 1:
        return keys[0], None
    return None, None


__all__ = ["default_axes", "numeric_keys"]
