"""Result size limiting."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def apply_limit(items: Sequence[T], limit: int | float | None = None) -> Sequence[T]:
    """Return at most ``limit`` leading items as a new list.

    ``None`` or a negative limit returns ``items`` itself, unchanged. A
    fractional limit is truncated.
    """

    if limit is None or not limit >= 0:
        return items
    if math.isinf(limit):
        return list(items)
    return list(items[: int(limit)])


__all__ = ["apply_limit"]
