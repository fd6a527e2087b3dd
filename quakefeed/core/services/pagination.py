"""Page windows over an already shaped record collection."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")

DEFAULT_ITEMS_PER_PAGE = 10


@dataclass(slots=True, frozen=True)
class PageWindow(Generic[T]):
    """One page of items plus the offsets that produced it."""

    page_items: list[T] = field(default_factory=list)
    total_pages: int = 0
    start_index: int = 0
    end_index: int = 0


def paginate(items: Sequence[T], page: int, page_size: int) -> PageWindow[T]:
    """Slice ``items`` into the window for the 1-based ``page``.

    Offsets use ``max(1, page_size)``. A non-positive ``page_size`` or a page
    beyond the last one gives an empty window rather than an error.
    """

    effective_size = max(1, page_size)
    total_pages = math.ceil(len(items) / effective_size) if items else 0
    start_index = (page - 1) * effective_size
    end_index = start_index + effective_size

    if not items or page_size <= 0 or (total_pages > 0 and page > total_pages):
        page_items: list[T] = []
    else:
        page_items = list(items[max(0, start_index):max(0, end_index)])

    return PageWindow(
        page_items=page_items,
        total_pages=total_pages,
        start_index=start_index,
        end_index=end_index,
    )


@dataclass
class PaginationState:
    """Mutable page selection owned by a table view."""

    current_page: int = 1
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE

    def set_page(self, page: int) -> None:
        self.current_page = page

    def handle_items_per_page_change(self, raw_value: Any) -> None:
        """Apply a page size picked by the user and go back to page 1.

        Unparseable or non-positive selections fall back to the default size.
        """

        try:
            parsed = int(raw_value)
        except (TypeError, ValueError):
            parsed = 0
        self.items_per_page = parsed if parsed > 0 else DEFAULT_ITEMS_PER_PAGE
        self.current_page = 1

    def window(self, items: Sequence[T]) -> PageWindow[T]:
        return paginate(items, self.current_page, self.items_per_page)


__all__ = ["DEFAULT_ITEMS_PER_PAGE", "PageWindow", "PaginationState", "paginate"]
