"""Null-value filters applied before sorting and before plotting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from quakefeed.core.models.fields import field_value

T = TypeVar("T")


def filter_valid(items: Iterable[T], keys: Iterable[str]) -> list[T]:
    """Keep items whose value for every key in ``keys`` is present (not ``None``).

    Order is preserved and the input is never modified.
    """

    required = [key for key in keys if key]
    return [item for item in items if all(field_value(item, key) is not None for key in required)]


def filter_invalid_earthquakes(items: Iterable[T], sort_by: str | None = None, y_axis_key: str = "longitude") -> list[T]:
    """Query-time filter: drop records lacking the Y axis value or the sort value."""

    keys = [y_axis_key]
    if sort_by:
        keys.append(sort_by)
    return filter_valid(items, keys)


def filter_for_plot(items: Iterable[T], x_key: str | None, y_key: str | None) -> list[T]:
    """Keep only items that can be drawn: both axes selected and both values present."""

    if not x_key or not y_key:
        return []
    return filter_valid(items, (x_key, y_key))


@dataclass(slots=True, frozen=True)
class PlotData(Generic[T]):
    """Points ready for plotting and how many were dropped."""

    items: list[T] = field(default_factory=list)
    filtered_out_count: int = 0


def plot_data(
    items: Sequence[T],
    x_key: str | None,
    y_key: str | None,
    *,
    is_loading: bool = False,
    is_error: bool = False,
) -> PlotData[T]:
    if is_loading or is_error:
        return PlotData(items=[], filtered_out_count=len(items))
    plotted = filter_for_plot(items, x_key, y_key)
    return PlotData(items=plotted, filtered_out_count=len(items) - len(plotted))


__all__ = ["PlotData", "filter_for_plot", "filter_invalid_earthquakes", "filter_valid", "plot_data"]
