"""Shared axis and highlight selection for the plot and table views."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")

Listener = Callable[["PlotTableState[Any]"], None]


@dataclass
class PlotTableState(Generic[T]):
    """Injectable state container shared by the plot and table panes.

    Instances are passed by reference to the views that need them. Every
    setter notifies subscribers after the change is applied.
    """

    x_axis_key: str | None = "latitude"
    y_axis_key: str | None = "longitude"
    highlighted_record: T | None = None
    _listeners: list[Listener] = field(default_factory=list, repr=False, compare=False)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable unsubscribes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def set_x_axis_key(self, key: str | None) -> None:
        self.x_axis_key = key
        self._notify()

    def set_y_axis_key(self, key: str | None) -> None:
        self.y_axis_key = key
        self._notify()

    def set_highlighted_record(self, record: T | None) -> None:
        self.highlighted_record = record
        self._notify()

    def highlight_binding(self) -> tuple[T | None, Callable[[T | None], None]]:
        """Return the highlighted record with its setter, for passing down to child views."""

        return self.highlighted_record, self.set_highlighted_record


__all__ = ["PlotTableState"]
