"""Active visualization pane selection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VisualizationPane(str, Enum):
    """可视化面板类型."""

    PLOT = "plot"
    MAP = "map"


@dataclass
class VisualizationState:
    """Which visualization pane is currently displayed."""

    current_pane: VisualizationPane = VisualizationPane.PLOT

    def set_pane(self, pane: VisualizationPane | str) -> None:
        self.current_pane = VisualizationPane(pane)

    def toggle(self) -> VisualizationPane:
        self.current_pane = (
            VisualizationPane.MAP if self.current_pane is VisualizationPane.PLOT else VisualizationPane.PLOT
        )
        return self.current_pane


__all__ = ["VisualizationPane", "VisualizationState"]
