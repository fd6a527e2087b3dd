"""UI state containers."""

from quakefeed.core.state.plot_table import PlotTableState
from quakefeed.core.state.visualization import VisualizationPane, VisualizationState

__all__ = ["PlotTableState", "VisualizationPane", "VisualizationState"]
