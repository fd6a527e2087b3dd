"""Record shaping services."""

from quakefeed.core.services.axes import default_axes, numeric_keys
from quakefeed.core.services.earthquakes import EarthquakeService, get_earthquakes
from quakefeed.core.services.filtering import (
    PlotData,
    filter_for_plot,
    filter_invalid_earthquakes,
    filter_valid,
    plot_data,
)
from quakefeed.core.services.limits import apply_limit
from quakefeed.core.services.pagination import PageWindow, PaginationState, paginate
from quakefeed.core.services.sorting import compare_values, sort_records, sorted_view

__all__ = [
    "EarthquakeService",
    "PageWindow",
    "PaginationState",
    "PlotData",
    "apply_limit",
    "compare_values",
    "default_axes",
    "filter_for_plot",
    "filter_invalid_earthquakes",
    "filter_valid",
    "get_earthquakes",
    "numeric_keys",
    "paginate",
    "plot_data",
    "sort_records",
    "sorted_view",
]
