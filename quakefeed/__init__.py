"""quakefeed - seismic event feed ingestion and display shaping."""

from quakefeed.core.config import QuakeFeedConfig
from quakefeed.core.exceptions import CsvParseError, FetchError, FieldCoercionError, QuakeFeedError
from quakefeed.core.models import EarthquakeFilters, EarthquakeRecord
from quakefeed.core.services import EarthquakeService, get_earthquakes

__version__ = "0.1.0"

__all__ = [
    "CsvParseError",
    "EarthquakeFilters",
    "EarthquakeRecord",
    "EarthquakeService",
    "FetchError",
    "FieldCoercionError",
    "QuakeFeedConfig",
    "QuakeFeedError",
    "__version__",
    "get_earthquakes",
]
