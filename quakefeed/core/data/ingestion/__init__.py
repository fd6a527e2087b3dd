"""Feed ingestion: fetch, parse and map."""

from quakefeed.core.data.ingestion.csv_parser import RawRow, parse_csv
from quakefeed.core.data.ingestion.fetcher import fetch_text
from quakefeed.core.data.ingestion.mapper import map_row, map_rows

__all__ = ["RawRow", "fetch_text", "map_row", "map_rows", "parse_csv"]
