"""CSV text to loosely-typed row mappings."""

from __future__ import annotations

import csv
import io
import math
from collections.abc import Iterator
from typing import Any

import pandas as pd
from loguru import logger

from quakefeed.core.exceptions import CsvParseError, CsvRowError
from quakefeed.core.models.fields import STRING_FIELDS

RawRow = dict[str, Any]


def _native(value: Any) -> Any:
    if hasattr(value, "item"):
        value = value.item()
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def _infer_cell(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    number = pd.to_numeric(value, errors="coerce")
    return value if pd.isna(number) else number


def _infer_column(series: pd.Series) -> pd.Series:
    """Numeric typing cell by cell; the feed's text columns stay text."""

    if series.name in STRING_FIELDS:
        return series
    return series.map(_infer_cell)


def _field_count_errors(text: str) -> list[CsvRowError]:
    """Rows whose field count differs from the header's, numbered from 0."""

    records = (fields for fields in csv.reader(io.StringIO(text)) if fields)
    header = next(records, None)
    if header is None:
        return []
    expected = len(header)
    errors: list[CsvRowError] = []
    for row, fields in enumerate(records):
        if len(fields) < expected:
            errors.append(
                CsvRowError(
                    row=row,
                    code="TooFewFields",
                    message=f"Too few fields: expected {expected} fields but parsed {len(fields)}",
                )
            )
        elif len(fields) > expected:
            errors.append(
                CsvRowError(
                    row=row,
                    code="TooManyFields",
                    message=f"Too many fields: expected {expected} fields but parsed {len(fields)}",
                )
            )
    return errors


def _iter_rows(frame: pd.DataFrame) -> Iterator[RawRow]:
    columns = list(frame.columns)
    for values in frame.itertuples(index=False, name=None):
        row: RawRow = {}
        for column, value in zip(columns, values):
            value = _native(value)
            if value is not None:
                row[column] = value
        if row:
            yield row


def parse_csv(text: str) -> list[RawRow]:
    """Parse CSV ``text`` whose first line is the header.

    Empty cells are left out of the row mapping and rows without any value
    are dropped. Numeric-looking cells become numbers; the feed's text
    columns are always kept as strings. Rows with more or fewer fields than
    the header are structural errors.

    Raises:
        CsvParseError: carrying the first structural error; every error is
            logged and available on ``CsvParseError.errors``.
    """

    if not text.strip():
        return []

    frame = None
    try:
        errors = _field_count_errors(text)
    except csv.Error as e:
        errors = [CsvRowError(row=None, code="ParserError", message=str(e))]

    if not errors:
        try:
            frame = pd.read_csv(
                io.StringIO(text),
                dtype=str,
                keep_default_na=False,
                na_values=[""],
                skip_blank_lines=True,
                engine="python",
            )
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
            errors.append(CsvRowError(row=None, code="ParserError", message=str(e)))

    if errors:
        for error in errors:
            logger.bind(stage="parse", error_code="CSV_PARSE_ERROR").error("CSV parsing error: {}", error.message)
        raise CsvParseError(f"CSV Parsing failed: {errors[0].message}", errors=errors)

    if frame is None or frame.empty:
        return []

    rows = list(_iter_rows(frame.apply(_infer_column)))
    logger.bind(stage="parse").debug("Parsed {} rows", len(rows))
    return rows


__all__ = ["RawRow", "parse_csv"]
