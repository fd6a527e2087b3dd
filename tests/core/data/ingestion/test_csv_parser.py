from __future__ import annotations

import pytest

from quakefeed.core.data.ingestion.csv_parser import parse_csv
from quakefeed.core.exceptions import CsvParseError


def test_header_defines_keys_and_numbers_are_inferred() -> None:
    rows = parse_csv("id,time,latitude,longitude,depth,mag,rms\nA1,2024-01-01T00:00:00Z,1.0,2.0,3.0,4.0,0.5\n")

    assert rows == [
        {
            "id": "A1",
            "time": "2024-01-01T00:00:00Z",
            "latitude": 1.0,
            "longitude": 2.0,
            "depth": 3.0,
            "mag": 4.0,
            "rms": 0.5,
        }
    ]


def test_feed_text_columns_stay_strings() -> None:
    rows = parse_csv("id,net,latitude\n0042,01,5\n")

    assert rows[0]["id"] == "0042"
    assert rows[0]["net"] == "01"
    assert rows[0]["latitude"] == 5


def test_empty_cells_are_left_out(feed_csv: str) -> None:
    rows = parse_csv(feed_csv)

    assert len(rows) == 3
    assert rows[1]["id"] == "ak002"
    assert "nst" not in rows[1]
    assert "gap" not in rows[1]
    assert rows[2]["nst"] == 0
    assert rows[0]["place"] == "5km N of The Geysers, CA"


def test_literal_null_text_is_not_treated_as_missing() -> None:
    rows = parse_csv("id,nst\nx,null\ny,5\n")

    assert rows[0]["nst"] == "null"
    assert rows[1]["nst"] == 5


def test_numbers_are_inferred_cell_by_cell() -> None:
    rows = parse_csv("id,nst,code\nx,null,abc\ny,5,7\nz,2.5,7b\n")

    assert rows[0] == {"id": "x", "nst": "null", "code": "abc"}
    assert rows[1] == {"id": "y", "nst": 5, "code": 7}
    assert isinstance(rows[1]["code"], int)
    assert rows[2] == {"id": "z", "nst": 2.5, "code": "7b"}


def test_structurally_empty_rows_are_discarded() -> None:
    rows = parse_csv("a,b\n1,2\n,\n\n3,4\n")

    assert rows == [{"a": 1, "b": 2}, {"a": 3, "b": 4}]


@pytest.mark.parametrize("text", ["", "   \n", "a,b\n"])
def test_empty_input_yields_no_rows(text: str) -> None:
    assert parse_csv(text) == []


def test_extra_fields_fail_with_first_error_and_keep_all_errors() -> None:
    with pytest.raises(CsvParseError) as exc_info:
        parse_csv("a,b\n1,2\n3,4,5\n6,7,8,9\n")

    error = exc_info.value
    assert error.error_code == "CSV_PARSE_ERROR"
    assert len(error.errors) == 2
    assert all(item.code == "TooManyFields" for item in error.errors)
    assert str(error).startswith("CSV Parsing failed: ")
    assert error.errors[0].message in str(error)
    assert len(error.details["errors"]) == 2


def test_short_rows_fail_with_too_few_fields() -> None:
    with pytest.raises(CsvParseError) as exc_info:
        parse_csv("id,time,latitude\nA1,2024-01-01\nA2,2024-01-02,3.0\n")

    error = exc_info.value
    assert [item.code for item in error.errors] == ["TooFewFields"]
    assert error.errors[0].row == 0
    assert str(error) == "CSV Parsing failed: Too few fields: expected 3 fields but parsed 2"


def test_field_count_errors_keep_row_numbers_and_order() -> None:
    with pytest.raises(CsvParseError) as exc_info:
        parse_csv('a,b\n1\n"x,y",2\n3,4,5\n')

    errors = exc_info.value.errors
    assert [(item.row, item.code) for item in errors] == [(0, "TooFewFields"), (2, "TooManyFields")]
