from __future__ import annotations

import io
import json
from datetime import date, datetime, timezone

from quakefeed.core.logging import LogConfig, StructuredLogger
from quakefeed.core.models import EarthquakeRecord
from quakefeed.core.services.sorting import compare_values, sort_records, sorted_view


def _records(**columns: list[object]) -> list[EarthquakeRecord]:
    (name, values), = columns.items()
    return [EarthquakeRecord(id=f"r{index}", **{name: value}) for index, value in enumerate(values)]


def test_sort_by_magnitude_puts_nulls_last() -> None:
    records = _records(mag=[3.5, None, 1.2])

    result = sort_records(records, "mag")

    assert [record.mag for record in result] == [1.2, 3.5, None]


def test_nulls_sort_after_values_regardless_of_input_order() -> None:
    records = _records(gap=[None, 5.0, None, 1.0, 3.0])

    result = sort_records(records, "gap")

    assert [record.gap for record in result] == [1.0, 3.0, 5.0, None, None]
    assert [record.id for record in result[-2:]] == ["r0", "r2"]


def test_sort_does_not_mutate_input() -> None:
    records = _records(mag=[3.0, 1.0, 2.0])
    before = list(records)

    result = sort_records(records, "mag")

    assert records == before
    assert result is not records


def test_missing_key_returns_same_reference() -> None:
    records = _records(mag=[3.0, 1.0])

    assert sort_records(records, None) is records
    assert sort_records(records, "") is records


def test_strings_sort_lexicographically_with_feed_column_names() -> None:
    records = [
        EarthquakeRecord(id="1", magType="ml"),
        EarthquakeRecord(id="2", magType="mb"),
        EarthquakeRecord(id="3", magType="md"),
    ]

    assert [r.mag_type for r in sort_records(records, "magType")] == ["mb", "md", "ml"]
    assert [r.mag_type for r in sort_records(records, "mag_type")] == ["mb", "md", "ml"]


def test_place_names_collate_ignoring_case_and_accents() -> None:
    rows = [{"place": name} for name in ["beta", "Alpha", "alpha", "Beta", "Émile", "echo"]]

    result = sort_records(rows, "place")

    assert [row["place"] for row in result] == ["alpha", "Alpha", "beta", "Beta", "echo", "Émile"]


def test_sort_is_generic_over_mappings_and_dates() -> None:
    rows = [
        {"when": datetime(2024, 3, 2, tzinfo=timezone.utc)},
        {"when": None},
        {"when": datetime(2024, 3, 1, tzinfo=timezone.utc)},
    ]

    result = sort_records(rows, "when")

    assert [row["when"] for row in result] == [rows[2]["when"], rows[0]["when"], None]
    assert compare_values("d", {"d": date(2024, 1, 2)}, {"d": date(2024, 1, 1)}) == 1


def test_compare_values_ordering() -> None:
    assert compare_values("v", {"v": 1}, {"v": 2}) == -1
    assert compare_values("v", {"v": 2.5}, {"v": 2.5}) == 0
    assert compare_values("v", {"v": None}, {"v": 0}) == 1
    assert compare_values("v", {"v": 0}, {}) == -1
    assert compare_values("v", {}, {"v": None}) == 0


def test_mixed_types_compare_equal_keep_order_and_warn() -> None:
    buffer = io.StringIO()
    StructuredLogger(LogConfig(console_stream=buffer, level="WARNING"))
    rows = [{"v": "b"}, {"v": 2}, {"v": "a"}, {"v": True}]

    assert compare_values("v", rows[0], rows[1]) == 0
    assert compare_values("v", {"v": True}, {"v": 1}) == 0

    sort_records(rows, "v")

    buffer.seek(0)
    records = [json.loads(line) for line in buffer.getvalue().splitlines() if line.strip()]
    assert records
    assert all(record["level"] == "WARNING" for record in records)
    assert all(record["stage"] == "sort" for record in records)


def test_sorted_view_handles_missing_data() -> None:
    records = _records(mag=[2.0, 1.0])

    assert sorted_view(None, "mag") == []
    assert sorted_view(records, None) is records
    assert [r.mag for r in sorted_view(records, "mag")] == [1.0, 2.0]
