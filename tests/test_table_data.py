import logging

import pytest

from bench_id import BLANK_ROW
from criterion_data import BenchmarkRecord
from table_data import TableAggregator, TableData
from table_errors import IdentifierFormatError


def _aggregate(pairs) -> TableAggregator:
    return TableAggregator().add_records(BenchmarkRecord(i, v) for i, v in pairs)


def test_tables_columns_rows_keep_first_seen_order() -> None:
    agg = _aggregate(
        [
            ("Zeta/B/2", 1.0),
            ("Alpha/X/1", 1.0),
            ("Zeta/A/1", 1.0),
            ("Zeta/B/1", 1.0),
            ("Alpha/W/1", 1.0),
        ]
    )

    assert list(agg.tables) == ["Zeta", "Alpha"]
    zeta = agg.tables["Zeta"]
    assert zeta.column_names == ["B", "A"]
    assert zeta.row_keys == ["2", "1"]
    assert agg.tables["Alpha"].column_names == ["X", "W"]


def test_row_order_independent_of_introducing_column() -> None:
    agg = _aggregate(
        [
            ("T/base/1", 10.0),
            ("T/other/2", 20.0),
            ("T/base/3", 30.0),
            ("T/base/2", 40.0),
        ]
    )

    assert agg.tables["T"].row_keys == ["1", "2", "3"]


def test_first_column_is_permanent_baseline() -> None:
    agg = _aggregate([("T/first/1", 1.0), ("T/second/1", 2.0), ("T/third/2", 3.0)])
    assert agg.tables["T"].baseline_column == "first"

    agg.add("T/second/3", 4.0)
    assert agg.tables["T"].baseline_column == "first"


def test_duplicate_measurement_last_write_wins(caplog) -> None:
    agg = _aggregate([("T/a/1", 1.0), ("T/b/1", 2.0)])

    with caplog.at_level(logging.WARNING):
        agg.add("T/a/1", 5.0)

    table = agg.tables["T"]
    assert table.get("a", "1") == 5.0
    assert table.column_names == ["a", "b"]
    assert table.row_keys == ["1"]
    assert "Duplicate measurement" in caplog.text


def test_ids_without_row_share_blank_row() -> None:
    agg = _aggregate([("Group/Col", 1.0), ("Group/Other", 2.0)])

    table = agg.tables["Group"]
    assert table.row_keys == [BLANK_ROW]
    assert table.get("Col", BLANK_ROW) == 1.0
    assert table.get("Other", BLANK_ROW) == 2.0


def test_bad_identifier_aborts_aggregation() -> None:
    with pytest.raises(IdentifierFormatError):
        _aggregate([("T/a/1", 1.0), ("OnlyOneSegment", 2.0)])


def test_empty_table_has_no_baseline() -> None:
    table = TableData("Empty")
    assert table.baseline_column is None
    assert table.get("missing", "1") is None
