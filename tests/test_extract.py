"""Tests for summary and generic table extraction."""
from datetime import datetime

import pytest
from openpyxl import Workbook

from sheetpick.config import SummaryConfig
from sheetpick.errors import EmptyDataset, UnexpectedProcessingFailure
from sheetpick.extract import (
    SUMMARY_HEADERS,
    Extractor,
    SummaryExtractor,
    TableExtractor,
)
from sheetpick.extract.summary_extractor import numeric_value
from sheetpick.models import SummaryValues
from sheetpick.workbook import load_workbook_bytes


def test_summary_sheet_uses_fixed_cells(summary_bytes):
    result = Extractor().extract_bytes(summary_bytes)

    assert result.mode == "summary"
    assert result.summary == SummaryValues(f24=100, f25=50, g24=10, g25=5, p24=110, p25=55)
    assert result.dataset.headers == SUMMARY_HEADERS
    assert result.dataset.rows == [
        ["24행", 100, 10, 110],
        ["25행", 50, 5, 55],
        ["전체 합계", 150, 15, 165],
    ]


def test_summary_total_row_is_column_sum(make_summary):
    cells = {"F24": 1.5, "F25": 2.25, "G24": 1000, "G25": 2000, "P24": -5, "P25": 7}
    result = Extractor().extract_bytes(make_summary(cells))

    first, second, total = result.dataset.rows
    for col in (1, 2, 3):
        assert total[col] == first[col] + second[col]


def test_missing_and_non_numeric_cells_default_to_zero(make_summary):
    cells = {
        "F24": "not a number",
        "G24": True,
        "G25": datetime(2024, 1, 1),
        "P24": 42,
        "P25": "=P24*2",
    }
    result = Extractor().extract_bytes(make_summary(cells))

    assert result.summary == SummaryValues(p24=42)
    assert result.dataset.rows[2] == ["전체 합계", 0, 0, 42]


def test_summary_sheet_with_no_cells(make_summary):
    result = Extractor().extract_bytes(make_summary({}))

    assert result.summary == SummaryValues()
    assert result.dataset.row_count == 3


def test_summary_sheet_name_must_match_exactly(make_summary, summary_cells):
    workbook = load_workbook_bytes(make_summary(summary_cells, sheet_name="정산서 "))

    assert isinstance(Extractor().get_strategy(workbook), TableExtractor)


def test_summary_sheet_name_is_configurable(make_summary, summary_cells):
    data = make_summary(summary_cells, sheet_name="Settlement")
    extractor = Extractor(summary_config=SummaryConfig(sheet_name="Settlement"))

    assert extractor.extract_bytes(data).summary.f == 150


def test_table_fallback_uses_first_row_as_headers(table_bytes, sample_rows):
    result = Extractor().extract_bytes(table_bytes)

    assert result.summary is None
    assert result.mode == "table"
    assert result.dataset.headers == sample_rows[0]
    assert result.dataset.rows == sample_rows[1:]


def test_table_reads_first_sheet_only():
    wb = Workbook()
    wb.active.append(["A", "B"])
    wb.active.append([1, 2])
    other = wb.create_sheet("Other")
    other.append(["X", "Y", "Z"])
    other.append([7, 8, 9])

    result = Extractor().extract(wb)

    assert result.dataset.headers == ["A", "B"]


def test_short_rows_and_wide_rows(make_table):
    rows = [
        ["A", "B"],
        [1],
        [1, 2, 3],
        [None, None, None, 4],
    ]
    dataset = Extractor().extract_bytes(make_table(rows)).dataset

    assert dataset.headers == ["A", "B", "", ""]
    assert dataset.rows == [[1], [1, 2, 3], [None, None, None, 4]]
    assert all(len(row) <= dataset.width for row in dataset.rows)


def test_interior_blank_rows_are_kept(make_table):
    rows = [["A"], [1], [None], [2]]
    dataset = Extractor().extract_bytes(make_table(rows)).dataset

    assert dataset.rows == [[1], [], [2]]


def test_blank_rows_before_header_and_after_data_are_ignored(make_table):
    rows = [[None], [None], ["A", "B"], [None], [1, 2], [None], [None]]
    dataset = Extractor().extract_bytes(make_table(rows)).dataset

    assert dataset.headers == ["A", "B"]
    assert dataset.rows == [[], [1, 2]]


def test_blank_rows_after_header_only_is_empty(make_table):
    with pytest.raises(EmptyDataset):
        Extractor().extract_bytes(make_table([["A"], [None], [None]]))


def test_non_text_headers_are_kept_verbatim(make_table):
    header = [2023, 2024.5, datetime(2024, 1, 1), "Name"]
    dataset = Extractor().extract_bytes(make_table([header, [1, 2, 3, 4]])).dataset

    assert dataset.headers == header
    assert isinstance(dataset.headers[0], int)


def test_header_only_sheet_is_empty(make_table):
    with pytest.raises(EmptyDataset):
        Extractor().extract_bytes(make_table([["A", "B"]]))


def test_sheet_without_rows_is_empty(make_table):
    with pytest.raises(EmptyDataset):
        Extractor().extract_bytes(make_table([]))


def test_unparseable_bytes_are_unexpected_failure():
    with pytest.raises(UnexpectedProcessingFailure):
        Extractor().extract_bytes(b"garbage")


def test_strategy_error_is_wrapped():
    class BrokenStrategy(TableExtractor):
        def extract(self, workbook):
            raise RuntimeError("boom")

    wb = Workbook()
    with pytest.raises(UnexpectedProcessingFailure) as exc_info:
        Extractor(strategies=[BrokenStrategy()]).extract(wb)
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_summary_strategy_is_tried_first():
    wb = Workbook()
    wb.create_sheet("정산서")
    extractor = Extractor()

    assert isinstance(extractor.get_strategy(wb), SummaryExtractor)


@pytest.mark.parametrize("value,expected", [
    (10, 10),
    (2.5, 2.5),
    (0, 0),
    (None, 0),
    ("10", 0),
    (True, 0),
])
def test_numeric_value(value, expected):
    assert numeric_value(value) == expected
