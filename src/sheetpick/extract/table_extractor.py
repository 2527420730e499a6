"""Generic row/column extraction from the first sheet."""
from typing import Any

from openpyxl import Workbook

from sheetpick.models import ExtractionResult, TabularDataset
from .base import BaseStrategy


def _trim_row(values: tuple) -> list[Any]:
    """Drop trailing empty cells."""
    row = list(values)
    while row and row[-1] is None:
        row.pop()
    return row


class TableExtractor(BaseStrategy):
    """Treat the first row as headers and every later row as data.

    Blank rows before the header row and after the last data row are
    ignored; blank rows in between are kept as empty rows.
    """

    @property
    def mode(self) -> str:
        return "table"

    def can_handle(self, workbook: Workbook) -> bool:
        return len(workbook.sheetnames) > 0

    def extract(self, workbook: Workbook) -> ExtractionResult:
        sheet = workbook.worksheets[0]

        rows = []
        for values in sheet.iter_rows(values_only=True):
            row = _trim_row(values)
            if row or rows:
                rows.append(row)

        while rows and not rows[-1]:
            rows.pop()

        if not rows:
            return ExtractionResult(dataset=TabularDataset(), mode=self.mode)

        header_row, data_rows = rows[0], rows[1:]
        width = max(len(row) for row in rows)
        headers = ["" if v is None else v for v in header_row]
        headers.extend([""] * (width - len(headers)))

        return ExtractionResult(
            dataset=TabularDataset(headers=headers, rows=data_rows),
            mode=self.mode,
        )
