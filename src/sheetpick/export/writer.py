"""Serialize a dataset into a single-sheet .xlsx workbook."""
from io import BytesIO

from openpyxl import Workbook

from sheetpick.models import TabularDataset


def write_workbook(dataset: TabularDataset, sheet_title: str = "Extracted Data") -> bytes:
    """Write headers and rows to a new workbook and return its bytes.

    Text that starts with ``=`` is written as text, not as a formula.
    """
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_title

    ws.append(list(dataset.headers))
    for row in dataset.rows:
        ws.append(list(row))

    for row in ws.iter_rows():
        for cell in row:
            if isinstance(cell.value, str) and cell.value.startswith("="):
                cell.data_type = "s"

    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()
