"""Workbook loading from in-memory buffers."""
from io import BytesIO

from openpyxl import Workbook, load_workbook


def load_workbook_bytes(data: bytes) -> Workbook:
    """Open an unencrypted .xlsx/.xlsm buffer with cached cell values."""
    return load_workbook(BytesIO(data), data_only=True)
