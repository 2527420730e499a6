"""Opener for files that need no password."""
from zipfile import BadZipFile

from openpyxl.utils.exceptions import InvalidFileException

from sheetpick.workbook import load_workbook_bytes
from .base import BaseOpener, OpenResult


class PlainOpener(BaseOpener):
    """Accept the bytes as-is when openpyxl can read them directly."""

    @property
    def name(self) -> str:
        return "plain"

    def open(self, data: bytes) -> OpenResult:
        try:
            wb = load_workbook_bytes(data)
            wb.close()
            return OpenResult(success=True, data=data, method=self.name)
        except (InvalidFileException, BadZipFile):
            return OpenResult(
                success=False,
                error="Not a readable unencrypted workbook",
                method=self.name,
            )
        except Exception as e:
            return OpenResult(success=False, error=str(e), method=self.name)
