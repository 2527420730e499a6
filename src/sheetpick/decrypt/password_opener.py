"""Opener for Office files encrypted with a known password."""
from io import BytesIO

import msoffcrypto
from msoffcrypto.exceptions import FileFormatError, InvalidKeyError

from sheetpick.workbook import load_workbook_bytes
from .base import BaseOpener, OpenResult


class PasswordOpener(BaseOpener):
    """Decrypt with a fixed password and return the plain workbook bytes."""

    def __init__(self, password: str):
        self.password = password

    @property
    def name(self) -> str:
        return "password"

    def open(self, data: bytes) -> OpenResult:
        try:
            office_file = msoffcrypto.OfficeFile(BytesIO(data))
            if not office_file.is_encrypted():
                return OpenResult(success=False, error="File is not encrypted", method=self.name)

            office_file.load_key(password=self.password)
            decrypted = BytesIO()
            office_file.decrypt(decrypted)
            plain = decrypted.getvalue()

            # The decrypted container still has to be a workbook we can read
            wb = load_workbook_bytes(plain)
            wb.close()
            return OpenResult(success=True, data=plain, method=self.name)
        except InvalidKeyError:
            return OpenResult(success=False, error="Password mismatch", method=self.name)
        except FileFormatError as e:
            return OpenResult(success=False, error=f"Unsupported format: {e}", method=self.name)
        except Exception as e:
            return OpenResult(success=False, error=str(e), method=self.name)
