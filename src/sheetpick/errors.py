"""Failure categories reported to the user.

Every pipeline failure is terminal for the current file load and carries a
user-facing message. Callers tell the categories apart by exception type.
"""
from typing import Optional


class SheetPickError(Exception):
    """Base class for pipeline failures."""

    default_message = "파일 처리 중 오류가 발생했습니다."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DecryptionFailure(SheetPickError):
    """Neither the plain nor the password opener could read the file."""

    default_message = "파일을 열 수 없습니다. 비밀번호가 다르거나 지원하지 않는 형식입니다."

    def __init__(self, message: Optional[str] = None, attempts: Optional[list[str]] = None):
        super().__init__(message)
        self.attempts = attempts or []


class EmptyDataset(SheetPickError):
    """Extraction produced no data rows."""

    default_message = "파일에 데이터가 없습니다."


class NoColumnsSelected(SheetPickError):
    """Export was requested with an empty selection."""

    default_message = "최소 한 개 이상의 열을 선택해주세요."


class UnexpectedProcessingFailure(SheetPickError):
    """Any other failure while parsing or extracting a file."""

    default_message = "파일 처리 중 예상치 못한 오류가 발생했습니다."
