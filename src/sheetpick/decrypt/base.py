"""Base opener interface and result type."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class OpenResult:
    """Result from one attempt at turning raw bytes into a plain workbook."""
    success: bool
    data: Optional[bytes] = None
    error: Optional[str] = None
    method: str = "plain"


class BaseOpener(ABC):
    """Abstract base class for workbook openers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short name reported as the open method."""
        pass

    @abstractmethod
    def open(self, data: bytes) -> OpenResult:
        """Try to produce plain workbook bytes from raw file bytes."""
        pass
