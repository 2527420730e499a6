"""Base extraction strategy interface."""
from abc import ABC, abstractmethod

from openpyxl import Workbook

from sheetpick.models import ExtractionResult


class BaseStrategy(ABC):
    """Abstract base class for workbook extraction strategies."""

    @property
    @abstractmethod
    def mode(self) -> str:
        """Name reported as the extraction mode."""
        pass

    @abstractmethod
    def can_handle(self, workbook: Workbook) -> bool:
        """Check if this strategy applies to the workbook."""
        pass

    @abstractmethod
    def extract(self, workbook: Workbook) -> ExtractionResult:
        """Extract a tabular dataset from the workbook."""
        pass
