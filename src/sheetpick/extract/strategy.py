"""Extraction strategy selection - summary sheet first, generic table otherwise."""
import logging
from typing import Optional

from openpyxl import Workbook

from sheetpick.config import SummaryConfig, get_config
from sheetpick.errors import EmptyDataset, SheetPickError, UnexpectedProcessingFailure
from sheetpick.models import ExtractionResult
from sheetpick.workbook import load_workbook_bytes
from .base import BaseStrategy
from .summary_extractor import SummaryExtractor
from .table_extractor import TableExtractor


logger = logging.getLogger(__name__)


class Extractor:
    """Routes a workbook to the first strategy that can handle it."""

    def __init__(
        self,
        strategies: Optional[list[BaseStrategy]] = None,
        summary_config: Optional[SummaryConfig] = None,
    ):
        if strategies is None:
            strategies = [
                SummaryExtractor(summary_config or get_config().summary),
                TableExtractor(),
            ]
        self._strategies = strategies

    def get_strategy(self, workbook: Workbook) -> Optional[BaseStrategy]:
        for strategy in self._strategies:
            if strategy.can_handle(workbook):
                return strategy
        return None

    def extract(self, workbook: Workbook) -> ExtractionResult:
        """
        Extract a dataset from an opened workbook.

        Raises:
            EmptyDataset: if no data rows follow the header row
            UnexpectedProcessingFailure: for any other extraction error
        """
        try:
            strategy = self.get_strategy(workbook)
            if strategy is None:
                raise EmptyDataset()

            result = strategy.extract(workbook)
        except SheetPickError:
            raise
        except Exception as e:
            logger.exception(f"Extraction failed: {e}")
            raise UnexpectedProcessingFailure() from e

        if result.dataset.is_empty:
            logger.warning(f"No data rows found ({strategy.mode} mode)")
            raise EmptyDataset()

        logger.info(
            f"Extracted {result.dataset.row_count} rows x {result.dataset.width} columns "
            f"({result.mode} mode)"
        )
        return result

    def extract_bytes(self, data: bytes) -> ExtractionResult:
        """Open plain workbook bytes and extract them."""
        try:
            workbook = load_workbook_bytes(data)
        except Exception as e:
            logger.exception(f"Could not parse workbook: {e}")
            raise UnexpectedProcessingFailure() from e

        try:
            return self.extract(workbook)
        finally:
            workbook.close()
