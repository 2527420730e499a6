"""Extraction strategies for opened workbooks."""
from .base import BaseStrategy
from .summary_extractor import SummaryExtractor, SUMMARY_HEADERS, SUMMARY_CELLS
from .table_extractor import TableExtractor
from .strategy import Extractor

__all__ = [
    "BaseStrategy",
    "SummaryExtractor", "SUMMARY_HEADERS", "SUMMARY_CELLS",
    "TableExtractor",
    "Extractor",
]
