"""Fixed-cell extraction from the settlement summary sheet."""
from typing import Any, Optional

from openpyxl import Workbook

from sheetpick.config import SummaryConfig
from sheetpick.models import ExtractionResult, SummaryValues, TabularDataset
from .base import BaseStrategy


SUMMARY_HEADERS = ["Row Label", "Management Fee (F)", "VAT (G)", "Settlement Amount (P)"]
SUMMARY_CELLS = ("F24", "F25", "G24", "G25", "P24", "P25")


def numeric_value(value: Any) -> float:
    """Return the cell value if it is a number, otherwise 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


class SummaryExtractor(BaseStrategy):
    """Read F/G/P on rows 24 and 25 of a named sheet into a 3-row table."""

    def __init__(self, config: Optional[SummaryConfig] = None):
        self.config = config or SummaryConfig()

    @property
    def mode(self) -> str:
        return "summary"

    def can_handle(self, workbook: Workbook) -> bool:
        return self.config.sheet_name in workbook.sheetnames

    def read_values(self, workbook: Workbook) -> SummaryValues:
        sheet = workbook[self.config.sheet_name]
        values = {
            coord.lower(): numeric_value(sheet[coord].value)
            for coord in SUMMARY_CELLS
        }
        return SummaryValues(**values)

    def extract(self, workbook: Workbook) -> ExtractionResult:
        summary = self.read_values(workbook)
        row24_label, row25_label = self.config.row_labels[:2]

        dataset = TabularDataset(
            headers=list(SUMMARY_HEADERS),
            rows=[
                [row24_label, summary.f24, summary.g24, summary.p24],
                [row25_label, summary.f25, summary.g25, summary.p25],
                [self.config.total_label, summary.f, summary.g, summary.p],
            ],
        )
        return ExtractionResult(dataset=dataset, summary=summary, mode=self.mode)
