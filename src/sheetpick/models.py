"""Data shapes shared by the extraction, projection and export stages."""
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional


Row = list[Any]


@dataclass
class TabularDataset:
    """Header row plus data rows aligned positionally with the headers.

    Headers are raw cell values and may repeat or be empty. A row may be
    shorter than the header row; missing trailing cells read as ``None``.
    """
    headers: list[Any] = field(default_factory=list)
    rows: list[Row] = field(default_factory=list)

    def __post_init__(self):
        width = len(self.headers)
        for i, row in enumerate(self.rows):
            if len(row) > width:
                raise ValueError(f"Row {i} has {len(row)} cells but only {width} headers")

    @property
    def width(self) -> int:
        return len(self.headers)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows


def project_row(row: Row, indices: Iterable[int]) -> Row:
    """Pick cells by column index, reading absent trailing cells as None."""
    return [row[i] if i < len(row) else None for i in indices]


@dataclass(frozen=True)
class SummaryValues:
    """Six fixed summary cells and their row-24/row-25 sums."""
    f24: float = 0
    f25: float = 0
    g24: float = 0
    g25: float = 0
    p24: float = 0
    p25: float = 0

    @property
    def f(self) -> float:
        return self.f24 + self.f25

    @property
    def g(self) -> float:
        return self.g24 + self.g25

    @property
    def p(self) -> float:
        return self.p24 + self.p25

    def as_dict(self) -> dict[str, float]:
        return {
            "f24": self.f24, "f25": self.f25,
            "g24": self.g24, "g25": self.g25,
            "p24": self.p24, "p25": self.p25,
            "f": self.f, "g": self.g, "p": self.p,
        }


@dataclass
class ExtractionResult:
    """Result from extracting one workbook."""
    dataset: TabularDataset
    summary: Optional[SummaryValues] = None
    mode: str = "table"

    @property
    def is_summary(self) -> bool:
        return self.summary is not None
