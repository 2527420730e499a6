"""Column projection store - current dataset plus the selected columns."""
from itertools import islice
from typing import Any, Iterator, Optional
import logging

from sheetpick.models import Row, TabularDataset, project_row


logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_LIMIT = 20


class PreviewView:
    """Lazy view over the first ``limit`` rows, restricted to some columns.

    Iterating again starts over from the first row.
    """

    def __init__(self, dataset: TabularDataset, indices: list[int], limit: int):
        self._dataset = dataset
        self._indices = indices
        self._limit = max(limit, 0)

    @property
    def headers(self) -> list[Any]:
        return [self._dataset.headers[i] for i in self._indices]

    @property
    def indices(self) -> list[int]:
        return list(self._indices)

    def __iter__(self) -> Iterator[Row]:
        for row in islice(self._dataset.rows, self._limit):
            yield project_row(row, self._indices)

    def __len__(self) -> int:
        return min(self._limit, self._dataset.row_count)


class ColumnProjectionStore:
    """Holds one loaded dataset and the set of selected column indices.

    Columns are addressed by position so repeated header names stay distinct.
    """

    def __init__(self, preview_limit: int = DEFAULT_PREVIEW_LIMIT):
        self.preview_limit = preview_limit
        self._dataset = TabularDataset()
        self._selected: set[int] = set()

    @property
    def dataset(self) -> TabularDataset:
        return self._dataset

    @property
    def headers(self) -> list[Any]:
        return list(self._dataset.headers)

    @property
    def is_loaded(self) -> bool:
        return self._dataset.width > 0

    @property
    def selection(self) -> frozenset[int]:
        return frozenset(self._selected)

    @property
    def selected_indices(self) -> list[int]:
        """Selected column indices in original header order."""
        return sorted(self._selected)

    @property
    def selected_headers(self) -> list[Any]:
        return [self._dataset.headers[i] for i in self.selected_indices]

    def load(self, dataset: TabularDataset) -> None:
        """Replace the dataset and select every column."""
        self._dataset = dataset
        self._selected = set(range(dataset.width))
        logger.debug(f"Loaded {dataset.row_count} rows, {dataset.width} columns selected")

    def clear(self) -> None:
        self._dataset = TabularDataset()
        self._selected = set()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._dataset.width:
            raise IndexError(f"Column index {index} out of range (0-{self._dataset.width - 1})")

    def is_selected(self, index: int) -> bool:
        return index in self._selected

    def toggle(self, index: int, included: bool) -> None:
        """Include or exclude one column."""
        self._check_index(index)
        if included:
            self._selected.add(index)
        else:
            self._selected.discard(index)

    def select_all(self) -> None:
        self._selected = set(range(self._dataset.width))

    def deselect_all(self) -> None:
        self._selected = set()

    def columns(self) -> list[dict]:
        """Describe every column with its selection state."""
        return [
            {"index": i, "name": name, "selected": i in self._selected}
            for i, name in enumerate(self._dataset.headers)
        ]

    def preview(self, limit: Optional[int] = None) -> PreviewView:
        """Get a view of the leading rows with only the selected columns."""
        if limit is None:
            limit = self.preview_limit
        return PreviewView(self._dataset, self.selected_indices, limit)
