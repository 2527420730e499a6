"""Export builder - restricts a dataset to the selected columns."""
from typing import Iterable

from sheetpick.errors import NoColumnsSelected
from sheetpick.models import TabularDataset, project_row


def build(dataset: TabularDataset, selection: Iterable[int]) -> TabularDataset:
    """
    Project every row of a dataset onto the selected columns.

    Args:
        dataset: Full dataset (not the preview)
        selection: Selected column indices, in any order

    Returns:
        New dataset with columns kept in original header order

    Raises:
        NoColumnsSelected: if the selection is empty
    """
    indices = sorted(set(selection))
    if not indices:
        raise NoColumnsSelected()

    for i in indices:
        if not 0 <= i < dataset.width:
            raise IndexError(f"Column index {i} out of range (0-{dataset.width - 1})")

    return TabularDataset(
        headers=[dataset.headers[i] for i in indices],
        rows=[project_row(row, indices) for row in dataset.rows],
    )
