"""Column selection over a loaded dataset."""
from .store import ColumnProjectionStore, PreviewView, DEFAULT_PREVIEW_LIMIT

__all__ = ["ColumnProjectionStore", "PreviewView", "DEFAULT_PREVIEW_LIMIT"]
