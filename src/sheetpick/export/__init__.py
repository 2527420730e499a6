"""Projected dataset export."""
from .builder import build
from .writer import write_workbook

__all__ = ["build", "write_workbook"]
