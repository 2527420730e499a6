"""API routes."""
from . import columns, files, status

__all__ = ["columns", "files", "status"]
