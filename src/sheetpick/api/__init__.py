"""HTTP API for SheetPick."""
from .app import create_app

__all__ = ["create_app"]
