"""SheetPick - decrypt, extract and re-export spreadsheet columns."""

__version__ = "1.0.0"
