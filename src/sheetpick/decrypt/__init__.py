"""Openers that turn possibly-encrypted files into plain workbook bytes."""
from .base import BaseOpener, OpenResult
from .plain_opener import PlainOpener
from .password_opener import PasswordOpener
from .resolver import DecryptionResolver

__all__ = [
    "BaseOpener", "OpenResult",
    "PlainOpener", "PasswordOpener",
    "DecryptionResolver",
]
