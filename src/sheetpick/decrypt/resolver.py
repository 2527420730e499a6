"""Decryption resolver - tries openers in order, first success wins."""
import asyncio
import logging
from typing import Optional

from sheetpick.config import get_config
from sheetpick.errors import DecryptionFailure
from .base import BaseOpener, OpenResult
from .plain_opener import PlainOpener
from .password_opener import PasswordOpener


logger = logging.getLogger(__name__)


class DecryptionResolver:
    """Ordered list of openers for possibly-encrypted workbooks."""

    def __init__(self, openers: Optional[list[BaseOpener]] = None, password: Optional[str] = None):
        if openers is None:
            if password is None:
                password = get_config().get_password()
            openers = [
                PlainOpener(),
                PasswordOpener(password),
            ]
        self._openers = openers

    @property
    def openers(self) -> list[BaseOpener]:
        return list(self._openers)

    def attempt(self, data: bytes) -> list[OpenResult]:
        """Run openers until one succeeds; return every attempt made."""
        results = []
        for opener in self._openers:
            result = opener.open(data)
            results.append(result)
            if result.success:
                break
            logger.debug(f"Opener '{opener.name}' failed: {result.error}")
        return results

    def resolve(self, data: bytes) -> bytes:
        """
        Turn raw file bytes into plain workbook bytes.

        Args:
            data: Uninterpreted file content

        Returns:
            The input unchanged if it opens without a password, otherwise the
            decrypted workbook bytes

        Raises:
            DecryptionFailure: if no opener could read the file
        """
        results = self.attempt(data)
        last = results[-1] if results else None
        if last is not None and last.success:
            logger.info(f"Opened workbook via '{last.method}' ({len(last.data)} bytes)")
            return last.data

        attempts = [f"{r.method}: {r.error}" for r in results]
        logger.warning(f"Could not open workbook: {'; '.join(attempts)}")
        raise DecryptionFailure(attempts=attempts)

    async def resolve_async(self, data: bytes) -> bytes:
        """Resolve without blocking the event loop."""
        return await asyncio.to_thread(self.resolve, data)
