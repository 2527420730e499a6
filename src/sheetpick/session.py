"""Extraction session - runs decrypt, extract, project and export for one file at a time."""
import asyncio
import logging
from pathlib import Path
from typing import Optional

from sheetpick.config import Config, get_config
from sheetpick.decrypt import DecryptionResolver
from sheetpick.errors import SheetPickError
from sheetpick.export import build, write_workbook
from sheetpick.extract import Extractor
from sheetpick.models import ExtractionResult, SummaryValues, TabularDataset
from sheetpick.projection import ColumnProjectionStore


logger = logging.getLogger(__name__)


class ExtractionSession:
    """Holds the currently loaded file and its column selection.

    A newer load supersedes one still in flight: the older result is
    dropped instead of committed.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        resolver: Optional[DecryptionResolver] = None,
        extractor: Optional[Extractor] = None,
    ):
        self.config = config or get_config()
        self.resolver = resolver or DecryptionResolver(password=self.config.get_password())
        self.extractor = extractor or Extractor(summary_config=self.config.summary)
        self.store = ColumnProjectionStore(preview_limit=self.config.preview.row_limit)
        self.summary: Optional[SummaryValues] = None
        self.mode: Optional[str] = None
        self.filename: Optional[str] = None
        self._load_counter = 0

    @property
    def is_loaded(self) -> bool:
        return self.store.is_loaded

    async def load(self, data: bytes, filename: Optional[str] = None) -> Optional[ExtractionResult]:
        """
        Decrypt and extract a file, then make it the current dataset.

        Returns:
            The extraction result, or None if a newer load started meanwhile

        Raises:
            SheetPickError: on any failure; the previous state is kept
        """
        self._load_counter += 1
        load_id = self._load_counter
        logger.info(f"Loading {filename or 'upload'} ({len(data)} bytes)")

        try:
            plain = await self.resolver.resolve_async(data)
        except SheetPickError:
            if load_id != self._load_counter:
                return None
            raise
        if load_id != self._load_counter:
            logger.info(f"Discarding superseded load of {filename or 'upload'}")
            return None

        result = self.extractor.extract_bytes(plain)
        self._commit(result, filename)
        return result

    async def load_path(self, path: Path) -> Optional[ExtractionResult]:
        """Read a file from disk and load it."""
        data = await asyncio.to_thread(Path(path).read_bytes)
        return await self.load(data, filename=Path(path).name)

    def _commit(self, result: ExtractionResult, filename: Optional[str]) -> None:
        self.store.load(result.dataset)
        self.summary = result.summary
        self.mode = result.mode
        self.filename = filename

    def reset(self) -> None:
        self.store.clear()
        self.summary = None
        self.mode = None
        self.filename = None

    def build_export(self) -> TabularDataset:
        """Project the full dataset onto the current selection."""
        return build(self.store.dataset, self.store.selection)

    def export(self) -> bytes:
        """Build the projected dataset and serialize it as .xlsx."""
        dataset = self.build_export()
        logger.info(f"Exporting {dataset.row_count} rows x {dataset.width} columns")
        return write_workbook(dataset, self.config.export.sheet_title)
