import asyncio
import logging
import os
import stat
from pathlib import Path
from typing import List, Optional, Union

from npm_scrub.core.common.enums import NodeKind
from npm_scrub.core.common.errors import (
    AccessError,
    ConfigurationError,
    INVALID_PATH_MESSAGE,
    MISSING_PATH_MESSAGE,
    ProcessingError,
    ValidationError,
)
from npm_scrub.features.manifest_cleaner.domain.models import CleanOptions, ProcessingResult
from npm_scrub.features.manifest_cleaner.service.processor import ManifestProcessor

from ..domain.interfaces import IFileSystemProbe
from ..data.entry_rules import EntryRules
from ..data.local_fs import LocalFileSystem

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def require_path(path: Optional[PathLike]) -> Path:
    if path is None or str(path) == "":
        raise ConfigurationError(MISSING_PATH_MESSAGE)
    return Path(path)


class TreeDispatcher:
    """
    Classifies a path and routes it: directories are walked concurrently,
    package.json files go to the ManifestProcessor.
    """

    def __init__(self,
                 fs: Optional[IFileSystemProbe] = None,
                 processor: Optional[ManifestProcessor] = None):
        self.fs = fs or LocalFileSystem()
        self.processor = processor or ManifestProcessor()

    async def process(self, path: Optional[PathLike], options: CleanOptions) -> List[ProcessingResult]:
        """
        Top-level classification.
        Raises ConfigurationError, AccessError or ValidationError;
        everything found below the root is reported as results.
        """
        # 1. Validate input before touching the disk
        root = require_path(path)
        if not isinstance(options, CleanOptions):
            raise ConfigurationError(f"Invalid options object: {options!r}")

        # 2. Resolve the root. The one stat failure that rejects the call.
        try:
            st = await self.fs.stat(root)
        except OSError as e:
            raise AccessError(f'Can\'t read directory/file at "{root}"', e)

        # 3. Route
        if stat.S_ISDIR(st.st_mode):
            return await self.process_dir(root, options)

        if EntryRules.is_manifest(root.name):
            return [await self.processor.process_file(root, options)]

        raise ValidationError(INVALID_PATH_MESSAGE)

    async def process_dir(self, dir_path: Path, options: CleanOptions) -> List[ProcessingResult]:
        try:
            names = await self.fs.list_dir(dir_path)
        except OSError as e:
            err = ProcessingError(f'Can\'t read directory at "{dir_path}"', e)
            logger.warning(str(err))
            return [ProcessingResult.failed(dir_path, NodeKind.DIRECTORY, err)]

        # gather keeps listing order regardless of completion order
        outcomes = await asyncio.gather(
            *(self._process_entry(dir_path / name, options) for name in names)
        )

        results = [ProcessingResult.directory_ok(dir_path)]
        for outcome in outcomes:
            results.extend(outcome)
        return results

    async def _process_entry(self, entry_path: Path, options: CleanOptions) -> List[ProcessingResult]:
        try:
            st = await self.fs.stat(entry_path)
        except OSError as e:
            # Reported like any other per-node failure instead of aborting the walk
            err = ProcessingError(f'Can\'t read directory/file at "{entry_path}"', e)
            logger.warning(str(err))
            return [ProcessingResult.failed(entry_path, NodeKind.UNKNOWN, err)]

        if stat.S_ISDIR(st.st_mode):
            return await self.process_dir(entry_path, options)

        if EntryRules.is_manifest(entry_path.name):
            return [await self.processor.process_file(entry_path, options)]

        return []
