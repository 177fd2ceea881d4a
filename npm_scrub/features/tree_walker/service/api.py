import asyncio
import logging
from typing import Any, List, Optional

from npm_scrub.core.config.settings import settings
from npm_scrub.features.manifest_cleaner.data.manifest_store import LocalManifestStore
from npm_scrub.features.manifest_cleaner.domain.models import CleanOptions, ProcessingResult
from npm_scrub.features.manifest_cleaner.service.processor import ManifestProcessor

from ..data.local_fs import LocalFileSystem
from .dispatcher import PathLike, TreeDispatcher, require_path

logger = logging.getLogger(__name__)


def build_dispatcher(max_in_flight: Optional[int] = None) -> TreeDispatcher:
    """
    Wires a fresh dispatcher for one invocation.
    A positive max_in_flight shares one semaphore between the stat/listdir
    probe and the manifest store.
    """
    limiter = asyncio.Semaphore(max_in_flight) if max_in_flight else None
    processor = ManifestProcessor(store=LocalManifestStore(limiter))
    return TreeDispatcher(fs=LocalFileSystem(limiter), processor=processor)


async def remove_absolute_paths(path: Optional[PathLike], options: Any = None) -> List[ProcessingResult]:
    """
    Public Service API: strip npm install metadata from every package.json
    under `path` (or from `path` itself when it is a package.json).

    Args:
        path: Directory to walk, or a file named package.json.
        options: None, a CleanOptions, or a mapping with "force" / "fields".

    Returns:
        One ProcessingResult per visited directory and manifest.

    Raises:
        ConfigurationError: missing path or invalid options (before any I/O).
        AccessError: the root path cannot be stat'ed.
        ValidationError: the root path is a file not named package.json.
    """
    # 1. Map primitives to domain objects, path first
    require_path(path)
    clean_options = CleanOptions.coerce(options)

    # 2. Walk
    logger.info(f"Cleaning manifests under: {path}")
    dispatcher = build_dispatcher(settings.MAX_IN_FLIGHT_IO)
    results = await dispatcher.process(path, clean_options)

    rewritten = sum(1 for r in results if r.rewritten)
    failed = sum(1 for r in results if not r.success)
    logger.info(f"Cleanup complete. Rewritten: {rewritten}, failures: {failed}, results: {len(results)}")
    return results


def run(path: Optional[PathLike], options: Any = None) -> List[ProcessingResult]:
    """Blocking wrapper around remove_absolute_paths."""
    return asyncio.run(remove_absolute_paths(path, options))
