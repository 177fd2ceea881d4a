import asyncio
import os
from pathlib import Path
from typing import List, Optional

from ..domain.interfaces import IFileSystemProbe

class LocalFileSystem(IFileSystemProbe):
    """
    Concrete probe over the local disk.
    Each call runs in the default thread pool, so sibling entries
    are queried concurrently.
    """

    def __init__(self, limiter: Optional[asyncio.Semaphore] = None):
        self.limiter = limiter

    async def stat(self, path: Path) -> os.stat_result:
        return await self._run(os.stat, path)

    async def list_dir(self, path: Path) -> List[str]:
        return await self._run(os.listdir, path)

    async def _run(self, func, *args):
        if self.limiter is None:
            return await asyncio.to_thread(func, *args)
        async with self.limiter:
            return await asyncio.to_thread(func, *args)
