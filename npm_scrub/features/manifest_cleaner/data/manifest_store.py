import asyncio
from pathlib import Path
from typing import Optional

from npm_scrub.core.config.settings import settings
from ..domain.interfaces import IManifestStore

class LocalManifestStore(IManifestStore):
    """
    Reads and writes manifests on the local disk.
    Blocking calls are pushed to the default thread pool.
    """

    def __init__(self, limiter: Optional[asyncio.Semaphore] = None):
        self.limiter = limiter

    async def read_text(self, file_path: Path) -> str:
        return await self._run(self._read, file_path)

    async def write_text(self, file_path: Path, content: str) -> None:
        await self._run(self._write, file_path, content)

    async def _run(self, func, *args):
        if self.limiter is None:
            return await asyncio.to_thread(func, *args)
        async with self.limiter:
            return await asyncio.to_thread(func, *args)

    @staticmethod
    def _read(file_path: Path) -> str:
        # newline="" keeps "\r\n" and the final "\n" exactly as on disk
        with open(file_path, "r", encoding=settings.ENCODING, newline="") as f:
            return f.read()

    @staticmethod
    def _write(file_path: Path, content: str) -> None:
        with open(file_path, "w", encoding=settings.ENCODING, newline="") as f:
            f.write(content)
