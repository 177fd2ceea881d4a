import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

class IFileSystemProbe(ABC):
    """
    Contract for the metadata side of a tree walk.
    Abstracts os.stat / os.listdir behind awaitables.
    """
    @abstractmethod
    async def stat(self, path: Path) -> os.stat_result:
        """Raises OSError if the path cannot be queried."""
        pass

    @abstractmethod
    async def list_dir(self, path: Path) -> List[str]:
        """
        Returns entry names in the order the OS reports them.
        Raises OSError if the directory cannot be listed.
        """
        pass
