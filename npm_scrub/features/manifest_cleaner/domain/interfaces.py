from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

class IManifestStore(ABC):
    """
    Contract for reading and writing manifest text.
    Implementations must not translate newlines.
    """
    @abstractmethod
    async def read_text(self, file_path: Path) -> str:
        pass

    @abstractmethod
    async def write_text(self, file_path: Path, content: str) -> None:
        pass

class IFieldPolicy(ABC):
    """
    Contract for deciding which top-level manifest keys get removed.
    """
    @abstractmethod
    def should_remove(self, key: str, fields: Optional[Tuple[str, ...]]) -> bool:
        pass

    @abstractmethod
    def strip(self, manifest: Dict[str, Any], fields: Optional[Tuple[str, ...]]) -> bool:
        """
        Deletes matching keys in place.
        Returns True if at least one key was removed.
        """
        pass
