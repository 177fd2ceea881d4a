from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from npm_scrub.core.common.enums import NodeKind
from npm_scrub.core.common.errors import (
    ConfigurationError,
    INVALID_FIELDS_MESSAGE,
    INVALID_FORCE_MESSAGE,
    ProcessingError,
)

@dataclass(frozen=True)
class CleanOptions:
    """
    Per-call cleanup options.
    Built once at the call boundary and never mutated afterwards.
    """
    force: bool = False
    fields: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        if not isinstance(self.force, bool):
            raise ConfigurationError(INVALID_FORCE_MESSAGE)
        if self.fields is None:
            return
        # A bare string is a sequence too, but never a valid field list
        if not isinstance(self.fields, (list, tuple)) or len(self.fields) == 0:
            raise ConfigurationError(INVALID_FIELDS_MESSAGE)
        if not all(isinstance(name, str) for name in self.fields):
            raise ConfigurationError(INVALID_FIELDS_MESSAGE)
        object.__setattr__(self, "fields", tuple(self.fields))

    @classmethod
    def coerce(cls, value: Any) -> "CleanOptions":
        """
        Accepts None, a CleanOptions instance or a plain mapping
        such as {"force": True, "fields": ["_where"]}.
        """
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            unknown = set(value) - {"force", "fields"}
            if unknown:
                raise ConfigurationError(f"Unknown option(s): {', '.join(sorted(map(str, unknown)))}")
            return cls(force=value.get("force", False), fields=value.get("fields"))
        raise ConfigurationError(f"Invalid options object: {value!r}")


@dataclass(frozen=True)
class ProcessingResult:
    """
    Outcome for one visited file or directory.
    """
    path: Path
    kind: NodeKind
    success: bool
    rewritten: bool = False
    err: Optional[ProcessingError] = None

    @classmethod
    def directory_ok(cls, path: Path) -> "ProcessingResult":
        return cls(path=path, kind=NodeKind.DIRECTORY, success=True)

    @classmethod
    def file_ok(cls, path: Path, rewritten: bool) -> "ProcessingResult":
        return cls(path=path, kind=NodeKind.FILE, success=True, rewritten=rewritten)

    @classmethod
    def failed(cls, path: Path, kind: NodeKind, err: ProcessingError) -> "ProcessingResult":
        return cls(path=path, kind=kind, success=False, err=err)

    @property
    def file_path(self) -> Optional[Path]:
        return self.path if self.kind == NodeKind.FILE else None

    @property
    def directory_path(self) -> Optional[Path]:
        return self.path if self.kind == NodeKind.DIRECTORY else None

    def to_dict(self) -> Dict[str, Any]:
        key = "directory_path" if self.kind == NodeKind.DIRECTORY else "file_path"
        if self.kind == NodeKind.UNKNOWN:
            key = "path"
        data: Dict[str, Any] = {key: str(self.path), "success": self.success}
        if self.kind == NodeKind.FILE and self.success:
            data["rewritten"] = self.rewritten
        if self.err is not None:
            data["err"] = str(self.err)
        return data
