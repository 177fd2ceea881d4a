# File: npm_scrub/core/common/enums.py

from enum import Enum, unique

@unique
class NodeKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    # Entry whose stat failed during a directory fan-out
    UNKNOWN = "unknown"
