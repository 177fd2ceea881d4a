# File: npm_scrub/core/common/errors.py

import errno
from typing import Optional


def describe_cause(cause: Optional[BaseException]) -> str:
    """
    Returns " (ENOENT)" style suffix for OS errors with a known errno,
    an empty string otherwise.
    """
    code = getattr(cause, "errno", None)
    if isinstance(cause, OSError) and code in errno.errorcode:
        return f" ({errno.errorcode[code]})"
    return ""


class ProcessingError(Exception):
    """
    Base error for everything the cleaner reports.
    Keeps the underlying error both as `cause` and as the chained __cause__,
    so it survives whether the error is raised or stored in a result.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.message = message + describe_cause(cause)
        self.cause = cause
        super().__init__(self.message)
        self.__cause__ = cause

    def __str__(self) -> str:
        return self.message


class ConfigurationError(ProcessingError):
    """Invalid caller input (missing path, malformed fields option)."""


class AccessError(ProcessingError):
    """The root path could not be stat'ed."""


class ValidationError(ProcessingError):
    """The root path is a file that is not a package.json manifest."""


MISSING_PATH_MESSAGE = (
    "Missing path.\n"
    "The first argument should be the path to a directory or a package.json file."
)

INVALID_FIELDS_MESSAGE = (
    "Invalid option: fields.\n"
    "The fields option should be a list containing the names of the specific "
    "fields that should be removed."
)

INVALID_PATH_MESSAGE = (
    "Invalid path provided. "
    "The path should be a directory or a package.json file."
)

INVALID_FORCE_MESSAGE = (
    "Invalid option: force.\n"
    "The force option should be a boolean."
)
