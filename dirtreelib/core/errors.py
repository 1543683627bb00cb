"""Classification of I/O errors captured in directory trees.

Every error caught while reading or writing a single node ends up inside a
FailedNode. The failure policy only needs to know a few broad categories,
so the raw exception is kept as-is and classified on demand.
"""

import errno
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Broad categories of filesystem errors."""
    NOT_FOUND = "not_found"                  # Entry vanished or never existed
    PERMISSION_DENIED = "permission_denied"  # Access refused by the OS
    OTHER_IO = "other_io"                    # Any other I/O failure


_NOT_FOUND_ERRNOS = frozenset({errno.ENOENT})
_PERMISSION_ERRNOS = frozenset({errno.EACCES, errno.EPERM})


def classify_error(error: Optional[BaseException]) -> ErrorKind:
    """Classify an exception captured at a tree node.

    Subclasses of OSError are checked first, then the raw errno so that
    plain ``OSError(errno.ENOENT, ...)`` instances are recognised too.

    Args:
        error: The captured exception (may be None for hand-built trees)

    Returns:
        The ErrorKind for the exception
    """
    if isinstance(error, FileNotFoundError):
        return ErrorKind.NOT_FOUND
    if isinstance(error, PermissionError):
        return ErrorKind.PERMISSION_DENIED
    if isinstance(error, OSError):
        if error.errno in _NOT_FOUND_ERRNOS:
            return ErrorKind.NOT_FOUND
        if error.errno in _PERMISSION_ERRNOS:
            return ErrorKind.PERMISSION_DENIED
    return ErrorKind.OTHER_IO


def is_not_found(error: Optional[BaseException]) -> bool:
    """Return True if the error means the path does not exist."""
    return classify_error(error) is ErrorKind.NOT_FOUND


def is_permission_denied(error: Optional[BaseException]) -> bool:
    """Return True if the error means access was refused."""
    return classify_error(error) is ErrorKind.PERMISSION_DENIED
