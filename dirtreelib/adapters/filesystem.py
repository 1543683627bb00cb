"""Filesystem adapters for dirtreelib.

The builder and writer never touch the filesystem directly. They go through
a FileSystemAdapter, which supplies the handful of primitives needed to
read and write a directory tree. Swapping the adapter lets the same
algorithms run against an in-memory fake in tests, or hide entries while
building.

Errors are reported by raising OSError subclasses; the builder and writer
catch them per node and the failure policy classifies them.
"""

import errno
import os
import stat
from abc import ABC, abstractmethod
from typing import IO, List, Optional, Set


class FileSystemAdapter(ABC):
    """Abstract capability interface over a filesystem.

    Only ``is_file``, ``is_symlink`` and ``list_entries`` are needed to
    build trees; ``create_directory`` is needed to write them. The content
    helpers back the convenience payload functions (``read_directory``,
    ``write_directory``, ``open_directory``).
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """True if ``path`` exists (following symlinks)."""
        pass

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """True if ``path`` is a regular file or a symlink to one.

        Returns False for missing paths instead of raising.
        """
        pass

    @abstractmethod
    def is_symlink(self, path: str) -> bool:
        """True if ``path`` itself is a symbolic link.

        Raises:
            FileNotFoundError: If nothing exists at ``path``
        """
        pass

    @abstractmethod
    def list_entries(self, path: str) -> List[str]:
        """Names of the entries in directory ``path``.

        Self and parent markers (``.`` and ``..``) are never included.
        Order is whatever the filesystem reports.
        """
        pass

    @abstractmethod
    def create_directory(self, path: str) -> None:
        """Create ``path`` and any missing parents. Existing dirs are fine."""
        pass

    def read_bytes(self, path: str) -> bytes:
        with open(path, "rb") as f:
            return f.read()

    def read_text(self, path: str) -> str:
        """Read ``path`` as text.

        Raises:
            OSError: Also for contents that cannot be decoded (``EILSEQ``),
                so an undecodable file fails like any other unreadable one
        """
        with open(path, "r") as f:
            try:
                return f.read()
            except UnicodeDecodeError as e:
                raise OSError(errno.EILSEQ, str(e), path) from e

    def write_bytes(self, path: str, data: bytes) -> None:
        with open(path, "wb") as f:
            f.write(data)

    def write_text(self, path: str, data: str) -> None:
        with open(path, "w") as f:
            try:
                f.write(data)
            except UnicodeEncodeError as e:
                raise OSError(errno.EILSEQ, str(e), path) from e

    def open_file(self, path: str, mode: str = "r") -> IO:
        """Open ``path``; the caller owns the returned file object."""
        return open(path, mode)


class LocalFileSystemAdapter(FileSystemAdapter):
    """Adapter for the local filesystem, built on ``os``."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def is_symlink(self, path: str) -> bool:
        # lstat raises FileNotFoundError for missing paths, unlike islink()
        return stat.S_ISLNK(os.lstat(path).st_mode)

    def list_entries(self, path: str) -> List[str]:
        # os.listdir never reports "." or ".."
        return os.listdir(path or ".")

    def create_directory(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)


class FilteredFileSystemAdapter(LocalFileSystemAdapter):
    """Local adapter that hides some entries from directory listings.

    Useful for skipping version control metadata or build artifacts when
    building a tree.
    """

    def __init__(self,
                 exclude_names: Optional[Set[str]] = None,
                 exclude_extensions: Optional[Set[str]] = None,
                 include_hidden: bool = True):
        """Initialize filtered adapter.

        Args:
            exclude_names: Entry names to hide (e.g., {'.git', '__pycache__'})
            exclude_extensions: File extensions to hide (e.g., {'.pyc', '.tmp'})
            include_hidden: Whether to list entries starting with a dot
        """
        self.exclude_names = set(exclude_names or ())
        self.exclude_extensions = set(exclude_extensions or ())
        self.include_hidden = include_hidden

    def list_entries(self, path: str) -> List[str]:
        """List entries with filtering applied."""
        return [name for name in super().list_entries(path) if self._keep(name)]

    def _keep(self, name: str) -> bool:
        if not self.include_hidden and name.startswith("."):
            return False
        if name in self.exclude_names:
            return False
        if os.path.splitext(name)[1] in self.exclude_extensions:
            return False
        return True
