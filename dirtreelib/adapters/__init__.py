"""Filesystem adapters.

Adapters implement the FileSystemAdapter capability interface used by
the builder and writer.
"""

from .filesystem import FileSystemAdapter, LocalFileSystemAdapter, FilteredFileSystemAdapter

__all__ = [
    "FileSystemAdapter",
    "LocalFileSystemAdapter",
    "FilteredFileSystemAdapter",
]
