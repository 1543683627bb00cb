"""High-level API for dirtreelib.

This module provides simple, functional interfaces for the common cases:
reading a directory into a tree with a given payload, and writing a tree
back out. They wrap the TreeBuilder and TreeWriter classes.
"""

from typing import IO, Any, Optional

from .adapters.filesystem import FileSystemAdapter, LocalFileSystemAdapter
from .builder import PayloadFn, build_tree
from .config import BuildConfig
from .core.node import AnchoredDirTree
from .error_policies import ErrorPolicy
from .writer import write_directory_with


def read_tree(path: Any,
              payload_fn: PayloadFn,
              config: Optional[BuildConfig] = None) -> AnchoredDirTree:
    """Read a tree as described by a BuildConfig.

    Args:
        path: Root of the tree to read
        payload_fn: Produces the payload of each file from its full path
        config: Strategy, link handling and filters (defaults: eager,
            no link following, no filters)

    Raises:
        ValueError: If the configuration is invalid

    Example:
        >>> config = BuildConfig.lazy_config(exclude_names={".git"})
        >>> anchored = read_tree("/src/project", lambda p: p, config)
    """
    config = config or BuildConfig()
    problems = config.validate()
    if problems:
        raise ValueError("Invalid build configuration: " + "; ".join(problems))
    return build_tree(path, payload_fn,
                      follow_symlinks=config.follow_symlinks,
                      lazy=config.lazy,
                      adapter=config.create_adapter(),
                      policy=config.error_policy)


def read_directory_with(payload_fn: PayloadFn,
                        path: Any,
                        follow_symlinks: bool = False,
                        adapter: Optional[FileSystemAdapter] = None,
                        policy: Optional[ErrorPolicy] = None) -> AnchoredDirTree:
    """Eagerly read the whole tree at ``path``, filling files with ``payload_fn``.

    ``payload_fn`` receives full paths that include ``path`` as a prefix.
    """
    return build_tree(path, payload_fn, follow_symlinks=follow_symlinks,
                      lazy=False, adapter=adapter, policy=policy)


def read_directory_with_lazy(payload_fn: PayloadFn,
                             path: Any,
                             follow_symlinks: bool = False,
                             adapter: Optional[FileSystemAdapter] = None,
                             policy: Optional[ErrorPolicy] = None) -> AnchoredDirTree:
    """Lazy version of ``read_directory_with``.

    Directory contents are read as the tree is consumed. Side effects are
    tied to the order the caller inspects nodes in, and exceptions other
    than OSError may surface wherever a node is first forced.
    """
    return build_tree(path, payload_fn, follow_symlinks=follow_symlinks,
                      lazy=True, adapter=adapter, policy=policy)


def read_directory(path: Any,
                   follow_symlinks: bool = False,
                   lazy: bool = False,
                   adapter: Optional[FileSystemAdapter] = None) -> AnchoredDirTree:
    """Read the tree at ``path`` with each file's text contents as payload."""
    adapter = adapter or LocalFileSystemAdapter()
    return build_tree(path, adapter.read_text, follow_symlinks=follow_symlinks,
                      lazy=lazy, adapter=adapter)


def read_directory_bytes(path: Any,
                         follow_symlinks: bool = False,
                         lazy: bool = False,
                         adapter: Optional[FileSystemAdapter] = None) -> AnchoredDirTree:
    """Read the tree at ``path`` with each file's raw bytes as payload."""
    adapter = adapter or LocalFileSystemAdapter()
    return build_tree(path, adapter.read_bytes, follow_symlinks=follow_symlinks,
                      lazy=lazy, adapter=adapter)


def open_directory(path: Any,
                   mode: str = "r",
                   follow_symlinks: bool = False,
                   adapter: Optional[FileSystemAdapter] = None) -> AnchoredDirTree:
    """Open every file under ``path``; payloads are open file objects.

    The caller is responsible for closing them, e.g. with
    ``for f in anchored.dir_tree.payloads(): f.close()``.
    """
    adapter = adapter or LocalFileSystemAdapter()

    def _open(file_path: str) -> IO:
        return adapter.open_file(file_path, mode)

    return build_tree(path, _open, follow_symlinks=follow_symlinks, adapter=adapter)


def build(path: Any, follow_symlinks: bool = False) -> AnchoredDirTree:
    """Eagerly read the tree at ``path``; payloads are the files' full paths."""
    return build_tree(path, _identity, follow_symlinks=follow_symlinks)


def build_lazy(path: Any, follow_symlinks: bool = False) -> AnchoredDirTree:
    """Like ``build`` but reads directories on demand."""
    return build_tree(path, _identity, follow_symlinks=follow_symlinks, lazy=True)


def write_directory(anchored: AnchoredDirTree,
                    adapter: Optional[FileSystemAdapter] = None) -> AnchoredDirTree:
    """Write a tree of ``str`` or ``bytes`` payloads to disk.

    Files of the same name are overwritten. The returned tree has ``None``
    payloads and a FailedNode wherever writing failed.
    """
    adapter = adapter or LocalFileSystemAdapter()

    def _write(file_path: str, data: Any) -> None:
        if isinstance(data, (bytes, bytearray)):
            adapter.write_bytes(file_path, bytes(data))
        else:
            adapter.write_text(file_path, data)

    return write_directory_with(anchored, _write, adapter=adapter)


def _identity(value: Any) -> Any:
    return value
