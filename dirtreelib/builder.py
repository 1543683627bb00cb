"""Building directory trees from the filesystem.

One recursive algorithm serves both strategies:

Eager
    Every directory's children are built before the directory node is
    returned, so all I/O has happened by the time ``build_tree`` returns.

Lazy
    A directory's children are wrapped in a LazyContents. Child ``k+1`` is
    classified, listed and read only when the consumer forces it, which lets
    huge trees be explored like an endless sequence. The root itself is
    classified and listed at call time.

For every node the builder first decides whether it is file-like (a regular
file, or a symlink when links are not followed) and then either runs the
payload function or lists the directory. An OSError at any of these steps
is caught at that node and handed to the error policy; siblings and
ancestors are unaffected.

NotFound failures below the root are removed afterwards (see
``failures.remove_nonexistent``). In a lazy tree that removal happens at the
moment each child is forced, so a sibling that vanished after the caller
already looked at its neighbours silently disappears from the sequence.
"""

import logging
from typing import Any, Callable, Iterator, Optional

from ._common.paths import base_dir, join_name, top_dir, validate_root
from .adapters.filesystem import FileSystemAdapter, LocalFileSystemAdapter
from .core.lazy import LazyContents
from .core.node import AnchoredDirTree, DirNode, DirTree, FileNode
from .error_policies import CaptureFailuresPolicy, ErrorPolicy
from .failures import remove_nonexistent

logger = logging.getLogger(__name__)

PayloadFn = Callable[[str], Any]


class TreeBuilder:
    """Builds DirTrees from paths.

    Args:
        payload_fn: Called with the full path of each file; its result
            becomes the FileNode payload
        follow_symlinks: Descend into symlinked directories instead of
            treating every symlink as a file
        lazy: Build directory contents on demand
        adapter: Filesystem capability interface (local filesystem by default)
        policy: Error policy (captures FailedNodes by default)
    """

    def __init__(self,
                 payload_fn: PayloadFn,
                 follow_symlinks: bool = False,
                 lazy: bool = False,
                 adapter: Optional[FileSystemAdapter] = None,
                 policy: Optional[ErrorPolicy] = None):
        self.payload_fn = payload_fn
        self.follow_symlinks = follow_symlinks
        self.lazy = lazy
        self.adapter = adapter or LocalFileSystemAdapter()
        self.policy = policy or CaptureFailuresPolicy()

    def build(self, path: Any) -> AnchoredDirTree:
        """Build the anchored tree rooted at ``path``.

        Raises:
            TypeError, ValueError: If ``path`` is not a usable path at all
        """
        root = validate_root(path)
        logger.debug("Building %s tree for %s", "lazy" if self.lazy else "eager", root)
        tree = remove_nonexistent(self.build_node(root))
        return AnchoredDirTree(base_dir(root), tree)

    def build_node(self, path: str) -> DirTree:
        """Build the node for ``path``, capturing any OSError as a failure."""
        name = top_dir(path)
        try:
            if self._is_file_like(path):
                return FileNode(name, self.payload_fn(path))
            entries = self.adapter.list_entries(path)
        except OSError as e:
            return self.policy.handle(e, path, name)

        if self.lazy:
            return DirNode(name, LazyContents(self._iter_children(path, entries)))
        return DirNode(name, tuple(self._iter_children(path, entries)))

    def _is_file_like(self, path: str) -> bool:
        if self.adapter.is_file(path):
            return True
        # Raises FileNotFoundError when nothing exists at path
        is_link = self.adapter.is_symlink(path)
        return is_link and not self.follow_symlinks

    def _iter_children(self, path: str, entries) -> Iterator[DirTree]:
        for entry in entries:
            yield self.build_node(join_name(path, entry))


def build_tree(path: Any,
               payload_fn: PayloadFn,
               follow_symlinks: bool = False,
               lazy: bool = False,
               adapter: Optional[FileSystemAdapter] = None,
               policy: Optional[ErrorPolicy] = None) -> AnchoredDirTree:
    """Build an AnchoredDirTree rooted at ``path``.

    The anchor is the parent of ``path`` and the root node is named after
    its last component. ``payload_fn`` receives full paths that start with
    ``path``.

    Example:
        >>> anchored = build_tree("/tmp/project", lambda p: p)
        >>> anchored.anchor, anchored.dir_tree.name
        ('/tmp', 'project')
    """
    builder = TreeBuilder(payload_fn, follow_symlinks=follow_symlinks, lazy=lazy,
                          adapter=adapter, policy=policy)
    return builder.build(path)
