"""Writing directory trees back to the filesystem.

The writer walks the tree in the same depth-first order the builder uses.
Directories are created (pre-existing ones are fine) before their children
are written; files are handed to a caller-supplied write function together
with their full path. FailedNodes are passed through untouched.

An OSError at a node replaces that node, and everything below it, with a
FailedNode in the returned tree. Siblings are still written. Comparing the
returned tree's shape with the input's shows exactly what could not be
written:

    >>> result = write_directory_with(anchored, write_bytes)
    >>> equal_shape(anchored.dir_tree, result.dir_tree)
    True
"""

import logging
from typing import Any, Callable, Optional

from ._common.paths import join_name
from .adapters.filesystem import FileSystemAdapter, LocalFileSystemAdapter
from .core.node import AnchoredDirTree, DirNode, DirTree, FailedNode, FileNode
from .error_policies import CaptureFailuresPolicy, ErrorPolicy

logger = logging.getLogger(__name__)

WriteFn = Callable[[str, Any], Any]


class TreeWriter:
    """Writes DirTrees below an anchor directory.

    Args:
        write_fn: Called as ``write_fn(full_path, payload)`` for each file;
            its return value becomes the payload of the returned tree
        adapter: Filesystem capability interface (local filesystem by default)
        policy: Error policy (captures FailedNodes by default)
    """

    def __init__(self,
                 write_fn: WriteFn,
                 adapter: Optional[FileSystemAdapter] = None,
                 policy: Optional[ErrorPolicy] = None):
        self.write_fn = write_fn
        self.adapter = adapter or LocalFileSystemAdapter()
        self.policy = policy or CaptureFailuresPolicy()

    def write(self, anchored: AnchoredDirTree) -> AnchoredDirTree:
        logger.debug("Writing tree %r below %r", anchored.dir_tree.name, anchored.anchor)
        return AnchoredDirTree(anchored.anchor, self.write_node(anchored.anchor, anchored.dir_tree))

    def write_node(self, base: str, node: DirTree) -> DirTree:
        """Write ``node`` below ``base`` and return the resulting node."""
        if isinstance(node, FailedNode):
            return node

        path = join_name(base, node.name)
        try:
            if isinstance(node, FileNode):
                return FileNode(node.name, self.write_fn(path, node.file))
            self.adapter.create_directory(path)
        except OSError as e:
            return self.policy.handle(e, path, node.name)

        return DirNode(node.name, tuple(self.write_node(path, c) for c in node.contents))


def write_directory_with(anchored: AnchoredDirTree,
                         write_fn: WriteFn,
                         adapter: Optional[FileSystemAdapter] = None,
                         policy: Optional[ErrorPolicy] = None) -> AnchoredDirTree:
    """Write ``anchored`` to disk using ``write_fn`` for file contents.

    Existing files with the same names are overwritten; other entries in
    existing directories are left alone.

    Returns:
        A tree of the same shape whose payloads are ``write_fn``'s results,
        with any node that failed replaced by a FailedNode
    """
    return TreeWriter(write_fn, adapter=adapter, policy=policy).write(anchored)


def write_just_dirs(anchored: AnchoredDirTree,
                    adapter: Optional[FileSystemAdapter] = None,
                    policy: Optional[ErrorPolicy] = None) -> AnchoredDirTree:
    """Create only the directory skeleton; payloads are returned unchanged."""
    return write_directory_with(anchored, lambda path, payload: payload,
                                adapter=adapter, policy=policy)
