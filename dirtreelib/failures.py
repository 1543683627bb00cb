"""Failure policy: inspecting and cleaning up FailedNodes.

Reading a real directory is not atomic. An entry can be listed and then
deleted before it is opened, which shows up as a NotFound failure below
the root. Those failures are an artifact of the traversal rather than
something the caller asked about, so ``remove_nonexistent`` drops them.
A NotFound at the root itself means the caller asked for a missing path,
and is kept. Every other failure is kept at any depth.
"""

from typing import Any, Callable, List

from .core.errors import ErrorKind
from .core.lazy import map_contents
from .core.node import DirNode, DirTree, FailedNode
from .transform import filter_dir, flatten_dir

RecoveryFn = Callable[[Any, BaseException], DirTree]


def failed(node: DirTree) -> bool:
    """True if ``node`` itself is a FailedNode."""
    return isinstance(node, FailedNode)


def failures(tree: DirTree) -> List[FailedNode]:
    """All FailedNodes in ``tree``, flattened depth first."""
    return [node for node in flatten_dir(tree) if failed(node)]


def successful(tree: DirTree) -> bool:
    """True if no FailedNode appears anywhere in ``tree``."""
    return not failures(tree)


def any_failed(tree: DirTree) -> bool:
    """True if at least one FailedNode appears anywhere in ``tree``."""
    return not successful(tree)


def failed_map(fn: RecoveryFn, tree: DirTree) -> DirTree:
    """Rewrite every FailedNode as ``fn(name, err)``.

    ``fn`` is called once per failure and must return a DirNode or FileNode.
    The substituted subtree is returned as-is and not searched again.

    Example:
        >>> failed_map(lambda name, err: FileNode(name, b""), tree)
    """
    if isinstance(tree, FailedNode):
        return fn(tree.name, tree.err)
    if isinstance(tree, DirNode):
        return DirNode(tree.name, map_contents(tree.contents, lambda c: failed_map(fn, c)))
    return tree


def is_ok_node(node: DirTree) -> bool:
    """False only for a FailedNode caused by a missing path."""
    return not failed(node) or node.kind is not ErrorKind.NOT_FOUND


def remove_nonexistent(tree: DirTree) -> DirTree:
    """Drop NotFound failures below the root; keep everything else.

    Lazy directory contents stay lazy, so a NotFound discovered while the
    caller forces a child is dropped at that moment too.
    """
    return filter_dir(is_ok_node, tree)
