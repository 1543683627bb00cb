"""Tree transformations and queries.

All functions return new trees and never mutate their input. When a
directory's contents are a LazyContents, the result is lazy too, so these
helpers can be applied to a lazily built tree without forcing any I/O.
"""

from typing import Any, Callable, List, Optional

from ._common.paths import equal_file_path, join_name
from .core.lazy import LazyContents, filter_contents, map_contents
from .core.node import AnchoredDirTree, DirNode, DirTree, FileNode

NodePredicate = Callable[[DirTree], bool]


def transform_dir(fn: Callable[[DirTree], DirTree], tree: DirTree) -> DirTree:
    """Apply ``fn`` top-down to every node.

    ``fn`` is applied to a node first; if the result is a directory, the
    transformation continues into the result's children. The topmost node
    is always passed through ``fn`` and kept.
    """
    result = fn(tree)
    if isinstance(result, DirNode):
        return DirNode(
            result.name,
            map_contents(result.contents, lambda child: transform_dir(fn, child)),
        )
    return result


def filter_dir(predicate: NodePredicate, tree: DirTree) -> DirTree:
    """Remove every node (with its subtree) for which ``predicate`` is False.

    The topmost node is always kept, whatever the predicate says about it.

    Example:
        >>> dirs_only = filter_dir(lambda n: n.is_dir(), tree)
    """
    def _filter(node: DirTree) -> DirTree:
        if isinstance(node, DirNode):
            return DirNode(node.name, filter_contents(node.contents, predicate))
        return node

    return transform_dir(_filter, tree)


def flatten_dir(tree: DirTree) -> List[DirTree]:
    """Flatten a tree into a (never empty) list of nodes, depth first.

    Directories appear with empty contents. Forces lazy contents.
    """
    if isinstance(tree, DirNode):
        flattened: List[DirTree] = [DirNode(tree.name, ())]
        for child in tree.contents:
            flattened.extend(flatten_dir(child))
        return flattened
    return [tree]


def drop_to(name: Any, anchored: AnchoredDirTree) -> Optional[AnchoredDirTree]:
    """Descend into the child called ``name``.

    The old root's name is appended to the anchor so that full paths stay
    correct.

    Returns:
        The anchored child, or None if the root is not a directory or has
        no child with that name
    """
    root = anchored.dir_tree
    if not isinstance(root, DirNode):
        return None
    for child in root.contents:
        if equal_file_path(name, child.name):
            return AnchoredDirTree(join_name(anchored.anchor, root.name), child)
    return None


def zip_paths(anchored: AnchoredDirTree) -> DirTree:
    """Pair each File payload with the file's full path.

    Returns:
        A tree whose payloads are ``(full_path, payload)`` tuples
    """
    def _zip(base: str, node: DirTree) -> DirTree:
        if isinstance(node, FileNode):
            return FileNode(node.name, (join_name(base, node.name), node.file))
        if isinstance(node, DirNode):
            path = join_name(base, node.name)
            return DirNode(node.name, map_contents(node.contents, lambda c: _zip(path, c)))
        return node

    return _zip(anchored.anchor, anchored.dir_tree)


def realize(tree: DirTree) -> DirTree:
    """Force every lazy directory and return a fully materialized copy."""
    if isinstance(tree, DirNode):
        children = tree.contents
        if isinstance(children, LazyContents):
            children = children.force()
        return DirNode(tree.name, tuple(realize(c) for c in children))
    return tree
