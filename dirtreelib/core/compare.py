"""Structural equality and ordering of directory trees.

Two separate notions live here:

Full comparison (``tree_equal``, ``compare_trees``)
    Compares names and File payloads, so payloads must support ``==`` and,
    for ordering, ``<``. Used by the comparison operators on DirTree.

Shape comparison (``comparing_shape``, ``equal_shape``)
    Compares variants and names only. Payloads are never touched, so a tree
    of open file objects can be compared against a tree of file contents
    to find out whether any entries were added or removed.

Both orderings rank variants Failed < Dir < File, then compare names.
Directory contents are sorted before comparison, making the result
independent of the order the filesystem listed entries in.

Functions here only rely on the node attributes ``constructor_rank``,
``name``, ``contents`` and ``file``.
"""

from functools import cmp_to_key
from typing import Any, Callable, List, Sequence

Comparator = Callable[[Any, Any], int]


def _cmp(a: Any, b: Any) -> int:
    """Three-way comparison using only ``<``."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def comparing_constr(a, b) -> int:
    """Non-recursive comparison: variant rank, then name.

    Directory contents and File payloads are ignored.
    """
    if a.constructor_rank != b.constructor_rank:
        return _cmp(a.constructor_rank, b.constructor_rank)
    return _cmp(a.name, b.name)


def _sorted(contents: Sequence, comparator: Comparator) -> List:
    # sorted() is stable, so entries that tie keep their listing order
    return sorted(contents, key=cmp_to_key(comparator))


def _lexicographic(xs: Sequence, ys: Sequence, comparator: Comparator) -> int:
    """Compare two sequences element-wise; a proper prefix sorts first."""
    for x, y in zip(xs, ys):
        result = comparator(x, y)
        if result != 0:
            return result
    return _cmp(len(xs), len(ys))


def comparing_shape(a, b) -> int:
    """Compare two trees by shape, ignoring every File payload.

    Args:
        a: First tree
        b: Second tree (its payload type may differ from ``a``'s)

    Returns:
        Negative, zero or positive, like a classic ``cmp`` function
    """
    if a.is_dir() and b.is_dir():
        result = _cmp(a.name, b.name)
        if result != 0:
            return result
        return _lexicographic(
            _sorted(a.contents, comparing_constr),
            _sorted(b.contents, comparing_constr),
            comparing_shape,
        )
    return comparing_constr(a, b)


def equal_shape(a, b) -> bool:
    """True if both trees have the same structure and names.

    Useful to check whether files were added or deleted, or to compare the
    tree returned by a write against the tree that was written.
    """
    return comparing_shape(a, b) == 0


def tree_equal(a, b) -> bool:
    """Full equality, including File payloads.

    Files are equal when names and payloads are equal. Directories are equal
    when names are equal and their contents, sorted with the full ordering,
    are pairwise equal. If the payloads cannot be ordered, the contents are
    sorted by variant and name only. Any other pairing is decided by shape.
    """
    if a.is_file() and b.is_file():
        return a.name == b.name and a.file == b.file
    if a.is_dir() and b.is_dir():
        if a.name != b.name:
            return False
        if len(a.contents) != len(b.contents):
            return False
        xs, ys = _sorted_for_equality(a.contents), _sorted_for_equality(b.contents)
        return all(tree_equal(x, y) for x, y in zip(xs, ys))
    return equal_shape(a, b)


def _sorted_for_equality(contents: Sequence) -> List:
    try:
        return _sorted(contents, compare_trees)
    except TypeError:
        return _sorted(contents, comparing_constr)


def compare_trees(a, b) -> int:
    """Full ordering, including File payloads.

    Files order by name, then payload. Directories order by name, then by
    their fully sorted contents compared lexicographically. Any other
    pairing is decided by shape.
    """
    if a.is_file() and b.is_file():
        result = _cmp(a.name, b.name)
        if result != 0:
            return result
        return _cmp(a.file, b.file)
    if a.is_dir() and b.is_dir():
        result = _cmp(a.name, b.name)
        if result != 0:
            return result
        return _lexicographic(
            _sorted(a.contents, compare_trees),
            _sorted(b.contents, compare_trees),
            compare_trees,
        )
    return comparing_shape(a, b)


def sort_dir(tree):
    """Recursively sort every directory using the full ordering."""
    return _sort_dir_by(compare_trees, tree)


def sort_dir_shape(tree):
    """Recursively sort every directory, ignoring File payloads."""
    return _sort_dir_by(comparing_shape, tree)


def _sort_dir_by(comparator: Comparator, tree):
    # Local import: node.py imports this module for its operators
    from .node import DirNode

    if not tree.is_dir():
        return tree
    children = _sorted(tree.contents, comparator)
    return DirNode(tree.name, tuple(_sort_dir_by(comparator, c) for c in children))
