"""Test fixtures for dirtreelib consumers.

These helpers build well-known trees and shuffle them, so that test suites
(ours and those of projects using dirtreelib) do not have to spell out
the same structures over and over.
"""

import random
from typing import Optional

from ..core.errors import ErrorKind
from ..core.node import AnchoredDirTree, DirNode, DirTree, FailedNode, FileNode
from ..writer import write_directory_with


def make_sample_tree(root_name: str = "TESTDIR", anchor: str = "") -> AnchoredDirTree:
    """Return the standard sample tree with bytes payloads.

    Structure (payloads in parentheses)::

        TESTDIR/
        ├── A/
        │   ├── A1/
        │   │   ├── A (b"a")
        │   │   └── B (b"b")
        │   ├── A2/
        │   │   └── C (b"c")
        │   └── FAIL      <- FailedNode
        ├── B/
        │   └── D (b"d")
        ├── C/
        │   ├── E (b"e")
        │   ├── F (b"f")
        │   └── G (b"g")
        └── FAAAIIILL     <- FailedNode

    Sorted, the payloads concatenate to ``b"abcdefg"``.
    """
    d_a = DirNode("A", [
        DirNode("A1", [FileNode("A", b"a"), FileNode("B", b"b")]),
        DirNode("A2", [FileNode("C", b"c")]),
        FailedNode("FAIL", OSError("sample failure")),
    ])
    d_b = DirNode("B", [FileNode("D", b"d")])
    d_c = DirNode("C", [FileNode("E", b"e"), FileNode("F", b"f"), FileNode("G", b"g")])
    root = DirNode(root_name, [d_a, d_b, d_c, FailedNode("FAAAIIILL", OSError("sample failure"))])
    return AnchoredDirTree(anchor, root)


def write_sample_tree(anchor: str, root_name: str = "TESTDIR") -> AnchoredDirTree:
    """Write the sample tree below ``anchor`` and return the written result."""
    def _write(path: str, data: bytes) -> bytes:
        with open(path, "wb") as f:
            f.write(data)
        return data

    return write_directory_with(make_sample_tree(root_name, anchor), _write)


def permute_children(tree: DirTree, rng: Optional[random.Random] = None) -> DirTree:
    """Return a copy of ``tree`` with every directory's children shuffled."""
    rng = rng or random.Random(0)
    if isinstance(tree, DirNode):
        children = [permute_children(child, rng) for child in tree.contents]
        rng.shuffle(children)
        return DirNode(tree.name, children)
    return tree


def make_failed(name: str, kind: ErrorKind) -> FailedNode:
    """Build a FailedNode whose error classifies as ``kind``."""
    if kind is ErrorKind.NOT_FOUND:
        return FailedNode(name, FileNotFoundError(2, "No such file or directory", name))
    if kind is ErrorKind.PERMISSION_DENIED:
        return FailedNode(name, PermissionError(13, "Permission denied", name))
    return FailedNode(name, OSError(5, "Input/output error", name))
