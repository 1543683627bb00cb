"""Core data model for dirtreelib.

This package contains the tree node types, their structural comparison
and the error classification used by the failure policy. Nothing here
performs I/O.
"""

from .node import (
    DirTree,
    FailedNode,
    DirNode,
    FileNode,
    AnchoredDirTree,
    iter_payloads,
    fold_payloads,
)
from .lazy import LazyContents
from .errors import ErrorKind, classify_error, is_not_found, is_permission_denied
from .compare import (
    comparing_constr,
    comparing_shape,
    equal_shape,
    tree_equal,
    compare_trees,
    sort_dir,
    sort_dir_shape,
)

__all__ = [
    "DirTree",
    "FailedNode",
    "DirNode",
    "FileNode",
    "AnchoredDirTree",
    "iter_payloads",
    "fold_payloads",
    "LazyContents",
    "ErrorKind",
    "classify_error",
    "is_not_found",
    "is_permission_denied",
    "comparing_constr",
    "comparing_shape",
    "equal_shape",
    "tree_equal",
    "compare_trees",
    "sort_dir",
    "sort_dir_shape",
]
