"""Testing utilities for dirtreelib."""

from .fixtures import make_sample_tree, write_sample_tree, permute_children, make_failed

__all__ = ["make_sample_tree", "write_sample_tree", "permute_children", "make_failed"]
