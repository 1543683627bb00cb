"""Common helpers shared by the builder, writer and transforms.

This internal package contains pure computation only, no I/O. It should
NOT be imported directly by users.

Important: This package must NEVER import from the builder or writer to
avoid circular dependencies.
"""

from .paths import (
    validate_root,
    name_to_path,
    join_name,
    split_directories,
    top_dir,
    base_dir,
    equal_file_path,
)

__all__ = [
    "validate_root",
    "name_to_path",
    "join_name",
    "split_directories",
    "top_dir",
    "base_dir",
    "equal_file_path",
]
