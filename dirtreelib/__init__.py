"""dirtreelib - Directory trees as immutable values.

dirtreelib reads a directory into an in-memory tree, writes trees back to
disk, compares trees by shape or contents, and renders them as text.

Reading:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Eager (all I/O up front):
    from dirtreelib import read_directory_with
    anchored = read_directory_with(my_payload_fn, "/path/to/dir")

Lazy (I/O as nodes are inspected):
    from dirtreelib import read_directory_with_lazy
    anchored = read_directory_with_lazy(my_payload_fn, "/path/to/dir")
━━━━━━━━━━━━━━━━━━━━━━━━━━

I/O errors never abort a read or write: each one is captured as a
FailedNode at the path where it happened.
"""

__version__ = "0.1.0"

from .core import (
    DirTree,
    FailedNode,
    DirNode,
    FileNode,
    AnchoredDirTree,
    LazyContents,
    ErrorKind,
    classify_error,
    iter_payloads,
    fold_payloads,
    comparing_constr,
    comparing_shape,
    equal_shape,
    compare_trees,
    sort_dir,
    sort_dir_shape,
)
from .failures import (
    failed,
    failures,
    successful,
    any_failed,
    failed_map,
    remove_nonexistent,
)
from .transform import (
    transform_dir,
    filter_dir,
    flatten_dir,
    drop_to,
    zip_paths,
    realize,
)
from .render import show_tree, show_tree_formatted
from .adapters import FileSystemAdapter, LocalFileSystemAdapter, FilteredFileSystemAdapter
from .error_policies import ErrorPolicy, CaptureFailuresPolicy, CollectErrorsPolicy, FailFastPolicy
from .config import BuildConfig, BuildStrategy
from .builder import TreeBuilder, build_tree
from .writer import TreeWriter, write_directory_with, write_just_dirs
from .api import (
    read_tree,
    read_directory,
    read_directory_bytes,
    read_directory_with,
    read_directory_with_lazy,
    open_directory,
    build,
    build_lazy,
    write_directory,
)

__all__ = [
    "__version__",
    # Model
    "DirTree",
    "FailedNode",
    "DirNode",
    "FileNode",
    "AnchoredDirTree",
    "LazyContents",
    "ErrorKind",
    "classify_error",
    "iter_payloads",
    "fold_payloads",
    # Comparison
    "comparing_constr",
    "comparing_shape",
    "equal_shape",
    "compare_trees",
    "sort_dir",
    "sort_dir_shape",
    # Failures
    "failed",
    "failures",
    "successful",
    "any_failed",
    "failed_map",
    "remove_nonexistent",
    # Transforms
    "transform_dir",
    "filter_dir",
    "flatten_dir",
    "drop_to",
    "zip_paths",
    "realize",
    # Rendering
    "show_tree",
    "show_tree_formatted",
    # Adapters and policies
    "FileSystemAdapter",
    "LocalFileSystemAdapter",
    "FilteredFileSystemAdapter",
    "ErrorPolicy",
    "CaptureFailuresPolicy",
    "CollectErrorsPolicy",
    "FailFastPolicy",
    # Config
    "BuildConfig",
    "BuildStrategy",
    # Building and writing
    "TreeBuilder",
    "build_tree",
    "TreeWriter",
    "write_directory_with",
    "write_just_dirs",
    "read_tree",
    "read_directory",
    "read_directory_bytes",
    "read_directory_with",
    "read_directory_with_lazy",
    "open_directory",
    "build",
    "build_lazy",
    "write_directory",
]
