"""Path helpers for anchoring trees and joining node names.

Node names are single path segments. A tree built from ``/tmp/project``
gets the root name ``project`` and the anchor ``/tmp``; joining the anchor
with the chain of names from the root gives back the full path of any node.
"""

import os
from pathlib import PurePath
from typing import Any, List, Union

PathLike = Union[str, bytes, "os.PathLike[str]"]


def validate_root(path: Any) -> str:
    """Normalise a user-supplied root path to ``str``.

    This is the only place a build or write fails outright: a root that
    cannot even be expressed as a path is not representable as a node.

    Raises:
        TypeError: If ``path`` is None or not path-like
        ValueError: If ``path`` is empty or contains a NUL character
    """
    if path is None:
        raise TypeError("root path must not be None")
    text = os.fsdecode(os.fspath(path))
    if not text:
        raise ValueError("root path must not be empty")
    if "\x00" in text:
        raise ValueError(f"root path contains a NUL character: {text!r}")
    return text


def name_to_path(name: Any) -> str:
    """Convert a node name to a path segment."""
    if isinstance(name, (str, bytes, os.PathLike)):
        return os.fsdecode(os.fspath(name))
    return str(name)


def join_name(base: str, name: Any) -> str:
    """Append a node name to a base path. An empty base yields the name."""
    return os.path.join(base, name_to_path(name))


def split_directories(path: str) -> List[str]:
    """Split a path into its components, keeping a leading root."""
    return list(PurePath(path).parts)


def top_dir(path: str) -> str:
    """Last component of ``path``; used as the root node name.

    ``"/tmp/project/"`` gives ``"project"``, ``"/"`` gives ``"/"`` and
    ``"."`` gives ``"."``.
    """
    parts = split_directories(path)
    if not parts:
        return path
    return parts[-1]


def base_dir(path: str) -> str:
    """Everything before the last component of ``path``; used as the anchor.

    ``"/tmp/project"`` gives ``"/tmp"`` and a single relative component
    gives ``""``.
    """
    parts = split_directories(path)
    if len(parts) <= 1:
        return ""
    return str(PurePath(*parts[:-1]))


def equal_file_path(a: Any, b: Any) -> bool:
    """Compare two path segments the way the host platform would."""
    return os.path.normcase(os.path.normpath(name_to_path(a))) == \
        os.path.normcase(os.path.normpath(name_to_path(b)))
