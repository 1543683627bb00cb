"""Directory tree node types for dirtreelib.

A directory tree is an immutable value made of three kinds of nodes:

- FailedNode: an entry that could not be read or written, holding the error
- DirNode: a directory, holding an ordered sequence of child nodes
- FileNode: a file, holding an arbitrary payload (contents, a path, an open
  file object, or anything else a payload function produces)

Names are path segments, never full paths. The AnchoredDirTree wrapper
keeps the base directory the names are relative to.

Child order is the order the filesystem listed the entries in. Equality
and ordering sort children before comparing them, so two trees read from
directories that list entries differently still compare equal.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional, Sequence

from .compare import compare_trees, tree_equal
from .errors import ErrorKind, classify_error
from .lazy import LazyContents, map_contents


class DirTree(ABC):
    """Base class for the three node variants.

    Subclasses set ``constructor_rank``, which orders the variants
    Failed < Dir < File in every comparison.
    """

    constructor_rank: int = -1
    name: Any

    @abstractmethod
    def map(self, fn: Callable[[Any], Any]) -> "DirTree":
        """Apply ``fn`` to every File payload, keeping the structure."""
        pass

    @abstractmethod
    def payloads(self) -> Iterator[Any]:
        """Yield every File payload, left to right, depth first."""
        pass

    def is_failed(self) -> bool:
        return False

    def is_dir(self) -> bool:
        return False

    def is_file(self) -> bool:
        return False

    # Full equality and ordering; payloads must be comparable.

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirTree):
            return NotImplemented
        return tree_equal(self, other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, DirTree):
            return NotImplemented
        return not tree_equal(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DirTree):
            return NotImplemented
        return compare_trees(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DirTree):
            return NotImplemented
        return compare_trees(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DirTree):
            return NotImplemented
        return compare_trees(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DirTree):
            return NotImplemented
        return compare_trees(self, other) >= 0

    __hash__ = None


@dataclass(frozen=True, eq=False)
class FailedNode(DirTree):
    """A node whose I/O failed; ``err`` is the exception that was caught."""

    name: Any
    err: Optional[BaseException] = None

    constructor_rank = 0

    @property
    def kind(self) -> ErrorKind:
        """Classification of the captured error."""
        return classify_error(self.err)

    def map(self, fn: Callable[[Any], Any]) -> "FailedNode":
        return self

    def payloads(self) -> Iterator[Any]:
        return iter(())

    def is_failed(self) -> bool:
        return True


@dataclass(frozen=True, eq=False)
class DirNode(DirTree):
    """A directory and its children.

    Lists are frozen into tuples on construction. A LazyContents is kept
    as-is so children built on demand stay unforced.
    """

    name: Any
    contents: Sequence[DirTree] = ()

    constructor_rank = 1

    def __post_init__(self):
        if not isinstance(self.contents, (tuple, LazyContents)):
            object.__setattr__(self, "contents", tuple(self.contents))

    def map(self, fn: Callable[[Any], Any]) -> "DirNode":
        return DirNode(self.name, map_contents(self.contents, lambda child: child.map(fn)))

    def payloads(self) -> Iterator[Any]:
        for child in self.contents:
            yield from child.payloads()

    def is_dir(self) -> bool:
        return True


@dataclass(frozen=True, eq=False)
class FileNode(DirTree):
    """A file and its payload."""

    name: Any
    file: Any = None

    constructor_rank = 2

    def map(self, fn: Callable[[Any], Any]) -> "FileNode":
        return FileNode(self.name, fn(self.file))

    def payloads(self) -> Iterator[Any]:
        yield self.file

    def is_file(self) -> bool:
        return True


@dataclass(frozen=True, order=True)
class AnchoredDirTree:
    """A tree together with the base directory its names are relative to.

    The anchor may be absolute or relative; an empty anchor means the
    current directory. Unpacks as ``anchor, tree = anchored``.
    """

    anchor: str
    dir_tree: DirTree

    def __iter__(self) -> Iterator[Any]:
        return iter((self.anchor, self.dir_tree))

    def map(self, fn: Callable[[Any], Any]) -> "AnchoredDirTree":
        """Apply ``fn`` to every File payload of the anchored tree."""
        return AnchoredDirTree(self.anchor, self.dir_tree.map(fn))

    def apply(self, fn: Callable[[DirTree], DirTree]) -> "AnchoredDirTree":
        """Apply a whole-tree function to the root, keeping the anchor.

        Example:
            >>> sorted_tree = build("/tmp/project").apply(sort_dir)
        """
        return AnchoredDirTree(self.anchor, fn(self.dir_tree))


def iter_payloads(tree: DirTree) -> Iterator[Any]:
    """Iterate every payload in ``tree`` depth first, left to right."""
    return tree.payloads()


def fold_payloads(fn: Callable[[Any, Any], Any], initial: Any, tree: DirTree) -> Any:
    """Left fold over every payload in traversal order.

    Example:
        >>> fold_payloads(lambda acc, text: acc + text, "", tree)
    """
    acc = initial
    for payload in tree.payloads():
        acc = fn(acc, payload)
    return acc
