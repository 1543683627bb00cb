"""Text rendering of directory trees, in the style of the ``tree`` command.

Example output for a small tree::

    project
    ├──docs
    │  └──index.md
    └──setup.py

Failed nodes are removed before rendering. Children are drawn in the order
they appear in the tree; sort first (``sort_dir``) for stable output.
"""

from typing import Callable, List

from ._common.paths import name_to_path
from .core.node import DirNode, DirTree, FailedNode
from .failures import failed
from .transform import filter_dir

SINGLE_INDENT = "   "
BRANCH = "├"
CORNER = "└"
CONTINUATION = "│  "

NodeFormatter = Callable[[DirTree], str]


def name_only(node: DirTree) -> str:
    """Default formatter: the node's name."""
    return name_to_path(node.name)


def show_tree(tree: DirTree) -> str:
    """Render ``tree`` with one line per node, labelled by name."""
    return show_tree_formatted(name_only, tree)


def show_tree_formatted(format_fn: NodeFormatter, tree: DirTree) -> str:
    """Render ``tree`` with node labels produced by ``format_fn``.

    ``format_fn`` receives each node and returns its display text, which
    makes it easy to add colours, sizes or markers.

    Raises:
        ValueError: If ``tree`` itself is a FailedNode
    """
    pruned = filter_dir(lambda node: not failed(node), tree)
    lines: List[str] = []
    _render(format_fn, "", True, pruned, lines)
    return "\n".join(lines)


def _substitute_joiner(joiner: str, prefix: str) -> str:
    """Replace the last indentation column of ``prefix`` with a connector."""
    if len(prefix) > 1:
        return prefix[:-len(SINGLE_INDENT)] + joiner + "──"
    return prefix


def _render(format_fn: NodeFormatter, prefix: str, is_last: bool,
            node: DirTree, lines: List[str]) -> None:
    if isinstance(node, FailedNode):
        raise ValueError(f"cannot render failed node {node.name!r}")

    joiner = CORNER if is_last else BRANCH
    lines.append(_substitute_joiner(joiner, prefix) + format_fn(node))

    if isinstance(node, DirNode):
        children = list(node.contents)
        for index, child in enumerate(children):
            last = index == len(children) - 1
            child_prefix = prefix + (SINGLE_INDENT if last else CONTINUATION)
            _render(format_fn, child_prefix, last, child, lines)
