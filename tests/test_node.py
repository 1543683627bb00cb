"""Tests for the tree node model: variants, immutability and payload maps."""

import dataclasses

import pytest

from dirtreelib import (
    AnchoredDirTree,
    DirNode,
    DirTree,
    ErrorKind,
    FailedNode,
    FileNode,
    LazyContents,
    equal_shape,
    fold_payloads,
    iter_payloads,
    sort_dir,
)
from dirtreelib.testing import make_sample_tree


class TestVariants:
    """Each node variant exposes its own fields plus ``name``."""

    def test_file_node(self):
        node = FileNode("a.txt", "hello")
        assert node.name == "a.txt"
        assert node.file == "hello"
        assert node.is_file()
        assert not node.is_dir()
        assert not node.is_failed()

    def test_dir_node_freezes_list(self):
        children = [FileNode("a", 1)]
        node = DirNode("d", children)
        children.append(FileNode("b", 2))
        assert isinstance(node.contents, tuple)
        assert len(node.contents) == 1

    def test_dir_node_keeps_lazy_contents(self):
        lazy = LazyContents(iter([FileNode("a", 1)]))
        node = DirNode("d", lazy)
        assert node.contents is lazy
        assert lazy.realized_count == 0

    def test_failed_node_kind(self):
        node = FailedNode("gone", FileNotFoundError(2, "No such file", "gone"))
        assert node.is_failed()
        assert node.kind is ErrorKind.NOT_FOUND

    def test_failed_node_without_error(self):
        assert FailedNode("x").kind is ErrorKind.OTHER_IO

    def test_nodes_are_immutable(self):
        node = FileNode("a", 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.name = "b"

    def test_nodes_are_not_hashable(self):
        with pytest.raises(TypeError):
            hash(FileNode("a", 1))

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            DirTree()

    def test_variant_must_implement_map_and_payloads(self):
        class NameOnly(DirTree):
            name = "partial"

            def map(self, fn):
                return self

        with pytest.raises(TypeError):
            NameOnly()


class TestPayloadMapping:
    """Functor-style map and payload iteration."""

    def test_map_changes_only_payloads(self):
        tree = make_sample_tree().dir_tree
        upper = tree.map(lambda data: data.upper())
        assert equal_shape(tree, upper)
        assert b"".join(sort_dir(upper).payloads()) == b"ABCDEFG"

    def test_map_keeps_failures(self):
        tree = DirNode("d", [FailedNode("f", OSError("boom")), FileNode("a", 1)])
        mapped = tree.map(lambda x: x + 1)
        assert mapped.contents[0] is tree.contents[0]
        assert mapped.contents[1].file == 2

    def test_map_with_arbitrary_function_preserves_shape(self):
        tree = make_sample_tree().dir_tree
        for fn in (len, str, lambda _: None, lambda _: object()):
            assert equal_shape(tree, tree.map(fn))

    def test_iter_payloads_depth_first_left_to_right(self):
        tree = DirNode("r", [
            FileNode("z", 1),
            DirNode("m", [FileNode("a", 2), FileNode("b", 3)]),
            FileNode("a", 4),
        ])
        assert list(iter_payloads(tree)) == [1, 2, 3, 4]

    def test_fold_payloads(self):
        tree = sort_dir(make_sample_tree().dir_tree)
        assert fold_payloads(lambda acc, data: acc + data, b"", tree) == b"abcdefg"

    def test_map_stays_lazy(self):
        pulled = []

        def source():
            for i in range(3):
                pulled.append(i)
                yield FileNode(str(i), i)

        tree = DirNode("d", LazyContents(source()))
        mapped = tree.map(lambda x: x * 10)
        assert pulled == []
        assert mapped.contents[0].file == 0
        assert pulled == [0]


class TestAnchoredDirTree:
    """The anchor wrapper."""

    def test_unpacking(self):
        anchor, tree = AnchoredDirTree("/tmp", FileNode("a", 1))
        assert anchor == "/tmp"
        assert tree == FileNode("a", 1)

    def test_map_keeps_anchor(self):
        anchored = make_sample_tree(anchor="/base")
        mapped = anchored.map(len)
        assert mapped.anchor == "/base"
        assert set(mapped.dir_tree.payloads()) == {1}

    def test_apply_whole_tree_function(self):
        anchored = AnchoredDirTree("x", DirNode("d", [FileNode("b", 2), FileNode("a", 1)]))
        sorted_tree = anchored.apply(sort_dir)
        assert sorted_tree.anchor == "x"
        assert [c.name for c in sorted_tree.dir_tree.contents] == ["a", "b"]

    def test_equality_includes_anchor(self):
        tree = DirNode("d", [FileNode("a", 1)])
        assert AnchoredDirTree("x", tree) == AnchoredDirTree("x", tree)
        assert AnchoredDirTree("x", tree) != AnchoredDirTree("y", tree)
