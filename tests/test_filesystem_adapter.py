"""Tests for filesystem adapters."""

import os
import shutil
import tempfile
import unittest
from pathlib import Path

from dirtreelib.adapters import FilteredFileSystemAdapter, LocalFileSystemAdapter


class TestLocalFileSystemAdapter(unittest.TestCase):
    """Test the plain local adapter."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.base = Path(self.test_dir)
        (self.base / "dir1").mkdir()
        (self.base / "file1.txt").write_text("content1")
        (self.base / "dir1" / "file2.bin").write_bytes(b"\x01\x02")
        self.adapter = LocalFileSystemAdapter()

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_exists(self):
        self.assertTrue(self.adapter.exists(str(self.base / "file1.txt")))
        self.assertFalse(self.adapter.exists(str(self.base / "missing")))

    def test_is_file(self):
        self.assertTrue(self.adapter.is_file(str(self.base / "file1.txt")))
        self.assertFalse(self.adapter.is_file(str(self.base / "dir1")))
        self.assertFalse(self.adapter.is_file(str(self.base / "missing")))

    def test_is_symlink_missing_raises(self):
        self.assertFalse(self.adapter.is_symlink(str(self.base / "file1.txt")))
        with self.assertRaises(FileNotFoundError):
            self.adapter.is_symlink(str(self.base / "missing"))

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks not supported")
    def test_is_symlink(self):
        link = self.base / "link"
        try:
            os.symlink(self.base / "dir1", link)
        except OSError:
            self.skipTest("cannot create symlinks here")
        self.assertTrue(self.adapter.is_symlink(str(link)))

    def test_list_entries(self):
        self.assertEqual(sorted(self.adapter.list_entries(self.test_dir)), ["dir1", "file1.txt"])

    def test_list_entries_errors(self):
        with self.assertRaises(FileNotFoundError):
            self.adapter.list_entries(str(self.base / "missing"))
        with self.assertRaises(NotADirectoryError):
            self.adapter.list_entries(str(self.base / "file1.txt"))

    def test_list_current_directory(self):
        cwd = os.getcwd()
        os.chdir(self.test_dir)
        try:
            self.assertEqual(sorted(self.adapter.list_entries("")), ["dir1", "file1.txt"])
        finally:
            os.chdir(cwd)

    def test_create_directory(self):
        target = self.base / "a" / "b"
        self.adapter.create_directory(str(target))
        self.assertTrue(target.is_dir())
        # Again, already existing
        self.adapter.create_directory(str(target))

    def test_read_and_write(self):
        self.assertEqual(self.adapter.read_text(str(self.base / "file1.txt")), "content1")
        self.assertEqual(self.adapter.read_bytes(str(self.base / "dir1" / "file2.bin")), b"\x01\x02")

        self.adapter.write_text(str(self.base / "new.txt"), "fresh")
        self.adapter.write_bytes(str(self.base / "new.bin"), b"\xff")
        self.assertEqual((self.base / "new.txt").read_text(), "fresh")
        self.assertEqual((self.base / "new.bin").read_bytes(), b"\xff")

    def test_open_file(self):
        with self.adapter.open_file(str(self.base / "file1.txt")) as f:
            self.assertEqual(f.read(), "content1")


class TestFilteredFileSystemAdapter(unittest.TestCase):
    """Test filtered listings."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        base = Path(self.test_dir)
        for name in (".hidden", "keep.py", "drop.pyc", "node_modules"):
            (base / name).write_text("x")

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_no_filters(self):
        adapter = FilteredFileSystemAdapter()
        self.assertEqual(len(adapter.list_entries(self.test_dir)), 4)

    def test_exclude_names(self):
        adapter = FilteredFileSystemAdapter(exclude_names={"node_modules"})
        self.assertNotIn("node_modules", adapter.list_entries(self.test_dir))

    def test_exclude_extensions(self):
        adapter = FilteredFileSystemAdapter(exclude_extensions={".pyc"})
        self.assertEqual(sorted(adapter.list_entries(self.test_dir)),
                         [".hidden", "keep.py", "node_modules"])

    def test_hidden(self):
        adapter = FilteredFileSystemAdapter(include_hidden=False)
        self.assertNotIn(".hidden", adapter.list_entries(self.test_dir))


if __name__ == '__main__':
    unittest.main()
