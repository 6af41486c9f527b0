"""Unit tests for MemoryPathEntry."""

import pytest

from addtree.path_entry.memory_path_entry import MemoryPathEntry


def test_from_paths_builds_directories_and_files():
    root = MemoryPathEntry.from_paths(["/proj/src/a.txt", "/proj/docs/"])
    assert root.path == "/"
    assert root.parent() is None

    src = root.find("/proj/src")
    assert src.is_dir()
    assert src.name == "src"
    assert src.parent().path == "/proj"

    a_txt = root.find("/proj/src/a.txt")
    assert not a_txt.is_dir()
    assert a_txt.children() == []

    docs = root.find("/proj/docs")
    assert docs.is_dir()
    assert docs.children() == []


def test_children_are_sorted_by_name():
    root = MemoryPathEntry.from_paths(["/p/c", "/p/a", "/p/b/"])
    assert [child.name for child in root.find("/p").children()] == ["a", "b", "c"]


def test_file_becomes_directory_when_a_child_is_added():
    root = MemoryPathEntry.from_paths(["/p/x", "/p/x/y"])
    assert root.find("/p/x").is_dir()


def test_unreadable_directory_reports_no_children():
    root = MemoryPathEntry.from_paths(["/p/locked/secret.txt"])
    locked = root.find("/p/locked")
    locked.readable = False
    assert locked.is_dir()
    assert locked.children() == []


def test_relative_path_rejected():
    with pytest.raises(ValueError):
        MemoryPathEntry.from_paths(["relative/path"])


def test_find_missing_path_raises_key_error():
    root = MemoryPathEntry.from_paths(["/p/a"])
    with pytest.raises(KeyError):
        root.find("/p/missing")


def test_entries_compare_and_hash_by_path():
    first = MemoryPathEntry.from_paths(["/p/a"]).find("/p/a")
    second = MemoryPathEntry.from_paths(["/p/a", "/p/b"]).find("/p/a")
    assert first is not second
    assert first == second
    assert len({first, second}) == 1
    assert repr(first) == "MemoryPathEntry('/p/a')"
