"""Unit tests for AdminPathDetector."""

import pytest

from addtree.oracles.admin import AdminPathDetector
from addtree.path_entry.memory_path_entry import MemoryPathEntry


@pytest.fixture
def tree():
    return MemoryPathEntry.from_paths(
        [
            "/proj/CVS/Entries",
            "/proj/src/CVS/Root",
            "/proj/src/main.c",
            "/proj/notes/CVS",
            "/proj/CVS.txt",
        ]
    )


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/proj/CVS", True),
        # Only the directory itself is an admin path; expansion prunes its content
        ("/proj/CVS/Entries", False),
        ("/proj/src/CVS", True),
        ("/proj/src/CVS/Root", False),
        ("/proj/src", False),
        ("/proj/src/main.c", False),
        # A plain file called CVS is not an admin directory
        ("/proj/notes/CVS", False),
        ("/proj/CVS.txt", False),
    ],
)
def test_default_admin_directory(tree, path, expected):
    assert AdminPathDetector().is_admin_path(tree.find(path)) == expected


def test_custom_names():
    tree = MemoryPathEntry.from_paths(["/proj/.svn/entries", "/proj/CVS/Entries"])
    detector = AdminPathDetector([".svn"])
    assert detector(tree.find("/proj/.svn"))
    assert not detector(tree.find("/proj/CVS"))


def test_names_are_case_sensitive():
    tree = MemoryPathEntry.from_paths(["/proj/cvs/notes.txt"])
    assert not AdminPathDetector().is_admin_path(tree.find("/proj/cvs/notes.txt"))


def test_admin_named_ancestor_is_not_consulted():
    tree = MemoryPathEntry.from_paths(["/home/u/CVS/proj/src/a.txt"])
    detector = AdminPathDetector()
    assert detector(tree.find("/home/u/CVS"))
    assert not detector(tree.find("/home/u/CVS/proj/src"))
    assert not detector(tree.find("/home/u/CVS/proj/src/a.txt"))
