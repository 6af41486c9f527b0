"""Test configuration and fixtures for addtree."""

import pytest

from addtree.oracles.admin import AdminPathDetector
from addtree.oracles.tracked import KnownPathsTracker
from addtree.oracles.vcs_oracles import VcsOracles
from addtree.path_entry.memory_path_entry import MemoryPathEntry


@pytest.fixture
def project_tree():
    """An in-memory working copy rooted at /proj."""
    return MemoryPathEntry.from_paths(
        [
            "/proj/README",
            "/proj/CVS/Entries",
            "/proj/src/a.txt",
            "/proj/src/VCSROOT/Entries",
            "/proj/src/VCSROOT/Root",
            "/proj/a/b/c.txt",
            "/proj/x/y/",
            "/proj/x/y/z.py",
            "/proj/x/y/z.pyc",
            "/proj/docs/",
        ]
    )


@pytest.fixture
def make_oracles():
    """Build VcsOracles from a set of tracked paths and ignored names."""

    def factory(tracked=("/proj",), ignored_suffixes=(), admin_names=("CVS", "VCSROOT")):
        return VcsOracles(
            is_tracked=KnownPathsTracker(tracked),
            is_ignored=lambda entry: entry.name.endswith(tuple(ignored_suffixes)) if ignored_suffixes else False,
            is_admin_path=AdminPathDetector(admin_names),
        )

    return factory
