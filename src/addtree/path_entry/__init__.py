"""Filesystem entry abstraction consumed by the add planner.

The planner only reads entries: their parent, whether they are directories, and
their children. Implementations exist for the real filesystem and for in-memory
trees.
"""

from .local_path_entry import LocalPathEntry
from .memory_path_entry import MemoryPathEntry
from .path_entry import PathEntry

__all__ = [
    "LocalPathEntry",
    "MemoryPathEntry",
    "PathEntry",
]
