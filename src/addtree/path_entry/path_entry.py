"""Read-only interface to a filesystem entry."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional


class PathEntry(ABC):
    """Abstract base class for a filesystem item the planner can inspect.

    An entry is identified by its ``path``: a posix-style string that is also the
    key used for ordering. Two entries with the same path are the same entry, so
    entries can be stored in sets and used as dictionary keys regardless of which
    object instance produced them.

    Subclasses provide navigation upward (``parent``) and downward (``children``).
    Children are reported lazily and may be empty for a directory whose contents
    cannot be read.

    Example:
        >>> from addtree.path_entry import MemoryPathEntry
        >>> root = MemoryPathEntry.from_paths(["/proj/src/", "/proj/src/a.txt"])
        >>> entry = root.find("/proj/src/a.txt")
        >>> entry.parent().path
        '/proj/src'
        >>> entry.is_dir()
        False
    """

    @property
    @abstractmethod
    def path(self) -> str:
        """The posix-style path identifying this entry."""

    @property
    def name(self) -> str:
        """The final path component."""
        return self.path.rstrip("/").rsplit("/", 1)[-1]

    @abstractmethod
    def parent(self) -> Optional["PathEntry"]:
        """Return the containing directory, or None at the filesystem root."""

    @abstractmethod
    def is_dir(self) -> bool:
        """Return True if this entry is a directory."""

    @abstractmethod
    def children(self) -> List["PathEntry"]:
        """Return the entries directly inside this one.

        Files and unreadable directories report an empty list. Implementations must
        not raise for enumeration failures.
        """

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PathEntry):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __lt__(self, other: "PathEntry") -> bool:
        return self.path < other.path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.path!r})"
