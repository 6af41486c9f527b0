"""Detection of version-control bookkeeping directories."""

from typing import Iterable, Optional

from addtree.path_entry.path_entry import PathEntry

DEFAULT_ADMIN_DIRECTORY_NAMES = ("CVS",)


class AdminPathDetector:
    """Recognize the version-control system's own metadata directories.

    An entry is an admin path if it is a directory carrying one of the admin names.
    Only the entry itself is inspected: content below an admin directory is never
    reached because expansion stops at the directory, and selections below one are
    rejected by the candidate builder up to the nearest tracked ancestor.

    Attributes:
        names (frozenset[str]): Admin directory names, compared case-sensitively.

    Example:
        >>> from addtree.path_entry import MemoryPathEntry
        >>> root = MemoryPathEntry.from_paths(["/proj/CVS/Entries", "/proj/CVS.txt"])
        >>> detector = AdminPathDetector()
        >>> detector.is_admin_path(root.find("/proj/CVS"))
        True
        >>> detector.is_admin_path(root.find("/proj/CVS.txt"))
        False
    """

    def __init__(self, names: Optional[Iterable[str]] = None) -> None:
        self.names = frozenset(DEFAULT_ADMIN_DIRECTORY_NAMES if names is None else names)

    def is_admin_path(self, entry: PathEntry) -> bool:
        return entry.is_dir() and entry.name in self.names

    def __call__(self, entry: PathEntry) -> bool:
        return self.is_admin_path(entry)
