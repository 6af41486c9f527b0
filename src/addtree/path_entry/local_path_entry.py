"""PathEntry backed by the real filesystem."""

import logging
import os
from pathlib import Path
from typing import List, Optional

from addtree.types import PathType

from .path_entry import PathEntry

logger = logging.getLogger(__name__)


class LocalPathEntry(PathEntry):
    """A file or directory on the local filesystem.

    The wrapped path is made absolute but not resolved, so a symlink inside the
    working copy keeps its own location instead of jumping to its target. Symlinks
    are never descended into.

    Directory listings that fail (permission denied, directory removed while
    planning) are logged and reported as empty. The planner treats such a
    directory as a leaf.

    Attributes:
        location (Path): Absolute path of the entry.

    Example:
        >>> entry = LocalPathEntry("/")
        >>> entry.parent() is None
        True
    """

    def __init__(self, location: PathType) -> None:
        self.location = Path(os.path.abspath(location))
        self._path = self.location.as_posix()

    @property
    def path(self) -> str:
        return self._path

    @property
    def name(self) -> str:
        return self.location.name

    def parent(self) -> Optional["LocalPathEntry"]:
        parent = self.location.parent
        if parent == self.location:
            return None
        return LocalPathEntry(parent)

    def is_dir(self) -> bool:
        try:
            return self.location.is_dir() and not self.location.is_symlink()
        except OSError:
            return False

    def children(self) -> List[PathEntry]:
        if not self.is_dir():
            return []
        try:
            names = sorted(os.listdir(self.location))
        except OSError as e:
            logger.warning("Cannot list directory %s: %s", self.location, e)
            return []
        return [LocalPathEntry(self.location / name) for name in names]
