"""In-memory PathEntry trees."""

from typing import Dict, Iterable, List, Optional

from .path_entry import PathEntry


class MemoryPathEntry(PathEntry):
    """An entry in a tree that exists only in memory.

    Useful for planning against a virtual filesystem and for exercising the planner
    without touching disk. Nodes are created through ``from_paths`` or by attaching
    children with ``add_child``.

    Attributes:
        directory (bool): Whether the entry is a directory.
        readable (bool): When False, ``children()`` reports nothing, as for a
            directory whose listing failed.

    Example:
        >>> root = MemoryPathEntry.from_paths(["/proj/a/b/c.txt"])
        >>> [child.path for child in root.find("/proj/a").children()]
        ['/proj/a/b']
    """

    def __init__(
        self,
        name: str,
        parent: Optional["MemoryPathEntry"] = None,
        directory: bool = False,
        readable: bool = True,
    ) -> None:
        self._name = name
        self._parent = parent
        self.directory = directory
        self.readable = readable
        self._children: Dict[str, "MemoryPathEntry"] = {}
        if parent is None:
            self._path = "/" + name if name else "/"
        elif parent.path == "/":
            self._path = "/" + name
        else:
            self._path = f"{parent.path}/{name}"

    @classmethod
    def from_paths(cls, paths: Iterable[str]) -> "MemoryPathEntry":
        """Build a tree rooted at ``/`` from absolute posix paths.

        Every intermediate component becomes a directory. A path ending with ``/``
        is a directory itself; otherwise the last component is a file.

        Args:
            paths: Absolute paths such as ``"/proj/src/"`` or ``"/proj/src/a.txt"``.

        Returns:
            The root entry (path ``"/"``).

        Raises:
            ValueError: If a path is not absolute.
        """
        root = cls("", directory=True)
        for path in paths:
            if not path.startswith("/"):
                raise ValueError(f"Path must be absolute: {path}")
            is_dir = path.endswith("/")
            parts = [part for part in path.split("/") if part]
            node = root
            for index, part in enumerate(parts):
                last = index == len(parts) - 1
                node = node.add_child(part, directory=is_dir or not last)
        return root

    def add_child(self, name: str, directory: bool = False) -> "MemoryPathEntry":
        """Return the child called ``name``, creating it if needed."""
        child = self._children.get(name)
        if child is None:
            child = MemoryPathEntry(name, parent=self, directory=directory)
            self._children[name] = child
            self.directory = True
        elif directory:
            child.directory = True
        return child

    def find(self, path: str) -> "MemoryPathEntry":
        """Look up a descendant by absolute path.

        Raises:
            KeyError: If no entry exists at ``path``.
        """
        node = self
        for part in (part for part in path.split("/") if part):
            node = node._children[part]
        return node

    @property
    def path(self) -> str:
        return self._path

    @property
    def name(self) -> str:
        return self._name

    def parent(self) -> Optional["MemoryPathEntry"]:
        return self._parent

    def is_dir(self) -> bool:
        return self.directory

    def children(self) -> List[PathEntry]:
        if not self.directory or not self.readable:
            return []
        return [self._children[name] for name in sorted(self._children)]
