"""Node representation for a candidate in the add forest."""

from typing import List, Optional

from addtree.path_entry.path_entry import PathEntry


class AddedFileNode:
    """A candidate entry placed in the add forest.

    A node owns its children. The link back to the parent is only the parent's
    path, ``parent_key``, which the owning ``AddForest`` resolves on request. Nodes
    therefore never reference each other in both directions.

    The ``children`` attribute is a plain list, so anytree's iterators and renderers
    can walk a node directly.

    Attributes:
        entry (PathEntry): The candidate entry.
        included (bool): False when ignore rules exclude the entry. Excluded nodes
            stay in the tree so they can be shown and re-included.
        parent_key (Optional[str]): Path of the parent node, or None for a root.
        children (List[AddedFileNode]): Child nodes, sorted by path once the forest
            is assembled.

    Example:
        >>> from addtree.path_entry import MemoryPathEntry
        >>> tree = MemoryPathEntry.from_paths(["/proj/src/a.txt"])
        >>> node = AddedFileNode(tree.find("/proj/src"))
        >>> node.path, node.is_dir, node.included, node.is_root
        ('/proj/src', True, True, True)
    """

    def __init__(self, entry: PathEntry, included: bool = True) -> None:
        self.entry = entry
        self.included = included
        self.parent_key: Optional[str] = None
        self.children: List["AddedFileNode"] = []

    @property
    def path(self) -> str:
        return self.entry.path

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def is_dir(self) -> bool:
        return self.entry.is_dir()

    @property
    def is_root(self) -> bool:
        return self.parent_key is None

    def attach(self, child: "AddedFileNode") -> None:
        """Make ``child`` a child of this node."""
        child.parent_key = self.path
        self.children.append(child)

    def sort(self) -> None:
        """Order the children by path."""
        self.children.sort(key=lambda node: node.path)

    def __repr__(self) -> str:
        flag = "" if self.included else ", included=False"
        return f"AddedFileNode({self.path!r}{flag})"
