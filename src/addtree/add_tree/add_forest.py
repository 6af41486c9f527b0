"""Assembly of add candidates into a forest of parent/child relationships."""

import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from anytree import PreOrderIter

from addtree.exceptions import TreeAssemblyError
from addtree.path_entry.path_entry import PathEntry

from .added_file_node import AddedFileNode

logger = logging.getLogger(__name__)


class AddForest:
    """The planned add operations, as an ordered collection of trees.

    A root is a node whose parent directory is not itself a candidate. Every other
    node is reachable from exactly one root. Roots and every list of children are
    sorted by path.

    The forest is read-only once assembled. Parent lookups go through an index of
    nodes keyed by path.

    Attributes:
        roots (List[AddedFileNode]): Root nodes, sorted by path.

    Example:
        >>> from addtree.path_entry import MemoryPathEntry
        >>> tree = MemoryPathEntry.from_paths(["/proj/x/y"])
        >>> forest = assemble_forest([tree.find("/proj/x"), tree.find("/proj/x/y")])
        >>> [root.path for root in forest.roots], len(forest)
        (['/proj/x'], 2)
        >>> forest.parent_of(forest.get("/proj/x/y")).path
        '/proj/x'
    """

    def __init__(self, roots: List[AddedFileNode], nodes: Dict[str, AddedFileNode]) -> None:
        self.roots = roots
        self._nodes = nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __iter__(self) -> Iterator[AddedFileNode]:
        """Iterate over all nodes, each root followed by its descendants in pre-order."""
        for root in self.roots:
            yield from PreOrderIter(root)

    def __contains__(self, path: str) -> bool:
        return path in self._nodes

    def get(self, path: str) -> Optional[AddedFileNode]:
        return self._nodes.get(path)

    def parent_of(self, node: AddedFileNode) -> Optional[AddedFileNode]:
        """Resolve the non-owning parent link of ``node``."""
        if node.parent_key is None:
            return None
        return self._nodes[node.parent_key]

    def iterate_included(self) -> Iterator[AddedFileNode]:
        """Iterate over the nodes an add command must register, parents first.

        An excluded node is skipped together with its subtree: nothing below a
        directory that is not added can be added either.
        """
        for root in self.roots:
            yield from PreOrderIter(root, stop=lambda node: not node.included)

    @property
    def directory_count(self) -> int:
        return sum(1 for node in self if node.is_dir)

    @property
    def file_count(self) -> int:
        return sum(1 for node in self if not node.is_dir)

    @property
    def included_count(self) -> int:
        return sum(1 for _ in self.iterate_included())

    @property
    def ignored_count(self) -> int:
        return sum(1 for node in self if not node.included)


def assemble_forest(
    candidates: Iterable[PathEntry],
    is_ignored: Optional[Callable[[PathEntry], bool]] = None,
) -> AddForest:
    """Arrange candidates into a forest.

    1. One node is created per distinct candidate.
    2. A candidate whose parent directory is also a candidate is attached to the
       parent's node.
    3. Each node is flagged ``included`` unless ``is_ignored`` matches its entry.
       Ignored nodes stay where they are.
    4. Nodes without a parent link become the roots. Roots and children are sorted
       by path.

    Args:
        candidates: Entries to arrange. Duplicates (by path) are collapsed.
        is_ignored: Ignore-status predicate. Defaults to ignoring nothing.

    Returns:
        The assembled forest. Empty input gives an empty forest.

    Raises:
        TreeAssemblyError: If candidates were given but no root was produced.
    """
    nodes: Dict[str, AddedFileNode] = {}
    for entry in candidates:
        if entry.path not in nodes:
            nodes[entry.path] = AddedFileNode(entry)

    for node in nodes.values():
        parent = node.entry.parent()
        if parent is not None and parent.path in nodes:
            nodes[parent.path].attach(node)

    if is_ignored is not None:
        for node in nodes.values():
            node.included = not is_ignored(node.entry)

    roots = [node for node in nodes.values() if node.is_root]
    if nodes and not roots:
        logger.error("Add candidates produced no tree roots: %s", sorted(nodes))
        raise TreeAssemblyError(sorted(nodes))

    roots.sort(key=lambda node: node.path)
    for node in nodes.values():
        node.sort()

    return AddForest(roots, nodes)
