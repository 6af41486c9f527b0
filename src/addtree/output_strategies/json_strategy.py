"""JSON rendering of an add forest."""

import json
from typing import Any, Dict, Iterator, List

from addtree.add_tree.add_forest import AddForest
from addtree.add_tree.added_file_node import AddedFileNode

from .base_strategy import OutputStrategy


class JSONOutputStrategy(OutputStrategy):
    """Render the forest as a single JSON document.

    The document has the structure::

        {"roots": [node, ...]}

    where each node is::

        {
            "path": "/abs/path",
            "name": "path",
            "type": "directory" | "file",
            "included": true,
            "children": [node, ...]
        }

    Example:
        >>> from addtree.add_tree import assemble_forest
        >>> from addtree.path_entry import MemoryPathEntry
        >>> tree = MemoryPathEntry.from_paths(["/proj/a.txt"])
        >>> print(JSONOutputStrategy(indent=None).render(assemble_forest([tree.find("/proj/a.txt")])), end="")
        {"roots": [{"path": "/proj/a.txt", "name": "a.txt", "type": "file", "included": true, "children": []}]}
    """

    def __init__(self, indent: Any = 2) -> None:
        self.indent = indent

    def stream(self, forest: AddForest) -> Iterator[str]:
        if not forest:
            return
        document = {"roots": [self.to_dict(root) for root in forest.roots]}
        yield from json.dumps(document, indent=self.indent).splitlines()

    def to_dict(self, root: AddedFileNode) -> Dict[str, Any]:
        """Convert a node and its subtree to plain dictionaries.

        The conversion walks the subtree with an explicit stack.
        """
        result = self._node_dict(root)
        stack: List[Any] = [(root, result)]
        while stack:
            node, node_dict = stack.pop()
            for child in node.children:
                child_dict = self._node_dict(child)
                node_dict["children"].append(child_dict)
                stack.append((child, child_dict))
        return result

    @staticmethod
    def _node_dict(node: AddedFileNode) -> Dict[str, Any]:
        return {
            "path": node.path,
            "name": node.name,
            "type": "directory" if node.is_dir else "file",
            "included": node.included,
            "children": [],
        }
