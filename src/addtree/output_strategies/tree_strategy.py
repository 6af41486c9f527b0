"""Tree diagram rendering of an add forest."""

from typing import Iterator

from anytree import RenderTree

from addtree.add_tree.add_forest import AddForest
from addtree.add_tree.added_file_node import AddedFileNode

from .base_strategy import OutputStrategy

IGNORED_MARKER = " [ignored]"


class TreeOutputStrategy(OutputStrategy):
    """Render each root and its descendants like the Unix ``tree`` command.

    Roots are labelled with their full path and descendants with their name.
    Directories carry a trailing ``/`` and ignored entries an ``[ignored]`` marker.

    Example:
        >>> from addtree.add_tree import assemble_forest
        >>> from addtree.path_entry import MemoryPathEntry
        >>> tree = MemoryPathEntry.from_paths(["/proj/src/a.txt", "/proj/src/b.log"])
        >>> entries = [tree.find(p) for p in ("/proj/src", "/proj/src/a.txt", "/proj/src/b.log")]
        >>> forest = assemble_forest(entries, lambda e: e.name.endswith(".log"))
        >>> print(TreeOutputStrategy().render(forest), end="")
        /proj/src/
        ├── a.txt
        └── b.log [ignored]
    """

    def stream(self, forest: AddForest) -> Iterator[str]:
        for root in forest.roots:
            for prefix, _, node in RenderTree(root):
                label = node.path if node.is_root else node.name
                yield f"{prefix}{label}{self._suffix(node)}"

    @staticmethod
    def _suffix(node: AddedFileNode) -> str:
        suffix = "/" if node.is_dir else ""
        if not node.included:
            suffix += IGNORED_MARKER
        return suffix
