"""Plain path list rendering of an add forest."""

from typing import Iterator

from addtree.add_tree.add_forest import AddForest

from .base_strategy import OutputStrategy


class PathsOutputStrategy(OutputStrategy):
    """One included path per line, parents before children.

    This is the order an add command has to register the entries in. Ignored
    entries and everything below an ignored directory are left out.
    """

    def stream(self, forest: AddForest) -> Iterator[str]:
        for node in forest.iterate_included():
            yield node.path
