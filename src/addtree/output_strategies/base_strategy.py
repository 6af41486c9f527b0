"""Base class for add forest output strategies."""

from abc import ABC, abstractmethod
from typing import Iterator

from addtree.add_tree.add_forest import AddForest


class OutputStrategy(ABC):
    """Abstract base class for rendering an add forest.

    Strategies stream their output as lines without trailing newlines so callers
    can write them incrementally. An empty forest renders as no lines at all.
    """

    @abstractmethod
    def stream(self, forest: AddForest) -> Iterator[str]:
        """Yield the rendering of ``forest`` one line at a time."""
        pass

    def render(self, forest: AddForest) -> str:
        """Return the complete rendering, newline terminated unless empty."""
        lines = list(self.stream(forest))
        return "\n".join(lines) + "\n" if lines else ""
