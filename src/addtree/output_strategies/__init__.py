"""Renderings of a planned add forest."""

from typing import Union

from addtree.types import AddFormat

from .base_strategy import OutputStrategy
from .json_strategy import JSONOutputStrategy
from .paths_strategy import PathsOutputStrategy
from .tree_strategy import TreeOutputStrategy


def get_output_strategy(output_format: Union[str, AddFormat]) -> OutputStrategy:
    """Return the strategy for ``output_format``.

    Raises:
        ValueError: If the format is unknown.
    """
    strategies = {
        AddFormat.TREE: TreeOutputStrategy,
        AddFormat.JSON: JSONOutputStrategy,
        AddFormat.PATHS: PathsOutputStrategy,
    }
    return strategies[AddFormat(output_format)]()


__all__ = [
    "JSONOutputStrategy",
    "OutputStrategy",
    "PathsOutputStrategy",
    "TreeOutputStrategy",
    "get_output_strategy",
]
