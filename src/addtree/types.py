from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class AddFormat(str, Enum):
    """Output formats for a planned add forest.

    Attributes:
        TREE: Indented tree diagram, one block per root
        JSON: Nested JSON document
        PATHS: Included paths in the order they must be added
    """

    TREE = "tree"
    JSON = "json"
    PATHS = "paths"
