"""Forest of planned add operations.

Candidates are linked to their parent candidates, flagged with their ignore status
and collected under the roots that have no candidate ancestor.
"""

from .add_forest import AddForest, assemble_forest
from .added_file_node import AddedFileNode

__all__ = [
    "AddForest",
    "AddedFileNode",
    "assemble_forest",
]
