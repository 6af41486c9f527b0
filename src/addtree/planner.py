"""Planning an add for a user selection.

``AddPlanner`` ties candidate selection and tree assembly together and is the entry
point most callers need. It performs no I/O beyond what the injected oracles and
entries do, and issues no version-control commands.
"""

import logging
from typing import Iterable, List

from addtree.add_tree.add_forest import AddForest, assemble_forest
from addtree.candidates import build_candidates
from addtree.oracles.vcs_oracles import VcsOracles
from addtree.path_entry.path_entry import PathEntry

logger = logging.getLogger(__name__)


class AddPlanner:
    """Turn a selection of entries into the forest of entries to add.

    The planner holds no state between calls, so one instance can plan any number of
    independent selections, including concurrently, as long as the oracles tolerate
    concurrent reads.

    Attributes:
        oracles (VcsOracles): Tracked, ignored and admin-path capabilities.

    Example:
        >>> from addtree.oracles.admin import AdminPathDetector
        >>> from addtree.oracles.tracked import KnownPathsTracker
        >>> from addtree.path_entry import MemoryPathEntry
        >>> tree = MemoryPathEntry.from_paths(["/proj/src/a.txt", "/proj/src/CVS/Entries"])
        >>> planner = AddPlanner(VcsOracles(is_tracked=KnownPathsTracker(["/proj"]), is_admin_path=AdminPathDetector()))
        >>> forest = planner.plan([tree.find("/proj/src")])
        >>> planner.included_paths(forest)
        ['/proj/src', '/proj/src/a.txt']
    """

    def __init__(self, oracles: VcsOracles) -> None:
        self.oracles = oracles

    def candidates(self, selection: Iterable[PathEntry]) -> List[PathEntry]:
        """Return the flat, sorted candidate list for ``selection``."""
        return build_candidates(selection, self.oracles)

    def plan(self, selection: Iterable[PathEntry]) -> AddForest:
        """Plan the add for ``selection``.

        Returns:
            The add forest. It is empty when there is nothing to add, which callers
            should treat as a completed no-op.

        Raises:
            TreeAssemblyError: If the candidates could not be arranged into a forest.
        """
        selection = list(selection)
        candidates = self.candidates(selection)
        forest = assemble_forest(candidates, self.oracles.is_ignored)
        if not self.has_work(forest):
            logger.info("Nothing to add for %d selected entries", len(selection))
        else:
            logger.debug(
                "Planned %d entries under %d roots (%d ignored)",
                len(forest),
                len(forest.roots),
                forest.ignored_count,
            )
        return forest

    @staticmethod
    def has_work(forest: AddForest) -> bool:
        """Return True if at least one entry in ``forest`` would be added."""
        return any(True for _ in forest.iterate_included())

    @staticmethod
    def included_paths(forest: AddForest) -> List[str]:
        """Return the paths to add, parents before children."""
        return [node.path for node in forest.iterate_included()]
