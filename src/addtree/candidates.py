"""Selection of the entries an add must register.

Given the entries a user selected, this module works out the complete set of
paths the version-control system has to be told about:

- every selected entry together with all of its descendants, minus version-control
  bookkeeping directories;
- the untracked directories between a selected entry and the nearest ancestor the
  system already knows about, without which the entry could not be added.

Both walks are iterative, so arbitrarily deep trees never exhaust the call stack.
"""

import logging
from typing import Dict, Iterable, List, Set

from addtree.oracles.vcs_oracles import EntryPredicate, VcsOracles
from addtree.path_entry.path_entry import PathEntry

logger = logging.getLogger(__name__)


def is_admin_path(entry: PathEntry, detector: EntryPredicate) -> bool:
    """Return True if ``entry`` is version-control bookkeeping and must never be added."""
    return bool(detector(entry))


def inside_admin_directory(entry: PathEntry, is_admin: EntryPredicate, is_tracked: EntryPredicate) -> bool:
    """Return True if an ancestor of ``entry`` below its nearest tracked ancestor is an admin path.

    The walk stops at the first tracked ancestor, so admin-named directories above
    the working copy are never consulted.

    Example:
        >>> from addtree.oracles.admin import AdminPathDetector
        >>> from addtree.oracles.tracked import KnownPathsTracker
        >>> from addtree.path_entry import MemoryPathEntry
        >>> tree = MemoryPathEntry.from_paths(["/w/CVS/proj/CVS/Entries", "/w/CVS/proj/a.txt"])
        >>> tracker = KnownPathsTracker(["/w/CVS/proj"])
        >>> inside_admin_directory(tree.find("/w/CVS/proj/CVS/Entries"), AdminPathDetector(), tracker)
        True
        >>> inside_admin_directory(tree.find("/w/CVS/proj/a.txt"), AdminPathDetector(), tracker)
        False
    """
    ancestor = entry.parent()
    while ancestor is not None:
        if is_admin_path(ancestor, is_admin):
            return True
        if is_tracked(ancestor):
            return False
        ancestor = ancestor.parent()
    return False


def expand_entry(entry: PathEntry, is_admin: EntryPredicate) -> Set[PathEntry]:
    """Collect ``entry`` and every descendant that is not an admin path.

    The traversal is depth first with an explicit stack. An admin directory is cut
    off together with everything below it. Entries that report no children are
    leaves, whether they are files or unreadable directories.

    Args:
        entry: Entry to expand.
        is_admin: Admin-path predicate.

    Returns:
        The set of reachable non-admin entries, each exactly once. No particular
        order is implied.

    Example:
        >>> from addtree.oracles.admin import AdminPathDetector
        >>> from addtree.path_entry import MemoryPathEntry
        >>> tree = MemoryPathEntry.from_paths(["/p/src/a.txt", "/p/src/CVS/Entries"])
        >>> sorted(e.path for e in expand_entry(tree.find("/p/src"), AdminPathDetector()))
        ['/p/src', '/p/src/a.txt']
    """
    result: Set[PathEntry] = set()
    stack = [entry]
    while stack:
        current = stack.pop()
        if current in result or is_admin_path(current, is_admin):
            continue
        result.add(current)
        if current.is_dir():
            stack.extend(reversed(current.children()))
    return result


def resolve_ancestors(
    entry: PathEntry,
    is_tracked: EntryPredicate,
    already_present: EntryPredicate,
) -> List[PathEntry]:
    """Find the untracked directories that must be added before ``entry`` can be.

    Starting at the parent of ``entry`` the walk climbs until it meets a boundary:
    an ancestor that is tracked or already present in the add set. The ancestors
    passed on the way are returned, nearest first; the boundary itself is not.

    If the walk reaches the filesystem root without meeting a boundary, nothing is
    returned. An untracked chain with nothing known above it is not part of any
    working copy and is never added automatically.

    Args:
        entry: The selected entry.
        is_tracked: Tracked-status predicate.
        already_present: Predicate telling whether an ancestor is already collected.

    Returns:
        Untracked intermediate ancestors, nearest first, or an empty list.

    Example:
        >>> from addtree.oracles.tracked import KnownPathsTracker
        >>> from addtree.path_entry import MemoryPathEntry
        >>> tree = MemoryPathEntry.from_paths(["/proj/a/b/c.txt"])
        >>> chain = resolve_ancestors(tree.find("/proj/a/b/c.txt"), KnownPathsTracker(["/proj"]), lambda e: False)
        >>> [e.path for e in chain]
        ['/proj/a/b', '/proj/a']
    """
    collected: List[PathEntry] = []
    parent = entry.parent()
    while parent is not None:
        if is_tracked(parent) or already_present(parent):
            return collected
        collected.append(parent)
        parent = parent.parent()
    return []


class CandidateSetBuilder:
    """Accumulates the add candidates for a selection.

    Candidates are keyed by path, so adding an entry that is already present is a
    no-op. Selections are processed in order, and ancestors collected for one
    selection act as boundaries for the ones after it.

    Policies applied on top of the two walks:

    - a selected admin path, or an entry inside an admin directory below its
      nearest tracked ancestor, contributes nothing;
    - entries the tracked oracle reports as known are not candidates, although the
      expansion still descends into tracked directories to find new content.

    Example:
        >>> from addtree.oracles.tracked import KnownPathsTracker
        >>> from addtree.path_entry import MemoryPathEntry
        >>> tree = MemoryPathEntry.from_paths(["/proj/x/y"])
        >>> builder = CandidateSetBuilder(VcsOracles(is_tracked=KnownPathsTracker(["/proj"])))
        >>> builder.add_selection([tree.find("/proj/x/y"), tree.find("/proj/x")])
        >>> [e.path for e in builder.candidates()]
        ['/proj/x', '/proj/x/y']
    """

    def __init__(self, oracles: VcsOracles) -> None:
        self.oracles = oracles
        self._candidates: Dict[str, PathEntry] = {}

    def __contains__(self, entry: PathEntry) -> bool:
        return entry.path in self._candidates

    def __len__(self) -> int:
        return len(self._candidates)

    def add(self, entry: PathEntry) -> None:
        self._candidates.setdefault(entry.path, entry)

    def add_selected(self, entry: PathEntry) -> None:
        """Merge one selected entry: its missing ancestors, then its expansion."""
        if is_admin_path(entry, self.oracles.is_admin_path) or inside_admin_directory(
            entry, self.oracles.is_admin_path, self.oracles.is_tracked
        ):
            logger.debug("Skipping admin path %s", entry.path)
            return

        ancestors = resolve_ancestors(entry, self.oracles.is_tracked, self.__contains__)
        if ancestors:
            logger.debug("Adding %d untracked ancestors for %s", len(ancestors), entry.path)
        for ancestor in ancestors:
            self.add(ancestor)

        for descendant in expand_entry(entry, self.oracles.is_admin_path):
            if not self.oracles.is_tracked(descendant):
                self.add(descendant)

    def add_selection(self, selection: Iterable[PathEntry]) -> None:
        for entry in selection:
            self.add_selected(entry)

    def candidates(self) -> List[PathEntry]:
        """Return the candidates sorted by path."""
        return [self._candidates[path] for path in sorted(self._candidates)]


def build_candidates(selection: Iterable[PathEntry], oracles: VcsOracles) -> List[PathEntry]:
    """Return the sorted, duplicate-free list of entries to add for ``selection``.

    An empty selection, or one where nothing is left to add, yields an empty list.
    """
    builder = CandidateSetBuilder(oracles)
    builder.add_selection(selection)
    candidates = builder.candidates()
    logger.debug("Built %d add candidates", len(candidates))
    return candidates
