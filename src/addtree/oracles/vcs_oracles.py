"""Bundle of the capabilities the planner consults."""

import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from addtree.path_entry.path_entry import PathEntry
from addtree.types import PathType

from .admin import DEFAULT_ADMIN_DIRECTORY_NAMES, AdminPathDetector
from .base_rules import BaseIgnoreRules
from .composite_rules import CompositeIgnoreRules
from .cvs_ignore_rules import CvsIgnoreRules
from .file_type_rules import FileTypeIgnoreRules
from .tracked import CvsEntriesTracker

EntryPredicate = Callable[[PathEntry], bool]


def _never(entry: PathEntry) -> bool:
    return False


def rules_as_oracle(rules: BaseIgnoreRules, root: PathType) -> EntryPredicate:
    """Adapt path-based ignore rules into a predicate over entries.

    The entry is matched by its path relative to ``root`` (with a trailing ``/`` for
    directories). Entries outside ``root`` are matched by their absolute path.

    Example:
        >>> from addtree.oracles.pattern_rules import PatternIgnoreRules
        >>> from addtree.path_entry import MemoryPathEntry
        >>> rules = PatternIgnoreRules()
        >>> rules.add_rule("/build/")
        >>> tree = MemoryPathEntry.from_paths(["/proj/build/", "/proj/src/build/"])
        >>> is_ignored = rules_as_oracle(rules, "/proj")
        >>> is_ignored(tree.find("/proj/build")), is_ignored(tree.find("/proj/src/build"))
        (True, False)
    """
    root_path = Path(os.path.abspath(root)).as_posix().rstrip("/") + "/"

    def is_ignored(entry: PathEntry) -> bool:
        path = entry.path
        if path.startswith(root_path):
            path = path[len(root_path) :]
        if entry.is_dir():
            path += "/"
        return rules.exclude(path)

    return is_ignored


class VcsOracles:
    """The three capabilities injected into candidate building and tree assembly.

    Attributes:
        is_tracked: Whether the version-control system already knows an entry.
        is_ignored: Whether ignore rules exclude an entry from the add.
        is_admin_path: Whether an entry is version-control bookkeeping.

    Any capability left out answers False for every entry.

    Example:
        >>> from addtree.oracles.tracked import KnownPathsTracker
        >>> oracles = VcsOracles(is_tracked=KnownPathsTracker(["/proj"]))
        >>> oracles.is_admin_path is not None
        True
    """

    def __init__(
        self,
        is_tracked: Optional[EntryPredicate] = None,
        is_ignored: Optional[EntryPredicate] = None,
        is_admin_path: Optional[EntryPredicate] = None,
    ) -> None:
        self.is_tracked: EntryPredicate = is_tracked or _never
        self.is_ignored: EntryPredicate = is_ignored or _never
        self.is_admin_path: EntryPredicate = is_admin_path or _never

    @classmethod
    def for_cvs(
        cls,
        root: PathType,
        extra_rules: Optional[Iterable[BaseIgnoreRules]] = None,
        admin_dirs: Optional[Iterable[str]] = None,
        use_default_ignores: bool = True,
        cvsignore_files: Optional[Iterable[PathType]] = None,
    ) -> "VcsOracles":
        """Wire the oracles for a CVS working copy rooted at ``root``.

        Args:
            root: Working-copy root that ignore rules are relative to.
            extra_rules: Additional ignore rules, e.g. user supplied patterns.
            admin_dirs: Admin directory names. The first one is where Entries files
                are read from. Defaults to ``("CVS",)``.
            use_default_ignores: Whether CVS's built-in ignore list and the
                file-type ignore list apply.
            cvsignore_files: Global CVS ignore files to load.

        Raises:
            FileNotFoundError: If a CVS ignore file does not exist.
        """
        names = list(admin_dirs) if admin_dirs else list(DEFAULT_ADMIN_DIRECTORY_NAMES)
        detector = AdminPathDetector(names)

        cvs_rules = CvsIgnoreRules(root, use_defaults=use_default_ignores)
        if cvsignore_files:
            cvs_rules.load_rules(list(cvsignore_files))

        rules: List[BaseIgnoreRules] = [cvs_rules]
        if use_default_ignores:
            rules.append(FileTypeIgnoreRules())
        rules.extend(extra_rules or [])

        return cls(
            is_tracked=CvsEntriesTracker(names[0]),
            is_ignored=rules_as_oracle(CompositeIgnoreRules(rules), root),
            is_admin_path=detector,
        )
