"""General file-type ignore list, independent of any version-control system."""

from typing import Iterable, List, Optional

from pathspec import PathSpec

from .base_rules import BaseIgnoreRules

DEFAULT_IGNORED_FILE_TYPES = (
    "*.hprof",
    "*.pyc",
    "*.pyo",
    "*.rbc",
    "*.yarb",
    "*~",
    ".DS_Store",
    ".git",
    ".hg",
    ".svn",
    "CVS",
    "__pycache__",
    "_svn",
    "vssver.scc",
    "vssver2.scc",
)


class FileTypeIgnoreRules(BaseIgnoreRules):
    """Ignore files and directories by name, wherever they appear.

    Each pattern is a shell-style glob matched against the final path component
    only, so ``__pycache__`` ignores every directory of that name and ``*.pyc``
    every compiled module.

    Example:
        >>> rules = FileTypeIgnoreRules()
        >>> rules.exclude("src/pkg/__pycache__/")
        True
        >>> rules.exclude("src/pkg/mod.py")
        False
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None) -> None:
        self._patterns: List[str] = list(DEFAULT_IGNORED_FILE_TYPES if patterns is None else patterns)
        self._compile()

    def exclude(self, path: str) -> bool:
        name = path.rstrip("/").rsplit("/", 1)[-1]
        if not name:
            return False
        return self._spec.match_file(name)

    def add_rule(self, rule: str) -> None:
        self._patterns.append(rule)
        self._compile()

    def _compile(self) -> None:
        self._spec = PathSpec.from_lines("gitwildmatch", [_escape_glob(p) for p in self._patterns])


def _escape_glob(pattern: str) -> str:
    """Turn a name glob into a gitwildmatch line that matches the same names."""
    if pattern.startswith(("#", "!")):
        return "\\" + pattern
    return pattern
