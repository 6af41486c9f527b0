"""Ignore rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec

from addtree.types import PathType

from .base_rules import BaseIgnoreRules


class PatternIgnoreRules(BaseIgnoreRules):
    """Ignore rules written in .gitignore pattern syntax.

    Patterns are matched with the pathspec library exactly the way Git matches
    them: globs, ``**``, directory-only patterns ending in ``/``, negations starting
    with ``!`` and comment lines. Rules from files and rules added one at a time are
    kept in the order they arrive, so a later negation can re-include a path an
    earlier pattern ignored.

    Attributes:
        spec (PathSpec): Compiled matcher for the current list of patterns.

    Example:
        >>> rules = PatternIgnoreRules()
        >>> rules.add_rule("build/")
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("build/out.o")
        True
        >>> rules.exclude("keep.log")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize with patterns from the given file(s), if any.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        return self.spec.match_file(path)

    def has_rules(self) -> bool:
        """Return True if at least one pattern (not a comment or blank line) is loaded."""
        return any(pattern.include is not None for pattern in self.spec.patterns)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns of one or more .gitignore-style files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self._lines.extend(f.read().splitlines())

        self._compile()

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern (e.g. ``"*.pyc"``, ``"dist/"``, ``"!keep.txt"``)."""
        self._lines.append(rule)
        self._compile()

    def _compile(self) -> None:
        self.spec = PathSpec.from_lines("gitwildmatch", self._lines)
