from abc import ABC, abstractmethod
from typing import Sequence, Union

from addtree.types import PathType


class BaseIgnoreRules(ABC):
    """
    Abstract base class defining the interface for ignore rules.

    Ignore rules decide whether a path is excluded from an add. They never remove an
    entry from the planned tree; the planner only flags matching entries as not
    included. Implementations may combine version-control specific rules (e.g.
    ``.cvsignore`` files) with general file-type rules.

    Paths handed to ``exclude`` are relative to the working-copy root, use ``/`` as
    separator and end with ``/`` when they name a directory.

    Example:
        >>> from addtree.oracles.pattern_rules import PatternIgnoreRules
        >>> rules = PatternIgnoreRules()
        >>> rules.add_rule('*.pyc')
        >>> rules.exclude('pkg/mod.pyc')
        True
        >>> rules.exclude('pkg/mod.py')
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path is ignored by these rules.

        Args:
            path (str): Root-relative path to check, with a trailing ``/`` for directories.

        Returns:
            bool: True if the path is ignored, False otherwise.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load ignore rules from one or more files.

        Rule types that are not file based use this default implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single ignore rule directly.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
