"""Composite ignore rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseIgnoreRules


class CompositeIgnoreRules(BaseIgnoreRules):
    """Union of several ignore rule sets.

    A path is ignored if ANY constituent rule ignores it. This is how the
    version-control specific rules (``.cvsignore``, user patterns) and the general
    file-type list are combined into one ignore-status answer.

    Attributes:
        rules (List[BaseIgnoreRules]): Constituent rules, evaluated in order.

    Example:
        >>> from addtree.oracles.file_type_rules import FileTypeIgnoreRules
        >>> from addtree.oracles.pattern_rules import PatternIgnoreRules
        >>> user_rules = PatternIgnoreRules()
        >>> user_rules.add_rule("*.tmp")
        >>> composite = CompositeIgnoreRules([user_rules, FileTypeIgnoreRules()])
        >>> composite.exclude("scratch.tmp"), composite.exclude("mod.pyc"), composite.exclude("mod.py")
        (True, True, False)
    """

    def __init__(self, rules: Sequence[BaseIgnoreRules]):
        """Initialize composite ignore rules.

        Raises:
            ValueError: If rules is empty.
            TypeError: If any rule doesn't implement BaseIgnoreRules.
        """
        if not rules:
            raise ValueError("At least one ignore rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseIgnoreRules):
                raise TypeError(f"Rule at index {i} must implement BaseIgnoreRules, got {type(rule)}")

        self.rules: List[BaseIgnoreRules] = list(rules)

    def exclude(self, path: str) -> bool:
        return any(rule.exclude(path) for rule in self.rules)

