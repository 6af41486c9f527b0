"""Status oracles consulted while planning an add.

Three capabilities are injected into the planner: whether an entry is already
tracked, whether ignore rules exclude it, and whether it belongs to the
version-control system's own bookkeeping.
"""

from .admin import AdminPathDetector
from .base_rules import BaseIgnoreRules
from .composite_rules import CompositeIgnoreRules
from .cvs_ignore_rules import CvsIgnoreRules
from .file_type_rules import FileTypeIgnoreRules
from .pattern_rules import PatternIgnoreRules
from .tracked import CvsEntriesTracker, KnownPathsTracker
from .vcs_oracles import VcsOracles, rules_as_oracle

__all__ = [
    "AdminPathDetector",
    "BaseIgnoreRules",
    "CompositeIgnoreRules",
    "CvsEntriesTracker",
    "CvsIgnoreRules",
    "FileTypeIgnoreRules",
    "KnownPathsTracker",
    "PatternIgnoreRules",
    "VcsOracles",
    "rules_as_oracle",
]
