"""Ignore rules following CVS's ``.cvsignore`` semantics."""

import os
from os import PathLike
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from pathspec import PathSpec

from addtree.types import PathType

from .base_rules import BaseIgnoreRules

# Names CVS ignores unless a "!" token resets the list.
CVS_DEFAULT_IGNORES = (
    "RCS SCCS CVS CVS.adm RCSLOG cvslog.* tags TAGS .make.state .nse_depinfo "
    "*~ #* .#* ,* _$* *$ *.old *.bak *.BAK *.orig *.rej .del-* "
    "*.a *.olb *.o *.obj *.so *.exe *.Z *.elc *.ln core"
).split()

CVSIGNORE_FILE_NAME = ".cvsignore"


class CvsIgnoreRules(BaseIgnoreRules):
    """Ignore rules the way the ``cvs`` client applies them.

    CVS ignore lists are whitespace-separated shell globs matched against a file's
    name, never its full path. For a given directory the effective list is built
    from, in order:

    1. the built-in default list (unless ``use_defaults`` is False),
    2. any global ignore files loaded with ``load_rules`` or patterns added with
       ``add_rule``,
    3. the ``.cvsignore`` file in that directory.

    A ``!`` token anywhere clears everything accumulated before it.

    Per-directory lists are read once and cached.

    Attributes:
        root (Path): Working-copy root that relative paths are resolved against.
        use_defaults (bool): Whether the built-in CVS list is active.

    Example:
        >>> rules = CvsIgnoreRules("/nonexistent/root")
        >>> rules.exclude("src/module.o")
        True
        >>> rules.exclude("src/module.c")
        False
    """

    def __init__(
        self,
        root: PathType,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
        use_defaults: bool = True,
    ) -> None:
        self.root = Path(os.path.abspath(root))
        self.use_defaults = use_defaults
        self._global_tokens: List[str] = list(CVS_DEFAULT_IGNORES) if use_defaults else []
        self._specs: Dict[Path, PathSpec] = {}

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        stripped = path.rstrip("/")
        if not stripped:
            return False
        directory, _, name = stripped.rpartition("/")
        return self._spec_for(self.root / directory).match_file(name)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the tokens of one or more global ignore files.

        Raises:
            FileNotFoundError: If any file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")
            self._global_tokens = _accumulate(self._global_tokens, path.read_text().split())
        self._specs.clear()

    def add_rule(self, rule: str) -> None:
        self._global_tokens = _accumulate(self._global_tokens, rule.split())
        self._specs.clear()

    def _spec_for(self, directory: Path) -> PathSpec:
        spec = self._specs.get(directory)
        if spec is None:
            tokens = list(self._global_tokens)
            cvsignore = directory / CVSIGNORE_FILE_NAME
            if cvsignore.is_file():
                tokens = _accumulate(tokens, cvsignore.read_text().split())
            spec = PathSpec.from_lines("gitwildmatch", [_to_wildmatch(token) for token in tokens])
            self._specs[directory] = spec
        return spec


def _accumulate(tokens: List[str], new_tokens: List[str]) -> List[str]:
    result = list(tokens)
    for token in new_tokens:
        if token == "!":
            result = []
        else:
            result.append(token)
    return result


def _to_wildmatch(token: str) -> str:
    if token.startswith(("#", "!")):
        return "\\" + token
    return token
