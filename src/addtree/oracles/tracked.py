"""Tracked-status oracles: does the version-control system already know a path?"""

import logging
from pathlib import Path
from typing import Dict, Iterable, NamedTuple, Optional

from addtree.exceptions import EntriesFormatError
from addtree.path_entry.path_entry import PathEntry

logger = logging.getLogger(__name__)

ENTRIES_FILE_NAME = "Entries"
ENTRIES_LOG_FILE_NAME = "Entries.Log"


class KnownPathsTracker:
    """Tracked-status oracle over a fixed set of paths.

    Example:
        >>> from addtree.path_entry import MemoryPathEntry
        >>> root = MemoryPathEntry.from_paths(["/proj/a.txt", "/proj/b.txt"])
        >>> tracker = KnownPathsTracker(["/proj", "/proj/a.txt"])
        >>> tracker.is_tracked(root.find("/proj/a.txt")), tracker.is_tracked(root.find("/proj/b.txt"))
        (True, False)
    """

    def __init__(self, paths: Iterable[str]) -> None:
        self.paths = frozenset(paths)

    def is_tracked(self, entry: PathEntry) -> bool:
        return entry.path in self.paths

    def __call__(self, entry: PathEntry) -> bool:
        return self.is_tracked(entry)


class EntriesLine(NamedTuple):
    """One parsed line of a CVS ``Entries`` file."""

    name: str
    is_dir: bool
    revision: str


def parse_entries_line(line: str) -> Optional[EntriesLine]:
    """Parse a single line of a CVS ``Entries`` file.

    File lines look like ``/name/revision/timestamp/options/tagdate`` and directory
    lines like ``D/name////``. A lone ``D`` (all subdirectories are listed) and blank
    lines carry no entry and yield None.

    Raises:
        EntriesFormatError: If the line is neither form.

    Example:
        >>> parse_entries_line("/main.c/1.4/Mon Jan  1 00:00:00 2001//")
        EntriesLine(name='main.c', is_dir=False, revision='1.4')
        >>> parse_entries_line("D/lib////")
        EntriesLine(name='lib', is_dir=True, revision='')
        >>> parse_entries_line("D") is None
        True
    """
    line = line.rstrip("\r\n")
    if not line or line == "D":
        return None
    is_dir = line.startswith("D/")
    body = line[1:] if is_dir else line
    fields = body.split("/")
    if not body.startswith("/") or len(fields) < 6 or not fields[1]:
        raise EntriesFormatError(line)
    return EntriesLine(name=fields[1], is_dir=is_dir, revision=fields[2])


class CvsEntriesTracker:
    """Tracked-status oracle that reads CVS's per-directory bookkeeping.

    A path is tracked when the ``Entries`` file of its parent directory lists it,
    after replaying the pending additions (``A``) and removals (``R``) recorded in
    ``Entries.Log``. A directory is also tracked when it has its own admin directory
    with an ``Entries`` file, which covers checked-out directories whose parent is
    outside the working copy. Files scheduled for removal are still tracked.

    Entries files are parsed once per directory and cached for the lifetime of the
    tracker. Malformed lines are skipped.

    Attributes:
        admin_dir (str): Name of the CVS admin directory.
    """

    def __init__(self, admin_dir: str = "CVS") -> None:
        self.admin_dir = admin_dir
        self._entries: Dict[Path, Dict[str, EntriesLine]] = {}

    def is_tracked(self, entry: PathEntry) -> bool:
        if entry.is_dir() and (Path(entry.path) / self.admin_dir / ENTRIES_FILE_NAME).is_file():
            return True
        parent = entry.parent()
        if parent is None:
            return False
        return entry.name in self.entries_for(Path(parent.path))

    def __call__(self, entry: PathEntry) -> bool:
        return self.is_tracked(entry)

    def entries_for(self, directory: Path) -> Dict[str, EntriesLine]:
        """Return the entries CVS records for ``directory``, keyed by name."""
        entries = self._entries.get(directory)
        if entries is None:
            entries = self._read_entries(directory / self.admin_dir)
            self._entries[directory] = entries
        return entries

    def _read_entries(self, admin_path: Path) -> Dict[str, EntriesLine]:
        entries: Dict[str, EntriesLine] = {}
        entries_file = admin_path / ENTRIES_FILE_NAME
        if not entries_file.is_file():
            return entries

        for raw_line in entries_file.read_text().splitlines():
            parsed = self._parse(raw_line, entries_file)
            if parsed is not None:
                entries[parsed.name] = parsed

        log_file = admin_path / ENTRIES_LOG_FILE_NAME
        if log_file.is_file():
            for raw_line in log_file.read_text().splitlines():
                command, _, rest = raw_line.partition(" ")
                if command not in ("A", "R"):
                    logger.debug("Skipping Entries.Log line %r in %s", raw_line, log_file)
                    continue
                parsed = self._parse(rest, log_file)
                if parsed is None:
                    continue
                if command == "A":
                    entries[parsed.name] = parsed
                else:
                    entries.pop(parsed.name, None)
        return entries

    @staticmethod
    def _parse(line: str, source: Path) -> Optional[EntriesLine]:
        try:
            return parse_entries_line(line)
        except EntriesFormatError as e:
            logger.debug("%s (%s)", e, source)
            return None
