from typing import Optional, Sequence


class TreeAssemblyError(RuntimeError):
    """
    Exception raised when a non-empty candidate list assembles into a forest without roots.

    Every candidate either has its parent among the candidates or is a root, so an empty
    root set can only come from a defect in parent linking. It is never a user error.

    Attributes:
        candidate_paths (list[str]): Paths of the candidates that were being assembled.

    Example:
        >>> error = TreeAssemblyError(["/proj/a", "/proj/a/b"])
        >>> str(error)
        'No roots assembled from 2 candidates'
    """

    def __init__(self, candidate_paths: Sequence[str]) -> None:
        self.candidate_paths = list(candidate_paths)
        super().__init__(f"No roots assembled from {len(self.candidate_paths)} candidates")


class EntriesFormatError(ValueError):
    """
    Exception raised when a line of a CVS ``Entries`` file cannot be parsed.

    Attributes:
        line (str): The offending line.
        source (Optional[str]): The file the line was read from, if known.

    Example:
        >>> error = EntriesFormatError("garbage")
        >>> str(error)
        "Malformed Entries line: 'garbage'"
    """

    def __init__(self, line: str, source: Optional[str] = None) -> None:
        self.line = line
        self.source = source
        message = f"Malformed Entries line: {line!r}"
        if source is not None:
            message += f" in {source}"
        super().__init__(message)
