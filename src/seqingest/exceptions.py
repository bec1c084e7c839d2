"""
Errors raised while parsing alignment files.

Every error carries the path of the file being parsed. Soft conditions
such as empty lines are logged, not raised.
"""

from pathlib import Path
from typing import Optional


class AlignmentParseError(ValueError):
    """Base class for alignment parsing failures."""

    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = str(path)


class NoSequencesParsed(AlignmentParseError):
    """The file ended without a single sequence being assembled."""

    def __init__(self, path: Path | str):
        super().__init__(f"Couldn't parse any sequences from file {path}", path)


class LineParseError(AlignmentParseError):
    """
    Reading or handling a line failed.

    Attributes
    ----------
    path : str
        File being parsed
    cause : BaseException
        The underlying exception
    line_number : int or None
        1-based count of non-empty lines read when the failure happened,
        or None if the failure was not tied to a specific line (e.g. the
        file could not be opened)
    """

    def __init__(
        self,
        path: Path | str,
        cause: BaseException,
        line_number: Optional[int] = None,
    ):
        location = f" at line {line_number}" if line_number is not None else ""
        super().__init__(f"Failed to parse '{path}'{location}: {cause}", path)
        self.cause = cause
        self.line_number = line_number
