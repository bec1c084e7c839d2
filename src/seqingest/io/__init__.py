"""
Input modules for sequence alignments.

- **Data model**: :class:`Alignment`, :class:`Sequence` and the
  :class:`FileFormat` / :class:`DataType` enums
- **Parsing**: format detection and line-by-line assembly of FASTA and
  PHYLIP (strict or relaxed) files
"""

from seqingest.io.sequences import Alignment, DataType, FileFormat, Sequence
from seqingest.io.parser import (
    AlignmentParser,
    parse_alignment,
    parse_lines,
    read_alignment,
)

__all__ = [
    "Alignment",
    "DataType",
    "FileFormat",
    "Sequence",
    "AlignmentParser",
    "parse_alignment",
    "parse_lines",
    "read_alignment",
]
