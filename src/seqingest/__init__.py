"""
seqingest: streaming ingestion of phylogenetic sequence alignments.

Reads FASTA and PHYLIP (strict or relaxed, sequential or interleaved)
alignment files, detecting the format from the file itself, and infers
the data type of every sequence and of the alignment as a whole.

Quick Start
-----------
>>> from seqingest import read_alignment
>>> aln = read_alignment("gene1.fasta")
>>> print(aln.summary())

Parse without blocking an event loop:

>>> import asyncio
>>> from seqingest import parse_alignment
>>> aln = asyncio.run(parse_alignment("gene1.phy"))
>>> aln.data_type
<DataType.DNA: 'dna'>
"""

import logging

__version__ = "0.1.0"

# Data model and parsing
from .io.sequences import Alignment, DataType, FileFormat, Sequence
from .io.parser import AlignmentParser, parse_lines

# High-level API
from .api import parse_alignment, parse_alignments, read_alignment

# Type inference
from .analysis.typecheck import classify_sequence, typecheck_alignment

# Errors
from .exceptions import AlignmentParseError, LineParseError, NoSequencesParsed

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Simple API - Start here!
    "read_alignment",
    "parse_alignment",
    "parse_alignments",

    # Data model
    "Alignment",
    "Sequence",
    "DataType",
    "FileFormat",

    # Lower level
    "AlignmentParser",
    "parse_lines",
    "classify_sequence",
    "typecheck_alignment",

    # Errors
    "AlignmentParseError",
    "LineParseError",
    "NoSequencesParsed",

    # Version
    "__version__",
]
