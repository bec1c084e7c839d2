"""
Streaming FASTA/PHYLIP alignment parser.

The first non-empty line decides the file format once and for all:
a PHYLIP header (``<n_sequences> <length> [i|s]``) selects PHYLIP,
anything else selects FASTA. Lines are then routed one at a time to the
matching line handler, and the assembled alignment is type-checked when
the stream ends.

Strict PHYLIP uses a fixed 10-column taxon label; relaxed PHYLIP uses a
whitespace-delimited label. The dialect is decided on the first data
line: if the text after column 10 holds more characters than the header
allows, the real label must be longer than 10 columns, so the file is
parsed as relaxed PHYLIP.
"""

import logging
import re
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional

import aiofiles

from ..analysis.typecheck import typecheck_alignment
from ..exceptions import LineParseError, NoSequencesParsed
from .sequences import Alignment, FileFormat, Sequence

logger = logging.getLogger(__name__)


FASTA_RECORD_MARKER = ">"
STRICT_TAXON_WIDTH = 10

# e.g. "  3  78  i" (optional i/s for interleaved/sequential)
PHYLIP_HEADER_PATTERN = re.compile(r"^\s*(\d+)\s+(\d+)(?:\s+([is]))?\s*$")
STRICT_PHYLIP_LINE_PATTERN = re.compile(r"^(.{%d})(.+)$" % STRICT_TAXON_WIDTH)
RELAXED_PHYLIP_LINE_PATTERN = re.compile(r"^(\w+)\s+(.+)$")
WHITESPACE_PATTERN = re.compile(r"\s")


class DetectorState(Enum):
    """Format detection state. Leaves UNDETECTED exactly once."""
    UNDETECTED = "undetected"
    FASTA = "fasta"
    PHYLIP = "phylip"


class PhylipDialect(Enum):
    """
    PHYLIP line grammar in use.

    The value of a confirmed dialect is the line grammar it parses with.
    """
    UNDECIDED = None
    STRICT_CONFIRMED = STRICT_PHYLIP_LINE_PATTERN
    RELAXED_CONFIRMED = RELAXED_PHYLIP_LINE_PATTERN

    @property
    def grammar(self) -> Optional[re.Pattern]:
        return self.value


def _strip_whitespace(text: str) -> str:
    return WHITESPACE_PATTERN.sub("", text)


class AlignmentParser:
    """
    Line-by-line alignment assembler for a single file.

    Feed every raw line of the file to :meth:`feed`, then call
    :meth:`finish` once to get the type-checked alignment. An instance
    parses exactly one file.

    Parameters
    ----------
    path : Path or str
        Path of the file being parsed, used in messages and errors

    Examples
    --------
    >>> parser = AlignmentParser("inline.fasta")
    >>> for line in [">t1", "ACGT", ">t2", "ACGG"]:
    ...     parser.feed(line)
    >>> parser.finish().num_sequences
    2
    """

    def __init__(self, path: Path | str):
        self.path = str(path)
        self.alignment = Alignment(file_path=self.path)
        self.state = DetectorState.UNDETECTED
        self.dialect = PhylipDialect.UNDECIDED

        # Non-empty lines seen, used in diagnostics
        self.line_count = 0

        # FASTA accumulator
        self.fasta_started = False
        self.taxon = ""
        self.code: List[str] = []

    def feed(self, line: str) -> None:
        """
        Consume one raw line of the file.

        Raises
        ------
        LineParseError
            If handling the line raised an exception
        """
        line = line.rstrip("\r\n")
        if len(line) == 0:
            logger.warning(
                "Empty line after line %d in '%s'", self.line_count, self.path
            )
            return

        self.line_count += 1
        try:
            if self.state is DetectorState.UNDETECTED:
                self._detect_format(line)
            elif self.state is DetectorState.PHYLIP:
                self._parse_phylip_line(line)
            else:
                self._parse_fasta_line(line)
        except Exception as e:
            raise LineParseError(self.path, e, line_number=self.line_count) from e

    def _detect_format(self, line: str) -> None:
        match = PHYLIP_HEADER_PATTERN.match(line)
        if match is None:
            self.state = DetectorState.FASTA
            self.alignment.file_format = FileFormat.FASTA
            self._parse_fasta_line(line)
            return

        num_sequences, length, layout = match.groups()
        self.state = DetectorState.PHYLIP
        self.alignment.file_format = FileFormat.PHYLIP
        self.alignment.num_sequences = int(num_sequences)
        self.alignment.length = int(length)
        self.alignment.is_interleaved = layout == "i"

    def _decide_dialect(self, line: str) -> None:
        strict_count = len(_strip_whitespace(line[STRICT_TAXON_WIDTH:]))
        if strict_count > self.alignment.length:
            self.dialect = PhylipDialect.RELAXED_CONFIRMED
            logger.info("Parsing relaxed phylip format in '%s'", self.path)
        else:
            self.dialect = PhylipDialect.STRICT_CONFIRMED

    def _parse_phylip_line(self, line: str) -> bool:
        """Append one PHYLIP sequence line. Returns False if it did not match."""
        if self.dialect is PhylipDialect.UNDECIDED:
            self._decide_dialect(line)

        match = self.dialect.grammar.match(line)
        if match is None:
            logger.debug(
                "Line %d in '%s' does not match %s grammar",
                self.line_count, self.path, self.dialect.name,
            )
            return False

        taxon, code = match.groups()
        self.alignment.sequences.append(
            Sequence(taxon=taxon.strip(), code=_strip_whitespace(code))
        )
        return True

    def _parse_fasta_line(self, line: str) -> None:
        if not self.fasta_started:
            if not line.startswith(FASTA_RECORD_MARKER):
                logger.warning(
                    "Ignoring line %d in '%s' before first '%s' record",
                    self.line_count, self.path, FASTA_RECORD_MARKER,
                )
                return
            self.fasta_started = True

        if line.startswith(FASTA_RECORD_MARKER):
            self.flush()
            self.taxon = line[len(FASTA_RECORD_MARKER):].strip()
        else:
            self.code.append(_strip_whitespace(line))

    def flush(self) -> None:
        """Append the FASTA record in progress, if it has any code."""
        if not self.code:
            return
        self.alignment.sequences.append(
            Sequence(taxon=self.taxon, code="".join(self.code))
        )
        self.code = []

    def finish(self) -> Alignment:
        """
        Complete the alignment after the last line and type-check it.

        Returns
        -------
        Alignment
            The finished alignment

        Raises
        ------
        NoSequencesParsed
            If no sequence was assembled
        """
        alignment = self.alignment
        if self.state is DetectorState.FASTA:
            self.flush()

        if not alignment.sequences:
            raise NoSequencesParsed(self.path)

        if alignment.file_format is FileFormat.FASTA:
            alignment.num_sequences = len(alignment.sequences)
            alignment.length = len(alignment.sequences[0].code)

        typecheck_alignment(alignment)
        logger.debug(
            "Alignment with first two sequences: %r %s",
            alignment, alignment.sequences[:2],
        )
        return alignment


def parse_lines(lines: Iterable[str], path: Path | str = "<lines>") -> Alignment:
    """
    Parse an alignment from an iterable of lines.

    Parameters
    ----------
    lines : iterable of str
        Raw lines, with or without line terminators
    path : Path or str
        Name reported in messages and errors

    Returns
    -------
    Alignment
    """
    parser = AlignmentParser(path)
    for line in lines:
        parser.feed(line)
    return parser.finish()


def read_alignment(filepath: Path | str, encoding: str = "utf-8") -> Alignment:
    """
    Parse an alignment file, reading it line by line.

    Parameters
    ----------
    filepath : Path or str
        Path to a FASTA or PHYLIP file
    encoding : str
        Text encoding of the file

    Returns
    -------
    Alignment
        Type-checked alignment

    Raises
    ------
    NoSequencesParsed
        If no sequence could be parsed from the file
    LineParseError
        If the file could not be read or a line could not be handled
    """
    parser = AlignmentParser(filepath)
    try:
        with open(filepath, 'r', encoding=encoding) as f:
            for line in f:
                parser.feed(line)
    except (OSError, UnicodeDecodeError) as e:
        raise LineParseError(filepath, e) from e
    return parser.finish()


async def parse_alignment(filepath: Path | str, encoding: str = "utf-8") -> Alignment:
    """
    Parse an alignment file without blocking the event loop.

    Same contract as :func:`read_alignment`; the file is read
    asynchronously, one line at a time.

    Examples
    --------
    >>> import asyncio
    >>> aln = asyncio.run(parse_alignment("gene1.phy"))
    """
    parser = AlignmentParser(filepath)
    try:
        async with aiofiles.open(filepath, mode='r', encoding=encoding) as f:
            async for line in f:
                parser.feed(line)
    except (OSError, UnicodeDecodeError) as e:
        raise LineParseError(filepath, e) from e
    return parser.finish()
