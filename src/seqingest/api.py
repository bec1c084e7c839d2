"""
High-level API for reading alignment files.

Single files are parsed with :func:`read_alignment` (blocking) or
:func:`parse_alignment` (awaitable). :func:`parse_alignments` parses
several files concurrently, each as an independent run.
"""

import asyncio
from pathlib import Path
from typing import Iterable, List

from .io.parser import parse_alignment, read_alignment
from .io.sequences import Alignment

__all__ = ["parse_alignment", "parse_alignments", "read_alignment"]


async def parse_alignments(
    filepaths: Iterable[Path | str], encoding: str = "utf-8"
) -> List[Alignment]:
    """
    Parse several alignment files concurrently.

    Parameters
    ----------
    filepaths : iterable of Path or str
        Files to parse
    encoding : str
        Text encoding shared by all files

    Returns
    -------
    list of Alignment
        Alignments in the same order as ``filepaths``

    Raises
    ------
    AlignmentParseError
        The first failure among the files

    Examples
    --------
    >>> import asyncio
    >>> alignments = asyncio.run(parse_alignments(["gene1.fasta", "morph.phy"]))
    >>> [aln.data_type.value for aln in alignments]
    ['dna', 'binary']
    """
    tasks = [parse_alignment(path, encoding=encoding) for path in filepaths]
    return list(await asyncio.gather(*tasks))
