"""
Data type inference for parsed alignments.

Each sequence is classified from its characters alone, then the
per-sequence types are reduced to a single alignment-level type.
"""

import re
from typing import Iterable, Optional

from ..io.sequences import Alignment, DataType


PROTEIN_PATTERN = re.compile(r"[EFIJLOPQZX*]", re.IGNORECASE)
NUCLEOTIDE_PATTERN = re.compile(r"[ACG]", re.IGNORECASE)
BINARY_PATTERN = re.compile(r"[01]")
MULTISTATE_PATTERN = re.compile(r"2")

# {0,1} is a subset of {0,1,2}, so these may be mixed within one alignment
_BINARY_OR_MULTISTATE = (DataType.BINARY, DataType.MULTISTATE)


def classify_sequence(code: str) -> Optional[DataType]:
    """
    Infer the data type of a single sequence.

    Parameters
    ----------
    code : str
        Sequence characters

    Returns
    -------
    DataType or None
        ``None`` if the code contains no recognised symbol class

    Examples
    --------
    >>> classify_sequence("ACGT")
    <DataType.DNA: 'dna'>
    >>> classify_sequence("ACG")
    <DataType.RNA: 'rna'>
    >>> classify_sequence("ACGT0")
    <DataType.MIXED: 'mixed'>
    """
    data_type = None
    if PROTEIN_PATTERN.search(code):
        data_type = DataType.PROTEIN
    elif NUCLEOTIDE_PATTERN.search(code):
        upper = code.upper()
        # Ties (including no T and no U) resolve to RNA
        if upper.count("T") > upper.count("U"):
            data_type = DataType.DNA
        else:
            data_type = DataType.RNA

    is_binary = BINARY_PATTERN.search(code) is not None
    is_multistate = MULTISTATE_PATTERN.search(code) is not None

    if data_type is None:
        if is_multistate:
            data_type = DataType.MULTISTATE
        elif is_binary:
            data_type = DataType.BINARY
    elif is_binary or is_multistate:
        data_type = DataType.MIXED

    return data_type


def reduce_data_types(data_types: Iterable[Optional[DataType]]) -> Optional[DataType]:
    """
    Reduce per-sequence data types to one alignment data type.

    Identical types reduce to that type. A mix of binary and multistate
    reduces to multistate. Any other disagreement is invalid.
    """
    data_types = list(data_types)
    if not data_types:
        return None

    candidate = data_types[0]
    if all(data_type == candidate for data_type in data_types):
        return candidate
    if all(data_type in _BINARY_OR_MULTISTATE for data_type in data_types):
        return DataType.MULTISTATE
    return DataType.INVALID


def typecheck_alignment(alignment: Alignment) -> Alignment:
    """
    Assign data types to every sequence and to the alignment.

    The alignment is modified in place and returned.

    Parameters
    ----------
    alignment : Alignment
        Fully assembled alignment

    Returns
    -------
    Alignment
        The same alignment with ``typechecking_complete`` set
    """
    for sequence in alignment.sequences:
        sequence.data_type = classify_sequence(sequence.code)

    alignment.data_type = reduce_data_types(
        sequence.data_type for sequence in alignment.sequences
    )
    alignment.typechecking_complete = True
    return alignment
