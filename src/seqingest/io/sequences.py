"""
Alignment data model.

An :class:`Alignment` is built incrementally by the parser in
:mod:`seqingest.io.parser`, then handed to the type classifier in
:mod:`seqingest.analysis.typecheck` which fills in ``data_type`` on every
sequence and on the alignment itself.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np


class FileFormat(str, Enum):
    """Text format an alignment was read from."""
    FASTA = "FASTA"
    PHYLIP = "PHYLIP"


class DataType(str, Enum):
    """
    Biological alphabet inferred from character content.

    A sequence whose code contains none of the recognised symbol classes
    has no data type; it is represented as ``None`` rather than a member.
    """
    DNA = "dna"
    RNA = "rna"
    PROTEIN = "protein"
    BINARY = "binary"
    MULTISTATE = "multistate"
    MIXED = "mixed"
    INVALID = "invalid"


# Labels used by partition files of downstream phylogenetics tools
PARTITION_TYPES = {
    DataType.DNA: "DNA",
    DataType.PROTEIN: "PROT",
    DataType.BINARY: "BIN",
    DataType.MULTISTATE: "MULTI",
}


@dataclass
class Sequence:
    """
    One taxon of an alignment.

    Attributes
    ----------
    taxon : str
        Identifier of the sequence
    code : str
        Sequence characters with all whitespace removed
    data_type : DataType or None
        Inferred alphabet, set by the type classifier
    """

    taxon: str
    code: str
    data_type: Optional[DataType] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "taxon": self.taxon,
            "code": self.code,
            "data_type": self.data_type.value if self.data_type else None,
        }


@dataclass
class Alignment:
    """
    Multiple sequence alignment parsed from a FASTA or PHYLIP file.

    Attributes
    ----------
    sequences : list[Sequence]
        Sequences in order of first appearance in the file
    file_format : FileFormat
        Detected input format
    num_sequences : int
        Number of sequences. For PHYLIP input this is the value declared
        in the header; for FASTA input it is the number of parsed records.
    length : int
        Number of alignment columns. For PHYLIP input this is the declared
        header value; for FASTA input it is the length of the first
        sequence (rectangularity is not checked).
    data_type : DataType or None
        Alignment-level alphabet, set by the type classifier
    typechecking_complete : bool
        True once the type classifier has run
    file_path : str or None
        Path the alignment was read from
    is_interleaved : bool
        True if a PHYLIP header carried the ``i`` flag. Recorded only;
        interleaved and sequential files are assembled the same way.

    Examples
    --------
    >>> aln = Alignment.from_file("gene1.fasta")
    >>> aln.num_sequences, aln.length
    (2, 4)
    >>> aln.data_type
    <DataType.DNA: 'dna'>
    """

    sequences: List[Sequence] = field(default_factory=list)
    file_format: FileFormat = FileFormat.FASTA
    num_sequences: int = 0
    length: int = 0
    data_type: Optional[DataType] = None
    typechecking_complete: bool = False
    file_path: Optional[str] = None
    is_interleaved: bool = False

    @classmethod
    def from_file(cls, filepath: Path | str, encoding: str = "utf-8") -> "Alignment":
        """
        Parse and type-check an alignment file, detecting its format.

        Parameters
        ----------
        filepath : Path or str
            Path to a FASTA or PHYLIP file
        encoding : str
            Text encoding of the file

        Returns
        -------
        Alignment
            Parsed alignment with ``typechecking_complete`` set

        Raises
        ------
        NoSequencesParsed
            If no sequence could be parsed from the file
        LineParseError
            If reading or handling a line failed
        """
        from .parser import read_alignment

        return read_alignment(filepath, encoding=encoding)

    @property
    def taxa(self) -> List[str]:
        """Taxon labels in file order."""
        return [seq.taxon for seq in self.sequences]

    @property
    def partition_type(self) -> Optional[str]:
        """Partition-file label for this alignment's data type."""
        if self.data_type is None:
            return None
        return PARTITION_TYPES.get(self.data_type, self.data_type.value)

    def to_matrix(self) -> np.ndarray:
        """
        Return the alignment as a character matrix.

        Returns
        -------
        ndarray, shape (n_sequences, n_columns)
            One single-character string per cell

        Raises
        ------
        ValueError
            If sequence codes differ in length
        """
        lengths = {len(seq.code) for seq in self.sequences}
        if len(lengths) > 1:
            raise ValueError(
                f"Sequences have different lengths: {sorted(lengths)}"
            )
        if not self.sequences:
            return np.empty((0, self.length), dtype="<U1")
        return np.array([list(seq.code) for seq in self.sequences], dtype="<U1")

    def to_dict(self, include_sequences: bool = True) -> Dict[str, Any]:
        """
        Convert the alignment to a JSON-serialisable dictionary.

        Parameters
        ----------
        include_sequences : bool, default=True
            Whether to include every sequence with its code

        Returns
        -------
        dict
        """
        result = {
            "file_path": self.file_path,
            "file_format": self.file_format.value,
            "num_sequences": self.num_sequences,
            "length": self.length,
            "data_type": self.data_type.value if self.data_type else None,
            "typechecking_complete": self.typechecking_complete,
            "is_interleaved": self.is_interleaved,
        }
        if include_sequences:
            result["sequences"] = [seq.to_dict() for seq in self.sequences]
        return result

    def to_json(self, filepath: Optional[Path | str] = None, indent: int = 2) -> str:
        """
        Serialise the alignment to JSON.

        Parameters
        ----------
        filepath : Path or str, optional
            If given, also write the JSON text to this file
        indent : int, default=2
            JSON indentation

        Returns
        -------
        str
            JSON text
        """
        json_str = json.dumps(self.to_dict(), indent=indent)
        if filepath:
            with open(filepath, 'w') as f:
                f.write(json_str)
        return json_str

    def summary(self, show_sequences: bool = False) -> str:
        """Human-readable summary of the alignment."""
        data_type = self.data_type.value if self.data_type else "undefined"
        lines = [
            f"File:      {self.file_path}",
            f"Format:    {self.file_format.value}"
            + (" (interleaved)" if self.is_interleaved else ""),
            f"Sequences: {self.num_sequences}",
            f"Length:    {self.length}",
            f"Data type: {data_type}",
        ]
        if show_sequences:
            width = max((len(taxon) for taxon in self.taxa), default=0)
            lines.append("")
            for seq in self.sequences:
                seq_type = seq.data_type.value if seq.data_type else "undefined"
                lines.append(f"  {seq.taxon:<{width}}  {seq_type}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        data_type = self.data_type.value if self.data_type else None
        return (
            f"Alignment(file_format='{self.file_format.value}', "
            f"num_sequences={self.num_sequences}, length={self.length}, "
            f"data_type={data_type!r})"
        )
