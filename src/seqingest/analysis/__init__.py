"""
Analysis of parsed alignments.

Currently provides data type inference for sequences and alignments.
"""

from .typecheck import classify_sequence, reduce_data_types, typecheck_alignment

__all__ = [
    "classify_sequence",
    "reduce_data_types",
    "typecheck_alignment",
]
