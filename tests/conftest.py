"""
Pytest configuration and shared fixtures.
"""

import pytest
from typer.testing import CliRunner


FASTA_TWO_DNA = ">t1\nACGT\n>t2\nACGA\n"

# dna and rna by the T/U tie-break, so the alignment is invalid
FASTA_DNA_RNA = ">t1\nACGT\n>t2\nACGG\n"

STRICT_PHYLIP = (
    "3 12\n"
    "Human     ACGTAC GTACGT\n"
    "Chimp     ACGTAC GTACGA\n"
    "Gorilla   ACGTAC GTACGG\n"
)

RELAXED_PHYLIP = (
    " 2 20 s\n"
    "taxon_number_one  ACGTACGTACGTACGTACGT\n"
    "taxon_number_two  ACGTACGTACGTACGTACGA\n"
)

MORPHOLOGY_PHYLIP = (
    "2 4\n"
    "Species_A 0101\n"
    "Species_B 0102\n"
)


@pytest.fixture
def write_alignment(tmp_path):
    """Write text to a file in tmp_path and return its path."""
    def _write(content, name="alignment.txt"):
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write


@pytest.fixture
def fasta_file(write_alignment):
    """Two-record DNA FASTA file."""
    return write_alignment(FASTA_TWO_DNA, "two_dna.fasta")


@pytest.fixture
def fasta_dna_rna_file(write_alignment):
    """FASTA file whose second record has neither T nor U."""
    return write_alignment(FASTA_DNA_RNA, "dna_rna.fasta")


@pytest.fixture
def strict_phylip_file(write_alignment):
    """Strict PHYLIP file with 10-column taxon labels."""
    return write_alignment(STRICT_PHYLIP, "strict.phy")


@pytest.fixture
def relaxed_phylip_file(write_alignment):
    """Relaxed PHYLIP file with taxon labels longer than 10 columns."""
    return write_alignment(RELAXED_PHYLIP, "relaxed.phy")


@pytest.fixture
def morphology_file(write_alignment):
    """PHYLIP file mixing binary and multistate characters."""
    return write_alignment(MORPHOLOGY_PHYLIP, "morphology.phy")


@pytest.fixture
def cli_runner():
    """CLI test runner for Typer apps."""
    return CliRunner()
