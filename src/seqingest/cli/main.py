"""Main CLI application for seqingest."""

import logging
import sys
import typer
from pathlib import Path
from typing import List, Optional
from enum import Enum

from .. import __version__

app = typer.Typer(
    name="seqingest",
    help="Detect, parse and type-check FASTA and PHYLIP alignments",
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output format."""
    TEXT = "text"
    JSON = "json"
    TSV = "tsv"


def configure_logging(verbose: bool, quiet: bool) -> None:
    """Send library log records to stderr at the requested verbosity."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("seqingest").setLevel(level)


def _version_callback(value: bool):
    if value:
        print(f"seqingest {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """Detect, parse and type-check FASTA and PHYLIP alignments."""


@app.command()
def inspect(
    files: List[Path] = typer.Argument(
        ...,
        help="Alignment files (FASTA or PHYLIP)",
        exists=True,
        file_okay=True,
        dir_okay=False,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output", "-o",
        help="Output file (default: stdout)",
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        help="Output format",
    ),
    sequences: bool = typer.Option(
        False,
        "--sequences",
        help="Also report every taxon and its data type",
    ),
    encoding: str = typer.Option(
        "utf-8",
        "--encoding",
        help="Text encoding of the alignment files",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Show parser diagnostics",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet", "-q",
        help="Minimal output",
    ),
):
    """
    Parse alignment files and report format, size and data type.

    Files are parsed concurrently.

    Example:
        seqingest inspect gene1.fasta gene2.phy
        seqingest inspect gene1.fasta --format json --sequences
    """
    from .commands.inspect import run_inspect

    configure_logging(verbose, quiet)
    run_inspect(
        files=files,
        output=output,
        format=format.value,
        sequences=sequences,
        encoding=encoding,
        quiet=quiet,
    )


@app.command()
def classify(
    code: str = typer.Argument(..., help="Sequence characters"),
):
    """
    Print the inferred data type of a single sequence.

    Example:
        seqingest classify ACGU
    """
    from ..analysis.typecheck import classify_sequence

    data_type = classify_sequence(code)
    print(data_type.value if data_type else "undefined")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
