"""Inspect command implementation."""

import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from seqingest.api import parse_alignments
from seqingest.exceptions import AlignmentParseError
from seqingest.io.sequences import Alignment


TSV_COLUMNS = ["file_path", "file_format", "num_sequences", "length", "data_type"]


def format_tsv(alignments: List[Alignment]) -> str:
    """One row per alignment."""
    rows = ["\t".join(TSV_COLUMNS)]
    for aln in alignments:
        record = aln.to_dict(include_sequences=False)
        rows.append("\t".join(
            "" if record[column] is None else str(record[column])
            for column in TSV_COLUMNS
        ))
    return "\n".join(rows)


def run_inspect(
    files: List[Path],
    output: Optional[Path],
    format: str,
    sequences: bool,
    encoding: str,
    quiet: bool,
):
    """Parse alignments and report them."""
    try:
        alignments = asyncio.run(parse_alignments(files, encoding=encoding))
    except AlignmentParseError as e:
        print(f"Error: Could not load alignment from {e.path}", file=sys.stderr)
        print(f"Details: {e}", file=sys.stderr)
        sys.exit(1)

    # Format output
    if format == "json":
        output_text = json.dumps(
            [aln.to_dict(include_sequences=sequences) for aln in alignments],
            indent=2,
        )
    elif format == "tsv":
        output_text = format_tsv(alignments)
    else:  # text
        output_text = "\n\n".join(
            aln.summary(show_sequences=sequences) for aln in alignments
        )

    # Write output
    if output:
        with open(output, 'w') as f:
            f.write(output_text + "\n")
        if not quiet:
            print(f"Results written to {output}", file=sys.stderr)
    else:
        print(output_text)
