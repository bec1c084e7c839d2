"""Command-line interface for seqingest."""
