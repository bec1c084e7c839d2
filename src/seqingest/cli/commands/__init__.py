"""Command implementations for the seqingest CLI."""
