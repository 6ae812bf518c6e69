"""Command-line interface for xstime."""
