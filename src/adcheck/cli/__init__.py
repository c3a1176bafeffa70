"""Command-line interface for adcheck."""
