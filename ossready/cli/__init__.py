"""Command-line interface for ossready."""
