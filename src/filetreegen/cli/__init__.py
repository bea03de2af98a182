"""Command-line interface for filetreegen."""
