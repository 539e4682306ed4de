"""Command line interface for busbook."""
