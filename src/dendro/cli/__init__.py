"""Command-line interface for dendro."""
