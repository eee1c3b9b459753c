"""Command-line interface for Collection Quiz."""
