"""Command-line interface for agpversion."""
