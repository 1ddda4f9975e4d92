"""Command-line interface for midcar."""
