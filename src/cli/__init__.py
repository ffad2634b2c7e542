"""Command-line interface for drift-insights."""
