"""Command-line interface for Healthgrade."""
