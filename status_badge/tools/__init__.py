"""Command-line tools for status badges."""
