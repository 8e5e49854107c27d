"""Command-line scripts for portfolio assets."""
