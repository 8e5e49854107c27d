"""Bundled portfolio content."""
