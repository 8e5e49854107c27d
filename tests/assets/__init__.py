"""Image asset tooling tests."""
