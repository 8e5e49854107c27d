"""Portfolio test suite.

- tui/: validation, form, disclosure, filter, reveal and back-to-top behaviour,
  plus app-level pilot tests
- assets/: image optimization and JPEG dimension probing
- test_logging_config.py: logging setup and formatters
"""
