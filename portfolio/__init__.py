"""Terminal portfolio.

A single-page personal portfolio rendered with Textual: navigation menu,
filterable project cards, scroll-reveal sections and an accessible contact
form, plus image tooling for the portfolio's assets.

Usage:
    python -m portfolio.tui                  # Bundled content
    python -m portfolio.tui my_content.yaml  # Custom content
"""

__version__ = "1.0.0"
