"""Textual TUI rendering a personal portfolio.

Usage:
    python -m portfolio.tui               # Bundled example content
    python -m portfolio.tui content.yaml  # Your own content file
"""

from __future__ import annotations

__all__ = [
    "PortfolioApp",
    "PortfolioContent",
]


def __getattr__(name: str):
    """Lazy import of TUI components."""
    if name == "PortfolioApp":
        from portfolio.tui.app import PortfolioApp
        return PortfolioApp
    if name == "PortfolioContent":
        from portfolio.tui.models.content import PortfolioContent
        return PortfolioContent
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
