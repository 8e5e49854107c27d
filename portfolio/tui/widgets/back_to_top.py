"""Back-to-top button."""

from __future__ import annotations

from textual.widgets import Button

from portfolio.tui.widgets.accessible import AccessibleMixin


class BackToTop(AccessibleMixin, Button):
    """Floating button shown once the page is scrolled down."""

    DEFAULT_CSS = """
    BackToTop {
        display: none;
        dock: bottom;
        min-width: 5;
        width: 5;
        margin: 0 0 1 2;
    }

    BackToTop.is-visible {
        display: block;
    }
    """

    def __init__(self, *, id: str | None = "back-to-top") -> None:
        super().__init__("↑", id=id, classes="back-to-top")
        self.set_aria("label", "Back to top")
