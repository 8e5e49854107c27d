"""Navigation bar widgets."""

from __future__ import annotations

from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Button

from portfolio.tui.widgets.accessible import AccessibleMixin


class NavToggle(AccessibleMixin, Button):
    """Button that opens and closes the navigation menu.

    Enter and Space are bound here, so the key press activates the toggle
    and goes no further.
    """

    BINDINGS = [
        Binding("enter", "press", "Toggle menu", show=False),
        Binding("space", "press", "Toggle menu", show=False),
    ]

    def __init__(self, label: str = "☰ Menu", *, controls: str = "nav-menu", id: str | None = "nav-toggle") -> None:
        super().__init__(label, id=id, classes="nav-toggle")
        self.set_aria("controls", controls)
        self.set_aria("label", "Toggle navigation")
        self.set_aria("expanded", "false")


class NavLink(Button):
    """Menu entry that scrolls to a section."""

    def __init__(self, label: str, target: str) -> None:
        super().__init__(label, classes="nav-link", id=f"nav-{target}")
        self.target = target


class NavMenu(Vertical):
    """Container of NavLinks; only displayed while it has ``is-open``."""

    DEFAULT_CSS = """
    NavMenu {
        display: none;
        height: auto;
        width: 100%;
        background: $surface;
    }

    NavMenu.is-open {
        display: block;
    }

    NavMenu NavLink {
        width: 100%;
        border: none;
        height: 1;
        min-width: 0;
    }
    """

    def __init__(self, *children: NavLink, id: str | None = "nav-menu") -> None:
        super().__init__(*children, id=id, classes="nav-list")
