"""Navigation menu disclosure.

The toggle's ``aria-expanded`` flag and the menu's ``is-open`` class always
change together, in one call, so no handler ever sees them disagree.
"""

from __future__ import annotations

from typing import Sequence

from portfolio.tui.constants import OPEN_CLASS


class DisclosureController:
    """Collapsed/expanded state of one navigation menu.

    Args:
        toggle: Control that opens and closes the menu
        menu: Container shown while expanded
        links: Focusable items inside the menu, in order
    """

    def __init__(self, toggle, menu, links: Sequence = ()) -> None:
        self._toggle = toggle
        self._menu = menu
        self._links = list(links)
        self.expanded = False
        self._apply(False)

    def toggle(self) -> None:
        """Flip the menu; opening it moves focus to the first link."""
        if self.expanded:
            self._apply(False)
        else:
            self._apply(True)
            if self._links:
                self._links[0].focus()

    def escape(self) -> bool:
        """Close an open menu and return focus to the toggle.

        Returns:
            True if the menu was open; False (and nothing changes) otherwise
        """
        if not self.expanded:
            return False
        self._apply(False)
        self._toggle.focus()
        return True

    def _apply(self, expanded: bool) -> None:
        self.expanded = expanded
        self._toggle.set_aria("expanded", "true" if expanded else "false")
        self._menu.set_class(expanded, OPEN_CLASS)
