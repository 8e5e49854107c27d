"""Back-to-top button visibility and action."""

from __future__ import annotations

from typing import Any

from portfolio.tui.constants import BACK_TO_TOP_THRESHOLD, VISIBLE_CLASS


class BackToTopController:
    """Show ``button`` once ``viewport`` is scrolled past the threshold.

    Args:
        button: The back-to-top control
        viewport: Scrollable container to watch and scroll
        threshold: Rows scrolled before the button appears
        animate: Animate the scroll home (off under reduced motion)
    """

    def __init__(self, button, viewport, *, threshold: int = BACK_TO_TOP_THRESHOLD, animate: bool = True) -> None:
        self._button = button
        self._viewport = viewport
        self.threshold = threshold
        self.animate = animate

    def start(self) -> None:
        self._viewport.watch(self._viewport, "scroll_y", self.update, init=True)

    def update(self, scroll_y: Any) -> None:
        self._button.set_class(scroll_y > self.threshold, VISIBLE_CLASS)

    def scroll_to_top(self) -> None:
        self._viewport.scroll_home(animate=self.animate)
