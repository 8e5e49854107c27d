"""Project card filtering.

Whether a card is shown depends only on the active filter and the card's
declared categories. Shown cards are displayed first and faded in after the
next refresh; hidden cards fade out and leave the layout after HIDE_DELAY.

Each card has at most one pending hide. A newer filter change cancels it,
so a card hidden and re-shown in quick succession is never removed from
layout by the stale timer.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from portfolio.tui.constants import (
    ACTIVE_CLASS,
    DEFAULT_CATEGORY,
    FILTER_ALL,
    HIDDEN_OFFSET,
    HIDE_DELAY,
    SHOWN_OFFSET,
)

logger = logging.getLogger(__name__)


def split_categories(raw: str | None) -> list[str]:
    """Split a comma-separated category declaration, keeping order.

    A missing declaration means the single category "other".
    """
    if raw is None:
        return [DEFAULT_CATEGORY]
    return [token.strip() for token in raw.split(",") if token.strip()]


def parse_categories(raw: str | None) -> frozenset[str]:
    return frozenset(split_categories(raw))


def card_matches(active: str, categories: Iterable[str]) -> bool:
    return active == FILTER_ALL or active in categories


class FilterController:
    """Active filter for one group of filter buttons and project cards.

    Args:
        buttons: Filter controls, each with a ``token``
        cards: Project cards, each with a raw ``categories`` declaration
        hide_delay: Seconds between fade-out and removal from layout
    """

    def __init__(self, buttons: Sequence, cards: Sequence, *, hide_delay: float = HIDE_DELAY) -> None:
        self._buttons = list(buttons)
        self._cards = list(cards)
        self.hide_delay = hide_delay
        self.active_filter = FILTER_ALL
        self._matched: dict = {card: True for card in self._cards}
        self._pending_hides: dict = {}

    @property
    def enabled(self) -> bool:
        """Filtering needs at least one button and one card."""
        return bool(self._buttons and self._cards)

    def is_matched(self, card) -> bool:
        return self._matched.get(card, False)

    def apply_filter(self, token: str) -> None:
        """Make ``token`` the active filter and show or hide every card."""
        if not self.enabled:
            return

        self.active_filter = token
        for button in self._buttons:
            button.set_class(button.token == token, ACTIVE_CLASS)

        shown = 0
        for card in self._cards:
            self._cancel_pending_hide(card)
            matched = card_matches(token, parse_categories(card.categories))
            self._matched[card] = matched
            if matched:
                shown += 1
                self._show(card)
            else:
                self._hide(card)

        logger.debug("Filter %r shows %d of %d cards", token, shown, len(self._cards))

    def _show(self, card) -> None:
        card.display = True
        card.call_after_refresh(self._settle_shown, card)

    def _settle_shown(self, card) -> None:
        if not self._matched.get(card):
            return
        # Drop the fade-out override so the reveal state decides opacity
        card.styles.clear_rule("opacity")
        card.styles.offset = SHOWN_OFFSET

    def _hide(self, card) -> None:
        card.styles.opacity = 0.0
        card.styles.offset = HIDDEN_OFFSET
        self._pending_hides[card] = card.set_timer(
            self.hide_delay, lambda: self._remove_from_layout(card)
        )

    def _remove_from_layout(self, card) -> None:
        self._pending_hides.pop(card, None)
        if not self._matched.get(card):
            card.display = False

    def _cancel_pending_hide(self, card) -> None:
        timer = self._pending_hides.pop(card, None)
        if timer is not None:
            timer.stop()
