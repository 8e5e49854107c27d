"""Scroll-reveal of portfolio sections.

Targets start hidden behind ``reveal-on-scroll`` and are latched visible
(``is-visible``) the first time enough of them scrolls into the viewport.
With reduced motion every target is visible from the start and nothing is
observed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Protocol, Sequence

from textual.geometry import Region

from portfolio.tui.constants import OBSERVED_CLASS, REVEAL_THRESHOLD, VISIBLE_CLASS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntersectionEntry:
    """One measurement of a target against the viewport."""

    target: Any
    ratio: float
    is_intersecting: bool


IntersectionCallback = Callable[[Sequence[IntersectionEntry]], None]


class Observer(Protocol):
    def observe(self, target: Any) -> None: ...

    def unobserve(self, target: Any) -> None: ...

    def disconnect(self) -> None: ...


ObserverFactory = Callable[[IntersectionCallback, float], Observer]


def intersection_ratio(target: Region, viewport: Region) -> float:
    """Fraction of ``target``'s area that lies inside ``viewport``."""
    if not target.area:
        return 0.0
    return target.intersection(viewport).area / target.area


class ViewportObserver:
    """Report when observed widgets cross a visibility threshold.

    Measures every observed target after it is observed, whenever the
    viewport scrolls and whenever its content size changes. Owners also
    connect ``schedule_check`` to the screen's layout refresh so targets
    moved by layout alone are measured. The callback receives entries only
    for targets at or above the threshold.

    Args:
        viewport: Scrollable container the targets live in
        callback: Receives entries for targets that are intersecting
        threshold: Minimum visible fraction, 0.0 to 1.0
    """

    def __init__(self, viewport, callback: IntersectionCallback, threshold: float = REVEAL_THRESHOLD) -> None:
        self._viewport = viewport
        self._callback = callback
        self.threshold = threshold
        self._targets: list = []
        self._connected = True
        viewport.watch(viewport, "scroll_y", self.schedule_check, init=False)
        viewport.watch(viewport, "virtual_size", self.schedule_check, init=False)

    @property
    def targets(self) -> list:
        return list(self._targets)

    def observe(self, target) -> None:
        if target not in self._targets:
            self._targets.append(target)
        self._viewport.call_after_refresh(self.check)

    def unobserve(self, target) -> None:
        if target in self._targets:
            self._targets.remove(target)

    def disconnect(self) -> None:
        self._targets.clear()
        self._connected = False

    def schedule_check(self, _value: Any = None) -> None:
        """Run ``check`` once the pending refresh has updated regions."""
        if not self._connected or not self._targets:
            return
        self._viewport.call_after_refresh(self.check)

    def check(self) -> None:
        """Measure all observed targets and notify for those intersecting."""
        if not self._connected or not self._targets:
            return
        viewport_region = self._viewport.region
        entries = []
        for target in self._targets:
            ratio = intersection_ratio(target.region, viewport_region)
            if ratio > 0 and ratio >= self.threshold:
                entries.append(IntersectionEntry(target, ratio, True))
        if entries:
            self._callback(entries)


class RevealController:
    """One-shot reveal of designated widgets.

    Args:
        targets: Widgets to reveal
        observer_factory: Builds the intersection observer from a callback
            and threshold
        reduced_motion: Reveal everything immediately and observe nothing
    """

    def __init__(
        self,
        targets: Iterable,
        observer_factory: ObserverFactory,
        *,
        reduced_motion: bool = False,
        threshold: float = REVEAL_THRESHOLD,
    ) -> None:
        self._targets = list(targets)
        self._observer_factory = observer_factory
        self.reduced_motion = reduced_motion
        self.threshold = threshold
        self._observer: Observer | None = None

    @property
    def observer(self) -> Observer | None:
        return self._observer

    def start(self) -> None:
        if self.reduced_motion:
            for target in self._targets:
                target.add_class(VISIBLE_CLASS)
            logger.debug("Reduced motion: revealed %d targets", len(self._targets))
            return

        if not self._targets:
            return

        self._observer = self._observer_factory(self._on_intersect, self.threshold)
        for target in self._targets:
            target.add_class(OBSERVED_CLASS)
            self._observer.observe(target)

    def _on_intersect(self, entries: Sequence[IntersectionEntry]) -> None:
        for entry in entries:
            if not entry.is_intersecting:
                continue
            entry.target.add_class(VISIBLE_CLASS)
            if self._observer is not None:
                self._observer.unobserve(entry.target)

    def is_revealed(self, target) -> bool:
        return target.has_class(VISIBLE_CLASS)
