"""Accessibility attributes for widgets.

Terminal widgets have no ARIA layer, so widgets that take part in form
validation or disclosure carry their ARIA-style state here. Controllers keep
it in step with the visual classes; screen-reader bridges and tests read it.
"""

from __future__ import annotations


class AccessibleMixin:
    """Mixin adding a ``role`` and ``aria-*`` attribute storage to a widget."""

    role: str | None = None

    @property
    def aria(self) -> dict[str, str]:
        """Current aria attributes, keyed without the ``aria-`` prefix."""
        try:
            return self._aria_attributes
        except AttributeError:
            self._aria_attributes: dict[str, str] = {}
            return self._aria_attributes

    def set_aria(self, name: str, value: str) -> None:
        self.aria[name] = value

    def get_aria(self, name: str) -> str | None:
        return self.aria.get(name)

    def remove_aria(self, name: str) -> None:
        self.aria.pop(name, None)

    def has_aria(self, name: str) -> bool:
        return name in self.aria
