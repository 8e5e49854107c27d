"""TUI widget components."""

from __future__ import annotations

from portfolio.tui.widgets.accessible import AccessibleMixin
from portfolio.tui.widgets.back_to_top import BackToTop
from portfolio.tui.widgets.form_field import (
    FieldBlurred,
    FieldError,
    FieldInput,
    FieldTextArea,
    FormField,
)
from portfolio.tui.widgets.nav import NavLink, NavMenu, NavToggle
from portfolio.tui.widgets.project_card import FilterButton, ProjectCard

__all__ = [
    "AccessibleMixin",
    "BackToTop",
    "FieldBlurred",
    "FieldError",
    "FieldInput",
    "FieldTextArea",
    "FormField",
    "NavLink",
    "NavMenu",
    "NavToggle",
    "FilterButton",
    "ProjectCard",
]
