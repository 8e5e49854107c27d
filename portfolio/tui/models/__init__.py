"""UI-agnostic models for the TUI.

Field kinds and verdicts used by the validation engine, and the portfolio
content loaded from YAML. Neither needs a running Textual app.
"""

from portfolio.tui.models.field_state import FieldKind, FieldState, ValidationVerdict
from portfolio.tui.models.content import (
    ContactFieldSpec,
    FilterOption,
    NavItem,
    PortfolioContent,
    Profile,
    Project,
    Service,
)

__all__ = [
    "FieldKind",
    "FieldState",
    "ValidationVerdict",
    "ContactFieldSpec",
    "FilterOption",
    "NavItem",
    "PortfolioContent",
    "Profile",
    "Project",
    "Service",
]
