"""Shared constants for TUI modules.

Centralizes the class names, messages and timings the controllers and the
stylesheet agree on.
"""

from __future__ import annotations

# =============================================================================
# Class names toggled by controllers (styled in portfolio.tcss)
# =============================================================================

INVALID_CLASS = "is-invalid"
OPEN_CLASS = "is-open"
ACTIVE_CLASS = "is-active"
VISIBLE_CLASS = "is-visible"
OBSERVED_CLASS = "reveal-on-scroll"

# Widgets carrying this class are scroll-reveal targets
REVEAL_CLASS = "reveal"

# =============================================================================
# Validation
# =============================================================================

REQUIRED_MESSAGE = "This field is required"
EMAIL_MESSAGE = "Please enter a valid email address"

# local-part@domain.tld with no whitespace and no extra @ in any part
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"

ERROR_ID_PREFIX = "error-"

# =============================================================================
# Filtering
# =============================================================================

FILTER_ALL = "all"
DEFAULT_CATEGORY = "other"

# Seconds between starting a card's fade-out and removing it from layout
HIDE_DELAY = 0.16

# Vertical offset (cells) of a card while it fades out
HIDDEN_OFFSET = (0, 1)
SHOWN_OFFSET = (0, 0)

# =============================================================================
# Scrolling
# =============================================================================

# Fraction of a target that must be inside the viewport to reveal it
REVEAL_THRESHOLD = 0.16

# Rows scrolled before the back-to-top button appears
BACK_TO_TOP_THRESHOLD = 20


def error_id_for(field_id: str | None) -> str:
    """Return the id of the error widget describing ``field_id``."""
    return f"{ERROR_ID_PREFIX}{field_id or ''}"
