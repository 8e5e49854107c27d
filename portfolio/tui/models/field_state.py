"""Form field kinds, states and validation verdicts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FieldKind(str, Enum):
    """What a form field holds; decides which format checks apply."""

    TEXT = "text"
    EMAIL = "email"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str | None) -> "FieldKind":
        """Map a declared kind to a FieldKind, treating unknown kinds as OTHER."""
        try:
            return cls((value or "text").lower())
        except ValueError:
            return cls.OTHER


class FieldState(str, Enum):
    """Validation state of one form field."""

    PRISTINE = "pristine"  # Not yet evaluated
    VALID = "valid"
    INVALID = "invalid"


@dataclass(frozen=True)
class ValidationVerdict:
    """Result of validating one field.

    Attributes:
        is_valid: Whether the value passed every check
        message: Error text to show; empty when valid
    """

    is_valid: bool
    message: str = ""

    @classmethod
    def ok(cls) -> "ValidationVerdict":
        return cls(True, "")

    @classmethod
    def error(cls, message: str) -> "ValidationVerdict":
        return cls(False, message)
