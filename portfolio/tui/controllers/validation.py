"""Field validation rules.

Pure functions: no widgets, no side effects. Failures are reported as
verdicts, never raised.
"""

from __future__ import annotations

import re
from typing import Protocol

from portfolio.tui.constants import EMAIL_MESSAGE, EMAIL_PATTERN, REQUIRED_MESSAGE
from portfolio.tui.models.field_state import FieldKind, ValidationVerdict

_EMAIL_RE = re.compile(EMAIL_PATTERN)


class ValidatableField(Protocol):
    """Anything exposing a value, a required flag and a kind."""

    @property
    def field_value(self) -> str: ...

    required: bool
    kind: FieldKind


def is_valid_email(value: str) -> bool:
    """Check ``value`` against the permissive local@domain.tld pattern."""
    return _EMAIL_RE.match(value) is not None


def validate(value: str, *, required: bool = False, kind: FieldKind = FieldKind.TEXT) -> ValidationVerdict:
    """Validate a field value.

    The required check runs first, so an empty optional email field is valid
    whatever its format.
    """
    value = value.strip()

    if required and not value:
        return ValidationVerdict.error(REQUIRED_MESSAGE)

    if kind == FieldKind.EMAIL and value and not is_valid_email(value):
        return ValidationVerdict.error(EMAIL_MESSAGE)

    return ValidationVerdict.ok()


def validate_field(field: ValidatableField) -> ValidationVerdict:
    """Validate a field widget (or any object shaped like one)."""
    return validate(field.field_value, required=field.required, kind=field.kind)
