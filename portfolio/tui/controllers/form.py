"""Contact form validation state machine.

Each required field starts ``pristine``. Leaving a field evaluates it;
typing only re-evaluates a field that is currently invalid, so a field the
user got right is not flagged again mid-edit. Submitting evaluates every
required field and refuses the submission while any is invalid.
"""

from __future__ import annotations

from typing import Iterable

from portfolio.tui.controllers.annotator import annotate
from portfolio.tui.controllers.validation import validate_field
from portfolio.tui.models.field_state import FieldState, ValidationVerdict


class FormController:
    """Validation state for the required fields of one form.

    Args:
        fields: Form controls in document order. Optional fields are not
            tracked: they are never annotated and never block submission.
    """

    def __init__(self, fields: Iterable) -> None:
        self._fields = [f for f in fields if f.required]
        self._states = {f: FieldState.PRISTINE for f in self._fields}

    @property
    def fields(self) -> list:
        return list(self._fields)

    def state_of(self, field) -> FieldState | None:
        """Current state of ``field``; None for fields this form ignores."""
        return self._states.get(field)

    def handle_blur(self, field) -> None:
        if field in self._states:
            self._evaluate(field)

    def handle_input(self, field) -> None:
        if self._states.get(field) is FieldState.INVALID:
            self._evaluate(field)

    def submit(self) -> bool:
        """Evaluate every required field.

        Returns:
            True if submission may proceed. False cancels it; focus then
            moves to the first invalid field in document order.
        """
        first_invalid = None
        for field in self._fields:
            verdict = self._evaluate(field)
            if not verdict.is_valid and first_invalid is None:
                first_invalid = field

        if first_invalid is not None:
            first_invalid.focus()
            return False
        return True

    def _evaluate(self, field) -> ValidationVerdict:
        verdict = validate_field(field)
        annotate(field, verdict)
        self._states[field] = FieldState.VALID if verdict.is_valid else FieldState.INVALID
        return verdict
