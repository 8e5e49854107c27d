"""Render validation verdicts onto form fields.

An invalid field carries the ``is-invalid`` class, ``aria-invalid="true"``
and an ``aria-describedby`` pointing at the one FieldError in its wrapper.
A valid field carries none of these and its wrapper holds no FieldError.
"""

from __future__ import annotations

from portfolio.tui.constants import INVALID_CLASS, error_id_for
from portfolio.tui.models.field_state import ValidationVerdict
from portfolio.tui.widgets.form_field import FieldError


def annotate(field, verdict: ValidationVerdict) -> None:
    """Apply ``verdict`` to ``field`` and its error widget.

    Idempotent: the same verdict applied twice leaves one error widget.
    Fields outside a FormField wrapper are left untouched.
    """
    wrapper = field.wrapper
    if wrapper is None:
        return

    if not verdict.is_valid:
        error_id = error_id_for(field.id)
        field.add_class(INVALID_CLASS)
        field.set_aria("invalid", "true")

        error = wrapper.error
        if error is None:
            error = FieldError(verdict.message, id=error_id)
            wrapper.attach_error(error)
        else:
            error.set_message(verdict.message)

        field.set_aria("describedby", error_id)
    else:
        field.remove_class(INVALID_CLASS)
        field.remove_aria("invalid")
        field.remove_aria("describedby")
        wrapper.detach_error()
