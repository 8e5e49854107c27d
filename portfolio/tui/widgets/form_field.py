"""Contact form field widgets."""

from __future__ import annotations

from textual import events
from textual.await_remove import AwaitRemove
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Input, Label, Static, TextArea

from portfolio.tui.models.content import ContactFieldSpec
from portfolio.tui.models.field_state import FieldKind
from portfolio.tui.widgets.accessible import AccessibleMixin


class FieldBlurred(Message):
    """Posted when a form control loses focus."""

    def __init__(self, field: "FieldInput | FieldTextArea") -> None:
        super().__init__()
        self.field = field


class FieldControlMixin(AccessibleMixin):
    """Behaviour shared by single-line and multi-line form controls."""

    required: bool = False
    kind: FieldKind = FieldKind.TEXT

    @property
    def wrapper(self) -> "FormField | None":
        """The closest FormField containing this control."""
        for node in self.ancestors:  # type: ignore[attr-defined]
            if isinstance(node, FormField):
                return node
        return None

    def on_blur(self, event: events.Blur) -> None:
        self.post_message(FieldBlurred(self))  # type: ignore[attr-defined]


class FieldInput(FieldControlMixin, Input):
    """Single-line form control."""

    def __init__(
        self,
        *,
        required: bool = False,
        kind: FieldKind = FieldKind.TEXT,
        placeholder: str = "",
        id: str | None = None,
    ) -> None:
        super().__init__(placeholder=placeholder, id=id)
        self.required = required
        self.kind = kind
        if required:
            self.set_aria("required", "true")

    @property
    def field_value(self) -> str:
        return self.value


class FieldTextArea(FieldControlMixin, TextArea):
    """Multi-line form control."""

    def __init__(
        self,
        *,
        required: bool = False,
        kind: FieldKind = FieldKind.TEXT,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self.required = required
        self.kind = kind
        if required:
            self.set_aria("required", "true")

    @property
    def field_value(self) -> str:
        return self.text


class FieldError(AccessibleMixin, Static):
    """Error text announced for an invalid field."""

    role = "alert"

    DEFAULT_CSS = """
    FieldError {
        color: $error;
        height: auto;
    }
    """

    def __init__(self, message: str = "", *, id: str | None = None) -> None:
        super().__init__(message, id=id, classes="field-error", markup=False)
        self.message = message
        self.set_aria("live", "polite")

    def set_message(self, message: str) -> None:
        if message != self.message:
            self.message = message
            self.update(message)


class FormField(Vertical):
    """Label, control and (while invalid) error text for one field.

    Attributes:
        control: The input or text area
        error: The current FieldError, or None while the field is valid
    """

    DEFAULT_CSS = """
    FormField {
        height: auto;
        margin-bottom: 1;
    }

    FormField .field-label {
        color: $text;
    }

    FormField TextArea {
        height: 6;
    }
    """

    def __init__(self, spec: ContactFieldSpec) -> None:
        super().__init__(classes="form-field", id=f"field-{spec.name}")
        self.spec = spec
        self.error: FieldError | None = None
        self._removing: AwaitRemove | None = None
        self.control: FieldInput | FieldTextArea
        if spec.multiline:
            self.control = FieldTextArea(required=spec.required, kind=spec.kind, id=spec.name)
        else:
            self.control = FieldInput(
                required=spec.required,
                kind=spec.kind,
                placeholder=spec.placeholder,
                id=spec.name,
            )

    def compose(self) -> ComposeResult:
        label = f"{self.spec.label} [red]*[/red]" if self.spec.required else self.spec.label
        yield Label(label, classes="field-label")
        yield self.control

    def attach_error(self, error: FieldError) -> None:
        """Mount ``error`` as this field's only error widget.

        A previous error still being removed holds the same id, so the mount
        waits for that removal to finish.
        """
        self.error = error
        if self._removing is None:
            self.mount(error)
        else:
            self.call_later(self._mount_after_removal, self._removing, error)

    async def _mount_after_removal(self, removing: AwaitRemove, error: FieldError) -> None:
        await removing
        if self.error is error and error.parent is None:
            await self.mount(error)

    def detach_error(self) -> None:
        """Remove the error widget, if any."""
        if self.error is None:
            return
        error, self.error = self.error, None
        # Not yet mounted: the pending mount sees it is no longer current
        if error.parent is not None:
            removing = self._removing = error.remove()
            self.call_later(self._removal_finished, removing)

    async def _removal_finished(self, removing: AwaitRemove) -> None:
        await removing
        if self._removing is removing:
            self._removing = None
