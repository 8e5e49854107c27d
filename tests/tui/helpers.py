"""Stand-ins for Textual widgets used by the controller tests.

Each records the classes, aria attributes, focus calls, timers and
after-refresh callbacks the controllers apply to it. FormHarness hosts a
real ContactForm for pilot tests.
"""

from __future__ import annotations

from typing import Any, Callable

from textual.app import App, ComposeResult

from portfolio.tui.controllers.reveal import IntersectionEntry
from portfolio.tui.models.field_state import FieldKind
from portfolio.tui.sections import ContactForm


class FakeTimer:
    """Timer returned by FakeWidget.set_timer."""

    def __init__(self, delay: float, callback: Callable[[], Any]) -> None:
        self.delay = delay
        self.callback = callback
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True

    def fire(self) -> None:
        if not self.stopped:
            self.callback()


class FakeStyles:
    """Inline styles; clearing a rule falls back to the stylesheet value."""

    STYLESHEET = {"opacity": 1.0, "offset": (0, 0)}

    def __init__(self) -> None:
        self.opacity = 1.0
        self.offset = (0, 0)
        self.cleared: list[str] = []

    def clear_rule(self, rule_name: str) -> bool:
        self.cleared.append(rule_name)
        setattr(self, rule_name, self.STYLESHEET[rule_name])
        return True


class FakeWidget:
    """Records what controllers do to a widget."""

    def __init__(self, id: str | None = None, *, focus_log: list | None = None) -> None:
        self.id = id
        self.classes: set[str] = set()
        self.aria: dict[str, str] = {}
        self.display = True
        self.styles = FakeStyles()
        self.timers: list[FakeTimer] = []
        self.after_refresh: list[tuple[Callable, tuple]] = []
        self.focus_log = focus_log if focus_log is not None else []

    def add_class(self, *names: str) -> None:
        self.classes.update(names)

    def remove_class(self, *names: str) -> None:
        self.classes.difference_update(names)

    def set_class(self, add: bool, *names: str) -> None:
        if add:
            self.add_class(*names)
        else:
            self.remove_class(*names)

    def has_class(self, *names: str) -> bool:
        return set(names) <= self.classes

    def set_aria(self, name: str, value: str) -> None:
        self.aria[name] = value

    def remove_aria(self, name: str) -> None:
        self.aria.pop(name, None)

    def focus(self) -> None:
        self.focus_log.append(self)

    def set_timer(self, delay: float, callback: Callable[[], Any]) -> FakeTimer:
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer

    def call_after_refresh(self, callback: Callable, *args: Any) -> None:
        self.after_refresh.append((callback, args))

    def run_after_refresh(self) -> None:
        pending, self.after_refresh = self.after_refresh, []
        for callback, args in pending:
            callback(*args)

    def fire_timers(self) -> None:
        for timer in list(self.timers):
            timer.fire()


class FakeButton(FakeWidget):
    def __init__(self, token: str) -> None:
        super().__init__(f"filter-{token}")
        self.token = token


class FakeCard(FakeWidget):
    def __init__(self, title: str, categories: str | None) -> None:
        super().__init__(title)
        self.categories = categories


class FakeField(FakeWidget):
    """Form control without a wrapper, so annotation is skipped."""

    wrapper = None

    def __init__(
        self,
        id: str,
        value: str = "",
        *,
        required: bool = True,
        kind: FieldKind = FieldKind.TEXT,
        focus_log: list | None = None,
    ) -> None:
        super().__init__(id, focus_log=focus_log)
        self.field_value = value
        self.required = required
        self.kind = kind


class FakeObserver:
    """Intersection observer fired by hand."""

    def __init__(self, callback: Callable, threshold: float) -> None:
        self.callback = callback
        self.threshold = threshold
        self.observed: list = []
        self.disconnected = False

    def observe(self, target: Any) -> None:
        self.observed.append(target)

    def unobserve(self, target: Any) -> None:
        if target in self.observed:
            self.observed.remove(target)

    def disconnect(self) -> None:
        self.observed.clear()
        self.disconnected = True

    def scroll_into_view(self, target: Any, ratio: float) -> None:
        """Notify as a browser would once ``ratio`` of ``target`` is visible."""
        if target in self.observed and ratio >= self.threshold:
            self.callback([IntersectionEntry(target, ratio, ratio > 0)])


class ObserverFactory:
    """Builds FakeObservers and remembers them."""

    def __init__(self) -> None:
        self.created: list[FakeObserver] = []

    def __call__(self, callback: Callable, threshold: float) -> FakeObserver:
        observer = FakeObserver(callback, threshold)
        self.created.append(observer)
        return observer




class FormHarness(App):
    """App holding only a ContactForm; records successful submissions."""

    AUTO_FOCUS = None

    def __init__(self, fields: list) -> None:
        super().__init__()
        self.fields = fields
        self.submitted: list[dict[str, str]] = []

    def compose(self) -> ComposeResult:
        yield ContactForm(self.fields)

    def on_contact_form_submitted(self, message: ContactForm.Submitted) -> None:
        self.submitted.append(message.values)
