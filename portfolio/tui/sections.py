"""Composite sections of the portfolio screen.

Each section builds its widgets, hands them to the controller that drives
them and routes Textual messages to that controller.
"""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, Input, Static, TextArea

from portfolio.tui.constants import ACTIVE_CLASS, FILTER_ALL
from portfolio.tui.controllers.disclosure import DisclosureController
from portfolio.tui.controllers.filter import FilterController
from portfolio.tui.controllers.form import FormController
from portfolio.tui.models.content import (
    ContactFieldSpec,
    FilterOption,
    NavItem,
    Profile,
    Project,
)
from portfolio.tui.widgets.form_field import FieldBlurred, FieldInput, FieldTextArea, FormField
from portfolio.tui.widgets.nav import NavLink, NavMenu, NavToggle
from portfolio.tui.widgets.project_card import FilterButton, ProjectCard

logger = logging.getLogger(__name__)


class NavBar(Vertical):
    """Site title, menu toggle and the collapsible navigation menu."""

    DEFAULT_CSS = """
    NavBar {
        dock: top;
        height: auto;
        background: $panel;
    }

    NavBar .nav-header {
        height: auto;
    }

    NavBar .brand {
        width: 1fr;
        padding: 1 2;
        text-style: bold;
    }
    """

    class Navigate(Message):
        """Posted when a navigation link is activated."""

        def __init__(self, target: str) -> None:
            super().__init__()
            self.target = target

    def __init__(self, profile: Profile, items: list[NavItem], *, id: str | None = "navbar") -> None:
        super().__init__(id=id)
        self.profile = profile
        self.toggle_control = NavToggle()
        self.links = [NavLink(item.label, item.target) for item in items]
        self.menu = NavMenu(*self.links)
        self.disclosure: DisclosureController | None = None

    def compose(self) -> ComposeResult:
        with Horizontal(classes="nav-header"):
            yield Static(self.profile.name, classes="brand", markup=False)
            yield self.toggle_control
        yield self.menu

    def on_mount(self) -> None:
        self.disclosure = DisclosureController(self.toggle_control, self.menu, self.links)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Route toggle and link activations."""
        if self.disclosure is None:
            return
        if event.button is self.toggle_control:
            event.stop()
            self.disclosure.toggle()
        elif isinstance(event.button, NavLink):
            event.stop()
            if self.disclosure.expanded:
                self.disclosure.toggle()
            self.post_message(self.Navigate(event.button.target))


class ProjectGallery(Vertical):
    """Filter buttons above the project cards they filter."""

    DEFAULT_CSS = """
    ProjectGallery {
        height: auto;
    }

    ProjectGallery .filter-bar {
        height: auto;
        margin-bottom: 1;
    }

    ProjectGallery .project-grid {
        height: auto;
    }
    """

    def __init__(
        self,
        filters: list[FilterOption],
        projects: list[Project],
        *,
        id: str | None = "project-gallery",
    ) -> None:
        super().__init__(id=id)
        self.buttons = [FilterButton(option) for option in filters]
        self.cards = [ProjectCard(project) for project in projects]
        self.filter_controller = FilterController(self.buttons, self.cards)
        for button in self.buttons:
            if button.token == FILTER_ALL:
                button.add_class(ACTIVE_CLASS)

    def compose(self) -> ComposeResult:
        if self.buttons:
            with Horizontal(classes="filter-bar"):
                yield from self.buttons
        with Vertical(classes="project-grid"):
            yield from self.cards

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, FilterButton):
            event.stop()
            self.filter_controller.apply_filter(event.button.token)


class ContactForm(Vertical):
    """Contact form whose required fields are validated before submission.

    Nothing is sent anywhere: a successful submission posts
    ``ContactForm.Submitted`` with the entered values.
    """

    DEFAULT_CSS = """
    ContactForm {
        height: auto;
        padding: 1 2;
        border: round $primary;
    }

    ContactForm .is-invalid {
        border: tall $error;
    }

    ContactForm #contact-submit {
        margin-top: 1;
    }
    """

    class Submitted(Message):
        """Posted when every required field is valid on submit."""

        def __init__(self, form: "ContactForm", values: dict[str, str]) -> None:
            super().__init__()
            self.form = form
            self.values = values

    def __init__(self, fields: list[ContactFieldSpec], *, id: str | None = "contact-form") -> None:
        super().__init__(id=id, classes="contact-form")
        self.form_fields = [FormField(spec) for spec in fields]
        self.submit_button = Button("Send message", variant="primary", id="contact-submit")
        self.controller = FormController(field.control for field in self.form_fields)

    def compose(self) -> ComposeResult:
        yield from self.form_fields
        yield self.submit_button

    @property
    def values(self) -> dict[str, str]:
        """Current value of every field, keyed by field name."""
        return {field.spec.name: field.control.field_value for field in self.form_fields}

    def submit(self) -> bool:
        """Validate and, if everything passes, post ``Submitted``.

        Returns:
            True if the submission went ahead
        """
        if not self.controller.submit():
            logger.debug("Contact form submission blocked by invalid fields")
            return False
        self.post_message(self.Submitted(self, self.values))
        return True

    def on_field_blurred(self, event: FieldBlurred) -> None:
        event.stop()
        self.controller.handle_blur(event.field)

    def on_input_changed(self, event: Input.Changed) -> None:
        if isinstance(event.input, FieldInput):
            self.controller.handle_input(event.input)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if isinstance(event.text_area, FieldTextArea):
            self.controller.handle_input(event.text_area)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button is self.submit_button:
            event.stop()
            self.submit()
