"""Textual application rendering the portfolio.

The screen is a navigation bar above one scrollable viewport holding the
home, projects, services and contact sections, with a back-to-top button
floating over it.
"""

from __future__ import annotations

import logging
from datetime import date

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.widgets import Button, Footer, Header, Static

from portfolio.tui.constants import REVEAL_CLASS
from portfolio.tui.controllers.back_to_top import BackToTopController
from portfolio.tui.controllers.reveal import (
    IntersectionCallback,
    RevealController,
    ViewportObserver,
)
from portfolio.tui.models.content import PortfolioContent
from portfolio.tui.sections import ContactForm, NavBar, ProjectGallery
from portfolio.tui.settings import PortfolioSettings, get_settings
from portfolio.tui.widgets.back_to_top import BackToTop

logger = logging.getLogger(__name__)


class PortfolioApp(App):
    """Single-page portfolio.

    Args:
        content: What to render; loaded from settings when None
        reduced_motion: Force reduced motion on or off. None defers to
            settings, then to the app's animation level.
        settings: Project settings; the global settings when None
    """

    TITLE = "Portfolio"
    CSS_PATH = "portfolio.tcss"

    BINDINGS = [
        Binding("escape", "close_menu", "Close menu", show=False),
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        content: PortfolioContent | None = None,
        *,
        reduced_motion: bool | None = None,
        settings: PortfolioSettings | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.content = content or PortfolioContent.load(self.settings.get_content_path())
        self._reduced_motion = reduced_motion if reduced_motion is not None else self.settings.reduced_motion
        self.viewport: VerticalScroll | None = None
        self.observer: ViewportObserver | None = None
        self.reveal: RevealController | None = None
        self.back_to_top: BackToTopController | None = None

    @property
    def reduced_motion(self) -> bool:
        """True when animations should be skipped."""
        if self._reduced_motion is not None:
            return self._reduced_motion
        return self.animation_level == "none"

    def compose(self) -> ComposeResult:
        content = self.content
        profile = content.profile

        yield Header()
        yield NavBar(profile, content.nav)
        with VerticalScroll(id="viewport"):
            with Vertical(id="home", classes=f"section {REVEAL_CLASS}"):
                yield Static(profile.name, classes="hero-name", markup=False)
                if profile.role:
                    yield Static(profile.role, classes="hero-role", markup=False)
                if profile.tagline:
                    yield Static(profile.tagline, classes="hero-tagline", markup=False)
                if profile.location:
                    yield Static(profile.location, classes="hero-location", markup=False)

            with Vertical(id="projects", classes=f"section {REVEAL_CLASS}"):
                yield Static("Projects", classes="section-title")
                yield ProjectGallery(content.filters, content.projects)

            with Vertical(id="services", classes=f"section {REVEAL_CLASS}"):
                yield Static("Services", classes="section-title")
                for service in content.services:
                    with Vertical(classes=f"service-card {REVEAL_CLASS}"):
                        yield Static(service.title, classes="service-title", markup=False)
                        if service.summary:
                            yield Static(service.summary, markup=False)

            with Vertical(id="contact", classes=f"section {REVEAL_CLASS}"):
                yield Static("Contact", classes="section-title")
                if content.contact_intro:
                    yield Static(content.contact_intro, markup=False)
                if profile.email:
                    yield Static(profile.email, classes="contact-email", markup=False)
                yield ContactForm(content.contact_fields)

            yield Static(
                f"© {date.today().year} {profile.name}",
                id="current-year",
                classes="site-footer",
                markup=False,
            )
        yield BackToTop()
        yield Footer()

    def on_mount(self) -> None:
        self.viewport = self.query_one("#viewport", VerticalScroll)
        reduced_motion = self.reduced_motion

        targets = list(self.query(f".{REVEAL_CLASS}"))
        self.reveal = RevealController(targets, self._make_observer, reduced_motion=reduced_motion)
        self.reveal.start()
        if self.observer is not None:
            # Filtering, menu changes and resizes move sections without scrolling
            self.screen.screen_layout_refresh_signal.subscribe(self, self.observer.schedule_check)

        self.back_to_top = BackToTopController(
            self.query_one(BackToTop), self.viewport, animate=not reduced_motion
        )
        self.back_to_top.start()

        logger.info(
            "Portfolio mounted: %d reveal targets, reduced motion %s",
            len(targets),
            "on" if reduced_motion else "off",
        )

    def _make_observer(self, callback: IntersectionCallback, threshold: float) -> ViewportObserver:
        assert self.viewport is not None
        self.observer = ViewportObserver(self.viewport, callback, threshold)
        return self.observer

    def action_close_menu(self) -> None:
        """Close the navigation menu if it is open."""
        try:
            nav = self.query_one(NavBar)
        except NoMatches:
            return
        if nav.disclosure is not None:
            nav.disclosure.escape()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if isinstance(event.button, BackToTop) and self.back_to_top is not None:
            self.back_to_top.scroll_to_top()

    def on_nav_bar_navigate(self, message: NavBar.Navigate) -> None:
        """Scroll the viewport to the section a nav link points at."""
        if self.viewport is None:
            return
        try:
            section = self.query_one(f"#{message.target}")
        except NoMatches:
            logger.warning("Navigation target #%s not found", message.target)
            return
        self.viewport.scroll_to_widget(section, animate=not self.reduced_motion, top=True)

    def on_contact_form_submitted(self, message: ContactForm.Submitted) -> None:
        name = message.values.get("name", "").strip()
        greeting = f"Thanks, {name}!" if name else "Thanks!"
        self.notify(f"{greeting} Your message has been received.", title="Contact")
        logger.info("Contact form submitted with fields: %s", ", ".join(sorted(message.values)))
