"""Project cards and the filter buttons that select them."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Button, Static

from portfolio.tui.constants import REVEAL_CLASS
from portfolio.tui.models.content import FilterOption, Project


class FilterButton(Button):
    """Selects the project category ``token`` (or "all")."""

    DEFAULT_CSS = """
    FilterButton {
        min-width: 8;
        margin-right: 1;
    }

    FilterButton.is-active {
        background: $accent;
        text-style: bold;
    }
    """

    def __init__(self, option: FilterOption) -> None:
        super().__init__(option.label, classes="filter-btn")
        self.token = option.token


class ProjectCard(Vertical):
    """Card for one project.

    Attributes:
        categories: Raw comma-separated category declaration, or None
    """

    DEFAULT_CSS = """
    ProjectCard {
        height: auto;
        border: round $primary;
        padding: 0 1;
        margin-bottom: 1;
    }

    ProjectCard .project-title {
        text-style: bold;
        color: $primary;
    }

    ProjectCard .project-categories {
        color: $text-muted;
    }
    """

    def __init__(self, project: Project, *, id: str | None = None) -> None:
        super().__init__(classes=f"project-card {REVEAL_CLASS}", id=id)
        self.project = project
        self.categories = project.categories

    def compose(self) -> ComposeResult:
        yield Static(self.project.title, classes="project-title", markup=False)
        if self.project.summary:
            yield Static(self.project.summary, markup=False)
        if self.project.categories:
            yield Static(self.project.categories, classes="project-categories", markup=False)
        if self.project.link:
            yield Static(self.project.link, classes="project-link", markup=False)
