"""Portfolio content loaded from YAML.

The content file plays the part of page markup: it declares the profile,
navigation, projects (with their filter categories), services and the
contact form's fields. This layer has no Textual dependency.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from portfolio.lib.errors import ContentError
from portfolio.tui.constants import FILTER_ALL
from portfolio.tui.controllers.filter import split_categories
from portfolio.tui.models.field_state import FieldKind

BUNDLED_CONTENT = "portfolio.yaml"


@dataclass
class Profile:
    """Who the portfolio belongs to."""

    name: str
    role: str = ""
    tagline: str = ""
    location: str = ""
    email: str = ""


@dataclass
class NavItem:
    """Navigation entry pointing at a section id."""

    label: str
    target: str


@dataclass
class FilterOption:
    """Filter button: label shown, token matched against card categories."""

    label: str
    token: str


@dataclass
class Project:
    """Project card.

    Attributes:
        title: Card heading
        summary: Short description
        categories: Raw comma-separated category declaration, or None when
            the project declares none
        link: Optional URL shown on the card
    """

    title: str
    summary: str = ""
    categories: str | None = None
    link: str = ""


@dataclass
class Service:
    """Service card."""

    title: str
    summary: str = ""


@dataclass
class ContactFieldSpec:
    """Declaration of one contact form field."""

    name: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    multiline: bool = False
    placeholder: str = ""


@dataclass
class PortfolioContent:
    """Everything the portfolio screen renders."""

    profile: Profile
    nav: list[NavItem] = field(default_factory=list)
    filters: list[FilterOption] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    services: list[Service] = field(default_factory=list)
    contact_intro: str = ""
    contact_fields: list[ContactFieldSpec] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: str | None = None) -> "PortfolioContent":
        """Build content from a parsed YAML mapping.

        Raises:
            ContentError: If a required key is missing or has the wrong shape
        """
        if not isinstance(data, dict):
            raise ContentError("Content must be a mapping", path=source)

        profile_data = data.get("profile")
        if not isinstance(profile_data, dict) or not profile_data.get("name"):
            raise ContentError("Content needs a profile with a name", path=source, key="profile.name")

        try:
            profile = Profile(**profile_data)
            nav = [NavItem(**item) for item in data.get("nav") or []]
            projects = [_project(item) for item in data.get("projects") or []]
            services = [Service(**item) for item in data.get("services") or []]

            contact = data.get("contact") or {}
            contact_fields = [_contact_field(item) for item in contact.get("fields") or []]

            if data.get("filters"):
                filters = [FilterOption(**item) for item in data["filters"]]
            else:
                filters = derive_filters(projects)
        except (TypeError, KeyError, AttributeError) as e:
            raise ContentError("Malformed content entry", path=source, cause=e) from e

        return cls(
            profile=profile,
            nav=nav,
            filters=filters,
            projects=projects,
            services=services,
            contact_intro=contact.get("intro", ""),
            contact_fields=contact_fields,
        )

    @classmethod
    def load(cls, path: Path | str | None = None) -> "PortfolioContent":
        """Load content from ``path``, or the bundled example when None.

        Raises:
            ContentError: If the file cannot be read or parsed
        """
        if path is None:
            source = f"portfolio.tui.data/{BUNDLED_CONTENT}"
            text = resources.files("portfolio.tui.data").joinpath(BUNDLED_CONTENT).read_text(encoding="utf-8")
        else:
            source = str(path)
            try:
                text = Path(path).read_text(encoding="utf-8")
            except OSError as e:
                raise ContentError("Cannot read content file", path=source, cause=e) from e

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ContentError("Content file is not valid YAML", path=source, cause=e) from e

        return cls.from_dict(data, source=source)


def _project(item: dict[str, Any]) -> Project:
    categories = item.get("categories")
    if isinstance(categories, list):
        categories = ", ".join(str(c) for c in categories)
    return Project(
        title=item["title"],
        summary=item.get("summary", ""),
        categories=categories,
        link=item.get("link", ""),
    )


def _contact_field(item: dict[str, Any]) -> ContactFieldSpec:
    name = item["name"]
    return ContactFieldSpec(
        name=name,
        label=item.get("label") or name.replace("_", " ").title(),
        kind=FieldKind.parse(item.get("kind")),
        required=bool(item.get("required", False)),
        multiline=bool(item.get("multiline", False)),
        placeholder=item.get("placeholder", ""),
    )


def derive_filters(projects: list[Project]) -> list[FilterOption]:
    """Build an "All" option plus one option per category, in first-seen order."""
    options = [FilterOption(label="All", token=FILTER_ALL)]
    seen: set[str] = set()
    for project in projects:
        for token in split_categories(project.categories):
            if token not in seen:
                seen.add(token)
                options.append(FilterOption(label=token.replace("-", " ").title(), token=token))
    return options
