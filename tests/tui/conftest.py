"""Shared fixtures for TUI tests.

Controller tests drive the widget stand-ins in ``helpers``; widget-level
tests use real Textual apps through ``App.run_test()``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest

from portfolio.tui.models.content import ContactFieldSpec, PortfolioContent
from portfolio.tui.models.field_state import FieldKind
from portfolio.tui.settings import PortfolioSettings

from tests.tui.helpers import ObserverFactory


@pytest.fixture
def focus_log() -> list:
    """Shared record of focus() calls, in order."""
    return []


@pytest.fixture
def observer_factory() -> ObserverFactory:
    return ObserverFactory()


@pytest.fixture
def contact_fields() -> list[ContactFieldSpec]:
    """Name, email and message required; subject optional."""
    return [
        ContactFieldSpec(name="name", label="Name", required=True),
        ContactFieldSpec(name="email", label="Email", kind=FieldKind.EMAIL, required=True),
        ContactFieldSpec(name="subject", label="Subject"),
        ContactFieldSpec(name="message", label="Message", required=True, multiline=True),
    ]


@pytest.fixture
def bundled_content() -> PortfolioContent:
    return PortfolioContent.load()


@pytest.fixture
def default_settings() -> PortfolioSettings:
    """Settings that ignore any .portfolio.yaml in the working directory."""
    return PortfolioSettings()


@pytest.fixture
def tmp_content_yaml(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a small content file for testing."""
    yaml_file = tmp_path / "content.yaml"
    yaml_file.write_text(
        """
profile:
  name: Sam Rivera
  role: Photographer
  email: sam@example.com

nav:
  - label: Home
    target: home
  - label: Projects
    target: projects

projects:
  - title: Coastlines
    categories: "landscape, print"
  - title: Portraits of the Market
    categories: portrait
  - title: Untitled

contact:
  fields:
    - name: email
      kind: email
      required: true
""",
        encoding="utf-8",
    )
    yield yaml_file
