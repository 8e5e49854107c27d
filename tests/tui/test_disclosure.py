"""Tests for the navigation menu disclosure."""

from __future__ import annotations

import asyncio

from portfolio.tui.app import PortfolioApp
from portfolio.tui.controllers.disclosure import DisclosureController
from portfolio.tui.sections import NavBar
from portfolio.tui.widgets.nav import NavLink, NavMenu, NavToggle

from tests.tui.helpers import FakeWidget


def _menu(focus_log: list) -> tuple[DisclosureController, FakeWidget, FakeWidget, list]:
    toggle = FakeWidget("nav-toggle", focus_log=focus_log)
    menu = FakeWidget("nav-menu")
    links = [FakeWidget("nav-home", focus_log=focus_log), FakeWidget("nav-projects", focus_log=focus_log)]
    return DisclosureController(toggle, menu, links), toggle, menu, links


class TestDisclosureController:
    """Tests for collapsed/expanded transitions."""

    def test_starts_collapsed(self, focus_log: list) -> None:
        controller, toggle, menu, _ = _menu(focus_log)
        assert controller.expanded is False
        assert toggle.aria["expanded"] == "false"
        assert not menu.has_class("is-open")

    def test_expand_sets_flag_class_and_focuses_first_link(self, focus_log: list) -> None:
        controller, toggle, menu, links = _menu(focus_log)
        controller.toggle()

        assert controller.expanded is True
        assert toggle.aria["expanded"] == "true"
        assert menu.has_class("is-open")
        assert focus_log == [links[0]]

    def test_collapse_does_not_move_focus(self, focus_log: list) -> None:
        controller, toggle, menu, _ = _menu(focus_log)
        controller.toggle()
        focus_log.clear()

        controller.toggle()

        assert controller.expanded is False
        assert toggle.aria["expanded"] == "false"
        assert not menu.has_class("is-open")
        assert focus_log == []

    def test_toggle_twice_restores_original_state(self, focus_log: list) -> None:
        controller, toggle, menu, _ = _menu(focus_log)
        before = (toggle.aria["expanded"], menu.has_class("is-open"))
        controller.toggle()
        controller.toggle()
        assert (toggle.aria["expanded"], menu.has_class("is-open")) == before

    def test_escape_while_expanded_collapses_and_focuses_toggle(self, focus_log: list) -> None:
        controller, toggle, menu, _ = _menu(focus_log)
        controller.toggle()
        focus_log.clear()

        assert controller.escape() is True
        assert controller.expanded is False
        assert not menu.has_class("is-open")
        assert toggle.aria["expanded"] == "false"
        assert focus_log == [toggle]

    def test_escape_while_collapsed_is_noop(self, focus_log: list) -> None:
        controller, toggle, menu, _ = _menu(focus_log)
        assert controller.escape() is False
        assert controller.expanded is False
        assert toggle.aria["expanded"] == "false"
        assert focus_log == []

    def test_menu_without_links_opens(self, focus_log: list) -> None:
        toggle = FakeWidget("nav-toggle", focus_log=focus_log)
        menu = FakeWidget("nav-menu")
        controller = DisclosureController(toggle, menu)
        controller.toggle()
        assert menu.has_class("is-open")
        assert focus_log == []


def test_keyboard_toggle_and_escape(bundled_content, default_settings) -> None:
    """Enter opens the menu, Space closes it, Escape returns focus to the toggle."""

    async def _run() -> None:
        app = PortfolioApp(bundled_content, reduced_motion=True, settings=default_settings)
        async with app.run_test() as pilot:
            toggle = app.query_one(NavToggle)
            menu = app.query_one(NavMenu)
            nav = app.query_one(NavBar)

            toggle.focus()
            await pilot.pause(0.1)
            await pilot.press("enter")
            await pilot.pause(0.1)

            assert nav.disclosure is not None and nav.disclosure.expanded
            assert toggle.get_aria("expanded") == "true"
            assert menu.has_class("is-open")
            assert app.focused is app.query(NavLink).first()

            toggle.focus()
            await pilot.pause(0.1)
            await pilot.press("space")
            await pilot.pause(0.1)
            assert not menu.has_class("is-open")
            assert toggle.get_aria("expanded") == "false"

            await pilot.press("enter")
            await pilot.pause(0.1)
            assert menu.has_class("is-open")

            await pilot.press("escape")
            await pilot.pause(0.1)
            assert not menu.has_class("is-open")
            assert toggle.get_aria("expanded") == "false"
            assert app.focused is toggle

    asyncio.run(_run())


def test_escape_with_menu_closed_keeps_focus(bundled_content, default_settings) -> None:
    async def _run() -> None:
        app = PortfolioApp(bundled_content, reduced_motion=True, settings=default_settings)
        async with app.run_test() as pilot:
            name_field = app.query_one("#name")
            name_field.focus()
            await pilot.pause(0.1)

            await pilot.press("escape")
            await pilot.pause(0.1)

            assert app.focused is name_field
            assert not app.query_one(NavMenu).has_class("is-open")

    asyncio.run(_run())
