"""Top-level application mode and admin page selection.

The console has four modes (landing, login, demo, admin). Inside admin mode
the sidebar picks one of a fixed set of pages. Every transition is an
explicit callback and is valid from any mode.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import MutableMapping, Union

from backend.errors import UnknownPageError

logger = logging.getLogger(__name__)

SESSION_KEY = "navigation"


class AppState(str, Enum):
    LANDING = "landing"
    LOGIN = "login"
    DEMO = "demo"
    ADMIN = "admin"


class Page(str, Enum):
    DASHBOARD = "dashboard"
    LIVE_MAP = "live-map"
    LIVE_TRAFFIC = "live-traffic"
    SIGNAL_CONTROL = "signal-control"
    E_CHALLAN = "e-challan"
    ANALYTICS = "analytics"
    MODEL_MONITORING = "model-monitoring"
    SETTINGS = "settings"


def parse_page(value: Union[Page, str]) -> Page:
    if isinstance(value, Page):
        return value
    try:
        return Page(str(value))
    except ValueError:
        raise UnknownPageError(str(value)) from None


class Navigation:
    def __init__(self, state: AppState = AppState.LANDING, page: Page = Page.DASHBOARD):
        self.state = AppState(state)
        self.page = parse_page(page)

    def _move(self, target: AppState):
        logger.debug("Navigation %s -> %s", self.state.value, target.value)
        self.state = target

    def navigate_to_login(self):
        self._move(AppState.LOGIN)

    def navigate_to_demo(self):
        self._move(AppState.DEMO)

    def login(self):
        self._move(AppState.ADMIN)

    def back_to_landing(self):
        # The page selection survives sign-out and is shown again on next login.
        self._move(AppState.LANDING)

    def change_page(self, page: Union[Page, str]):
        target = parse_page(page)
        logger.debug("Page %s -> %s", self.page.value, target.value)
        self.page = target

    @property
    def screen_key(self) -> str:
        """Identifier of the screen currently on display."""
        if self.state is AppState.ADMIN:
            return f"admin:{self.page.value}"
        return self.state.value

    def __repr__(self):
        return f"Navigation(state={self.state.value!r}, page={self.page.value!r})"


def get_navigation(session_state: MutableMapping) -> Navigation:
    nav = session_state.get(SESSION_KEY)
    if not isinstance(nav, Navigation):
        nav = Navigation()
        session_state[SESSION_KEY] = nav
    return nav
