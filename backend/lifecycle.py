"""Per-screen state bound to the screen's lifetime.

Only one screen is mounted per session. Entering another screen cancels the
tickers and timed actions of the previous one and throws its state away, so
coming back to a screen always starts from fresh values.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, MutableMapping, Optional

from backend.actions import TimedAction
from backend.ticker import PeriodicTicker

logger = logging.getLogger(__name__)

SESSION_KEY = "screen_lifecycle"


class ScreenScope:
    def __init__(self, screen: str):
        self.screen = screen
        self.tickers: Dict[str, PeriodicTicker] = {}
        self.actions: Dict[str, TimedAction] = {}
        self.state: Dict[str, Any] = {}
        self.closed = False

    def ticker(self, key: str, factory: Callable[[], PeriodicTicker], now: Optional[float] = None) -> PeriodicTicker:
        """Mount the ticker on first use, then bring it up to date."""
        now = time.monotonic() if now is None else now
        ticker = self.tickers.get(key)
        if ticker is None:
            ticker = factory()
            if self.closed:
                ticker.cancel()
            else:
                ticker.start(now)
            self.tickers[key] = ticker
        ticker.advance(now)
        return ticker

    def action(self, key: str, duration: float) -> TimedAction:
        action = self.actions.get(key)
        if action is None:
            action = TimedAction(duration)
            if self.closed:
                action.cancel()
            self.actions[key] = action
        return action

    def setdefault(self, key: str, default: Any) -> Any:
        return self.state.setdefault(key, default)

    def close(self):
        for ticker in self.tickers.values():
            ticker.cancel()
        for action in self.actions.values():
            action.cancel()
        for value in self.state.values():
            close = getattr(value, "close", None)
            if callable(close):
                close()
        self.closed = True


class ScreenLifecycle:
    def __init__(self):
        self.scope: Optional[ScreenScope] = None

    @property
    def mounted(self) -> Optional[str]:
        return self.scope.screen if self.scope is not None else None

    def enter(self, screen: str) -> ScreenScope:
        if self.scope is not None and self.scope.screen == screen:
            return self.scope
        if self.scope is not None:
            logger.debug("Unmounting screen %s", self.scope.screen)
            self.scope.close()
        logger.debug("Mounting screen %s", screen)
        self.scope = ScreenScope(screen)
        return self.scope


def get_lifecycle(session_state: MutableMapping) -> ScreenLifecycle:
    lifecycle = session_state.get(SESSION_KEY)
    if not isinstance(lifecycle, ScreenLifecycle):
        lifecycle = ScreenLifecycle()
        session_state[SESSION_KEY] = lifecycle
    return lifecycle
