"""One-shot delayed effects used for the simulated "AI" buttons."""

from __future__ import annotations

import time
from typing import Optional

IDLE = "idle"
RUNNING = "running"
COMPLETE = "complete"


class TimedAction:
    def __init__(self, duration: float):
        self.duration = max(0.0, float(duration))
        self._started_at: Optional[float] = None
        self._cancelled = False

    def start(self, now: Optional[float] = None) -> bool:
        """Start the action. Returns False if it is already running or cancelled."""
        now = time.monotonic() if now is None else now
        if self._cancelled or self.status(now) == RUNNING:
            return False
        self._started_at = now
        return True

    def status(self, now: Optional[float] = None) -> str:
        if self._started_at is None or self._cancelled:
            return IDLE
        now = time.monotonic() if now is None else now
        if now - self._started_at < self.duration:
            return RUNNING
        return COMPLETE

    def is_running(self, now: Optional[float] = None) -> bool:
        return self.status(now) == RUNNING

    def is_complete(self, now: Optional[float] = None) -> bool:
        return self.status(now) == COMPLETE

    def remaining(self, now: Optional[float] = None) -> float:
        if self.status(now) != RUNNING:
            return 0.0
        now = time.monotonic() if now is None else now
        return max(0.0, self._started_at + self.duration - now)

    def progress(self, now: Optional[float] = None) -> float:
        state = self.status(now)
        if state == IDLE:
            return 0.0
        if state == COMPLETE or self.duration == 0:
            return 1.0
        return 1.0 - self.remaining(now) / self.duration

    def reset(self):
        self._started_at = None

    def cancel(self):
        self._cancelled = True
        self._started_at = None
