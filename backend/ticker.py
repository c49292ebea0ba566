"""Simulated live telemetry.

A ticker owns a handful of metrics and perturbs them on a fixed period. The
Streamlit script only runs on reruns, so instead of a background timer the
ticker is advanced lazily: every call to ``advance(now)`` applies all ticks
that have come due since the previous one.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Sequence, Union

import numpy as np

from backend.config import MAX_CATCH_UP_TICKS

logger = logging.getLogger(__name__)

Value = Union[int, str]


@dataclass(frozen=True)
class IntMetric:
    name: str
    initial: int
    floor: int
    low: int
    high: int

    def step(self, previous: int, rng: np.random.Generator) -> int:
        delta = int(rng.integers(self.low, self.high, endpoint=True))
        return max(self.floor, int(previous) + delta)


@dataclass(frozen=True)
class ChoiceMetric:
    name: str
    initial: str
    choices: Sequence[str]

    def step(self, previous: str, rng: np.random.Generator) -> str:
        del previous
        return str(self.choices[int(rng.integers(len(self.choices)))])


Metric = Union[IntMetric, ChoiceMetric]


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(seed)


class PeriodicTicker:
    def __init__(self, period: float, metrics: Iterable[Metric], rng: Optional[np.random.Generator] = None):
        if period <= 0:
            raise ValueError("period must be positive")
        self.period = float(period)
        self.metrics: Dict[str, Metric] = {m.name: m for m in metrics}
        self.values: Dict[str, Value] = {name: m.initial for name, m in self.metrics.items()}
        self.rng = rng if rng is not None else make_rng()
        self.ticks = 0
        self._next_due: Optional[float] = None
        self._cancelled = False

    @property
    def running(self) -> bool:
        return self._next_due is not None and not self._cancelled

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def start(self, now: Optional[float] = None):
        if self._cancelled or self._next_due is not None:
            return
        now = time.monotonic() if now is None else now
        self._next_due = now + self.period

    def cancel(self):
        self._cancelled = True
        self._next_due = None

    def tick(self) -> Dict[str, Value]:
        """Apply one tick unconditionally."""
        if self._cancelled:
            return dict(self.values)
        for name, metric in self.metrics.items():
            self.values[name] = metric.step(self.values[name], self.rng)
        self.ticks += 1
        return dict(self.values)

    def advance(self, now: Optional[float] = None) -> int:
        if not self.running:
            return 0
        now = time.monotonic() if now is None else now
        applied = 0
        while self._next_due <= now and applied < MAX_CATCH_UP_TICKS:
            self.tick()
            self._next_due += self.period
            applied += 1
        if self._next_due <= now:
            # Drop the backlog after a long idle period.
            self._next_due = now + self.period
        if applied:
            logger.debug("Ticker advanced %d tick(s): %s", applied, self.values)
        return applied

    def seconds_until_next(self, now: Optional[float] = None) -> Optional[float]:
        if not self.running:
            return None
        now = time.monotonic() if now is None else now
        return max(0.0, self._next_due - now)

    def __getitem__(self, name: str) -> Value:
        return self.values[name]
