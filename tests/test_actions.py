from __future__ import annotations

import pytest

from backend.actions import COMPLETE, IDLE, RUNNING, TimedAction


def test_lifecycle_idle_running_complete() -> None:
    action = TimedAction(3.0)
    assert action.status(0.0) == IDLE
    assert action.start(0.0)
    assert action.status(2.9) == RUNNING
    assert action.status(3.0) == COMPLETE


def test_cannot_start_while_running() -> None:
    action = TimedAction(3.0)
    action.start(0.0)
    assert not action.start(1.0)
    assert action.start(3.5)
    assert action.is_running(4.0)


def test_remaining_and_progress() -> None:
    action = TimedAction(2.0)
    assert action.progress(0.0) == 0.0
    action.start(10.0)
    assert action.remaining(10.5) == pytest.approx(1.5)
    assert action.progress(11.0) == pytest.approx(0.5)
    assert action.remaining(12.0) == 0.0
    assert action.progress(12.0) == 1.0


def test_reset_returns_to_idle() -> None:
    action = TimedAction(1.0)
    action.start(0.0)
    action.reset()
    assert action.status(5.0) == IDLE


def test_cancel_is_permanent() -> None:
    action = TimedAction(1.0)
    action.start(0.0)
    action.cancel()
    assert action.status(0.5) == IDLE
    assert not action.start(2.0)
    assert not action.is_complete(5.0)
