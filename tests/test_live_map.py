from __future__ import annotations

import pytest

from backend.catalog import Catalog
from backend.live_map import (
    average_wait_reduction,
    format_wait,
    junction_frame,
    live_junctions,
    signal_phase_color,
    status_color,
)
from backend.telemetry import junction_metric_name, live_map_ticker
from backend.ticker import make_rng


def test_format_wait() -> None:
    assert format_wait(3.2) == "3.2 min"
    assert format_wait(2) == "2.0 min"


def test_live_junctions_without_ticker(catalog: Catalog) -> None:
    rows = live_junctions(catalog.records("map_junctions"))
    first = rows[0]
    assert first["display_wait"] == "3.2 min"
    assert first["last_update"] == "2 min ago"
    assert first["color"] == status_color("critical")
    assert first["phase_color"] == signal_phase_color("red-all")


def test_optimized_wait_shown_after_optimization(catalog: Catalog) -> None:
    rows = live_junctions(catalog.records("map_junctions"), show_optimized=True)
    assert rows[0]["display_wait"] == "2.4 min"
    assert rows[-1]["display_wait"] == "0.8 min"


def test_ticker_values_and_last_update(catalog: Catalog) -> None:
    junctions = catalog.records("map_junctions")
    ticker = live_map_ticker(junctions, rng=make_rng(9))
    rows = live_junctions(junctions, ticker)
    assert rows[0]["vehicles"] == 45
    assert rows[0]["last_update"] == "2 min ago"

    ticker.tick()
    rows = live_junctions(junctions, ticker)
    assert rows[0]["vehicles"] == ticker[junction_metric_name(1)]
    assert all(row["last_update"] == "Just now" for row in rows)


def test_junction_frame_flips_vertical_axis(catalog: Catalog) -> None:
    df = junction_frame(live_junctions(catalog.records("map_junctions")))
    assert list(df["x"]) == [40, 35, 60, 45, 70]
    assert list(df["y"]) == [70, 40, 75, 25, 60]


def test_junction_frame_empty() -> None:
    assert junction_frame([]).empty


def test_average_wait_reduction(catalog: Catalog) -> None:
    assert average_wait_reduction(catalog.records("map_junctions")) == pytest.approx(25.714, abs=1e-3)
    assert average_wait_reduction([]) == 0.0


@pytest.mark.parametrize(
    "phase,color",
    [("green-ns", "#22c55e"), ("red-all", "#ef4444"), ("amber-ns", "#f59e0b"), ("flashing", "#6b7280")],
)
def test_signal_phase_color(phase: str, color: str) -> None:
    assert signal_phase_color(phase) == color
