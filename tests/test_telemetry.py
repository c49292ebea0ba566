from __future__ import annotations

from backend import config
from backend.catalog import Catalog
from backend.telemetry import (
    CONGESTION_LEVELS,
    analysis_ticker,
    camera_feed_ticker,
    dashboard_ticker,
    junction_metric_name,
    live_map_ticker,
)
from backend.ticker import IntMetric, PeriodicTicker


def _assert_steps_within_bounds(ticker: PeriodicTicker, ticks: int = 300) -> None:
    previous = dict(ticker.values)
    for _ in range(ticks):
        current = ticker.tick()
        for name, metric in ticker.metrics.items():
            if not isinstance(metric, IntMetric):
                continue
            value = current[name]
            assert value >= metric.floor
            lower = max(metric.floor, previous[name] + metric.low)
            upper = max(metric.floor, previous[name] + metric.high)
            assert lower <= value <= upper
        previous = current


def test_dashboard_pending_count(rng) -> None:
    ticker = dashboard_ticker(23, rng=rng)
    assert ticker.period == config.DASHBOARD_TICK_SECONDS
    assert ticker["pending_violations"] == 23
    _assert_steps_within_bounds(ticker)
    assert ticker["pending_violations"] >= config.PENDING_VIOLATIONS_FLOOR


def test_live_map_ticker_tracks_each_junction(catalog: Catalog, rng) -> None:
    junctions = catalog.records("map_junctions")
    ticker = live_map_ticker(junctions, rng=rng)
    assert ticker.period == config.LIVE_MAP_TICK_SECONDS
    assert set(ticker.values) == {junction_metric_name(j["id"]) for j in junctions}
    assert ticker[junction_metric_name(1)] == 45
    _assert_steps_within_bounds(ticker)


def test_camera_feed_ticker_floors(catalog: Catalog, rng) -> None:
    camera = catalog.records("live_cameras")[0]
    ticker = camera_feed_ticker(camera, rng=rng)
    assert ticker.period == config.CAMERA_FEED_TICK_SECONDS
    assert ticker["cars"] == camera["cars"]
    assert ticker["throughput"] == camera["throughput"]
    _assert_steps_within_bounds(ticker, ticks=1000)
    assert ticker["avg_wait_time"] >= config.AVG_WAIT_FLOOR
    assert ticker["throughput"] >= config.THROUGHPUT_FLOOR
    assert ticker["violations"] >= 0


def test_analysis_ticker_starts_empty(rng) -> None:
    ticker = analysis_ticker(rng=rng)
    assert ticker.period == config.ANALYSIS_TICK_SECONDS
    assert ticker["cars"] == 0
    assert ticker["congestion_level"] == "low"
    _assert_steps_within_bounds(ticker, ticks=50)
    assert ticker["congestion_level"] in CONGESTION_LEVELS
