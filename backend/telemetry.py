"""Ticker definitions for each screen's simulated telemetry."""

from __future__ import annotations

from typing import Dict, List, Optional

import numpy as np

from backend import config
from backend.ticker import ChoiceMetric, IntMetric, PeriodicTicker

CONGESTION_LEVELS = ("low", "medium", "high")

DETECTION_FIELDS = ("cars", "trucks", "bikes", "pedestrians")


def dashboard_ticker(initial_pending: int = 23, rng: Optional[np.random.Generator] = None) -> PeriodicTicker:
    return PeriodicTicker(
        config.DASHBOARD_TICK_SECONDS,
        [IntMetric("pending_violations", int(initial_pending), config.PENDING_VIOLATIONS_FLOOR, -1, 1)],
        rng=rng,
    )


def junction_metric_name(junction_id) -> str:
    return f"vehicles_{junction_id}"


def live_map_ticker(junctions: List[Dict], rng: Optional[np.random.Generator] = None) -> PeriodicTicker:
    metrics = [
        IntMetric(junction_metric_name(j["id"]), int(j["vehicles"]), config.JUNCTION_VEHICLES_FLOOR, -3, 2)
        for j in junctions
    ]
    return PeriodicTicker(config.LIVE_MAP_TICK_SECONDS, metrics, rng=rng)


def camera_feed_ticker(camera: Dict, rng: Optional[np.random.Generator] = None) -> PeriodicTicker:
    metrics = [
        IntMetric("cars", int(camera.get("cars", 0)), 0, -3, 2),
        IntMetric("trucks", int(camera.get("trucks", 0)), 0, -1, 1),
        IntMetric("bikes", int(camera.get("bikes", 0)), 0, -4, 3),
        IntMetric("pedestrians", int(camera.get("pedestrians", 0)), 0, -2, 1),
        IntMetric("violations", int(camera.get("violations", 0)), 0, -1, 0),
        IntMetric("queue_length", int(camera.get("queue_length", 0)), 0, -5, 4),
        IntMetric("avg_wait_time", int(camera.get("avg_wait_time", config.AVG_WAIT_FLOOR)), config.AVG_WAIT_FLOOR, -10, 9),
        IntMetric("throughput", int(camera.get("throughput", config.THROUGHPUT_FLOOR)), config.THROUGHPUT_FLOOR, -20, 19),
    ]
    return PeriodicTicker(config.CAMERA_FEED_TICK_SECONDS, metrics, rng=rng)


def analysis_ticker(rng: Optional[np.random.Generator] = None) -> PeriodicTicker:
    metrics = [
        IntMetric("cars", 0, 0, -2, 5),
        IntMetric("trucks", 0, 0, -1, 1),
        IntMetric("bikes", 0, 0, -3, 6),
        IntMetric("pedestrians", 0, 0, -2, 3),
        IntMetric("queue_length", 0, 0, -8, 11),
        ChoiceMetric("congestion_level", "low", CONGESTION_LEVELS),
    ]
    return PeriodicTicker(config.ANALYSIS_TICK_SECONDS, metrics, rng=rng)
