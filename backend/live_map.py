from typing import Dict, List, Optional

import pandas as pd

from backend.telemetry import junction_metric_name
from backend.ticker import PeriodicTicker

STATUS_COLORS = {
    "critical": "#ef4444",
    "high": "#f97316",
    "medium": "#eab308",
    "low": "#22c55e",
}


def status_color(status: str) -> str:
    return STATUS_COLORS.get(status, "#6b7280")


def signal_phase_color(phase: str) -> str:
    if "green" in phase:
        return "#22c55e"
    if "red" in phase:
        return "#ef4444"
    if "amber" in phase:
        return "#f59e0b"
    return "#6b7280"


def format_wait(minutes: float) -> str:
    return f"{float(minutes):.1f} min"


def live_junctions(junctions: List[Dict], ticker: Optional[PeriodicTicker] = None, show_optimized: bool = False) -> List[Dict]:
    rows = []
    for junction in junctions:
        row = dict(junction)
        if ticker is not None:
            row["vehicles"] = int(ticker.values.get(junction_metric_name(junction["id"]), row["vehicles"]))
            if ticker.ticks > 0:
                row["last_update"] = "Just now"
        wait = row["wait_time_optimized"] if show_optimized else row["wait_time"]
        row["display_wait"] = format_wait(wait)
        row["color"] = status_color(row["status"])
        row["phase_color"] = signal_phase_color(row["signal_phase"])
        rows.append(row)
    return rows


def junction_frame(rows: List[Dict]) -> pd.DataFrame:
    if not rows:
        return pd.DataFrame(columns=["name", "x", "y", "vehicles", "status", "display_wait"])
    df = pd.DataFrame(rows)
    # Positions are percentages from the top-left corner of the map canvas.
    df["x"] = pd.to_numeric(df["left"], errors="coerce").fillna(0)
    df["y"] = 100 - pd.to_numeric(df["top"], errors="coerce").fillna(0)
    return df


def average_wait_reduction(junctions: List[Dict]) -> float:
    baseline = sum(float(j["wait_time"]) for j in junctions)
    optimized = sum(float(j["wait_time_optimized"]) for j in junctions)
    if baseline <= 0:
        return 0.0
    return (baseline - optimized) / baseline * 100.0
