from typing import Dict, List

import pandas as pd

TIME_RANGES = {
    "today": "Today",
    "week": "This Week",
    "month": "This Month",
    "quarter": "This Quarter",
}

VIEW_MODES = ("baseline", "optimized", "comparison")

SERIES_LABELS = {
    "baseline": "Baseline",
    "optimized": "AI Optimized",
}


def _pct_change(before: float, after: float) -> float:
    if before == 0:
        return 0.0
    return (after - before) / before * 100.0


def _series_for_mode(view_mode: str) -> List[str]:
    if view_mode not in VIEW_MODES:
        raise ValueError(f"Unknown view mode: {view_mode}")
    if view_mode == "comparison":
        return ["baseline", "optimized"]
    return [view_mode]


def traffic_frame(traffic_data: List[Dict]) -> pd.DataFrame:
    if not traffic_data:
        return pd.DataFrame(columns=["time", "baseline", "optimized", "baseline_wait", "optimized_wait"])
    df = pd.DataFrame(traffic_data)
    for col in ["baseline", "optimized", "baseline_wait", "optimized_wait"]:
        df[col] = pd.to_numeric(df[col], errors="coerce").fillna(0)
    return df


def throughput_long(traffic_data: List[Dict], view_mode: str = "comparison") -> pd.DataFrame:
    """Vehicles per hour in long form, one row per (time, series)."""
    df = traffic_frame(traffic_data)
    series = _series_for_mode(view_mode)
    long_df = df.melt(id_vars=["time"], value_vars=series, var_name="series", value_name="vehicles")
    long_df["series"] = long_df["series"].map(SERIES_LABELS)
    return long_df


def wait_long(traffic_data: List[Dict], view_mode: str = "comparison") -> pd.DataFrame:
    df = traffic_frame(traffic_data)
    series = _series_for_mode(view_mode)
    columns = {f"{name}_wait": name for name in series}
    long_df = df[["time"] + list(columns)].rename(columns=columns).melt(
        id_vars=["time"], value_vars=list(columns.values()), var_name="series", value_name="wait_seconds"
    )
    long_df["series"] = long_df["series"].map(SERIES_LABELS)
    return long_df


def traffic_summary(traffic_data: List[Dict]) -> Dict[str, object]:
    df = traffic_frame(traffic_data)
    if df.empty:
        return {
            "baseline_total": 0,
            "optimized_total": 0,
            "baseline_avg_wait": 0.0,
            "optimized_avg_wait": 0.0,
            "wait_change_pct": 0.0,
            "peak_hour": None,
            "peak_wait_saved": 0.0,
        }
    saved = df["baseline_wait"] - df["optimized_wait"]
    peak_idx = df["baseline"].idxmax()
    baseline_avg = float(df["baseline_wait"].mean())
    optimized_avg = float(df["optimized_wait"].mean())
    return {
        "baseline_total": int(df["baseline"].sum()),
        "optimized_total": int(df["optimized"].sum()),
        "baseline_avg_wait": baseline_avg,
        "optimized_avg_wait": optimized_avg,
        "wait_change_pct": _pct_change(baseline_avg, optimized_avg),
        "peak_hour": str(df.loc[peak_idx, "time"]),
        "peak_wait_saved": float(saved.max()),
    }


def violation_breakdown(violation_types: List[Dict]) -> pd.DataFrame:
    if not violation_types:
        return pd.DataFrame(columns=["name", "baseline", "optimized", "color", "change_pct"])
    df = pd.DataFrame(violation_types)
    df["change_pct"] = [
        round(_pct_change(float(b), float(o)), 1) for b, o in zip(df["baseline"], df["optimized"])
    ]
    return df


def junction_performance_frame(rows: List[Dict]) -> pd.DataFrame:
    if not rows:
        return pd.DataFrame(columns=["name", "baseline", "optimized", "improvement"])
    df = pd.DataFrame(rows)
    df["improvement"] = df["optimized"] - df["baseline"]
    return df.sort_values("improvement", ascending=False).reset_index(drop=True)
