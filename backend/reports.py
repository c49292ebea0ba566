import json
from datetime import datetime
from typing import Dict, List, Optional

import pandas as pd

from backend import analytics

REPORT_FORMATS = ("csv", "json")


def report_filename(kind: str, fmt: str, now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    timestamp = now.strftime("%Y%m%d_%H%M%S")
    safe_kind = kind.replace(" ", "_").replace("-", "_").lower()
    return f"netra_{safe_kind}_{timestamp}.{fmt.lower()}"


def _collect_analytics_data(catalog_sections: Dict[str, List[Dict]], time_range: str, view_mode: str) -> Dict:
    traffic = catalog_sections.get("traffic_data", [])
    return {
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "report_type": "Traffic Analytics & Impact",
        "time_range": analytics.TIME_RANGES.get(time_range, time_range),
        "view_mode": view_mode,
        "summary": analytics.traffic_summary(traffic),
        "before_after": catalog_sections.get("before_after_kpis", []),
        "violation_types": analytics.violation_breakdown(catalog_sections.get("violation_types", [])).to_dict(orient="records"),
        "junction_performance": analytics.junction_performance_frame(
            catalog_sections.get("junction_performance", [])
        ).to_dict(orient="records"),
        "hourly": analytics.traffic_frame(traffic).to_dict(orient="records"),
    }


def analytics_report(catalog_sections: Dict[str, List[Dict]], time_range: str, view_mode: str, fmt: str = "csv") -> bytes:
    fmt = fmt.lower()
    if fmt not in REPORT_FORMATS:
        raise ValueError(f"Unsupported report format: {fmt}")
    data = _collect_analytics_data(catalog_sections, time_range, view_mode)

    if fmt == "json":
        return json.dumps(data, indent=2, default=str).encode("utf-8")

    blocks = []
    header = pd.DataFrame(
        [
            {"field": "report_type", "value": data["report_type"]},
            {"field": "generated_at", "value": data["generated_at"]},
            {"field": "time_range", "value": data["time_range"]},
            {"field": "view_mode", "value": data["view_mode"]},
        ]
        + [{"field": k, "value": v} for k, v in data["summary"].items()]
    )
    blocks.append(("Summary", header))
    blocks.append(("Hourly Traffic", pd.DataFrame(data["hourly"])))
    blocks.append(("Before vs After", pd.DataFrame(data["before_after"])))
    blocks.append(("Violation Types", pd.DataFrame(data["violation_types"])))
    blocks.append(("Junction Performance", pd.DataFrame(data["junction_performance"])))

    parts = []
    for title, frame in blocks:
        parts.append(f"# {title}\n")
        parts.append(frame.to_csv(index=False))
        parts.append("\n")
    return "".join(parts).encode("utf-8")


def challans_csv(challans: List[Dict]) -> bytes:
    columns = ["id", "violation_id", "vehicle", "fine", "status", "issued_at", "due_date", "paid_at", "payment_ref"]
    df = pd.DataFrame(challans)
    for col in columns:
        if col not in df.columns:
            df[col] = ""
    return df[columns].fillna("").to_csv(index=False).encode("utf-8")
