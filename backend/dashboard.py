from typing import Dict, List, Optional

SEVERITY_COLORS = {
    "high": "#f87171",
    "medium": "#facc15",
    "low": "#4ade80",
}

ALERT_COLORS = {
    "success": "#4ade80",
    "warning": "#facc15",
    "info": "#22d3ee",
    "violation": "#f472b6",
}

TREND_COLORS = {
    "up": "#22d3ee",
    "down": "#4ade80",
    "neutral": "#facc15",
}


def current_kpis(kpis: List[Dict], pending_violations: Optional[int] = None, overrides: Optional[List[Dict]] = None) -> List[Dict]:
    """Merge the live pending count and, once the simulation has run, the optimised values."""
    by_title = {item["title"]: item for item in (overrides or [])}
    out = []
    for kpi in kpis:
        row = dict(kpi)
        if row["title"] in by_title:
            row.update(by_title[row["title"]])
        if row["title"] == "Pending Violations" and pending_violations is not None:
            row["value"] = str(int(pending_violations))
        out.append(row)
    return out


def severity_color(severity: str) -> str:
    return SEVERITY_COLORS.get(severity, "#94a3b8")


def initial_pending(kpis: List[Dict], default: int = 23) -> int:
    for kpi in kpis:
        if kpi["title"] == "Pending Violations":
            try:
                return int(float(kpi["value"]))
            except (TypeError, ValueError):
                return default
    return default
