import logging
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

STATUS_FILTERS = ("all", "pending", "approved", "rejected")
SEARCH_KEYS = ("vehicle", "junction", "type")

STATUS_COLORS = {
    "pending": "#fb923c",
    "approved": "#4ade80",
    "rejected": "#f87171",
    "paid": "#60a5fa",
}

PAYMENT_WINDOW_DAYS = 10


def confidence_band(confidence) -> str:
    value = float(confidence)
    if value >= 90:
        return "high"
    if value >= 80:
        return "medium"
    return "low"


def status_color(status: str) -> str:
    return STATUS_COLORS.get(status, "#9ca3af")


def filter_violations(rows: Iterable[Dict], term: str = "", status: str = "all") -> List[Dict]:
    t = (term or "").lower().strip()
    out = []
    for row in rows:
        if status != "all" and row.get("status") != status:
            continue
        if t and not any(t in str(row.get(key, "")).lower() for key in SEARCH_KEYS):
            continue
        out.append(row)
    return out


def pending_count(rows: Iterable[Dict]) -> int:
    return sum(1 for row in rows if row.get("status") == "pending")


def challan_totals(challans: Iterable[Dict]) -> Dict[str, int]:
    totals = {"issued": 0, "paid": 0, "pending": 0, "collected": 0, "outstanding": 0}
    for challan in challans:
        fine = int(challan.get("fine", 0))
        totals["issued"] += 1
        if challan.get("status") == "paid":
            totals["paid"] += 1
            totals["collected"] += fine
        else:
            totals["pending"] += 1
            totals["outstanding"] += fine
    return totals


class ChallanDesk:
    """Review queue for detected violations.

    Works on private copies of the catalog records; decisions never leave the
    screen that made them.
    """

    def __init__(self, violations: List[Dict], challans: List[Dict]):
        self.violations = [dict(v) for v in violations]
        self.challans = [dict(c) for c in challans]
        self.issuing: Optional[str] = None

    def get(self, violation_id: str) -> Optional[Dict]:
        for violation in self.violations:
            if violation["id"] == violation_id:
                return violation
        return None

    def _next_challan_id(self) -> str:
        numbers = []
        for challan in self.challans:
            digits = "".join(ch for ch in str(challan.get("id", "")) if ch.isdigit())
            if digits:
                numbers.append(int(digits))
        return f"CH{(max(numbers) + 1 if numbers else 1):03d}"

    def begin_approval(self, violation_id: str) -> bool:
        violation = self.get(violation_id)
        if violation is None or violation.get("status") != "pending":
            return False
        logger.info("Approving violation: %s", violation_id)
        self.issuing = violation_id
        return True

    def complete_approval(self, now: Optional[datetime] = None) -> Optional[Dict]:
        """Issue the challan for the violation under approval."""
        if self.issuing is None:
            return None
        violation = self.get(self.issuing)
        self.issuing = None
        if violation is None:
            return None
        now = now or datetime.now()
        violation["status"] = "approved"
        challan = {
            "id": self._next_challan_id(),
            "violation_id": violation["id"],
            "vehicle": violation["vehicle"],
            "fine": int(violation.get("estimated_fine", 0)),
            "status": "pending",
            "issued_at": now.strftime("%Y-%m-%d %H:%M:%S"),
            "due_date": (now + timedelta(days=PAYMENT_WINDOW_DAYS)).strftime("%Y-%m-%d 23:59:59"),
        }
        self.challans.append(challan)
        logger.info("Issued challan %s for violation %s", challan["id"], violation["id"])
        return challan

    def reject(self, violation_id: str) -> bool:
        violation = self.get(violation_id)
        if violation is None or violation.get("status") != "pending":
            return False
        logger.info("Rejecting violation: %s", violation_id)
        violation["status"] = "rejected"
        if self.issuing == violation_id:
            self.issuing = None
        return True
