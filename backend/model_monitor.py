import logging
from typing import Dict, List, Optional

import pandas as pd

from backend.actions import TimedAction
from backend.config import RETRAIN_SECONDS

logger = logging.getLogger(__name__)

STATUS_COLORS = {
    "healthy": "#4ade80",
    "warning": "#fb923c",
    "drift": "#f87171",
}

PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}


def status_color(status: str) -> str:
    return STATUS_COLORS.get(status, "#9ca3af")


def fleet_summary(models: List[Dict]) -> Dict[str, float]:
    if not models:
        return {"active": 0, "healthy": 0, "needs_attention": 0, "avg_accuracy": 0.0, "avg_latency": 0.0}
    df = pd.DataFrame(models)
    return {
        "active": int(len(df)),
        "healthy": int((df["status"] == "healthy").sum()),
        "needs_attention": int((df["status"] != "healthy").sum()),
        "avg_accuracy": float(df["accuracy"].mean()),
        "avg_latency": float(df["latency"].mean()),
    }


def drift_summary(drift: List[Dict]) -> Dict[str, float]:
    """Accuracy and confidence lost between the first and last drift sample."""
    if len(drift) < 2:
        return {"accuracy_drop": 0.0, "confidence_drop": 0.0, "drifting": False}
    first, last = drift[0], drift[-1]
    accuracy_drop = float(first["accuracy"]) - float(last["accuracy"])
    confidence_drop = float(first["confidence"]) - float(last["confidence"])
    return {
        "accuracy_drop": accuracy_drop,
        "confidence_drop": confidence_drop,
        "drifting": accuracy_drop > 0 and confidence_drop > 0,
    }


def labeler_queue_sorted(queue: List[Dict]) -> List[Dict]:
    return sorted(queue, key=lambda item: (PRIORITY_ORDER.get(item.get("priority"), 99), float(item.get("confidence", 0))))


class RetrainQueue:
    """Only one model retrains at a time, as in the control room."""

    def __init__(self, duration: float = RETRAIN_SECONDS):
        self.duration = duration
        self.model_id: Optional[str] = None
        self._action = TimedAction(duration)

    def trigger(self, model_id: str, now: Optional[float] = None) -> bool:
        if self.active(now) is not None:
            return False
        self._action.reset()
        if not self._action.start(now):
            return False
        self.model_id = model_id
        logger.info("Retraining requested for model %s", model_id)
        return True

    def active(self, now: Optional[float] = None) -> Optional[str]:
        if self.model_id is not None and self._action.is_running(now):
            return self.model_id
        return None

    def remaining(self, now: Optional[float] = None) -> float:
        return self._action.remaining(now)

    def cancel(self):
        self._action.cancel()
        self.model_id = None

    def close(self):
        self.cancel()
