"""Upload-and-analyse flow of the AI video analysis screen.

Nothing is detected for real: while the analysis runs the detection counts
are perturbed by a one second ticker, and when it finishes they snap to a
fixed final result.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Optional

import numpy as np

from backend import config
from backend.actions import TimedAction
from backend.telemetry import analysis_ticker
from backend.ticker import PeriodicTicker, make_rng
from backend.video_loader import format_duration, format_file_size, validate_upload

logger = logging.getLogger(__name__)

EMPTY_DETECTIONS = {
    "cars": 0,
    "trucks": 0,
    "bikes": 0,
    "pedestrians": 0,
    "queue_length": 0,
    "congestion_level": "low",
    "total_vehicles": 0,
}

FINAL_DETECTIONS = {
    "cars": 23,
    "trucks": 4,
    "bikes": 15,
    "pedestrians": 8,
    "queue_length": 45,
    "congestion_level": "high",
    "total_vehicles": 50,
}

CONGESTION_COLORS = {"low": "#4ade80", "medium": "#facc15", "high": "#f87171"}


class UploadProgress:
    def __init__(self, rng: np.random.Generator, period: float = config.UPLOAD_TICK_SECONDS):
        self.rng = rng
        self.period = period
        self.value = 0.0
        self._last: Optional[float] = None

    def start(self, now: float):
        self.value = 0.0
        self._last = now

    def advance(self, now: float) -> float:
        if self._last is None:
            return self.value
        while self._last + self.period <= now and self.value < 100.0:
            self.value = min(100.0, self.value + float(self.rng.random()) * 15.0)
            self._last += self.period
        return self.value

    def finish(self):
        self.value = 100.0
        self._last = None


class VideoAnalysis:
    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else make_rng()
        self.file: Optional[Dict] = None
        self.upload = TimedAction(config.UPLOAD_SECONDS)
        self.progress = UploadProgress(self.rng)
        self.analysis = TimedAction(config.ANALYSIS_SECONDS)
        self.ticker: Optional[PeriodicTicker] = None
        self._pending: Optional[Dict] = None
        self.upload_key: Optional[tuple] = None
        self.closed = False

    def begin_upload(self, name: str, size: int, mime_type: Optional[str] = None, path: Optional[str] = None,
                     duration_seconds: Optional[float] = None, now: Optional[float] = None):
        validate_upload(name, mime_type)
        if self.closed:
            return False
        now = time.monotonic() if now is None else now
        self.reset()
        self._pending = {
            "name": name,
            "size": format_file_size(int(size)),
            "duration": format_duration(duration_seconds),
            "path": path,
        }
        self.upload.start(now)
        self.progress.start(now)
        logger.info("Uploading %s (%s)", name, self._pending["size"])
        return True

    def upload_progress(self, now: Optional[float] = None) -> float:
        now = time.monotonic() if now is None else now
        if self.upload.is_complete(now):
            self._finish_upload()
            return 100.0
        return self.progress.advance(now)

    def _finish_upload(self):
        if self._pending is not None:
            self.file = self._pending
            self._pending = None
            self.progress.finish()

    def is_uploading(self, now: Optional[float] = None) -> bool:
        return self.upload.is_running(now)

    def has_file(self, now: Optional[float] = None) -> bool:
        if self.upload.is_complete(now):
            self._finish_upload()
        return self.file is not None

    def start_analysis(self, now: Optional[float] = None) -> bool:
        now = time.monotonic() if now is None else now
        if self.closed or not self.has_file(now) or self.analysis.is_running(now):
            return False
        self.analysis.reset()
        self.analysis.start(now)
        self.ticker = analysis_ticker(rng=self.rng)
        self.ticker.start(now)
        logger.info("AI analysis started for %s", self.file["name"])
        return True

    def status(self, now: Optional[float] = None) -> str:
        return self.analysis.status(now)

    def detections(self, now: Optional[float] = None) -> Dict:
        now = time.monotonic() if now is None else now
        state = self.analysis.status(now)
        if state == "complete":
            if self.ticker is not None:
                self.ticker.cancel()
            return dict(FINAL_DETECTIONS)
        if state == "running" and self.ticker is not None:
            self.ticker.advance(now)
            values = dict(EMPTY_DETECTIONS)
            values.update(self.ticker.values)
            return values
        return dict(EMPTY_DETECTIONS)

    def show_overlays(self, now: Optional[float] = None) -> bool:
        return self.analysis.is_complete(now)

    def claim_upload(self, name: str, size: int) -> bool:
        """Record the uploader selection; False if it was already taken in."""
        key = (name, int(size))
        if key == self.upload_key:
            return False
        self.upload_key = key
        return True

    def release_upload(self):
        self.upload_key = None

    def remove(self):
        self.reset()
        self.release_upload()

    def reset(self):
        self.file = None
        self._pending = None
        self.upload = TimedAction(config.UPLOAD_SECONDS)
        self.analysis = TimedAction(config.ANALYSIS_SECONDS)
        self.progress = UploadProgress(self.rng)
        if self.ticker is not None:
            self.ticker.cancel()
        self.ticker = None

    def close(self):
        if self.ticker is not None:
            self.ticker.cancel()
        self.upload.cancel()
        self.analysis.cancel()
        self.closed = True
