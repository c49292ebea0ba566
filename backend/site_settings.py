import ipaddress
import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)

RESOLUTIONS = {
    "1920x1080": "1920x1080 (FHD)",
    "1280x720": "1280x720 (HD)",
    "640x480": "640x480 (SD)",
}

FPS_RANGE = (1, 60)


@dataclass(frozen=True)
class NumberSetting:
    key: str
    label: str
    default: int
    minimum: int
    maximum: int

    def clamp(self, value) -> int:
        return max(self.minimum, min(self.maximum, int(value)))


ALERT_THRESHOLDS = (
    NumberSetting("congestion_threshold", "Congestion Threshold (%)", 85, 0, 100),
    NumberSetting("accuracy_threshold", "Model Accuracy Threshold (%)", 80, 0, 100),
)

RETENTION_SETTINGS = (
    NumberSetting("video_retention_days", "Video Retention (days)", 30, 1, 365),
    NumberSetting("analytics_retention_months", "Analytics Data (months)", 12, 1, 60),
)

PERFORMANCE_SETTINGS = (
    NumberSetting("inference_batch_size", "Inference Batch Size", 8, 1, 64),
    NumberSetting("model_update_hours", "Model Update Frequency (hours)", 24, 1, 168),
)


def default_values() -> Dict[str, int]:
    return {s.key: s.default for s in ALERT_THRESHOLDS + RETENTION_SETTINGS + PERFORMANCE_SETTINGS}


def validate_camera(form: Dict, junction_names: List[str]) -> List[str]:
    errors = []
    if not str(form.get("name", "")).strip():
        errors.append("Camera name is required")
    if form.get("junction") not in junction_names:
        errors.append("Select a junction")
    ip = str(form.get("ip", "")).strip()
    if not ip:
        errors.append("IP address is required")
    else:
        try:
            ipaddress.ip_address(ip)
        except ValueError:
            errors.append(f"Invalid IP address: {ip}")
    if form.get("resolution") not in RESOLUTIONS:
        errors.append("Unsupported resolution")
    try:
        fps = int(form.get("fps", 0))
    except (TypeError, ValueError):
        fps = 0
    if not FPS_RANGE[0] <= fps <= FPS_RANGE[1]:
        errors.append(f"FPS must be between {FPS_RANGE[0]} and {FPS_RANGE[1]}")
    return errors


def next_camera_id(cameras: List[Dict]) -> str:
    numbers = []
    for cam in cameras:
        digits = "".join(ch for ch in str(cam.get("id", "")) if ch.isdigit())
        if digits:
            numbers.append(int(digits))
    return f"CAM{(max(numbers) + 1 if numbers else 1):03d}"


def add_camera(cameras: List[Dict], form: Dict, junction_names: List[str]) -> Tuple[List[Dict], List[str]]:
    errors = validate_camera(form, junction_names)
    if errors:
        return cameras, errors
    camera = {
        "id": next_camera_id(cameras),
        "name": str(form["name"]).strip(),
        "junction": form["junction"],
        "ip": str(form["ip"]).strip(),
        "status": "online",
        "resolution": form["resolution"],
        "fps": int(form["fps"]),
        "last_ping": "Just now",
    }
    logger.info("Saving camera: %s", camera)
    return cameras + [camera], []


def camera_status_counts(cameras: List[Dict]) -> Dict[str, int]:
    counts = {"online": 0, "offline": 0}
    for cam in cameras:
        key = "online" if cam.get("status") == "online" else "offline"
        counts[key] += 1
    return counts


def save_settings(values: Dict[str, int]) -> Dict[str, int]:
    """Clamp every known setting; the result lives only as long as the screen."""
    saved = default_values()
    for setting in ALERT_THRESHOLDS + RETENTION_SETTINGS + PERFORMANCE_SETTINGS:
        if setting.key in values:
            saved[setting.key] = setting.clamp(values[setting.key])
    logger.info("Settings saved: %s", saved)
    return saved
