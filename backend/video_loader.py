import math
import os
from datetime import datetime
from typing import Optional

import cv2

from backend.config import UPLOAD_DIR, VIDEO_EXTENSIONS
from backend.errors import InvalidUploadError


def is_video(name: str, mime_type: Optional[str] = None) -> bool:
    if mime_type and str(mime_type).startswith("video/"):
        return True
    ext = os.path.splitext(str(name))[1].lower().lstrip(".")
    return ext in VIDEO_EXTENSIONS


def validate_upload(name: str, mime_type: Optional[str] = None):
    if not is_video(name, mime_type):
        raise InvalidUploadError("Please select a valid video file")


def save_uploaded_video(uploaded_file, upload_dir: str = UPLOAD_DIR) -> str:
    validate_upload(uploaded_file.name, getattr(uploaded_file, "type", None))
    os.makedirs(upload_dir, exist_ok=True)
    safe_name = os.path.basename(uploaded_file.name)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_path = os.path.join(upload_dir, f"{ts}_{safe_name}")
    with open(out_path, "wb") as f:
        f.write(uploaded_file.getbuffer())
    return out_path


def get_duration_seconds(video_path: str) -> Optional[float]:
    cap = cv2.VideoCapture(video_path)
    if not cap.isOpened():
        return None
    frames = cap.get(cv2.CAP_PROP_FRAME_COUNT) or 0.0
    fps = cap.get(cv2.CAP_PROP_FPS) or 0.0
    cap.release()
    if fps <= 0 or frames <= 0:
        return None
    return float(frames) / float(fps)


def get_first_frame(video_path: str) -> Optional[object]:
    cap = cv2.VideoCapture(video_path)
    if not cap.isOpened():
        return None
    ok, frame = cap.read()
    cap.release()
    if not ok:
        return None
    return cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)


def format_file_size(num_bytes: int) -> str:
    if num_bytes <= 0:
        return "0 Bytes"
    sizes = ["Bytes", "KB", "MB", "GB"]
    i = min(len(sizes) - 1, int(math.floor(math.log(num_bytes) / math.log(1024))))
    value = round(num_bytes / math.pow(1024, i), 2)
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {sizes[i]}"


def format_duration(seconds: Optional[float]) -> str:
    if seconds is None or seconds != seconds:
        return "--:--"
    seconds = max(0.0, float(seconds))
    mins = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{mins}:{secs:02d}"
