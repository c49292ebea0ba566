from __future__ import annotations

import pytest

from backend.errors import InvalidUploadError
from backend.video_loader import (
    format_duration,
    format_file_size,
    get_duration_seconds,
    is_video,
    save_uploaded_video,
    validate_upload,
)


class _Upload:
    def __init__(self, name: str, data: bytes, mime_type: str = "video/mp4") -> None:
        self.name = name
        self.type = mime_type
        self._data = data

    def getbuffer(self):
        return memoryview(self._data)


@pytest.mark.parametrize(
    "name,mime,expected",
    [
        ("clip.mp4", None, True),
        ("CLIP.MKV", None, True),
        ("junction.wmv", "", True),
        ("stream", "video/webm", True),
        ("notes.txt", "text/plain", False),
        ("photo.jpg", "image/jpeg", False),
    ],
)
def test_is_video(name, mime, expected) -> None:
    assert is_video(name, mime) is expected


def test_validate_upload_message() -> None:
    with pytest.raises(InvalidUploadError) as excinfo:
        validate_upload("report.pdf", "application/pdf")
    assert str(excinfo.value) == "Please select a valid video file"


@pytest.mark.parametrize(
    "size,text",
    [(0, "0 Bytes"), (500, "500 Bytes"), (1024, "1 KB"), (1536, "1.5 KB"), (5 * 1024 * 1024, "5 MB"), (3 * 1024 ** 3, "3 GB")],
)
def test_format_file_size(size, text) -> None:
    assert format_file_size(size) == text


@pytest.mark.parametrize(
    "seconds,text",
    [(None, "--:--"), (float("nan"), "--:--"), (0, "0:00"), (65.9, "1:05"), (754, "12:34")],
)
def test_format_duration(seconds, text) -> None:
    assert format_duration(seconds) == text


def test_save_uploaded_video(tmp_path) -> None:
    path = save_uploaded_video(_Upload("../../cam1.mp4", b"\x00\x01"), upload_dir=str(tmp_path))
    assert path.startswith(str(tmp_path))
    assert path.endswith("_cam1.mp4")
    with open(path, "rb") as f:
        assert f.read() == b"\x00\x01"


def test_save_rejects_non_video(tmp_path) -> None:
    with pytest.raises(InvalidUploadError):
        save_uploaded_video(_Upload("notes.txt", b"hi", "text/plain"), upload_dir=str(tmp_path))
    assert list(tmp_path.iterdir()) == []


def test_duration_of_unreadable_file(tmp_path) -> None:
    assert get_duration_seconds(str(tmp_path / "missing.mp4")) is None
