from __future__ import annotations

import pytest

from backend.errors import InvalidUploadError
from backend.telemetry import CONGESTION_LEVELS
from backend.ticker import make_rng
from backend.video_analysis import EMPTY_DETECTIONS, FINAL_DETECTIONS, VideoAnalysis


@pytest.fixture
def session() -> VideoAnalysis:
    return VideoAnalysis(rng=make_rng(11))


def test_rejects_non_video(session: VideoAnalysis) -> None:
    with pytest.raises(InvalidUploadError):
        session.begin_upload("notes.txt", 10, mime_type="text/plain", now=0.0)
    assert not session.has_file(5.0)


def test_upload_progress_until_done(session: VideoAnalysis) -> None:
    assert session.begin_upload("junction.mp4", 1536, duration_seconds=125, now=0.0)
    assert session.is_uploading(1.0)
    assert not session.has_file(1.0)

    first = session.upload_progress(0.2)
    assert 0.0 <= first <= 15.0
    assert session.upload_progress(1.0) >= first

    assert session.upload_progress(2.0) == 100.0
    assert session.has_file(2.0)
    assert session.file == {"name": "junction.mp4", "size": "1.5 KB", "duration": "2:05", "path": None}


def test_analysis_requires_a_file(session: VideoAnalysis) -> None:
    assert not session.start_analysis(now=0.0)
    assert session.detections(0.0) == EMPTY_DETECTIONS


def test_analysis_runs_then_snaps_to_final(session: VideoAnalysis) -> None:
    session.begin_upload("junction.mp4", 2048, now=0.0)
    assert session.start_analysis(now=3.0)
    assert not session.start_analysis(now=4.0)
    assert session.status(4.0) == "running"

    live = session.detections(5.0)
    assert set(live) == set(EMPTY_DETECTIONS)
    assert live["congestion_level"] in CONGESTION_LEVELS
    assert all(live[k] >= 0 for k in ("cars", "trucks", "bikes", "pedestrians", "queue_length"))
    assert not session.show_overlays(5.0)

    assert session.detections(11.0) == FINAL_DETECTIONS
    assert session.status(11.0) == "complete"
    assert session.show_overlays(11.0)
    assert session.ticker.cancelled


def test_reset_clears_file(session: VideoAnalysis) -> None:
    session.begin_upload("junction.mp4", 2048, now=0.0)
    session.has_file(3.0)
    session.reset()
    assert session.file is None
    assert session.status(3.0) == "idle"


def test_closed_session_ignores_new_work(session: VideoAnalysis) -> None:
    session.begin_upload("junction.mp4", 2048, now=0.0)
    session.has_file(2.5)
    session.close()
    assert not session.begin_upload("other.mp4", 10, now=3.0)
    assert not session.start_analysis(now=3.0)
    assert session.status(4.0) == "idle"


def test_same_clip_can_be_uploaded_again_after_remove(session: VideoAnalysis) -> None:
    assert session.claim_upload("junction.mp4", 2048)
    session.begin_upload("junction.mp4", 2048, now=0.0)
    assert session.has_file(2.5)
    assert not session.claim_upload("junction.mp4", 2048)

    session.remove()
    assert not session.has_file(3.0)
    assert session.claim_upload("junction.mp4", 2048)
    assert session.begin_upload("junction.mp4", 2048, now=3.0)
    assert session.has_file(5.5)


def test_clearing_uploader_releases_selection(session: VideoAnalysis) -> None:
    assert session.claim_upload("junction.mp4", 2048)
    session.begin_upload("junction.mp4", 2048, now=0.0)
    assert session.upload_key == ("junction.mp4", 2048)
    session.release_upload()
    assert session.claim_upload("junction.mp4", 2048)
