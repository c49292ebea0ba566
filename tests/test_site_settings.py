from __future__ import annotations

import pytest

from backend.catalog import Catalog
from backend.site_settings import (
    ALERT_THRESHOLDS,
    add_camera,
    camera_status_counts,
    default_values,
    next_camera_id,
    save_settings,
    validate_camera,
)


@pytest.fixture
def junction_names(catalog: Catalog) -> list:
    return [j["name"] for j in catalog.records("site_junctions")]


def _form(**overrides) -> dict:
    form = {
        "name": "Silk Board Cam 2",
        "junction": "Silk Board Junction",
        "ip": "192.168.1.100",
        "resolution": "1280x720",
        "fps": 25,
    }
    form.update(overrides)
    return form


def test_default_values() -> None:
    assert default_values() == {
        "congestion_threshold": 85,
        "accuracy_threshold": 80,
        "video_retention_days": 30,
        "analytics_retention_months": 12,
        "inference_batch_size": 8,
        "model_update_hours": 24,
    }


def test_threshold_clamp() -> None:
    congestion = ALERT_THRESHOLDS[0]
    assert congestion.clamp(150) == 100
    assert congestion.clamp(-5) == 0


def test_valid_camera_form(junction_names) -> None:
    assert validate_camera(_form(), junction_names) == []


@pytest.mark.parametrize(
    "overrides,fragment",
    [
        ({"name": "  "}, "name"),
        ({"junction": "Nowhere"}, "junction"),
        ({"ip": ""}, "IP address is required"),
        ({"ip": "300.1.1.1"}, "Invalid IP"),
        ({"resolution": "4k"}, "resolution"),
        ({"fps": 0}, "FPS"),
        ({"fps": 61}, "FPS"),
        ({"fps": "fast"}, "FPS"),
    ],
)
def test_invalid_camera_form(junction_names, overrides, fragment) -> None:
    errors = validate_camera(_form(**overrides), junction_names)
    assert len(errors) == 1
    assert fragment in errors[0]


def test_add_camera(catalog: Catalog, junction_names) -> None:
    cameras = catalog.records("cameras")
    assert next_camera_id(cameras) == "CAM004"
    updated, errors = add_camera(cameras, _form(fps=60), junction_names)
    assert errors == []
    assert len(cameras) == 3
    new = updated[-1]
    assert new["id"] == "CAM004"
    assert new["status"] == "online"
    assert new["last_ping"] == "Just now"
    assert new["fps"] == 60


def test_add_camera_with_errors_keeps_list(catalog: Catalog, junction_names) -> None:
    cameras = catalog.records("cameras")
    updated, errors = add_camera(cameras, _form(ip="nope"), junction_names)
    assert updated is cameras
    assert errors


def test_camera_status_counts(catalog: Catalog) -> None:
    assert camera_status_counts(catalog.records("cameras")) == {"online": 2, "offline": 1}


def test_save_settings_clamps_and_fills_defaults() -> None:
    saved = save_settings({"congestion_threshold": 140, "inference_batch_size": 0, "unknown": 5})
    assert saved["congestion_threshold"] == 100
    assert saved["inference_batch_size"] == 1
    assert saved["video_retention_days"] == 30
    assert "unknown" not in saved
