from __future__ import annotations

import json

import pytest

from backend.catalog import REQUIRED_SECTIONS, Catalog, load_catalog
from backend.errors import CatalogError


def test_bundled_catalog_has_every_section(catalog: Catalog) -> None:
    for name in REQUIRED_SECTIONS:
        assert name in catalog
    assert len(catalog.records("violations")) == 3
    assert catalog.section("dashboard")["kpis"][0]["title"] == "Active Junctions"


def test_records_are_copies(catalog: Catalog) -> None:
    rows = catalog.records("violations")
    rows[0]["status"] = "rejected"
    rows.append({"id": "VIO999"})
    fresh = catalog.records("violations")
    assert fresh[0]["status"] == "pending"
    assert len(fresh) == 3


def test_records_requires_list_section(catalog: Catalog) -> None:
    with pytest.raises(CatalogError):
        catalog.records("landing")


def test_unknown_section(catalog: Catalog) -> None:
    with pytest.raises(CatalogError):
        catalog.section("weather")


def test_missing_sections_rejected() -> None:
    with pytest.raises(CatalogError) as excinfo:
        Catalog({"landing": {}})
    assert "live_cameras" in str(excinfo.value)


def test_source_mapping_is_not_shared() -> None:
    data = {name: [] for name in REQUIRED_SECTIONS}
    catalog = Catalog(data)
    data["violations"].append({"id": "VIO001"})
    assert catalog.records("violations") == []


def test_load_missing_file(tmp_path) -> None:
    with pytest.raises(CatalogError):
        load_catalog(tmp_path / "nope.json")


def test_load_invalid_json(tmp_path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog(path)


def test_load_non_object_root(tmp_path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog(path)


def test_load_custom_file(tmp_path) -> None:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({name: [] for name in REQUIRED_SECTIONS}), encoding="utf-8")
    assert load_catalog(str(path)).records("models") == []
