from __future__ import annotations

from datetime import datetime

import pytest

from backend.catalog import Catalog
from backend.challans import (
    ChallanDesk,
    challan_totals,
    confidence_band,
    filter_violations,
    pending_count,
)


@pytest.fixture
def desk(catalog: Catalog) -> ChallanDesk:
    return ChallanDesk(catalog.records("violations"), catalog.records("challans"))


@pytest.mark.parametrize(
    "confidence,band",
    [(94, "high"), (90, "high"), (89.9, "medium"), (80, "medium"), (79, "low")],
)
def test_confidence_band(confidence: float, band: str) -> None:
    assert confidence_band(confidence) == band


def test_filter_by_search_term(catalog: Catalog) -> None:
    rows = catalog.records("violations")
    assert [r["id"] for r in filter_violations(rows, "ka 05")] == ["VIO002"]
    assert [r["id"] for r in filter_violations(rows, "SILK")] == ["VIO003"]
    assert [r["id"] for r in filter_violations(rows, "red light")] == ["VIO001"]
    assert len(filter_violations(rows, "  ")) == 3


def test_filter_by_status(catalog: Catalog) -> None:
    rows = catalog.records("violations")
    assert [r["id"] for r in filter_violations(rows, status="pending")] == ["VIO001", "VIO002"]
    assert [r["id"] for r in filter_violations(rows, "ka 01", status="approved")] == []


def test_challan_totals(catalog: Catalog) -> None:
    assert challan_totals(catalog.records("challans")) == {
        "issued": 2,
        "paid": 1,
        "pending": 1,
        "collected": 300,
        "outstanding": 1000,
    }


def test_approve_issues_challan(desk: ChallanDesk, catalog: Catalog) -> None:
    assert desk.begin_approval("VIO001")
    assert desk.issuing == "VIO001"
    challan = desk.complete_approval(now=datetime(2024, 9, 14, 15, 0, 0))

    assert challan["id"] == "CH003"
    assert challan["fine"] == 1000
    assert challan["status"] == "pending"
    assert challan["issued_at"] == "2024-09-14 15:00:00"
    assert challan["due_date"] == "2024-09-24 23:59:59"
    assert desk.get("VIO001")["status"] == "approved"
    assert desk.issuing is None
    assert pending_count(desk.violations) == 1
    assert challan_totals(desk.challans)["outstanding"] == 2000
    assert catalog.records("violations")[0]["status"] == "pending"


def test_only_pending_violations_can_be_decided(desk: ChallanDesk) -> None:
    assert not desk.begin_approval("VIO003")
    assert not desk.reject("VIO003")
    assert not desk.begin_approval("VIO404")


def test_reject_is_immediate(desk: ChallanDesk) -> None:
    assert desk.reject("VIO002")
    assert desk.get("VIO002")["status"] == "rejected"
    assert not desk.reject("VIO002")
    assert len(desk.challans) == 2


def test_complete_without_pending_approval(desk: ChallanDesk) -> None:
    assert desk.complete_approval() is None
