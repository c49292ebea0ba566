from __future__ import annotations

import pytest

from backend.catalog import Catalog
from backend.signal_control import DEFAULT_PHASES, ControlMode, PhaseLimit, SignalPanel, mode_color


@pytest.fixture
def panel(catalog: Catalog) -> SignalPanel:
    return SignalPanel(catalog.records("signal_junctions"))


def test_defaults(panel: SignalPanel) -> None:
    assert panel.global_mode is ControlMode.AI
    assert panel.selected_id == 1
    assert panel.phases == DEFAULT_PHASES
    assert panel.cycle_length == 70
    assert not panel.emergency


def test_manual_controls_disabled_for_ai_junctions(panel: SignalPanel) -> None:
    assert not panel.manual_enabled()
    panel.select(2)
    assert panel.selected["name"] == "Silk Board Junction"
    assert panel.manual_enabled()
    panel.select(4)
    assert panel.manual_enabled()


def test_select_unknown_junction_is_ignored(panel: SignalPanel) -> None:
    panel.select(99)
    assert panel.selected_id == 1


@pytest.mark.parametrize(
    "name,requested,expected",
    [
        ("north_south", 200, 120),
        ("north_south", 3, 10),
        ("east_west", 47, 45),
        ("east_west", 60, 60),
        ("pedestrian", 2, 5),
        ("pedestrian", 90, 60),
    ],
)
def test_set_phase_clamps_to_limits(panel: SignalPanel, name: str, requested: int, expected: int) -> None:
    assert panel.set_phase(name, requested) == expected
    assert panel.phases[name] == expected


def test_cycle_length_is_sum_of_phases(panel: SignalPanel) -> None:
    panel.set_phase("north_south", 45)
    panel.set_phase("pedestrian", 20)
    assert panel.cycle_length == 45 + 25 + 20


def test_unknown_phase(panel: SignalPanel) -> None:
    with pytest.raises(KeyError):
        panel.set_phase("left_turn", 20)


def test_global_mode(panel: SignalPanel) -> None:
    panel.set_global_mode("manual")
    assert panel.global_mode is ControlMode.MANUAL
    with pytest.raises(ValueError):
        panel.set_global_mode("chaos")


def test_emergency_toggle(panel: SignalPanel) -> None:
    assert panel.toggle_emergency() is True
    assert panel.toggle_emergency() is False


def test_corridor_state(panel: SignalPanel, catalog: Catalog) -> None:
    corridors = catalog.records("corridors")
    assert [panel.corridor_active(c) for c in corridors] == [True, True, False]
    panel.set_corridor(corridors[2], True)
    panel.set_corridor(corridors[0], False)
    assert [panel.corridor_active(c) for c in corridors] == [False, True, True]


def test_phase_limit_rounds_to_step() -> None:
    limit = PhaseLimit(10, 120, 5)
    assert limit.clamp(33) == 35
    assert limit.clamp(31) == 30


def test_mode_color_fallback() -> None:
    assert mode_color("ai") == "#60a5fa"
    assert mode_color("unknown") == "#94a3b8"
