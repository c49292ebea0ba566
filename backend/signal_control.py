import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


class ControlMode(str, Enum):
    AI = "ai"
    SCHEDULED = "scheduled"
    MANUAL = "manual"


MODE_LABELS = {
    ControlMode.AI: "AI Automated",
    ControlMode.SCHEDULED: "Scheduled Plans",
    ControlMode.MANUAL: "Manual Override",
}

MODE_COLORS = {
    ControlMode.AI: "#60a5fa",
    ControlMode.SCHEDULED: "#4ade80",
    ControlMode.MANUAL: "#fb923c",
}


@dataclass(frozen=True)
class PhaseLimit:
    minimum: int
    maximum: int
    step: int

    def clamp(self, seconds) -> int:
        value = int(round(float(seconds) / self.step)) * self.step
        return max(self.minimum, min(self.maximum, value))


PHASE_LIMITS = {
    "north_south": PhaseLimit(10, 120, 5),
    "east_west": PhaseLimit(10, 120, 5),
    "pedestrian": PhaseLimit(5, 60, 5),
}

DEFAULT_PHASES = {"north_south": 30, "east_west": 25, "pedestrian": 15}


@dataclass
class SignalPanel:
    junctions: List[Dict]
    global_mode: ControlMode = ControlMode.AI
    selected_id: Optional[int] = None
    phases: Dict[str, int] = field(default_factory=lambda: dict(DEFAULT_PHASES))
    emergency: bool = False
    corridor_state: Dict[int, bool] = field(default_factory=dict)

    def __post_init__(self):
        if self.selected_id is None and self.junctions:
            self.selected_id = self.junctions[0]["id"]

    @property
    def selected(self) -> Optional[Dict]:
        for junction in self.junctions:
            if junction["id"] == self.selected_id:
                return junction
        return None

    def select(self, junction_id: int):
        if any(j["id"] == junction_id for j in self.junctions):
            self.selected_id = junction_id

    def set_global_mode(self, mode):
        self.global_mode = ControlMode(mode)
        logger.info("Global signal mode set to %s", self.global_mode.value)

    def manual_enabled(self) -> bool:
        junction = self.selected
        return junction is not None and junction.get("mode") != ControlMode.AI.value

    def set_phase(self, name: str, seconds) -> int:
        if name not in PHASE_LIMITS:
            raise KeyError(name)
        self.phases[name] = PHASE_LIMITS[name].clamp(seconds)
        return self.phases[name]

    @property
    def cycle_length(self) -> int:
        return int(sum(self.phases.values()))

    def toggle_emergency(self) -> bool:
        self.emergency = not self.emergency
        logger.info("Emergency override %s", "activated" if self.emergency else "deactivated")
        return self.emergency

    def corridor_active(self, corridor: Dict) -> bool:
        return self.corridor_state.get(corridor["id"], corridor.get("coordination") == "active")

    def set_corridor(self, corridor: Dict, active: bool):
        self.corridor_state[corridor["id"]] = bool(active)


def mode_color(mode: str) -> str:
    try:
        return MODE_COLORS[ControlMode(mode)]
    except ValueError:
        return "#94a3b8"
