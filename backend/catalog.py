"""Read-only mock data behind every screen.

The catalog is loaded once and handed to the screens; a screen that needs to
mutate a record (a violation being approved, a junction's vehicle count)
works on the copy returned by ``records``.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

from backend.config import CATALOG_PATH
from backend.errors import CatalogError

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = (
    "landing",
    "live_cameras",
    "demo_videos",
    "dashboard",
    "map_junctions",
    "signal_junctions",
    "corridors",
    "violations",
    "challans",
    "traffic_data",
    "before_after_kpis",
    "violation_types",
    "junction_performance",
    "models",
    "model_performance",
    "model_drift",
    "labeler_queue",
    "cameras",
    "users",
    "site_junctions",
    "alert_rules",
    "api_integrations",
)


class Catalog:
    def __init__(self, data: Mapping[str, Any]):
        missing = [name for name in REQUIRED_SECTIONS if name not in data]
        if missing:
            raise CatalogError(f"Catalog is missing sections: {', '.join(missing)}")
        self._data = MappingProxyType(copy.deepcopy(dict(data)))

    def sections(self) -> List[str]:
        return list(self._data.keys())

    def section(self, name: str) -> Any:
        if name not in self._data:
            raise CatalogError(f"Unknown catalog section: {name}")
        return copy.deepcopy(self._data[name])

    def records(self, name: str) -> List[Dict[str, Any]]:
        value = self.section(name)
        if not isinstance(value, list):
            raise CatalogError(f"Catalog section {name} is not a list")
        return value

    def __getitem__(self, name: str) -> Any:
        return self.section(name)

    def __contains__(self, name: object) -> bool:
        return name in self._data


def load_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    path = Path(path) if path is not None else CATALOG_PATH
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise CatalogError(f"Catalog file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog file is not valid JSON: {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise CatalogError(f"Catalog root must be an object: {path}")
    logger.info("Loaded catalog from %s (%d sections)", path, len(data))
    return Catalog(data)
