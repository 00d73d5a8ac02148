from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .metrics import TickMetrics


@dataclass(slots=True)
class Snapshot:
    tick: int
    metrics: Optional[TickMetrics]
    agents: List[Dict[str, Any]]
    world: "SnapshotWorld"


@dataclass(slots=True)
class SnapshotWorld:
    width: float
    height: float
    agent_radius: float
