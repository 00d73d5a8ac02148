from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path

import yaml

NEIGHBOR_INDEXES = ("brute", "grid")


@dataclass
class ForceConfig:
    separation_strength: float = 1000.0
    separation_radius_factor: float = 5.0
    alignment_radius_factor: float = 6.0
    separation_weight: float = 5.0
    alignment_weight: float = 2.0
    cohesion_weight: float = 1.0
    # Floor on (distance - radius)^2 so a neighbor exactly one radius away
    # pushes with at most separation_strength / floor.
    separation_min_denominator: float = 1.0


@dataclass
class SimulationConfig:
    width: float = 640.0
    height: float = 640.0
    min_speed: float = 2.0
    max_speed: float = 2.0
    agent_radius: float = 5.0
    population_size: int = 100
    spawn_margin: float = 50.0
    # Frame milliseconds are divided by this before integration.
    delta_divisor: float = 50.0
    seed: int = 42
    neighbor_index: str = "brute"
    cell_size: float = 30.0
    forces: ForceConfig = field(default_factory=ForceConfig)

    @property
    def separation_radius(self) -> float:
        return self.forces.separation_radius_factor * self.agent_radius

    @property
    def alignment_radius(self) -> float:
        return self.forces.alignment_radius_factor * self.agent_radius

    @property
    def speed_range_collapsed(self) -> bool:
        return self.min_speed == self.max_speed

    def validate(self) -> "SimulationConfig":
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"World size must be positive, got {self.width}x{self.height}")
        if self.agent_radius <= 0:
            raise ValueError(f"agent_radius must be positive, got {self.agent_radius}")
        if self.min_speed < 0 or self.max_speed < 0:
            raise ValueError("Speeds must not be negative")
        if self.min_speed > self.max_speed:
            raise ValueError(f"min_speed ({self.min_speed}) exceeds max_speed ({self.max_speed})")
        if self.population_size < 1:
            raise ValueError(f"population_size must be at least 1, got {self.population_size}")
        if self.spawn_margin < 0 or 2 * self.spawn_margin > min(self.width, self.height):
            raise ValueError(f"spawn_margin {self.spawn_margin} leaves no room to spawn")
        if not math.isfinite(self.delta_divisor) or self.delta_divisor <= 0:
            raise ValueError(f"delta_divisor must be positive, got {self.delta_divisor}")
        if self.neighbor_index not in NEIGHBOR_INDEXES:
            raise ValueError(f"Unknown neighbor index: {self.neighbor_index}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        forces = self.forces
        if forces.separation_radius_factor > forces.alignment_radius_factor:
            raise ValueError("separation_radius_factor must not exceed alignment_radius_factor")
        if forces.separation_min_denominator <= 0:
            raise ValueError("separation_min_denominator must be positive")
        return self

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data)


def load_config(raw: dict) -> SimulationConfig:
    forces = ForceConfig(**raw.get("forces", {}))
    sim_values = {k: v for k, v in raw.items() if k != "forces"}
    return SimulationConfig(forces=forces, **sim_values).validate()
