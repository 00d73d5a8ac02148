from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.agent import Bird, Population
from ..core.config import SimulationConfig
from ..core.spatial_grid import SpatialGrid
from ..utils.math2d import add, clamp_value, magnitude, normalize, scale
from .boundary import augmented_neighbors, virtual_images
from .forces import steering_acceleration


@dataclass(frozen=True, slots=True)
class StepResult:
    population: Population
    neighbor_checks: int


def frame_delta(delta_ms: float, config: SimulationConfig) -> float:
    return delta_ms / config.delta_divisor


def integrate_bird(bird: Bird, candidates: Sequence[Bird], d: float, config: SimulationConfig) -> Bird:
    # Position and velocity advance with the acceleration computed last tick;
    # the freshly computed one is only stored.
    old_acceleration = bird.acceleration
    position = add(
        add(bird.position, scale(d, bird.velocity)),
        scale(0.5 * d * d, old_acceleration),
    )
    moved = add(bird.velocity, scale(d, old_acceleration))
    speed = clamp_value(magnitude(moved), config.min_speed, config.max_speed)
    velocity = scale(speed, normalize(moved))
    acceleration = steering_acceleration(bird, candidates, config)
    return Bird(position=position, velocity=velocity, acceleration=acceleration)


def integrate(
    population: Sequence[Bird],
    d: float,
    config: SimulationConfig,
    grid: Optional[SpatialGrid] = None,
    out: Optional[List[Bird]] = None,
) -> StepResult:
    """Advance every bird by one tick.

    All birds read the same tick-start ``population``. When ``out`` is given
    the new generation is written into it (it is cleared first), which lets
    the driver reuse its back buffer.
    """
    snapshot = tuple(population)
    target: List[Bird] = out if out is not None else []
    target.clear()
    neighbor_checks = 0

    if grid is not None:
        grid.rebuild(snapshot)
        query_radius = config.alignment_radius

    for bird in snapshot:
        if grid is None:
            candidates = augmented_neighbors(bird, snapshot, config)
        else:
            candidates = grid.get_neighbors(bird.position, query_radius)
            candidates.extend(virtual_images(bird, config))
        neighbor_checks += len(candidates)
        target.append(integrate_bird(bird, candidates, d, config))

    return StepResult(population=tuple(target), neighbor_checks=neighbor_checks)
