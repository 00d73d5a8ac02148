from __future__ import annotations

from typing import Optional

from pygame.math import Vector2

from ..core.agent import Bird, Population
from ..core.config import SimulationConfig
from ..core.rng import DeterministicRng
from ..utils.math2d import normalize, scale


def spawn_bird(config: SimulationConfig, rng: DeterministicRng) -> Bird:
    margin = config.spawn_margin
    position = Vector2(
        rng.next_range(margin, config.width - margin),
        rng.next_range(margin, config.height - margin),
    )
    direction = normalize(Vector2(rng.next_range(-1.0, 1.0), rng.next_range(-1.0, 1.0)))
    speed = rng.next_range(config.min_speed, config.max_speed)
    return Bird(position=position, velocity=scale(speed, direction), acceleration=Vector2())


def spawn_population(
    config: SimulationConfig,
    rng: DeterministicRng,
    count: Optional[int] = None,
) -> Population:
    total = config.population_size if count is None else count
    return tuple(spawn_bird(config, rng) for _ in range(total))
