from __future__ import annotations

from typing import List, Sequence

from pygame.math import Vector2

from ..core.agent import Bird
from ..core.config import SimulationConfig


def virtual_images(bird: Bird, config: SimulationConfig) -> List[Bird]:
    """Project ``bird`` onto the four world edges.

    Each image keeps the bird's velocity and carries no acceleration. Images
    only ever act as neighbors; they are never integrated or drawn.
    """
    x = bird.position.x
    y = bird.position.y
    return [
        Bird(Vector2(0.0, y), Vector2(bird.velocity), Vector2()),
        Bird(Vector2(config.width, y), Vector2(bird.velocity), Vector2()),
        Bird(Vector2(x, 0.0), Vector2(bird.velocity), Vector2()),
        Bird(Vector2(x, config.height), Vector2(bird.velocity), Vector2()),
    ]


def augmented_neighbors(bird: Bird, population: Sequence[Bird], config: SimulationConfig) -> List[Bird]:
    # Images are appended unconditionally; the force bands discard far ones.
    candidates = list(population)
    candidates.extend(virtual_images(bird, config))
    return candidates
