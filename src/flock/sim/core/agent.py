from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from pygame.math import Vector2

from ..utils.math2d import heading, magnitude


@dataclass(frozen=True, slots=True)
class Bird:
    """One flocking agent.

    Birds are values: a tick never edits a bird, it builds a new one from the
    previous generation.
    """

    position: Vector2
    velocity: Vector2
    acceleration: Vector2 = field(default_factory=Vector2)

    def copy(self) -> "Bird":
        return Bird(Vector2(self.position), Vector2(self.velocity), Vector2(self.acceleration))

    def __hash__(self) -> int:
        return hash((tuple(self.position), tuple(self.velocity), tuple(self.acceleration)))

    @property
    def speed(self) -> float:
        return magnitude(self.velocity)

    @property
    def heading(self) -> float:
        return heading(self.velocity)


Population = Tuple[Bird, ...]
