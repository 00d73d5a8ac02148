from __future__ import annotations

from pygame.math import Vector2

from .math2d import magnitude

HUE_PER_ACCELERATION = 10.0


def acceleration_hue(acceleration: Vector2, hue_scale: float = HUE_PER_ACCELERATION) -> float:
    """Map acceleration magnitude onto the colour wheel, wrapping at 360."""
    return (magnitude(acceleration) * hue_scale) % 360.0
