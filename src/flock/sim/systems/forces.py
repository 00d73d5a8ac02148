"""Separation, alignment and cohesion for one bird against its candidates.

Candidates are the tick-start population plus the bird's boundary images.
The bird itself is among them: it sits at distance zero, so it adds nothing
to the separation sum but still counts toward the separation mean and the
cohesion centroid.
"""
from __future__ import annotations

import logging
from typing import List, Sequence

from pygame.math import Vector2

from ..core.agent import Bird
from ..core.config import SimulationConfig
from ..utils.math2d import add, distance, divide, normalize, scale, sub

logger = logging.getLogger(__name__)


def separation_neighbors(subject: Bird, candidates: Sequence[Bird], config: SimulationConfig) -> List[Bird]:
    radius = config.separation_radius
    return [other for other in candidates if distance(subject.position, other.position) <= radius]


def cohesion_neighbors(subject: Bird, candidates: Sequence[Bird], config: SimulationConfig) -> List[Bird]:
    return separation_neighbors(subject, candidates, config)


def alignment_neighbors(subject: Bird, candidates: Sequence[Bird], config: SimulationConfig) -> List[Bird]:
    inner = config.separation_radius
    outer = config.alignment_radius
    return [
        other
        for other in candidates
        if inner < distance(subject.position, other.position) <= outer
    ]


def separation(subject: Bird, neighbors: Sequence[Bird], config: SimulationConfig) -> Vector2:
    if not neighbors:
        return Vector2()
    strength = config.forces.separation_strength
    floor = config.forces.separation_min_denominator
    radius = config.agent_radius
    total = Vector2()
    for other in neighbors:
        gap = distance(subject.position, other.position) - radius
        denominator = gap * gap
        if denominator < floor:
            logger.debug("separation saturated at gap %.6f", gap)
            denominator = floor
        push = normalize(sub(subject.position, other.position))
        total = add(total, scale(strength / denominator, push))
    return divide(len(neighbors), total)


def alignment(subject: Bird, neighbors: Sequence[Bird]) -> Vector2:
    if not neighbors:
        return Vector2()
    total = Vector2()
    for other in neighbors:
        total = add(total, other.velocity)
    return sub(divide(len(neighbors), total), subject.velocity)


def cohesion(subject: Bird, neighbors: Sequence[Bird]) -> Vector2:
    if not neighbors:
        return Vector2()
    total = Vector2()
    for other in neighbors:
        total = add(total, other.position)
    return sub(divide(len(neighbors), total), subject.position)


def steering_acceleration(subject: Bird, candidates: Sequence[Bird], config: SimulationConfig) -> Vector2:
    """Weighted sum of the three rules.

    Separation keeps its magnitude so the push grows as birds close in;
    alignment and cohesion contribute direction only.
    """
    forces = config.forces
    close = separation_neighbors(subject, candidates, config)
    ring = alignment_neighbors(subject, candidates, config)

    separation_force = separation(subject, close, config)
    alignment_force = normalize(alignment(subject, ring))
    cohesion_force = normalize(cohesion(subject, close))

    result = scale(forces.separation_weight, separation_force)
    result = add(result, scale(forces.alignment_weight, alignment_force))
    return add(result, scale(forces.cohesion_weight, cohesion_force))
