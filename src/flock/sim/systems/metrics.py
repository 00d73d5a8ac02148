from __future__ import annotations

from typing import Sequence

from ..core.agent import Bird
from ..types.metrics import TickMetrics
from ..utils.math2d import magnitude


def create_metrics(
    tick: int,
    population: Sequence[Bird],
    neighbor_checks: int,
    duration_ms: float,
) -> TickMetrics:
    count = len(population)
    if count == 0:
        return TickMetrics(
            tick=tick,
            population=0,
            average_speed=0.0,
            min_speed=0.0,
            max_speed=0.0,
            average_acceleration=0.0,
            max_acceleration=0.0,
            neighbor_checks=neighbor_checks,
            tick_duration_ms=duration_ms,
        )
    speeds = [magnitude(bird.velocity) for bird in population]
    accelerations = [magnitude(bird.acceleration) for bird in population]
    return TickMetrics(
        tick=tick,
        population=count,
        average_speed=sum(speeds) / count,
        min_speed=min(speeds),
        max_speed=max(speeds),
        average_acceleration=sum(accelerations) / count,
        max_acceleration=max(accelerations),
        neighbor_checks=neighbor_checks,
        tick_duration_ms=duration_ms,
    )
