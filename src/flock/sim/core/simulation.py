"""Event-driven driver for the flock.

The host delivers two kinds of events: a single ``on_population_ready`` once
the initial birds exist, then ``on_frame_elapsed`` once per rendered frame.
Each frame event runs exactly one integration pass over the whole
population. Readers call ``current_population`` between events and always
see a complete generation.
"""
from __future__ import annotations

import logging
import math
from enum import Enum
from time import perf_counter
from typing import Any, Dict, Iterable, List, Optional

from .agent import Bird, Population
from .config import SimulationConfig
from .rng import DeterministicRng
from .spatial_grid import SpatialGrid
from ..systems import metrics as metrics_system
from ..systems.integrator import frame_delta, integrate
from ..systems.population import spawn_population
from ..types.metrics import TickMetrics
from ..types.snapshot import Snapshot, SnapshotWorld
from ..utils.palette import acceleration_hue

logger = logging.getLogger(__name__)


class SimulationState(str, Enum):
    UNINITIALIZED = "Uninitialized"
    RUNNING = "Running"


class Simulation:
    def __init__(self, config: SimulationConfig):
        self._config = config.validate()
        self._state = SimulationState.UNINITIALIZED
        self._front: List[Bird] = []
        self._back: List[Bird] = []
        self._grid: Optional[SpatialGrid] = (
            SpatialGrid(config.cell_size) if config.neighbor_index == "grid" else None
        )
        self._tick = 0
        self._metrics: TickMetrics | None = None
        if config.speed_range_collapsed:
            logger.warning(
                "min_speed equals max_speed (%s); every bird will travel at exactly that speed",
                config.min_speed,
            )

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def tick(self) -> int:
        return self._tick

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    def bootstrap(self, rng: Optional[DeterministicRng] = None) -> Population:
        generator = rng if rng is not None else DeterministicRng(self._config.seed)
        population = spawn_population(self._config, generator)
        self.on_population_ready(population)
        return population

    def on_population_ready(self, population: Iterable[Bird]) -> None:
        if self._state is not SimulationState.UNINITIALIZED:
            raise RuntimeError("Population has already been delivered")
        birds = [bird.copy() for bird in population]
        if not birds:
            raise ValueError("Cannot start a simulation with an empty population")
        self._front = birds
        self._back = []
        self._state = SimulationState.RUNNING
        logger.info("Population ready: %d birds, simulation running", len(birds))

    def on_frame_elapsed(self, delta_ms: float) -> TickMetrics | None:
        if not math.isfinite(delta_ms) or delta_ms < 0:
            raise ValueError(f"Frame delta must be a finite non-negative number, got {delta_ms}")
        if self._state is SimulationState.UNINITIALIZED:
            return None

        start = perf_counter()
        d = frame_delta(delta_ms, self._config)
        result = integrate(self._front, d, self._config, grid=self._grid, out=self._back)
        self._front, self._back = self._back, self._front
        self._tick += 1
        elapsed_ms = (perf_counter() - start) * 1000.0

        self._metrics = metrics_system.create_metrics(
            self._tick,
            self._front,
            result.neighbor_checks,
            elapsed_ms,
        )
        logger.debug("tick %d advanced in %.3f ms (d=%.4f)", self._tick, elapsed_ms, d)
        return self._metrics

    def current_population(self) -> Population:
        # Copies, so a reader editing vectors in place cannot reach the live generation.
        return tuple(bird.copy() for bird in self._front)

    def snapshot(self) -> Snapshot:
        config = self._config
        return Snapshot(
            tick=self._tick,
            metrics=self._metrics,
            agents=[self._agent_snapshot(bird) for bird in self._front],
            world=SnapshotWorld(width=config.width, height=config.height, agent_radius=config.agent_radius),
        )

    @staticmethod
    def _agent_snapshot(bird: Bird) -> Dict[str, Any]:
        return {
            "x": bird.position.x,
            "y": bird.position.y,
            "vx": bird.velocity.x,
            "vy": bird.velocity.y,
            "ax": bird.acceleration.x,
            "ay": bird.acceleration.y,
            "speed": bird.speed,
            "heading": bird.heading,
            "hue": acceleration_hue(bird.acceleration),
        }
