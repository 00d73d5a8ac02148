"""pygame front end for the flock.

The viewer only reads ``Simulation.current_population`` and feeds frame
deltas back in; it owns no simulation state.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

import pygame

from ..sim.core.agent import Bird
from ..sim.core.config import SimulationConfig
from ..sim.core.simulation import Simulation
from ..sim.utils.math2d import add, normalize, scale
from ..sim.utils.palette import acceleration_hue
from .headless import build_config

logger = logging.getLogger(__name__)

BACKGROUND = pygame.Color(16, 16, 24)
BOUNDS_COLOR = pygame.Color(200, 200, 200)
HEADING_COLOR = pygame.Color(255, 255, 255)


def bird_color(bird: Bird) -> pygame.Color:
    color = pygame.Color(0, 0, 0)
    color.hsla = (acceleration_hue(bird.acceleration), 100, 50, 100)
    return color


def draw_population(surface: pygame.Surface, population: Sequence[Bird], config: SimulationConfig) -> None:
    surface.fill(BACKGROUND)
    pygame.draw.rect(surface, BOUNDS_COLOR, pygame.Rect(0, 0, int(config.width), int(config.height)), 1)
    radius = config.agent_radius
    for bird in population:
        center = (bird.position.x, bird.position.y)
        pygame.draw.circle(surface, bird_color(bird), center, radius)
        tip = add(bird.position, scale(2 * radius, normalize(bird.velocity)))
        pygame.draw.line(surface, HEADING_COLOR, center, (tip.x, tip.y))


def run_viewer(config: SimulationConfig, fps: int = 60, max_frames: Optional[int] = None) -> Simulation:
    pygame.init()
    try:
        screen = pygame.display.set_mode((int(config.width), int(config.height)))
        pygame.display.set_caption("Flock")
        simulation = Simulation(config)
        simulation.bootstrap()
        clock = pygame.time.Clock()
        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            delta_ms = clock.tick(fps)
            simulation.on_frame_elapsed(float(delta_ms))
            draw_population(screen, simulation.current_population(), config)
            pygame.display.flip()
            frames += 1
            if max_frames is not None and frames >= max_frames:
                running = False
        logger.info("Viewer closed after %d frames", frames)
        return simulation
    finally:
        pygame.quit()


def main() -> None:
    parser = argparse.ArgumentParser(description="Flock viewer")
    parser.add_argument("--config", type=Path, default=None, help="YAML file overriding the default configuration")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run_viewer(build_config(args.config, args.seed), fps=args.fps)


if __name__ == "__main__":
    main()
