from __future__ import annotations

import argparse
import csv
import json
import logging
import statistics
from pathlib import Path
from typing import Optional

from ..sim.core.config import SimulationConfig
from ..sim.core.simulation import Simulation
from ..sim.types.metrics import TickMetrics

logger = logging.getLogger(__name__)

DEFAULT_FRAME_MS = 1000.0 / 60.0

_HEADER = [
    "tick",
    "population",
    "avg_speed",
    "min_speed",
    "max_speed",
    "avg_acceleration",
    "max_acceleration",
    "neighbor_checks",
    "tick_ms",
]


def _format_row(metrics: TickMetrics, tick_ms: float) -> list[object]:
    return [
        metrics.tick,
        metrics.population,
        f"{metrics.average_speed:.4f}",
        f"{metrics.min_speed:.4f}",
        f"{metrics.max_speed:.4f}",
        f"{metrics.average_acceleration:.4f}",
        f"{metrics.max_acceleration:.4f}",
        metrics.neighbor_checks,
        f"{tick_ms:.3f}",
    ]


def _summary_stats(values: list[float]) -> dict[str, float]:
    if not values:
        return {"min": 0.0, "max": 0.0, "avg": 0.0, "p50": 0.0, "p90": 0.0, "p99": 0.0}
    if len(values) == 1:
        cuts = [float(values[0])] * 99
    else:
        # Linear interpolation between order statistics.
        cuts = statistics.quantiles(values, n=100, method="inclusive")
    return {
        "min": float(min(values)),
        "max": float(max(values)),
        "avg": float(statistics.fmean(values)),
        "p50": float(cuts[49]),
        "p90": float(cuts[89]),
        "p99": float(cuts[98]),
    }


def build_config(config_path: Optional[Path], seed: Optional[int]) -> SimulationConfig:
    config = SimulationConfig.from_yaml(config_path) if config_path else SimulationConfig()
    if seed is not None:
        config.seed = seed
    return config.validate()


def run_headless(
    steps: int,
    seed: Optional[int],
    log_path: Optional[Path],
    deterministic_log: bool = False,
    frame_ms: float = DEFAULT_FRAME_MS,
    config_path: Optional[Path] = None,
    summary_path: Optional[Path] = None,
) -> Simulation:
    if steps < 0:
        raise ValueError(f"steps must not be negative, got {steps}")
    config = build_config(config_path, seed)
    simulation = Simulation(config)
    simulation.bootstrap()
    logger.info(
        "Running %d headless ticks (seed=%d, birds=%d, frame_ms=%.3f)",
        steps,
        config.seed,
        config.population_size,
        frame_ms,
    )

    writer = None
    csv_file = None
    if log_path:
        csv_file = Path(log_path).open("w", newline="")
        writer = csv.writer(csv_file)
        writer.writerow(_HEADER)

    tick_ms_series: list[float] = []
    speed_series: list[float] = []
    acceleration_series: list[float] = []
    neighbor_checks_series: list[float] = []

    try:
        for _ in range(steps):
            metrics = simulation.on_frame_elapsed(frame_ms)
            tick_ms = 0.0 if deterministic_log else metrics.tick_duration_ms
            tick_ms_series.append(tick_ms)
            speed_series.append(metrics.average_speed)
            acceleration_series.append(metrics.average_acceleration)
            neighbor_checks_series.append(float(metrics.neighbor_checks))
            if writer:
                writer.writerow(_format_row(metrics, tick_ms))
    finally:
        if csv_file:
            csv_file.close()

    if summary_path:
        summary = {
            "steps": steps,
            "seed": config.seed,
            "population": len(simulation.current_population()),
            "frame_ms": frame_ms,
            "deterministic_log": deterministic_log,
            "tick_ms": _summary_stats(tick_ms_series),
            "avg_speed": _summary_stats(speed_series),
            "avg_acceleration": _summary_stats(acceleration_series),
            "neighbor_checks": _summary_stats(neighbor_checks_series),
        }
        Path(summary_path).write_text(json.dumps(summary, indent=2))

    logger.info("Headless run finished after %d ticks", simulation.tick)
    return simulation


def main() -> None:
    parser = argparse.ArgumentParser(description="Headless flock simulation")
    parser.add_argument("--steps", type=int, default=600)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", type=Path, default=None, help="YAML file overriding the default configuration")
    parser.add_argument("--frame-ms", type=float, default=DEFAULT_FRAME_MS, help="Milliseconds per simulated frame")
    parser.add_argument("--log", type=Path, default=None, help="CSV file to write per-tick metrics")
    parser.add_argument("--summary", type=Path, default=None, help="Optional JSON file to write summary stats")
    parser.add_argument(
        "--deterministic-log",
        action="store_true",
        help="Write deterministic CSV (tick_ms is forced to 0.000 so identical seeds match).",
    )
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run_headless(
        args.steps,
        args.seed,
        args.log,
        deterministic_log=args.deterministic_log,
        frame_ms=args.frame_ms,
        config_path=args.config,
        summary_path=args.summary,
    )


if __name__ == "__main__":
    main()
