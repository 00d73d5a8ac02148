from __future__ import annotations

from pathlib import Path

import pytest
from pytest import approx

from flock.sim.core.config import ForceConfig, SimulationConfig, load_config

ROOT = Path(__file__).resolve().parents[2]


def test_defaults_match_reference_constants(config):
    assert (config.width, config.height) == (640.0, 640.0)
    assert config.min_speed == config.max_speed == 2.0
    assert config.agent_radius == 5.0
    assert config.population_size == 100
    assert config.forces.separation_strength == 1000.0
    assert (config.forces.separation_weight, config.forces.alignment_weight, config.forces.cohesion_weight) == (
        5.0,
        2.0,
        1.0,
    )
    assert config.separation_radius == approx(25.0)
    assert config.alignment_radius == approx(30.0)
    assert config.speed_range_collapsed


def test_bundled_yaml_matches_defaults():
    loaded = SimulationConfig.from_yaml(ROOT / "config" / "flock.yaml")
    assert loaded == SimulationConfig()


def test_load_config_overrides_nested_values(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("population_size: 12\nmax_speed: 4\nforces:\n  cohesion_weight: 3\n")

    loaded = SimulationConfig.from_yaml(path)

    assert loaded.population_size == 12
    assert loaded.max_speed == 4
    assert loaded.forces.cohesion_weight == 3
    assert loaded.forces.separation_weight == 5.0


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert SimulationConfig.from_yaml(path) == SimulationConfig()


def test_unknown_keys_are_rejected():
    with pytest.raises(TypeError):
        load_config({"gravity": 9.8})
    with pytest.raises(TypeError):
        load_config({"forces": {"gravity": 9.8}})


@pytest.mark.parametrize(
    "overrides",
    [
        {"min_speed": 3.0, "max_speed": 2.0},
        {"width": 0.0},
        {"agent_radius": -1.0},
        {"delta_divisor": 0.0},
        {"spawn_margin": 400.0},
        {"neighbor_index": "quadtree"},
        {"cell_size": 0.0},
        {"population_size": 0},
        {"population_size": -1},
    ],
)
def test_validate_rejects_unusable_values(overrides):
    with pytest.raises(ValueError):
        SimulationConfig(**overrides).validate()


def test_validate_rejects_bad_force_values():
    with pytest.raises(ValueError):
        SimulationConfig(forces=ForceConfig(separation_min_denominator=0.0)).validate()
    with pytest.raises(ValueError):
        SimulationConfig(forces=ForceConfig(separation_radius_factor=7.0)).validate()
