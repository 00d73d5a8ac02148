import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
src_root = ROOT / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from flock.sim.core.config import SimulationConfig  # noqa: E402


@pytest.fixture
def config() -> SimulationConfig:
    return SimulationConfig()
