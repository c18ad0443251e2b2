"""Shared fixtures for universe tests."""

import numpy as np
import pytest

from torus_life.core.config import UniverseConfig
from torus_life.core.universe import Universe


def make_empty_universe(width: int, height: int, **kwargs) -> Universe:
    """Universe of the given size with every cell dead."""
    config = UniverseConfig(width=width, height=height, seed_probability=0.0,
                            rng=np.random.default_rng(0))
    return Universe(config, **kwargs)


@pytest.fixture
def empty_universe():
    """Factory fixture: empty_universe(width, height) -> all-dead Universe."""
    return make_empty_universe
