"""Tests for universe construction options and random seeding."""

import numpy as np
import pytest

from torus_life.core.config import UniverseConfig, DEFAULT_SEED_PROBABILITY
from torus_life.core.errors import InvalidDimensionError
from torus_life.core.universe import Universe


class TestUniverseConfig:
    """Test configuration validation."""

    def test_defaults(self):
        """Default config is 8x8 with 40% seed probability."""
        config = UniverseConfig()
        assert config.width == 8
        assert config.height == 8
        assert config.seed_probability == DEFAULT_SEED_PROBABILITY == 0.4
        assert isinstance(config.rng, np.random.Generator)

    @pytest.mark.parametrize("bad", [0, -1, 2.5, True, "8", None])
    def test_invalid_width(self, bad):
        with pytest.raises(InvalidDimensionError, match="width must be a positive integer"):
            UniverseConfig(width=bad)

    @pytest.mark.parametrize("bad", [0, -3])
    def test_invalid_height(self, bad):
        with pytest.raises(InvalidDimensionError, match="height"):
            UniverseConfig(height=bad)

    def test_invalid_dimension_is_value_error(self):
        """InvalidDimensionError can be caught as ValueError."""
        with pytest.raises(ValueError):
            UniverseConfig(width=0)

    def test_numpy_integer_dimension(self):
        config = UniverseConfig(width=np.int64(5), height=np.int32(4))
        assert config.width == 5 and type(config.width) is int
        assert config.height == 4

    @pytest.mark.parametrize("bad", [-0.1, 1.5])
    def test_invalid_probability(self, bad):
        with pytest.raises(ValueError, match="seed_probability"):
            UniverseConfig(seed_probability=bad)

    def test_invalid_rng(self):
        with pytest.raises(ValueError, match="numpy Generator"):
            UniverseConfig(rng=42)


class TestSeeding:
    """Test random initial state."""

    def test_default_universe(self):
        """Universe() builds an 8x8 grid."""
        universe = Universe()
        assert universe.width == 8
        assert universe.height == 8
        assert universe.generation == 0
        assert len(universe.get_cells()) == 64

    def test_probability_zero_all_dead(self):
        universe = Universe(UniverseConfig(width=10, height=6, seed_probability=0.0))
        assert universe.live_count() == 0

    def test_probability_one_all_alive(self):
        universe = Universe(UniverseConfig(width=10, height=6, seed_probability=1.0))
        assert universe.live_count() == 60

    def test_seeded_rng_reproducible(self):
        """Same seed gives the same initial grid."""
        a = Universe(UniverseConfig(width=16, height=16, rng=np.random.default_rng(7)))
        b = Universe(UniverseConfig(width=16, height=16, rng=np.random.default_rng(7)))
        assert np.array_equal(a.get_cells(), b.get_cells())

    def test_density_close_to_probability(self):
        """Large grid density approximates the seed probability."""
        config = UniverseConfig(width=100, height=100, seed_probability=0.4,
                                rng=np.random.default_rng(123))
        universe = Universe(config)
        density = universe.live_count() / (100 * 100)
        assert 0.37 <= density <= 0.43

    def test_cells_are_binary(self):
        universe = Universe(UniverseConfig(width=20, height=20, rng=np.random.default_rng(1)))
        assert set(np.unique(universe.get_cells())) <= {0, 1}
