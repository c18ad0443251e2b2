"""Construction options for a Universe."""

from dataclasses import dataclass, field

import numpy as np

from .errors import InvalidDimensionError


DEFAULT_WIDTH = 8
DEFAULT_HEIGHT = 8
DEFAULT_SEED_PROBABILITY = 0.4


def validate_dimension(name: str, value: object) -> int:
    """Return value if it is a positive int, else raise InvalidDimensionError."""
    # bool is an int subclass; True is not a width
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
        raise InvalidDimensionError(name, value)
    return int(value)


@dataclass
class UniverseConfig:
    """Initial size and seeding policy.

    Attributes:
        width: Number of columns
        height: Number of rows
        seed_probability: Chance each cell starts alive (0.0 to 1.0)
        rng: Uniform random source; pass a seeded generator for reproducible runs
    """
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    seed_probability: float = DEFAULT_SEED_PROBABILITY
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    def __post_init__(self):
        self.width = validate_dimension("width", self.width)
        self.height = validate_dimension("height", self.height)

        if not 0.0 <= self.seed_probability <= 1.0:
            raise ValueError(f"seed_probability must be between 0 and 1, got {self.seed_probability}")

        if not isinstance(self.rng, np.random.Generator):
            raise ValueError(f"rng must be a numpy Generator, got {type(self.rng).__name__}")
