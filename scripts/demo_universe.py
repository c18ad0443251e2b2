#!/usr/bin/env python3
"""
Toroidal Game of Life Demonstration Script

Seeds a universe (randomly or with a named pattern), advances it for a
number of generations and prints the rendered grid after each tick.
Stands in for the external rendering loop that normally drives the engine.
"""

import sys
import os
import time
import logging

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

from torus_life.core.config import UniverseConfig
from torus_life.core.errors import UniverseError
from torus_life.core.patterns import PATTERNS, get_pattern, place
from torus_life.core.universe import Universe

logger = logging.getLogger(__name__)


def build_universe(width, height, pattern, probability, seed):
    """Create a universe seeded randomly or with a centered pattern."""
    rng = np.random.default_rng(seed)

    if pattern == 'random':
        config = UniverseConfig(width=width, height=height, seed_probability=probability, rng=rng)
        return Universe(config, error_handler=report_error)

    universe = Universe(UniverseConfig(width=width, height=height, seed_probability=0.0, rng=rng),
                        error_handler=report_error)
    universe.set_cells(place(get_pattern(pattern), height // 2 - 1, width // 2 - 1))
    return universe


def report_error(error):
    """Error channel for the universe: surface rejected calls on stderr."""
    print(f"universe error: {error}", file=sys.stderr)


def run_demo(universe, generations=10, delay=0.0):
    """Tick the universe and print each generation."""
    logger.info(f"Running {generations} generations on {universe!r}")

    print(f"Generation {universe.generation}")
    print(universe.render())

    for _ in range(generations):
        universe.tick()
        print(f"Generation {universe.generation}")
        print(universe.render())
        if delay > 0:
            time.sleep(delay)

    logger.info(f"Finished: {universe!r}")
    return universe


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Toroidal Game of Life Demonstration")
    parser.add_argument("--width", type=int, default=8, help="Grid width (columns)")
    parser.add_argument("--height", type=int, default=8, help="Grid height (rows)")
    parser.add_argument("--generations", type=int, default=10, help="Generations to run")
    parser.add_argument("--pattern", choices=sorted(PATTERNS) + ['random'], default='random',
                        help="Initial pattern, centered on the grid")
    parser.add_argument("--probability", type=float, default=0.4, help="Alive probability for random seeding")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--delay", type=float, default=0.0, help="Seconds to pause between generations")
    parser.add_argument("--verbose", action="store_true", help="Log per-tick diagnostics")

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        universe = build_universe(args.width, args.height, args.pattern, args.probability, args.seed)
        run_demo(universe, args.generations, args.delay)
    except (UniverseError, ValueError) as e:
        logger.error(f"Demonstration failed: {e}")
        sys.exit(1)
