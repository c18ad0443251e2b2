"""
torus-life: Conway's Game of Life on a toroidal grid

A small in-memory cellular automaton engine. The Universe owns a flat
row-major cell buffer and is driven by an external rendering loop.
"""

from .core.cell import Cell
from .core.config import UniverseConfig
from .core.conway_rules import ConwayRuleParams
from .core.errors import UniverseError, OutOfBoundsError, InvalidDimensionError
from .core.universe import Universe

__version__ = "0.1.0"

__all__ = [
    'Cell',
    'ConwayRuleParams',
    'InvalidDimensionError',
    'OutOfBoundsError',
    'Universe',
    'UniverseConfig',
    'UniverseError',
]
