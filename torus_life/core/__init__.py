"""Core simulation engine: cells, rules, configuration and the Universe."""

from .cell import Cell
from .config import UniverseConfig
from .conway_rules import ConwayRuleParams, update_cell
from .errors import UniverseError, OutOfBoundsError, InvalidDimensionError
from .universe import Universe

__all__ = [
    'Cell',
    'ConwayRuleParams',
    'InvalidDimensionError',
    'OutOfBoundsError',
    'Universe',
    'UniverseConfig',
    'UniverseError',
    'update_cell',
]
