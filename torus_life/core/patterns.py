"""
Classic Conway Patterns

Coordinate lists for well-known patterns, ready for Universe.set_cells().
Coordinates are (row, column) relative to the pattern's top-left corner;
use place() to move them onto the grid.
"""

from typing import Iterable, List, Tuple

Coordinate = Tuple[int, int]


# 2x2 still life
BLOCK: List[Coordinate] = [(0, 0), (0, 1), (1, 0), (1, 1)]

# Period-2 oscillator, horizontal phase
BLINKER: List[Coordinate] = [(0, 0), (0, 1), (0, 2)]

# Spaceship moving one cell down and right every 4 generations
#  .X.
#  ..X
#  XXX
GLIDER: List[Coordinate] = [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)]

PATTERNS = {
    'block': BLOCK,
    'blinker': BLINKER,
    'glider': GLIDER,
}


def place(pattern: Iterable[Coordinate], row: int, column: int) -> List[Coordinate]:
    """Translate a pattern so its top-left corner lands at (row, column)."""
    return [(row + dr, column + dc) for dr, dc in pattern]


def get_pattern(name: str) -> List[Coordinate]:
    """Look up a pattern by name.

    Raises:
        KeyError: If the pattern name is unknown
    """
    try:
        return list(PATTERNS[name])
    except KeyError:
        raise KeyError(f"Unknown pattern '{name}', expected one of {sorted(PATTERNS)}") from None
