"""
Conway's Game of Life Transition Rules

Maps a cell's current state and live-neighbor count to its state in the
next generation. The Universe applies these rules once per cell per tick.
"""

from typing import Set, Optional

from .cell import Cell


# Standard Conway rules
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors


def update_cell(cell: Cell, live_neighbors: int) -> Cell:
    """Apply standard Conway rules to determine the next cell state.

    Rules are checked in order, first match wins:
    - Alive with fewer than 2 neighbors dies (underpopulation)
    - Alive with 2 or 3 neighbors survives
    - Alive with more than 3 neighbors dies (overpopulation)
    - Dead with exactly 3 neighbors becomes alive (reproduction)
    - Everything else keeps its state

    Args:
        cell: Current cell state
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state
    """
    if cell == Cell.ALIVE and live_neighbors < 2:
        return Cell.DEAD
    if cell == Cell.ALIVE and live_neighbors in (2, 3):
        return Cell.ALIVE
    if cell == Cell.ALIVE and live_neighbors > 3:
        return Cell.DEAD
    if cell == Cell.DEAD and live_neighbors == 3:
        return Cell.ALIVE
    return Cell(cell)


class ConwayRuleParams:
    """Survival and birth neighbor counts for a Life-like rule.

    Defaults to standard Conway rules (B3/S23).
    """

    def __init__(self,
                 survival_set: Optional[Set[int]] = None,
                 birth_set: Optional[Set[int]] = None):
        """Initialize rule parameters.

        Args:
            survival_set: Neighbor counts for live cell survival (default {2,3})
            birth_set: Neighbor counts for dead cell birth (default {3})

        Raises:
            ValueError: If a neighbor count is outside 0-8
        """
        self.survival_set: Set[int] = set(survival_set) if survival_set is not None else SURVIVAL_SET.copy()
        self.birth_set: Set[int] = set(birth_set) if birth_set is not None else BIRTH_SET.copy()

        for count in self.survival_set | self.birth_set:
            if not 0 <= count <= 8:
                raise ValueError(f"Neighbor count {count} outside 0-8")

    @classmethod
    def standard(cls) -> 'ConwayRuleParams':
        """Create standard Conway rules."""
        return cls(SURVIVAL_SET.copy(), BIRTH_SET.copy())

    @property
    def is_standard(self) -> bool:
        return self.survival_set == SURVIVAL_SET and self.birth_set == BIRTH_SET

    def update_cell(self, cell: Cell, live_neighbors: int) -> Cell:
        """Apply these rule parameters to a cell.

        Args:
            cell: Current cell state
            live_neighbors: Number of live neighbors

        Returns:
            Next cell state
        """
        if cell == Cell.ALIVE:
            return Cell.ALIVE if live_neighbors in self.survival_set else Cell.DEAD
        return Cell.ALIVE if live_neighbors in self.birth_set else Cell.DEAD

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConwayRuleParams):
            return NotImplemented
        return self.survival_set == other.survival_set and self.birth_set == other.birth_set

    def __repr__(self) -> str:
        return f"ConwayRuleParams(survival={self.survival_set}, birth={self.birth_set})"
