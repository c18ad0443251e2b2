"""Toroidal Game of Life universe.

The Universe owns the grid dimensions and a flat row-major cell buffer
(index = row * width + column). Neighbor lookups wrap at every edge.
Each tick computes the next generation into a fresh buffer from the
previous one, so no cell ever sees a neighbor's already-updated state.
"""

import logging
from typing import Callable, Iterable, Optional, Tuple

import numpy as np

from .cell import Cell
from .config import UniverseConfig, validate_dimension
from .conway_rules import ConwayRuleParams, update_cell
from .errors import InvalidDimensionError, OutOfBoundsError, UniverseError

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[UniverseError], None]


def _is_coordinate(value: object) -> bool:
    # bool is an int subclass; floats would truncate onto another cell
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _frozen(cells: np.ndarray) -> np.ndarray:
    cells.flags.writeable = False
    return cells


class Universe:
    """Conway's Game of Life on a wraparound grid.

    Attributes:
        generation: Ticks applied since construction or the last resize
        rule_params: Survival/birth rule applied on each tick
    """

    def __init__(self,
                 config: Optional[UniverseConfig] = None,
                 rule_params: Optional[ConwayRuleParams] = None,
                 error_handler: Optional[ErrorHandler] = None):
        """Create a randomly seeded universe.

        Args:
            config: Size and seeding policy (8x8, 40% alive if None)
            rule_params: Transition rule (standard Conway if None)
            error_handler: Called with every rejected-call error before it is raised
        """
        config = config if config is not None else UniverseConfig()

        self._width = config.width
        self._height = config.height
        self.rule_params = rule_params or ConwayRuleParams.standard()
        self.error_handler = error_handler
        self.generation = 0

        seeded = config.rng.random(self._width * self._height) < config.seed_probability
        self._cells = _frozen(seeded.astype(np.uint8))

        logger.debug(f"Created {self._width}x{self._height} universe with "
                     f"{self.live_count()} live cells (p={config.seed_probability})")

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _reject(self, error: UniverseError) -> None:
        logger.error(str(error))
        if self.error_handler is not None:
            self.error_handler(error)
        raise error

    def _check_bounds(self, row: int, column: int) -> None:
        if not (_is_coordinate(row) and _is_coordinate(column)
                and 0 <= row < self._height and 0 <= column < self._width):
            self._reject(OutOfBoundsError(row, column, self._width, self._height))

    def get_index(self, row: int, column: int) -> int:
        """Map (row, column) to its position in the cell buffer.

        Raises:
            OutOfBoundsError: If the coordinates are not integers inside the grid
        """
        self._check_bounds(row, column)
        return row * self._width + column

    def get_cell(self, row: int, column: int) -> Cell:
        """Get the state of a single cell."""
        return Cell(int(self._cells[self.get_index(row, column)]))

    def live_neighbor_count(self, row: int, column: int) -> int:
        """Count live cells among the 8 wraparound neighbors of a cell.

        Args:
            row: Cell row (0 to height-1)
            column: Cell column (0 to width-1)

        Returns:
            Number of live neighbors (0-8)

        Raises:
            OutOfBoundsError: If the coordinates are outside the grid
        """
        self._check_bounds(row, column)
        return self._count_neighbors(self._cells, row, column)

    def _count_neighbors(self, cells: np.ndarray, row: int, column: int) -> int:
        count = 0
        for dr in [-1, 0, 1]:
            for dc in [-1, 0, 1]:
                if dr == 0 and dc == 0:
                    continue

                nr = (row + dr) % self._height
                nc = (column + dc) % self._width
                count += int(cells[nr * self._width + nc])

        return count

    def tick(self) -> None:
        """Advance the whole grid by one generation."""
        current = self._cells
        next_cells = np.empty_like(current)
        rule = update_cell if self.rule_params.is_standard else self.rule_params.update_cell

        for row in range(self._height):
            for column in range(self._width):
                idx = row * self._width + column
                neighbors = self._count_neighbors(current, row, column)
                next_cells[idx] = rule(Cell(int(current[idx])), neighbors)

        self._cells = _frozen(next_cells)
        self.generation += 1

        logger.debug(f"Generation {self.generation}: {self.live_count()} live cells")

    def get_cells(self) -> np.ndarray:
        """Read-only view of the cell buffer in row-major order.

        The view is not updated by later ticks or resizes; fetch a new
        one after any mutating call. The buffer itself is read-only, so
        the view cannot be made writeable again.
        """
        return self._cells.view()

    def set_cells(self, coordinates: Iterable[Tuple[int, int]]) -> None:
        """Mark each (row, column) alive, leaving all other cells untouched.

        All coordinates are checked before any cell is written.

        Raises:
            OutOfBoundsError: If any coordinate is not an integer inside the grid
        """
        indices = [self.get_index(row, column) for row, column in coordinates]
        cells = self._cells.copy()
        cells[np.array(indices, dtype=np.intp)] = Cell.ALIVE
        self._cells = _frozen(cells)

    def set_width(self, width: int) -> None:
        """Set the number of columns and reset every cell to dead.

        Raises:
            InvalidDimensionError: If width is not a positive integer
        """
        self._resize(self._validated("width", width), self._height)

    def set_height(self, height: int) -> None:
        """Set the number of rows and reset every cell to dead.

        Raises:
            InvalidDimensionError: If height is not a positive integer
        """
        self._resize(self._width, self._validated("height", height))

    def _validated(self, name: str, value: int) -> int:
        try:
            return validate_dimension(name, value)
        except InvalidDimensionError as error:
            self._reject(error)

    def _resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._cells = _frozen(np.zeros(width * height, dtype=np.uint8))
        self.generation = 0

        logger.info(f"Resized universe to {self._width}x{self._height}, all cells dead")

    def live_count(self) -> int:
        """Get total number of live cells."""
        return int(np.count_nonzero(self._cells))

    def render(self) -> str:
        """Text snapshot: one line of glyphs per row, each ending in a newline."""
        dead, alive = Cell.DEAD.glyph, Cell.ALIVE.glyph
        lines = []
        for row in self._cells.reshape(self._height, self._width):
            lines.append(''.join(alive if cell else dead for cell in row) + '\n')
        return ''.join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (f"Universe({self._width}x{self._height}, generation={self.generation}, "
                f"alive={self.live_count()})")
