"""Cell states for the Game of Life grid."""

from enum import IntEnum


class Cell(IntEnum):
    """Two-valued cell state, stored as one byte in the universe buffer.

    Values are 0 and 1 so a neighbor's state can be summed directly
    into a live-neighbor count.
    """
    DEAD = 0
    ALIVE = 1

    @property
    def glyph(self) -> str:
        """Character used by Universe.render() for this state."""
        return ALIVE_GLYPH if self is Cell.ALIVE else DEAD_GLYPH


DEAD_GLYPH = '◻'
ALIVE_GLYPH = '◼'
