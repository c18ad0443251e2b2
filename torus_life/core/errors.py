"""Exceptions raised by the Universe for rejected calls."""


class UniverseError(Exception):
    """Base class for all universe errors."""


class OutOfBoundsError(UniverseError, IndexError):
    """Row or column outside the grid."""

    def __init__(self, row: int, column: int, width: int, height: int):
        self.row = row
        self.column = column
        super().__init__(
            f"Coordinates (row={row}, column={column}) out of bounds for {width}x{height} universe"
        )


class InvalidDimensionError(UniverseError, ValueError):
    """Width or height is not a positive integer."""

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(f"Universe {name} must be a positive integer, got {value!r}")
