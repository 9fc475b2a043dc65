"""Cell states for the Game of Life universe."""

from enum import IntEnum


class Cell(IntEnum):
    """Binary cell state. Integer values double as neighbor-sum contributions."""
    DEAD = 0   # Contributes 0 to a neighbor count
    ALIVE = 1  # Contributes 1 to a neighbor count
