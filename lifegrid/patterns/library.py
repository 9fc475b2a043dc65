"""Classic Conway patterns and a seed that places them on a torus.

Patterns are 2D boolean numpy arrays (True = alive), indexed [row, col].
"""

from typing import Callable

import numpy as np


def block() -> np.ndarray:
    """Create stable 2x2 block still life."""
    return np.array([
        [True, True],
        [True, True]
    ], dtype=bool)


def blinker() -> np.ndarray:
    """Create horizontal blinker pattern (3 cells, period 2)."""
    return np.array([[True, True, True]], dtype=bool)


def glider() -> np.ndarray:
    """Create classic glider, travelling one cell down and right every 4 generations."""
    return np.array([
        [False, True, False],
        [False, False, True],
        [True, True, True]
    ], dtype=bool)


PATTERNS = {
    "block": block,
    "blinker": blinker,
    "glider": glider,
}


def pattern_seed(width: int, height: int, pattern: np.ndarray,
                 row: int = 0, col: int = 0) -> Callable[[int], bool]:
    """Build a seed function that places a pattern on an otherwise dead grid.

    Args:
        width: Grid width the seed will be applied to
        height: Grid height the seed will be applied to
        pattern: 2D boolean array representing the pattern
        row: Row of the pattern's top-left cell
        col: Column of the pattern's top-left cell

    Returns:
        Callable mapping a flat row-major index to True if that cell is alive

    Raises:
        ValueError: If the pattern is not 2D or doesn't fit the grid
    """
    pattern = np.asarray(pattern, dtype=bool)
    if pattern.ndim != 2:
        raise ValueError(f"Pattern must be 2D, got {pattern.ndim} dimensions")

    pattern_height, pattern_width = pattern.shape
    if pattern_height > height or pattern_width > width:
        raise ValueError(f"Pattern {pattern_width}x{pattern_height} doesn't fit a {width}x{height} grid")

    # Copy pattern into a full-size grid with wrapping
    grid = np.zeros((height, width), dtype=bool)
    for py in range(pattern_height):
        for px in range(pattern_width):
            if pattern[py, px]:
                grid[(row + py) % height, (col + px) % width] = True

    flat = grid.reshape(-1)
    return lambda index: bool(flat[index])
