"""Toroidal Game of Life universe.

The universe owns a flat, row-major cell buffer (index = row * width + col)
and advances it one generation per tick. Edges wrap in both directions, so
the grid has no boundary: it is a torus. Consumers only ever see read-only
views of a completed generation.
"""

import logging
from typing import Callable, Optional, Sequence, Union

import numpy as np

from .cell import Cell
from .conway_rules import transition_lookup
from ..patterns.library import pattern_seed

logger = logging.getLogger(__name__)


DEFAULT_WIDTH = 128
DEFAULT_HEIGHT = 64

ALIVE_GLYPH = '◻'
DEAD_GLYPH = '◼'

SeedFunction = Callable[[int], Union[Cell, bool, int]]

_TRANSITIONS = transition_lookup()


def default_seed(index: int) -> Cell:
    """Initial pattern: alive on even indices and on multiples of 7."""
    if index % 2 == 0 or index % 7 == 0:
        return Cell.ALIVE
    return Cell.DEAD


def _validate_dimensions(width: int, height: int) -> None:
    """Reject sizes that would make the modulo wraparound undefined."""
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"Universe {name} must be an integer, got {value!r}")
        if value < 1:
            raise ValueError(f"Universe dimensions must be positive, got {name}={value}")


def _frozen(buffer: np.ndarray) -> np.ndarray:
    """Copy a generation into immutable bytes so no view can be made writable."""
    return np.frombuffer(buffer.astype(np.uint8).tobytes(), dtype=np.uint8)


def _cell_value(value, index: int) -> int:
    """Validate one seeded value: a Cell, a bool, or the integer 0 or 1."""
    if isinstance(value, (bool, np.bool_)):
        return int(value)
    if isinstance(value, (int, np.integer)) and value in (Cell.DEAD, Cell.ALIVE):
        return int(value)
    raise ValueError(f"Seed produced invalid cell value {value!r} at index {index}")


class Universe:
    """Conway's Game of Life on a fixed-size toroidal grid.

    Attributes:
        width: Grid width in cells (fixed for the lifetime of the instance)
        height: Grid height in cells (fixed for the lifetime of the instance)
        cells: Read-only flat view of the current generation
        generation: Number of ticks applied since construction
    """

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 seed: Optional[SeedFunction] = None):
        """Create a universe and populate its first generation.

        Args:
            width: Grid width (cells)
            height: Grid height (cells)
            seed: Callable mapping a flat cell index to its initial state.
                Defaults to default_seed.

        Raises:
            ValueError: If a dimension is not a positive integer or the seed
                produces a value other than dead/alive
        """
        _validate_dimensions(width, height)

        self._width = int(width)
        self._height = int(height)
        self._generation = 0

        seed = seed or default_seed
        size = self._width * self._height
        initial = np.fromiter((_cell_value(seed(i), i) for i in range(size)), dtype=np.uint8, count=size)

        self._cells = _frozen(initial)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Created universe {self._width}x{self._height} with {self.count_alive()} live cells")

    @classmethod
    def from_cells(cls, width: int, height: int, cells: Sequence) -> 'Universe':
        """Create a universe from an explicit row-major cell sequence.

        Args:
            width: Grid width (cells)
            height: Grid height (cells)
            cells: width * height cell states (Cell, bool or 0/1)

        Returns:
            Universe whose first generation is exactly the given cells

        Raises:
            ValueError: If the sequence length doesn't match the grid size
        """
        _validate_dimensions(width, height)

        flat = np.asarray(cells).reshape(-1)
        if flat.size != width * height:
            raise ValueError(f"Expected {width * height} cells for a {width}x{height} universe, got {flat.size}")

        return cls(width, height, seed=lambda index: flat[index])

    @classmethod
    def from_pattern(cls, width: int, height: int, pattern: np.ndarray,
                     row: int = 0, col: int = 0) -> 'Universe':
        """Create an otherwise dead universe holding a single pattern.

        The pattern's top-left corner lands on (row, col); cells falling off
        an edge wrap around to the opposite one.
        """
        _validate_dimensions(width, height)
        return cls(width, height, seed=pattern_seed(width, height, pattern, row, col))

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def cells(self) -> np.ndarray:
        """Read-only flat view of the last completed generation.

        A view taken before a tick keeps showing the generation it was taken
        from, since tick() swaps in a new buffer instead of writing the old one.
        """
        return self._cells.view()

    def index_of(self, row: int, col: int) -> int:
        """Flat buffer index of an already-wrapped (row, col)."""
        return row * self._width + col

    def cell(self, row: int, col: int) -> Cell:
        """Cell state at (row, col), wrapping coordinates onto the torus."""
        return Cell(int(self._cells[self.index_of(row % self._height, col % self._width)]))

    def live_neighbor_count(self, row: int, col: int) -> int:
        """Count live cells in the Moore neighborhood of (row, col).

        Offsets of height - 1 / width - 1 stand in for -1, so every
        intermediate coordinate stays non-negative before the modulo.

        Args:
            row: Cell row (0 to height-1)
            col: Cell column (0 to width-1)

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0

        for d_row in (self._height - 1, 0, 1):
            for d_col in (self._width - 1, 0, 1):
                # Skip the cell itself
                if d_row == 0 and d_col == 0:
                    continue

                neighbor_row = (row + d_row) % self._height
                neighbor_col = (col + d_col) % self._width
                count += int(self._cells[self.index_of(neighbor_row, neighbor_col)])

        return count

    def neighbor_counts(self) -> np.ndarray:
        """Live neighbor counts for every cell as a (height, width) array.

        Uses the same offsets as live_neighbor_count(), applied to the whole
        grid at once with np.roll.
        """
        grid = self._cells.reshape(self._height, self._width)
        counts = np.zeros((self._height, self._width), dtype=np.uint8)

        for d_row in (self._height - 1, 0, 1):
            for d_col in (self._width - 1, 0, 1):
                if d_row == 0 and d_col == 0:
                    continue
                # np.roll(a, -d)[i] == a[(i + d) % n]
                counts += np.roll(np.roll(grid, -d_row, axis=0), -d_col, axis=1)

        return counts

    def tick(self) -> None:
        """Advance the universe exactly one generation.

        The next generation is computed into a fresh buffer from the current
        one, then swapped in. The current buffer is never written, so no
        neighbor count can see a partially updated generation.
        """
        counts = self.neighbor_counts().reshape(-1)
        next_cells = _TRANSITIONS[self._cells, counts]

        self._cells = _frozen(next_cells)
        self._generation += 1

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Generation {self._generation}: {self.count_alive()} live cells")

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.count_nonzero(self._cells))

    def to_array(self) -> np.ndarray:
        """Current generation as a writable (height, width) copy."""
        return self._cells.reshape(self._height, self._width).copy()

    def to_bytes(self) -> bytes:
        """Raw buffer, one byte per cell in row-major order."""
        return self._cells.tobytes()

    def render(self) -> str:
        """Render the grid as text, one newline-terminated line per row."""
        lines = []
        for row in self._cells.reshape(self._height, self._width):
            lines.append(''.join(ALIVE_GLYPH if state else DEAD_GLYPH for state in row))
            lines.append('\n')
        return ''.join(lines)

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: object) -> bool:
        """Check equality with another universe (size and cells)."""
        if not isinstance(other, Universe):
            return False
        return (self._width == other._width and
                self._height == other._height and
                np.array_equal(self._cells, other._cells))

    __hash__ = None

    def __repr__(self) -> str:
        return (f"Universe({self._width}x{self._height}, generation={self._generation}, "
                f"alive={self.count_alive()})")
