"""
Conway's Game of Life Transition Rule

The classic B3/S23 rule: a live cell survives with two or three live
neighbors, a dead cell is born with exactly three, everything else is dead
in the next generation. The rule is fixed; there are no rule parameters.
"""

from typing import Dict, Set, Tuple

import numpy as np

from .cell import Cell


# Standard Conway rules - unmodified
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors

MAX_NEIGHBORS = 8


def next_state(cell: Cell, live_neighbors: int) -> Cell:
    """Apply Conway's rules to determine the next cell state.

    Args:
        cell: Current cell state
        live_neighbors: Number of live Moore neighbors (0-8)

    Returns:
        Cell state in the next generation

    Raises:
        ValueError: If live_neighbors is outside 0-8
    """
    if not 0 <= live_neighbors <= MAX_NEIGHBORS:
        raise ValueError(f"Neighbor count {live_neighbors} outside 0-{MAX_NEIGHBORS}")

    if cell == Cell.ALIVE:
        if live_neighbors < 2:
            return Cell.DEAD   # Underpopulation
        if live_neighbors in SURVIVAL_SET:
            return Cell.ALIVE  # Survives
        return Cell.DEAD       # Overpopulation

    if live_neighbors in BIRTH_SET:
        return Cell.ALIVE      # Birth
    return Cell.DEAD


def rule_table() -> Dict[Tuple[Cell, int], Cell]:
    """Get the complete rule table for both states and all neighbor counts.

    Returns:
        Dictionary mapping (current_state, neighbor_count) to next_state
    """
    return {
        (cell, neighbors): next_state(cell, neighbors)
        for cell in Cell
        for neighbors in range(MAX_NEIGHBORS + 1)
    }


def transition_lookup() -> np.ndarray:
    """Rule table as a (2, 9) uint8 array indexed by [state, neighbor_count].

    Lets a whole generation be mapped with a single fancy-indexing operation
    while keeping next_state() as the only definition of the rule.
    """
    lookup = np.zeros((len(Cell), MAX_NEIGHBORS + 1), dtype=np.uint8)
    for (cell, neighbors), outcome in rule_table().items():
        lookup[cell, neighbors] = outcome
    lookup.setflags(write=False)
    return lookup
