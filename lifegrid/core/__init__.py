"""
Simulation core: cell states, the B3/S23 rule and the toroidal universe.
"""

from .cell import Cell
from .conway_rules import BIRTH_SET, SURVIVAL_SET, next_state, rule_table, transition_lookup
from .universe import (
    ALIVE_GLYPH,
    DEAD_GLYPH,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    Universe,
    default_seed,
)

__all__ = [
    'Cell',
    'BIRTH_SET',
    'SURVIVAL_SET',
    'next_state',
    'rule_table',
    'transition_lookup',
    'ALIVE_GLYPH',
    'DEAD_GLYPH',
    'DEFAULT_HEIGHT',
    'DEFAULT_WIDTH',
    'Universe',
    'default_seed'
]
