"""
Pattern library for seeding a universe.

Still lifes, oscillators and spaceships used to build known initial states.
"""

from .library import PATTERNS, block, blinker, glider, pattern_seed

__all__ = [
    'PATTERNS',
    'block',
    'blinker',
    'glider',
    'pattern_seed'
]
