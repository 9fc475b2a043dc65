"""
lifegrid: Conway's Game of Life on a toroidal grid

A fixed-size universe with a flat row-major cell buffer, advanced one
generation per tick under the classic B3/S23 rule. Edges wrap, so the grid
is a torus. A small frame loop drives the universe and paints it as text.
"""

from .core import Cell, Universe, default_seed
from .config import DriverConfig, UniverseConfig
from .driver import FrameLoop, TerminalPainter

__version__ = "0.1.0"

__all__ = [
    'Cell',
    'Universe',
    'default_seed',
    'DriverConfig',
    'UniverseConfig',
    'FrameLoop',
    'TerminalPainter'
]
