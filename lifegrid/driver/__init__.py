"""
Driver layer: the loop that owns a universe and paints it every frame.
"""

from .frame_loop import FrameLoop, Painter
from .painters import CLEAR_SEQUENCE, TerminalPainter

__all__ = [
    'FrameLoop',
    'Painter',
    'CLEAR_SEQUENCE',
    'TerminalPainter'
]
