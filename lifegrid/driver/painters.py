"""Painters that draw a universe after each tick."""

import sys
from typing import Optional, TextIO

from ..core.universe import Universe

# Cursor home + clear screen
CLEAR_SEQUENCE = "\x1b[H\x1b[2J"


class TerminalPainter:
    """Write the textual rendering of each generation to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, clear: bool = False):
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear
        self.frames = 0

    def __call__(self, universe: Universe) -> None:
        if self.clear:
            self.stream.write(CLEAR_SEQUENCE)
        self.stream.write(universe.render())
        self.stream.flush()
        self.frames += 1
