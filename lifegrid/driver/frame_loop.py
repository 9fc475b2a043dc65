"""Frame loop driving a universe.

Owns a single universe and, once per frame, advances it one generation and
hands it to a painter. Painters only read the universe's public accessors.
"""

import logging
import time
from typing import Callable, Optional

from ..core.universe import Universe

logger = logging.getLogger(__name__)


Painter = Callable[[Universe], None]


class FrameLoop:
    """Tick-then-paint loop with fixed frame pacing."""

    def __init__(self, universe: Universe, painter: Painter, frame_interval: float = 0.0,
                 sleep: Callable[[float], None] = time.sleep):
        """Initialize the frame loop.

        Args:
            universe: Universe to drive (owned by the loop from here on)
            painter: Callable invoked with the universe after every tick
            frame_interval: Seconds to wait between frames (0 disables pacing)
            sleep: Sleep function used for pacing

        Raises:
            ValueError: If frame_interval is negative
        """
        if frame_interval < 0:
            raise ValueError(f"Frame interval must be non-negative, got {frame_interval}")

        self.universe = universe
        self.painter = painter
        self.frame_interval = frame_interval
        self._sleep = sleep
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def stop(self) -> None:
        """End the loop after the current frame."""
        self._running = False

    def frame(self) -> None:
        """Advance one generation and paint it."""
        self.universe.tick()
        self.painter(self.universe)

    def run(self, generations: Optional[int] = None) -> int:
        """Paint the current generation, then tick and paint frame by frame.

        Args:
            generations: Number of ticks to perform. None runs until stop()
                is called or the process is interrupted.

        Returns:
            Number of ticks performed

        Raises:
            ValueError: If generations is negative
        """
        if generations is not None and generations < 0:
            raise ValueError(f"Generation count must be non-negative, got {generations}")

        logger.info(f"Starting frame loop on {self.universe!r} "
                    f"(generations={generations}, interval={self.frame_interval}s)")

        start_generation = self.universe.generation
        self._running = True

        try:
            self.painter(self.universe)
            while self._running and (generations is None or
                                     self.universe.generation - start_generation < generations):
                if self.frame_interval > 0:
                    self._sleep(self.frame_interval)
                self.frame()
        except KeyboardInterrupt:
            if generations is not None:
                raise
            logger.info("Frame loop interrupted")
        finally:
            self._running = False

        ticks = self.universe.generation - start_generation

        logger.info(f"Frame loop stopped after {ticks} ticks at generation {self.universe.generation}")
        return ticks
