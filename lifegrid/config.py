"""Configuration for building and driving a universe."""

from dataclasses import dataclass
from typing import Optional

from .core.universe import DEFAULT_HEIGHT, DEFAULT_WIDTH, Universe, _validate_dimensions


@dataclass
class UniverseConfig:
    """Grid size for a new universe."""

    width: int = DEFAULT_WIDTH    # Grid width in cells
    height: int = DEFAULT_HEIGHT  # Grid height in cells

    def __post_init__(self):
        _validate_dimensions(self.width, self.height)

    def build(self) -> Universe:
        """Create a universe with the default seeding rule."""
        return Universe(self.width, self.height)


@dataclass
class DriverConfig:
    """Frame loop settings."""

    generations: Optional[int] = None  # None runs until stopped
    frame_interval: float = 0.05       # Seconds between frames
    clear_screen: bool = True          # Redraw in place on a terminal

    def __post_init__(self):
        if self.generations is not None and self.generations < 0:
            raise ValueError(f"Generation count must be non-negative, got {self.generations}")
        if self.frame_interval < 0:
            raise ValueError(f"Frame interval must be non-negative, got {self.frame_interval}")
