"""Tests for the frame loop, terminal painter and configuration."""

import io

import pytest
from lifegrid.config import DriverConfig, UniverseConfig
from lifegrid.core.universe import Universe
from lifegrid.driver import CLEAR_SEQUENCE, FrameLoop, TerminalPainter
from lifegrid.patterns import blinker


class RecordingPainter:
    """Painter that remembers the generation and live count of each frame."""

    def __init__(self):
        self.frames = []

    def __call__(self, universe):
        self.frames.append((universe.generation, universe.count_alive()))


class TestFrameLoop:
    """Test tick/paint ordering and loop control."""

    def setup_method(self):
        """Create a fresh universe and painter for each test."""
        self.universe = Universe.from_pattern(8, 8, blinker(), 3, 2)
        self.painter = RecordingPainter()

    def test_bounded_run(self):
        """Initial generation is painted, then one paint per tick."""
        loop = FrameLoop(self.universe, self.painter)
        ticks = loop.run(3)

        assert ticks == 3
        assert self.universe.generation == 3
        assert [generation for generation, _ in self.painter.frames] == [0, 1, 2, 3]
        assert not loop.running

    def test_zero_generations(self):
        """Zero generations paints once and never ticks."""
        loop = FrameLoop(self.universe, self.painter)
        assert loop.run(0) == 0
        assert self.universe.generation == 0
        assert len(self.painter.frames) == 1

    def test_single_frame(self):
        """frame() ticks once then paints."""
        loop = FrameLoop(self.universe, self.painter)
        loop.frame()
        assert self.painter.frames == [(1, 3)]

    def test_frame_pacing(self):
        """Loop sleeps frame_interval before every tick."""
        sleeps = []
        loop = FrameLoop(self.universe, self.painter, frame_interval=0.25, sleep=sleeps.append)
        loop.run(4)
        assert sleeps == [0.25] * 4

    def test_no_pacing_when_interval_zero(self):
        """Zero interval never sleeps."""
        sleeps = []
        loop = FrameLoop(self.universe, self.painter, frame_interval=0.0, sleep=sleeps.append)
        loop.run(5)
        assert sleeps == []

    def test_stop_from_painter(self):
        """stop() ends an unbounded run after the current frame."""
        loop = FrameLoop(self.universe, None)

        def painter(universe):
            self.painter(universe)
            if universe.generation == 5:
                loop.stop()

        loop.painter = painter
        ticks = loop.run()

        assert ticks == 5
        assert self.universe.generation == 5

    def test_keyboard_interrupt_ends_unbounded_run(self):
        """Ctrl-C ends an unbounded run without raising."""
        def painter(universe):
            if universe.generation == 3:
                raise KeyboardInterrupt

        loop = FrameLoop(self.universe, painter)
        ticks = loop.run()

        # Third tick completed before the painter was interrupted
        assert ticks == 3
        assert self.universe.generation == 3
        assert not loop.running

    def test_ticks_counted_from_current_generation(self):
        """Ticks are counted relative to the generation the run started at."""
        self.universe.tick()
        self.universe.tick()

        loop = FrameLoop(self.universe, self.painter)
        assert loop.run(3) == 3
        assert self.universe.generation == 5

    def test_keyboard_interrupt_propagates_from_bounded_run(self):
        """Ctrl-C during a bounded run is re-raised."""
        def painter(universe):
            if universe.generation == 1:
                raise KeyboardInterrupt

        loop = FrameLoop(self.universe, painter)
        with pytest.raises(KeyboardInterrupt):
            loop.run(10)

    def test_painter_errors_propagate(self):
        """Painter failures reach the caller."""
        def painter(universe):
            raise RuntimeError("surface missing")

        loop = FrameLoop(self.universe, painter)
        with pytest.raises(RuntimeError, match="surface missing"):
            loop.run(1)
        assert not loop.running
        assert self.universe.generation == 0

    def test_painter_error_after_tick(self):
        """A painter failing mid-run still leaves the loop stopped."""
        def painter(universe):
            if universe.generation == 2:
                raise RuntimeError("surface lost")

        loop = FrameLoop(self.universe, painter)
        with pytest.raises(RuntimeError, match="surface lost"):
            loop.run(5)
        assert not loop.running
        assert self.universe.generation == 2

    def test_negative_generations(self):
        """Negative generation counts are rejected."""
        loop = FrameLoop(self.universe, self.painter)
        with pytest.raises(ValueError, match="non-negative"):
            loop.run(-1)

    def test_negative_interval(self):
        """Negative frame interval is rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            FrameLoop(self.universe, self.painter, frame_interval=-0.1)


class TestTerminalPainter:
    """Test the text painter."""

    def test_writes_render(self):
        """Painter writes the universe rendering."""
        stream = io.StringIO()
        universe = Universe(4, 3)
        painter = TerminalPainter(stream)

        painter(universe)

        assert stream.getvalue() == universe.render()
        assert painter.frames == 1

    def test_clear_prefix(self):
        """Clearing painter prefixes each frame with the clear sequence."""
        stream = io.StringIO()
        universe = Universe(4, 3)
        painter = TerminalPainter(stream, clear=True)

        painter(universe)
        painter(universe)

        assert stream.getvalue() == (CLEAR_SEQUENCE + universe.render()) * 2
        assert painter.frames == 2

    def test_loop_with_terminal_painter(self):
        """Frame loop paints every generation to the stream."""
        stream = io.StringIO()
        universe = Universe.from_pattern(8, 8, blinker(), 3, 2)
        painter = TerminalPainter(stream)

        FrameLoop(universe, painter).run(2)

        assert painter.frames == 3
        # Blinker has period 2: first and last frames match
        frames = stream.getvalue().split(universe.render())
        assert stream.getvalue().startswith(universe.render())
        assert stream.getvalue().endswith(universe.render())
        assert len(frames) == 3


class TestConfig:
    """Test configuration dataclasses."""

    def test_universe_config_defaults(self):
        """Default config builds the 128x64 default universe."""
        universe = UniverseConfig().build()
        assert (universe.width, universe.height) == (128, 64)
        assert universe == Universe()

    def test_universe_config_custom(self):
        """Custom sizes flow through build()."""
        universe = UniverseConfig(width=10, height=5).build()
        assert (universe.width, universe.height) == (10, 5)

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-2, 3)])
    def test_universe_config_rejects_bad_size(self, width, height):
        """Non-positive sizes fail at config time."""
        with pytest.raises(ValueError, match="must be positive"):
            UniverseConfig(width=width, height=height)

    @pytest.mark.parametrize("width,height", [(True, 4), (2.5, 4), ("8", 4), (8, None)])
    def test_universe_config_rejects_non_integer_size(self, width, height):
        """Config applies the same integer check as the universe itself."""
        with pytest.raises(ValueError, match="must be an integer"):
            UniverseConfig(width=width, height=height)

    def test_driver_config_defaults(self):
        """Driver defaults run until stopped at 20 fps."""
        config = DriverConfig()
        assert config.generations is None
        assert config.frame_interval == 0.05
        assert config.clear_screen is True

    def test_driver_config_validation(self):
        """Negative generations or intervals are rejected."""
        with pytest.raises(ValueError, match="Generation count"):
            DriverConfig(generations=-1)
        with pytest.raises(ValueError, match="Frame interval"):
            DriverConfig(frame_interval=-1.0)
