"""Shared fixtures for the breakout tests.

Nothing here opens a window: the simulation only needs a text measurer
and a uniform random source, both replaced with deterministic fakes.
"""
import pytest

from breakout.core.geometry import Playfield
from breakout.core.session import SessionState
from breakout.ui.input import FrameInput

PLAYFIELD = Playfield(1280.0, 720.0)


class FixedUniform:
    """Stands in for ``random.uniform``; always returns the same fraction of the range."""

    def __init__(self, fraction=0.5):
        self.fraction = fraction
        self.calls = []

    def __call__(self, lo, hi):
        self.calls.append((lo, hi))
        return lo + (hi - lo) * self.fraction


def fake_measure(text, size):
    """Every glyph is half the font size wide."""
    return len(text) * size * 0.5, float(size)


@pytest.fixture
def playfield():
    return PLAYFIELD


@pytest.fixture
def uniform():
    # 0.75 of [-1, 1] is 0.5: a launch angle that is neither straight nor flat.
    return FixedUniform(0.75)


@pytest.fixture
def measure():
    return fake_measure


@pytest.fixture
def session(uniform):
    return SessionState.new(PLAYFIELD, uniform=uniform)


@pytest.fixture
def frame():
    """Factory for a frame on the default playfield."""
    def make(**kwargs):
        kwargs.setdefault("dt", 1.0 / 60.0)
        kwargs.setdefault("playfield", PLAYFIELD)
        return FrameInput(**kwargs)
    return make
