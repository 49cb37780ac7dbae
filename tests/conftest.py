"""Shared fixtures: a recording display and small deterministic stand-ins."""

import pytest

from simple_snake.config import Settings
from simple_snake.grid import build_grid


class FakeDisplay:
    """Records draw calls instead of touching a window."""

    def __init__(self):
        self.rects = []
        self.texts = []
        self.frames = 0
        self.clears = 0

    def clear(self, color):
        self.clears += 1

    def draw_rect(self, rect, color, filled=True):
        self.rects.append((rect.copy(), color, filled))

    def render_text(self, text, color, bold=False):
        self.texts.append(text)
        return text, (len(text) * 10, 20)

    def blit(self, surface, rect):
        pass

    def present_frame(self):
        self.frames += 1


class FixedRng:
    """randrange() returns queued values, recording each bound it was asked for."""

    def __init__(self, *values):
        self.values = list(values)
        self.bounds = []

    def randrange(self, stop):
        self.bounds.append(stop)
        return self.values.pop(0)


@pytest.fixture
def grid():
    """The default 800x600 window grid: 38x28 cells."""
    return build_grid(800, 600, 20, 20)


@pytest.fixture
def settings():
    return Settings(seed=1234)


@pytest.fixture
def display():
    return FakeDisplay()
