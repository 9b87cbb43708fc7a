import os

# pygame must not open real windows or audio devices during tests.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pygame
import pytest

from cell import Cell


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def cell(rng):
    """A cell at (100, 100) with fixed, known colors."""
    c = Cell((100.0, 100.0), 40.0, rng)
    c.color = np.array([1.0, 0.5, 0.25])
    c.next_color = np.array([0.0, 0.5, 1.0])
    c.transition_progress = 0.0
    return c
