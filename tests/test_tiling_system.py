import numpy as np
import pygame
import pytest

import constants
from hexgrid import grid_dimensions
from settings import ScreensaverConfig, Shape
from tiling_system import TilingSystem


@pytest.fixture
def tiling(rng):
    return TilingSystem(bounds=(800, 600), cell_radius=40.0, rng=rng)


def test_one_cell_per_grid_center(tiling):
    rows, cols = grid_dimensions(40.0, 800, 600)

    assert len(tiling.cells) == 2 * rows * cols
    assert tiling.phase_offsets.shape == (len(tiling.cells),)
    assert tiling.phase_offsets[5] == tiling.cells[5].phase_offset
    assert all(cell.radius == 40.0 for cell in tiling.cells)


def test_update_advances_every_cell(tiling):
    tiling.update(1.0)
    expected = constants.COLOR_TRANSITION_RATE
    assert all(cell.transition_progress == pytest.approx(expected) for cell in tiling.cells)


def test_draw_returns_number_of_visible_cells(tiling):
    surface = pygame.Surface((800, 600))
    config = ScreensaverConfig(Shape.HEXAGON, 0.0)

    visible = tiling.visible_count(0.0, config.threshold)
    drawn = tiling.draw(surface, 0.0, config)

    assert drawn == visible
    assert 0 < drawn < len(tiling.cells)


def test_draw_hearts(tiling):
    surface = pygame.Surface((800, 600))
    drawn = tiling.draw(surface, 1.5, ScreensaverConfig(Shape.HEART, 0.2))
    assert drawn == tiling.visible_count(1.5, 0.2)


def test_threshold_one_draws_nothing(tiling):
    surface = pygame.Surface((800, 600))
    surface.fill((0, 0, 0))

    drawn = tiling.draw(surface, 4.2, ScreensaverConfig(Shape.HEXAGON, 1.0))

    assert drawn == 0
    assert pygame.surfarray.array3d(surface).max() == 0


def test_seeded_systems_are_identical():
    a = TilingSystem((320, 240), 40.0, np.random.default_rng(5))
    b = TilingSystem((320, 240), 40.0, np.random.default_rng(5))

    assert np.array_equal(a.phase_offsets, b.phase_offsets)
    assert np.array_equal(a.compute_opacities(2.0, 0.4), b.compute_opacities(2.0, 0.4))
