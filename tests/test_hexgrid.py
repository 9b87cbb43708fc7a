import math

import numpy as np
import pytest

import constants
from hexgrid import build_grid, grid_dimensions


def test_grid_dimensions_over_provision_by_margin():
    rows, cols = grid_dimensions(40.0, 800, 600)
    cell_height = 2.0 * 40.0 * constants.SIN_60

    assert cols == 10 + constants.GRID_MARGIN_CELLS
    assert rows == math.ceil(600 / cell_height) + constants.GRID_MARGIN_CELLS


def test_build_grid_covers_viewport():
    centers = build_grid(40.0, 800, 600)
    rows, cols = grid_dimensions(40.0, 800, 600)

    assert len(centers) == 2 * rows * cols
    assert centers[:, 0].min() == pytest.approx(0.0)
    assert centers[:, 1].min() == pytest.approx(0.0)
    assert centers[:, 0].max() >= 800
    assert centers[:, 1].max() >= 600


@pytest.mark.parametrize("width, height", [
    (800, 600),
    (800, 800),
    (1920, 1080),
    (2560, 1440),
    (3840, 2160),
    (1080, 1920),
])
def test_build_grid_leaves_no_band_at_far_edges(width, height):
    radius = 40.0
    centers = build_grid(radius, width, height)

    # Bottom edge of the lowest hexagon and right edge of the rightmost one.
    assert centers[:, 1].max() + radius * constants.SIN_60 >= height
    assert centers[:, 0].max() + radius >= width
    # At least one whole margin row lies past the bottom edge.
    assert centers[:, 1].max() >= height + 2.0 * radius * constants.SIN_60 * 0.5


def test_build_grid_has_no_duplicate_centers():
    centers = build_grid(40.0, 800, 600)

    unique = np.unique(np.round(centers, 6), axis=0)
    assert len(unique) == len(centers)


def test_build_grid_interleaves_offset_points():
    radius = 40.0
    cell_height = 2.0 * radius * constants.SIN_60
    centers = build_grid(radius, 800, 600)

    assert centers[0] == pytest.approx([0.0, 0.0])
    assert centers[1] == pytest.approx([1.5 * radius, 0.5 * cell_height])
    assert centers[2] == pytest.approx([3.0 * radius, 0.0])


def test_build_grid_rejects_non_positive_radius():
    with pytest.raises(ValueError):
        build_grid(0.0, 800, 600)
