import numpy as np
import pytest

import constants
from cell import Cell, random_color


def test_new_cell_state_is_valid(rng):
    cell = Cell((12.0, 34.0), 40.0, rng)

    assert cell.position == (12.0, 34.0)
    assert cell.radius == 40.0
    assert cell.transition_progress == 0.0
    assert 0.0 <= cell.phase_offset < 2 * np.pi
    for color in (cell.color, cell.next_color):
        assert color.shape == (3,)
        assert np.all((color >= 0.0) & (color <= 1.0))


def test_random_color_is_seedable():
    a = random_color(np.random.default_rng(7))
    b = random_color(np.random.default_rng(7))
    assert np.array_equal(a, b)


def test_update_advances_progress(cell):
    cell.update(0.5)
    assert cell.transition_progress == pytest.approx(0.5 * constants.COLOR_TRANSITION_RATE)


def test_update_commits_next_color_after_full_transition(cell):
    previous_next = cell.next_color.copy()

    for _ in range(33):
        cell.update(0.1)
    assert cell.transition_progress == pytest.approx(0.99)
    assert np.array_equal(cell.next_color, previous_next)

    cell.update(0.1)

    assert np.array_equal(cell.color, previous_next)
    assert 0.0 <= cell.transition_progress < 0.1 * constants.COLOR_TRANSITION_RATE
    assert np.all((cell.next_color >= 0.0) & (cell.next_color <= 1.0))


def test_draw_color_at_zero_progress_is_current_color(cell):
    r, g, b, a = cell.draw_color(0.6)

    assert (r, g, b) == (1.0, 0.5, 0.25)
    assert a == 0.6


def test_draw_color_approaches_next_color(cell):
    cell.transition_progress = 1.0 - 1e-9

    r, g, b, _ = cell.draw_color(1.0)

    assert (r, g, b) == pytest.approx((0.0, 0.5, 1.0), abs=1e-8)


def test_draw_color_interpolates_linearly(cell):
    cell.transition_progress = 0.5
    assert cell.draw_color(1.0)[:3] == pytest.approx((0.5, 0.5, 0.625))


def test_visibility_is_recomputed_from_time(cell):
    cell.phase_offset = np.pi / 2

    assert cell.visibility(0.0, 0.0) == pytest.approx(1.0)
    # Half a period later the sine is at its trough.
    assert cell.visibility(np.pi / 10, 0.0) == 0.0
