import math

import numpy as np
import pytest

from geometry import hexagon_points, heart_points, triangle_fan


def test_hexagon_points_are_six_vertices_at_60_degree_steps():
    points = hexagon_points((0.0, 0.0), 10.0, 0.0)

    assert points.shape == (6, 2)
    for i, (x, y) in enumerate(points):
        assert math.hypot(x, y) == pytest.approx(10.0)
        angle = math.degrees(math.atan2(y, x)) % 360.0
        assert angle == pytest.approx(i * 60.0, abs=1e-9)

    assert points[0] == pytest.approx([10.0, 0.0])


def test_hexagon_points_respect_center_and_rotation():
    points = hexagon_points((50.0, -20.0), 4.0, math.pi / 2)

    assert points[0] == pytest.approx([50.0, -16.0])
    distances = np.hypot(points[:, 0] - 50.0, points[:, 1] + 20.0)
    assert distances == pytest.approx(np.full(6, 4.0))


def test_heart_points_form_a_closed_loop():
    points = heart_points((0.0, 0.0), 20.0)

    assert points.shape == (101, 2)
    assert points[0] == pytest.approx(points[-1], abs=1e-9)


def test_heart_points_match_parametric_curve():
    points = heart_points((10.0, 10.0), 40.0, segments=4)
    scale = 40.0 / 20.0

    # t = 0: x = 0, y = -(13 - 5 - 2 - 1) = -5
    assert points[0] == pytest.approx([10.0, 10.0 - 5.0 * scale])
    # t = pi / 2: x = 16, y = -(0 + 5 - 0 - 1) = -4
    assert points[1] == pytest.approx([10.0 + 16.0 * scale, 10.0 - 4.0 * scale])
    # t = pi: x = 0, y = -(-13 - 5 + 2 - 1) = 17 (the bottom tip)
    assert points[2] == pytest.approx([10.0, 10.0 + 17.0 * scale])


def test_heart_points_reject_non_positive_segments():
    with pytest.raises(ValueError):
        heart_points((0.0, 0.0), 20.0, segments=0)


def test_triangle_fan_closed_wraps_to_first_point():
    outline = hexagon_points((0.0, 0.0), 1.0)
    fan = triangle_fan((0.0, 0.0), outline, closed=True)

    assert fan.shape == (6, 3, 2)
    assert fan[:, 0] == pytest.approx(np.zeros((6, 2)))
    assert fan[5, 1] == pytest.approx(outline[5])
    assert fan[5, 2] == pytest.approx(outline[0])


def test_triangle_fan_open_uses_consecutive_points():
    outline = heart_points((3.0, 4.0), 20.0, segments=100)
    fan = triangle_fan((3.0, 4.0), outline, closed=False)

    assert fan.shape == (100, 3, 2)
    assert fan[0, 1] == pytest.approx(outline[0])
    assert fan[99, 2] == pytest.approx(outline[100])
    assert fan[:, 0] == pytest.approx(np.tile([3.0, 4.0], (100, 1)))
