# geometry.py

"""
Shape Geometry

Pure functions producing ordered outline points for the two drawable shapes and
the triangle fans used to fill them. All outputs are float64 NumPy arrays of
shape (N, 2) in screen coordinates (y grows downwards).
"""

import numpy as np

import constants


def hexagon_points(center, radius: float, rotation: float = 0.0) -> np.ndarray:
    """
    Returns the 6 vertices of a regular hexagon.

    Vertex i sits at angle rotation + i * 60 degrees, at distance radius from
    center.

    Data Contract:
    - Inputs:
        - center: (x, y) of the hexagon center.
        - radius (float): Circumradius in pixels.
        - rotation (float): Angle of vertex 0 in radians.
    - Outputs: np.ndarray of shape (6, 2), ordered by vertex index.
    """
    angles = rotation + np.radians(np.arange(6) * 60.0)
    cx, cy = center
    return np.column_stack((cx + radius * np.cos(angles), cy + radius * np.sin(angles)))


def heart_points(center, size: float, segments: int = constants.HEART_SEGMENTS) -> np.ndarray:
    """
    Returns the outline of the classic parametric heart.

        x(t) = 16 sin^3(t)
        y(t) = -(13 cos(t) - 5 cos(2t) - 2 cos(3t) - cos(4t))

    sampled at segments + 1 uniform steps of t over [0, 2*pi], scaled by
    size / 20 and translated to center. The first and last points both come from
    t = 0 and t = 2*pi, so the outline is closed. The curve is star-shaped around
    center, which is what makes a fan from center a valid fill.

    Data Contract:
    - Inputs:
        - center: (x, y) of the heart center.
        - size (float): Nominal size in pixels (the heart spans about 1.6 * size wide).
        - segments (int): Number of steps along t. Must be positive.
    - Outputs: np.ndarray of shape (segments + 1, 2), ordered by t.
    """
    if segments <= 0:
        raise ValueError(f"segments must be positive, got {segments}")

    t = np.arange(segments + 1) / segments * 2.0 * np.pi
    heart_x = 16.0 * np.sin(t) ** 3
    heart_y = -(13.0 * np.cos(t) - 5.0 * np.cos(2.0 * t) - 2.0 * np.cos(3.0 * t) - np.cos(4.0 * t))

    scale = size / 20.0
    cx, cy = center
    return np.column_stack((cx + heart_x * scale, cy + heart_y * scale))


def triangle_fan(center, points: np.ndarray, closed: bool) -> np.ndarray:
    """
    Builds a triangle fan from center over an ordered outline.

    Triangle i is (center, points[i], points[i + 1]). With closed=True the last
    triangle wraps around to points[0], giving len(points) triangles; otherwise
    len(points) - 1 triangles are produced.

    - Outputs: np.ndarray of shape (n_triangles, 3, 2).
    """
    if closed:
        following = np.roll(points, -1, axis=0)
        starts = points
    else:
        following = points[1:]
        starts = points[:-1]

    centers = np.broadcast_to(np.asarray(center, dtype=float), starts.shape)
    return np.stack((centers, starts, following), axis=1)
