# renderer.py

from collections import namedtuple

import numpy as np
import pygame
import pygame.gfxdraw

import constants
from geometry import hexagon_points, heart_points, triangle_fan
from settings import Shape


def shape_points(shape: Shape, center, radius: float) -> np.ndarray:
    """Outline of the selected shape. The only place shape kinds are dispatched."""
    if shape is Shape.HEART:
        return heart_points(center, radius, constants.HEART_SEGMENTS)
    return hexagon_points(center, radius, 0.0)


def shape_fan(shape: Shape, center, outline: np.ndarray) -> np.ndarray:
    # The heart outline already repeats its first point; the hexagon's does not.
    return triangle_fan(center, outline, closed=shape is Shape.HEXAGON)


class Drawable(namedtuple('Drawable', ['shape', 'center', 'outline', 'color'])):
    """
    A shape ready to be drawn: its outline (N, 2) and an RGBA color with 0-255
    integer channels. The triangle fan covering the same area is built only on
    request, since the pygame fill works from the outline.
    """
    __slots__ = ()

    @property
    def triangles(self) -> np.ndarray:
        return shape_fan(self.shape, self.center, self.outline)


def to_rgba255(color) -> tuple:
    """Converts an (r, g, b, a) color with [0, 1] channels to clamped 0-255 ints."""
    return tuple(int(round(min(1.0, max(0.0, c)) * 255)) for c in color)


def build_drawable(cell, time: float, config, opacity: float = None):
    """
    Combines a cell's animation state with the selected shape.

    Data Contract:
    - Inputs:
        - cell (Cell): The cell to draw.
        - time (float): Elapsed session time in seconds.
        - config (ScreensaverConfig): Supplies shape and threshold.
        - opacity (float): Precomputed opacity for this frame. Computed from
          the cell when omitted.
    - Outputs: Drawable, or None when the cell is at or below VISIBILITY_FLOOR.
    """
    if opacity is None:
        opacity = cell.visibility(time, config.threshold)
    if opacity <= constants.VISIBILITY_FLOOR:
        return None

    outline = shape_points(config.shape, cell.position, cell.radius)
    return Drawable(config.shape, cell.position, outline, to_rgba255(cell.draw_color(opacity)))


def draw_drawable(surface: pygame.Surface, drawable: Drawable):
    """
    Fills a drawable on the surface, alpha-blended with what is already there.
    The outline polygon covers exactly the area of its triangle fan.
    """
    points = np.rint(drawable.outline).astype(int).tolist()
    pygame.gfxdraw.filled_polygon(surface, points, drawable.color)
