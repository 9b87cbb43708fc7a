# hexgrid.py

import logging
import math

import numpy as np

import constants

logger = logging.getLogger("hex_saver")


def grid_dimensions(cell_radius: float, width: float, height: float):
    """
    Number of (rows, cols) needed to cover width x height, including the edge margin.

    Rows are counted from the real row pitch (2 * r * sin(60)), so the margin
    stays GRID_MARGIN_CELLS rows past the bottom edge at every screen height.
    Columns use the 2 * r step, which over-covers the 3 * r column pitch.
    """
    cell_height = 2.0 * cell_radius * constants.SIN_60
    cols = math.ceil(width / (cell_radius * 2)) + constants.GRID_MARGIN_CELLS
    rows = math.ceil(height / cell_height) + constants.GRID_MARGIN_CELLS
    return rows, cols


def build_grid(cell_radius: float, width: float, height: float) -> np.ndarray:
    """
    Computes the cell centers of a hexagonal tiling covering the viewport.

    Rows of hexagon centers are laid out 2 * r * sin(60) apart vertically and
    3 * r apart horizontally. Every grid position also emits a second center
    shifted by (1.5 * r, 0.5 * cell_height), which fills the gaps and produces
    the brick-like offset pattern of a flat-top hex tiling.

    Data Contract:
    - Inputs:
        - cell_radius (float): Hexagon circumradius in pixels. Must be positive.
        - width, height (float): Viewport size in pixels.
    - Outputs: np.ndarray of shape (2 * rows * cols, 2). Row-major, then the two
      sub-points of each position.
    - Invariants: The points cover [0, width] x [0, height] with at least
      GRID_MARGIN_CELLS extra rows and columns past the far edges.
    """
    if cell_radius <= 0:
        raise ValueError(f"cell_radius must be positive, got {cell_radius}")

    cell_height = 2.0 * cell_radius * constants.SIN_60
    rows, cols = grid_dimensions(cell_radius, width, height)

    # --- Base lattice, row-major ---
    row_idx, col_idx = np.meshgrid(np.arange(rows), np.arange(cols), indexing='ij')
    base = np.column_stack((
        col_idx.ravel() * cell_radius * 3.0,
        row_idx.ravel() * cell_height,
    ))

    # --- Offset lattice, interleaved after each base point ---
    offset = base + np.array([cell_radius * 1.5, cell_height * 0.5])
    centers = np.stack((base, offset), axis=1).reshape(-1, 2)

    logger.debug(f"Grid built: {rows} rows x {cols} cols -> {len(centers)} cells for {width}x{height}.")
    return centers
