# tiling_system.py

import logging

import numpy as np
import pygame

import constants
from cell import Cell
from hexgrid import build_grid
from pulse import pulse_opacities
from renderer import build_drawable, draw_drawable

logger = logging.getLogger("hex_saver")


class TilingSystem:
    """
    Manages every cell of the screensaver for one session.

    Data Contract:
    - Inputs:
        - bounds (tuple): The (width, height) of the viewport in pixels.
        - cell_radius (float): Circumradius of one cell.
        - rng (np.random.Generator): The master random number generator.
    - Outputs: None. This class modifies its internal state.
    - Side Effects: Draws onto the surface passed to draw().
    - Invariants: Cells are created once from the grid layout and are never
      added or removed. phase_offsets[i] is cells[i].phase_offset.
    """
    def __init__(self, bounds: tuple, cell_radius: float, rng: np.random.Generator):
        self.bounds = bounds
        self.cell_radius = cell_radius

        centers = build_grid(cell_radius, bounds[0], bounds[1])
        self.cells = [Cell(center, cell_radius, rng) for center in centers]

        # --- Structure of Arrays mirror for the JIT opacity pass ---
        self.phase_offsets = np.array([cell.phase_offset for cell in self.cells], dtype=np.float64)
        self.opacities = np.zeros(len(self.cells), dtype=np.float64)

        logger.info(f"TilingSystem created with {len(self.cells)} cells for {bounds[0]}x{bounds[1]} (radius {cell_radius}).")

    def update(self, dt: float):
        """Advances every cell's color crossfade by dt seconds."""
        for cell in self.cells:
            cell.update(dt)

    def compute_opacities(self, time: float, threshold: float) -> np.ndarray:
        return pulse_opacities(time, self.phase_offsets, threshold, out=self.opacities)

    def visible_count(self, time: float, threshold: float) -> int:
        """Number of cells that would be drawn at this time."""
        return int(np.count_nonzero(self.compute_opacities(time, threshold) > constants.VISIBILITY_FLOOR))

    def draw(self, surface: pygame.Surface, time: float, config) -> int:
        """
        Draws all visible cells.

        - Inputs:
            - surface (pygame.Surface): Target surface, already cleared.
            - time (float): Elapsed session time in seconds.
            - config (ScreensaverConfig): Shape and threshold for this frame.
        - Outputs: int - The number of cells drawn.
        """
        opacities = self.compute_opacities(time, config.threshold)

        drawn = 0
        for cell, opacity in zip(self.cells, opacities):
            drawable = build_drawable(cell, time, config, opacity=float(opacity))
            if drawable is None:
                continue
            draw_drawable(surface, drawable)
            drawn += 1
        return drawn
