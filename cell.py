# cell.py

import numpy as np

import constants
from pulse import pulse_opacity


def random_color(rng: np.random.Generator) -> np.ndarray:
    """Uniformly random RGB color, each channel in [0, 1]. Alpha is implicitly 1.0."""
    return rng.random(3)


class Cell:
    """
    Represents a single tile of the screensaver grid.

    Data Contract:
    - Inputs:
        - position: (x, y) of the cell center. Fixed for the cell's lifetime.
        - radius (float): Size of the drawn shape. Fixed for the cell's lifetime.
        - rng (np.random.Generator): Source of the phase offset and of every color.
    - Invariants:
        - color and next_color channels are always in [0, 1].
        - transition_progress is in [0, 1). color is the settled color when it
          is 0; next_color is the upcoming target.
        - phase_offset is in [0, 2*pi) and never changes.
    """
    def __init__(self, position, radius: float, rng: np.random.Generator):
        self.position = (float(position[0]), float(position[1]))
        self.radius = float(radius)
        self.rng = rng

        self.color = random_color(rng)
        self.next_color = random_color(rng)
        self.transition_progress = 0.0
        self.phase_offset = rng.uniform(0.0, 2.0 * np.pi)

    def update(self, dt: float):
        """
        Advances the color crossfade by dt seconds.
        Once the crossfade completes, the target becomes the settled color and a
        new random target is drawn.
        """
        self.transition_progress += dt * constants.COLOR_TRANSITION_RATE

        if self.transition_progress >= 1.0:
            self.color = self.next_color
            self.next_color = random_color(self.rng)
            self.transition_progress = 0.0

    def visibility(self, time: float, threshold: float) -> float:
        """Opacity in [0, 1] at elapsed time. Recomputed on every call, never stored."""
        return pulse_opacity(float(time), self.phase_offset, float(threshold))

    def current_rgb(self) -> np.ndarray:
        """The crossfaded color: color + (next_color - color) * transition_progress."""
        return self.color + (self.next_color - self.color) * self.transition_progress

    def draw_color(self, opacity: float):
        """
        Returns the (r, g, b, a) draw color with channels in [0, 1].
        The alpha channel is the opacity supplied by the caller.
        """
        r, g, b = self.current_rgb()
        return (float(r), float(g), float(b), float(opacity))
