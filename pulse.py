# pulse.py

import numpy as np
import numba

import constants

# --- JIT-Compiled Pulse Functions ---
# Every cell's opacity is recomputed each frame from elapsed time, so these are
# compiled with Numba and operate only on scalars and NumPy arrays.

PHASE_SPEED_SCALE = constants.PHASE_SPEED_SCALE


@numba.jit(nopython=True)
def opacity_from_raw(raw, threshold):
    """
    Maps a raw sine sample to an opacity in [0, 1].

    Samples at or below threshold are invisible. Above it, the opacity rises as
    the square of the normalized distance to the peak, so cells are fully
    opaque only briefly around raw == 1.
    """
    if raw <= threshold:
        return 0.0
    ramp = (raw - threshold) / (1.0 - threshold)
    return ramp * ramp


@numba.jit(nopython=True)
def phase_speed(threshold):
    """Angular speed of the pulse. Higher thresholds give rarer, faster pulses."""
    return (1.0 - threshold) * PHASE_SPEED_SCALE


@numba.jit(nopython=True)
def pulse_opacity(time, phase_offset, threshold):
    """Opacity of a single cell at elapsed time (seconds)."""
    raw = np.sin(time * phase_speed(threshold) + phase_offset)
    return opacity_from_raw(raw, threshold)


@numba.jit(nopython=True)
def _pulse_opacities_jit(time, phase_offsets, threshold, out):
    """Numba-accelerated opacity pass over every cell."""
    speed = phase_speed(threshold)
    for i in range(phase_offsets.shape[0]):
        out[i] = opacity_from_raw(np.sin(time * speed + phase_offsets[i]), threshold)


def pulse_opacities(time: float, phase_offsets: np.ndarray, threshold: float, out: np.ndarray = None) -> np.ndarray:
    """
    Computes the opacity of every cell for one frame.

    Data Contract:
    - Inputs:
        - time (float): Elapsed session time in seconds.
        - phase_offsets (np.ndarray): float64 array, one phase per cell.
        - threshold (float): Global threshold, already clamped to [0, 1].
        - out (np.ndarray): Optional preallocated float64 output array.
    - Outputs: np.ndarray of opacities, same length as phase_offsets.
    """
    if out is None:
        out = np.empty_like(phase_offsets, dtype=np.float64)
    _pulse_opacities_jit(float(time), phase_offsets, float(threshold), out)
    return out
