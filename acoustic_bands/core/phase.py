"""
Phase Conditioning

Cleans up per-bin phase vectors (degrees) for charting.

Technical assumptions:
- All vector operations work IN PLACE on float numpy arrays and return
  the same array for chaining. Callers must own the array exclusively
  while it is conditioned.
- unwrap_phase() bounds every sample to [-180, 180];
  normalize_adjacent_phase() only removes jumps > 180 between neighbors.
  Both are needed: charting artifacts come from inter-sample jumps, not
  from absolute values.
- -180 and +180 describe the same phase. Edge cleanup keeps neighbors on
  the same side; polarity normalization prefers -180 for a full
  polarity inversion.
- Every operation is idempotent.
"""

import math

import numpy as np


PHASE_EDGE_EPSILON = 1e-4  # degrees


def _check_phase_vector(phase: np.ndarray) -> None:
    if not isinstance(phase, np.ndarray) or phase.ndim != 1:
        raise ValueError("Phase data must be a 1D numpy array")
    if not np.issubdtype(phase.dtype, np.floating):
        raise ValueError("Phase data must be float (in-place conditioning)")


def unwrap_phase_value(phase: float) -> float:
    """
    Bring a single phase value into [-180, 180] degrees.

    Values already inside the interval are returned unchanged, others are
    shifted by whole multiples of 360. Non-finite values pass through.
    """
    if not math.isfinite(phase):
        return phase
    if phase < -180.0:
        return phase + 360.0 * math.ceil((-180.0 - phase) / 360.0)
    if phase > 180.0:
        return phase - 360.0 * math.ceil((phase - 180.0) / 360.0)
    return phase


def unwrap_phase(phase: np.ndarray) -> np.ndarray:
    """
    Bring every sample into [-180, 180] degrees (element-wise unwrap_phase_value).

    Args:
        phase: Phase vector in degrees, modified in place

    Returns:
        The same array
    """
    _check_phase_vector(phase)
    with np.errstate(invalid="ignore"):
        below = phase < -180.0
        above = phase > 180.0
    phase[below] += 360.0 * np.ceil((-180.0 - phase[below]) / 360.0)
    phase[above] -= 360.0 * np.ceil((phase[above] - 180.0) / 360.0)
    return phase


def normalize_adjacent_phase(phase: np.ndarray) -> np.ndarray:
    """
    Remove jumps larger than 180 degrees between neighboring samples.

    Each sample is rotated by multiples of 360 until it lies within 180
    degrees of its (already normalized) left neighbor. Samples are NOT
    bounded to [-180, 180]; e.g. [0, 190] becomes [0, -170] and
    [170, -170] becomes [170, 190].

    Args:
        phase: Phase vector in degrees, modified in place

    Returns:
        The same array
    """
    _check_phase_vector(phase)
    if len(phase) > 1:
        step = np.diff(phase)
        with np.errstate(invalid="ignore"):
            wrapped = np.mod(step + 180.0, 360.0) - 180.0
            # a difference of exactly +180 stays +180
            wrapped[(wrapped == -180.0) & (step > 0)] = 180.0
            correction = wrapped - step
            # non-finite samples are left as they are and do not rotate their neighbors
            correction[~np.isfinite(step) | (np.abs(step) <= 180.0)] = 0.0
        phase[1:] += np.cumsum(correction)
    return phase


def cleanup_edge_flutter(phase: np.ndarray, epsilon: float = PHASE_EDGE_EPSILON) -> np.ndarray:
    """
    Avoid flipping between -180 and +180 across neighboring samples.

    Charting clients connect neighbors with lines, so a flip between the
    two equivalent values is drawn as a full-height wrap. Every sample
    (except the first) within epsilon of +-180 takes the side of its left
    neighbor: -180 if the neighbor is <= 0, else +180.

    Args:
        phase: Phase vector in degrees, modified in place
        epsilon: Tolerance around +-180 in degrees

    Returns:
        The same array
    """
    _check_phase_vector(phase)
    near_edge = np.abs(np.abs(phase) - 180.0) < epsilon
    # Sequential: a corrected sample is the reference for the next one
    for i in np.flatnonzero(near_edge[1:]) + 1:
        phase[i] = -180.0 if phase[i - 1] <= 0.0 else 180.0
    return phase


def normalize_polarity_reversal(phase: np.ndarray, epsilon: float = PHASE_EDGE_EPSILON) -> np.ndarray:
    """
    Represent a full polarity inversion as -180 degrees.

    Every sample within epsilon of +180 is set to exactly -180,
    independent of its neighbors.
    """
    _check_phase_vector(phase)
    phase[np.abs(phase - 180.0) < epsilon] = -180.0
    return phase


def condition_phase(phase: np.ndarray, epsilon: float = PHASE_EDGE_EPSILON) -> np.ndarray:
    """
    Full conditioning for display: unwrap, edge cleanup, polarity convention.

    Args:
        phase: Phase vector in degrees, modified in place
        epsilon: Tolerance around +-180 in degrees

    Returns:
        The same array
    """
    unwrap_phase(phase)
    cleanup_edge_flutter(phase, epsilon)
    normalize_polarity_reversal(phase, epsilon)
    return phase
