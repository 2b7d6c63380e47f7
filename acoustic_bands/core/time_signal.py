"""
Time Signal Helpers

Alignment and peak search for measured impulse responses before they
are transformed to the frequency domain.

Technical assumptions:
- All operations work on copies, original data remains unchanged
- Time shifts are rounded to whole samples (half up), no fractional delay
- Samples that open up at either end are zero-filled
"""

import math

import numpy as np

from .errors import InvalidArgumentError


def adjust_time_signal(
    amplitudes: np.ndarray,
    adjustment_ms: float,
    sample_rate_khz: float,
) -> np.ndarray:
    """
    Shift a time signal by a given time.

    A positive adjustment moves the signal to the left (earlier), e.g. to
    remove propagation delay; a negative adjustment moves it to the right.

    Args:
        amplitudes: Time signal (1D)
        adjustment_ms: Shift in milliseconds
        sample_rate_khz: Sample rate in kHz (samples per millisecond)

    Returns:
        Shifted copy of the signal, same length
    """
    amplitudes = np.asarray(amplitudes, dtype=float)
    if amplitudes.ndim != 1:
        raise ValueError("Time signal must be 1D")
    if sample_rate_khz <= 0:
        raise InvalidArgumentError(f"Sample rate must be positive, got {sample_rate_khz} kHz")

    shift = int(math.floor(adjustment_ms * sample_rate_khz + 0.5))
    num_samples = len(amplitudes)
    result = np.zeros(num_samples)

    if abs(shift) >= num_samples:
        return result
    if shift > 0:
        result[:num_samples - shift] = amplitudes[shift:]
    elif shift < 0:
        result[-shift:] = amplitudes[:num_samples + shift]
    else:
        result[:] = amplitudes
    return result


def peak_time_index(amplitudes: np.ndarray) -> int:
    """
    Index of the peak (absolute maximum) of a time signal.

    The first occurrence wins. An all-zero or empty signal gives 0.
    """
    amplitudes = np.asarray(amplitudes, dtype=float)
    if len(amplitudes) == 0:
        return 0
    return int(np.argmax(np.abs(amplitudes)))


def peak_time_ms(amplitudes: np.ndarray, time_increments_ms: np.ndarray) -> float:
    """
    Time of the peak of a time signal.

    Args:
        amplitudes: Time signal (1D)
        time_increments_ms: Time axis in ms, aligned 1:1 with amplitudes

    Returns:
        Peak time in ms
    """
    if len(time_increments_ms) != len(amplitudes):
        raise ValueError("Time axis and signal must have the same length")
    return float(time_increments_ms[peak_time_index(amplitudes)])
