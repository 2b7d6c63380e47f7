"""
Level Conversions

Converts between linear ratios and decibels.

Technical assumptions:
- Voltage (amplitude) ratios use 20·log10, power ratios use 10·log10
- Peaking/shelving filters use the half-exponent convention 10^(dB/40)
  (Audio EQ Cookbook)
- Zero magnitude maps to -inf dB, no clipping is applied here
"""

from typing import Optional

import numpy as np

from .errors import InvalidArgumentError


# Ratio of one-octave bandwidth to quality factor. The textbook value from
# N = (2/ln2)·asinh(1/(2Q)) is ~1.41; the calibrated value in use is 1.43.
OCTAVE_BANDWIDTH_TO_QUALITY_FACTOR_RATIO = 1.43


def voltage_ratio(power_ratio_db: float) -> float:
    """
    Linear voltage ratio for a level difference in dB.

    For all but peaking and shelving filters.

    Args:
        power_ratio_db: Level difference in dB

    Returns:
        Linear ratio 10^(dB/20), e.g. ~0.501 for -6 dB
    """
    return 10.0 ** (power_ratio_db / 20.0)


def peaking_voltage_ratio(power_ratio_db: float) -> float:
    """Linear voltage ratio for peaking and shelving filters (10^(dB/40))."""
    return 10.0 ** (power_ratio_db / 40.0)


def power_ratio_db(voltage_ratio_linear: float) -> float:
    """Level difference in dB for a linear voltage ratio."""
    if voltage_ratio_linear < 0:
        raise InvalidArgumentError("Voltage ratio must not be negative")
    if voltage_ratio_linear == 0:
        return -np.inf
    return 20.0 * np.log10(voltage_ratio_linear)


def magnitude_to_db(magnitude, min_db: Optional[float] = None):
    """
    Convert magnitude (linear) to dB.

    Works on scalars and arrays.

    Args:
        magnitude: Linear magnitude, e.g. abs() of complex FFT values
        min_db: Optional floor to avoid -inf for zero magnitudes

    Returns:
        Magnitude in dB (same shape as input)
    """
    magnitude = np.asarray(magnitude, dtype=float)
    if np.any(magnitude < 0):
        raise InvalidArgumentError("Magnitude must not be negative")
    if min_db is not None:
        magnitude = np.maximum(magnitude, 10 ** (min_db / 20))
    with np.errstate(divide="ignore"):
        result = 20.0 * np.log10(magnitude)
    return result if result.ndim else float(result)


def magnitude_from_db(magnitude_db):
    """Convert magnitude from dB to linear."""
    result = np.power(10.0, np.asarray(magnitude_db, dtype=float) / 20.0)
    return result if result.ndim else float(result)


def power_ratio_to_db(power_ratio):
    """Convert a power ratio from linear to dB (10·log10)."""
    power_ratio = np.asarray(power_ratio, dtype=float)
    if np.any(power_ratio < 0):
        raise InvalidArgumentError("Power ratio must not be negative")
    with np.errstate(divide="ignore"):
        result = 10.0 * np.log10(power_ratio)
    return result if result.ndim else float(result)


def power_ratio_from_db(power_ratio_db_value):
    """Convert a power ratio from dB to linear."""
    result = np.power(10.0, np.asarray(power_ratio_db_value, dtype=float) / 10.0)
    return result if result.ndim else float(result)


def angular_frequency(frequency_hz: float) -> float:
    """Angular frequency in rad/s."""
    return 2.0 * np.pi * frequency_hz


def s_domain_frequency(frequency_hz: float) -> complex:
    """Laplace variable s = jω on the imaginary axis for a frequency in Hz."""
    return complex(0.0, angular_frequency(frequency_hz))


def bandwidth_to_q(bandwidth_octaves: float) -> float:
    """
    Quality factor for a bandwidth given in octaves.

    Scales the one-octave reference ratio, so 1 octave gives 1.43 and
    1/3 octave gives 4.29.
    """
    if bandwidth_octaves <= 0:
        raise InvalidArgumentError("Bandwidth must be positive")
    return OCTAVE_BANDWIDTH_TO_QUALITY_FACTOR_RATIO / bandwidth_octaves
