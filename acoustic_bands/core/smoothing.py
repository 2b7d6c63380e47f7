"""
Fractional-Octave Gaussian Smoothing

Simulates 1/3- and 1/6-octave resolution from narrow-band (FFT bin) data.

Technical assumptions:
- Kernel is Gaussian in log-frequency:
  w(i, j) = exp(-ln(f_j / f_i)² / window_width)
- window_width = -ln(window_center)² / ln(voltage_ratio)
  with window_center = exp(ln2 / (2·O)) and voltage_ratio = 10^(-6/20),
  so the kernel drops to -6 dB at ±1/(2·O) octave
- Window: bins i-15 ... i+15 (31 weights), clamped at the lower array
  bound; positions past the last bin carry zero weight
- Output is normalized by the sum of weights actually used, which handles
  the clamped edges. A zero weight sum gives 0.

Tables depend only on (bin layout, divider). Build once, apply many times.
Complexity O(N·W) for building and applying.

Documented limitations:
- apply_smoothing() only accepts O in {3, 6}, although tables can be built
  for any divider
- The window is counted in bins, not in octaves: for coarse FFT grids at
  low frequencies it is wider than 1/O octave, for dense grids the kernel
  is cut off at ±15 bins
"""

import warnings
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from .band_table import Smoothing
from .errors import InvalidArgumentError, UnsupportedSmoothingError
from .levels import voltage_ratio


SMOOTHING_WINDOW_RADIUS = 15
SMOOTHING_WINDOW_SIZE = 2 * SMOOTHING_WINDOW_RADIUS + 1

REFERENCE_POWER_RATIO_DB = -6.0

SUPPORTED_SMOOTHING_DIVIDERS = (3, 6)


@dataclass(frozen=True, eq=False)
class SmoothingTable:
    """
    Precomputed Gaussian weights for one bin layout and octave divider.

    Immutable once built and safe to share between callers.

    Attributes:
        frequencies: Bin center frequencies in Hz, Shape: (N,)
        octave_divider: O the table was built for
        weights: Shape: (N, SMOOTHING_WINDOW_SIZE). weights[i, k] belongs to
            bin window_start[i] + k; unused positions are 0
        window_start: First bin of each window, max(0, i - 15)
    """
    frequencies: np.ndarray
    octave_divider: int
    weights: np.ndarray
    window_start: np.ndarray

    @property
    def num_bins(self) -> int:
        return len(self.frequencies)

    def window_indices(self) -> tuple[np.ndarray, np.ndarray]:
        """
        Bin index and validity mask for every table position.

        Returns:
            Tuple of (indices clipped to the array, mask of used positions),
            both Shape: (N, SMOOTHING_WINDOW_SIZE)
        """
        return _window_indices(self.num_bins)

    def matches(self, frequencies: np.ndarray, octave_divider: int) -> bool:
        """True if the table was built for this bin layout and divider."""
        return (
            octave_divider == self.octave_divider
            and np.array_equal(np.asarray(frequencies, dtype=float), self.frequencies)
        )


def _window_indices(num_bins: int) -> tuple[np.ndarray, np.ndarray]:
    bins = np.arange(num_bins)
    start = np.maximum(bins - SMOOTHING_WINDOW_RADIUS, 0)
    indices = start[:, np.newaxis] + np.arange(SMOOTHING_WINDOW_SIZE)[np.newaxis, :]
    used = (indices <= (bins + SMOOTHING_WINDOW_RADIUS)[:, np.newaxis]) & (indices < num_bins)
    return np.minimum(indices, max(num_bins - 1, 0)), used


def gaussian_window_width(octave_divider: float) -> float:
    """
    Width parameter of the log-frequency Gaussian for divider O.

    Chosen so that the kernel equals the -6 dB voltage ratio at a
    distance of 1/(2·O) octave from the center bin.
    """
    if not octave_divider > 0:
        raise InvalidArgumentError(f"Octave divider must be positive, got {octave_divider}")
    window_center = np.exp(np.log(2.0) / (2.0 * octave_divider))
    return -np.log(window_center) ** 2 / np.log(voltage_ratio(REFERENCE_POWER_RATIO_DB))


def build_smoothing_table(frequency_bins: np.ndarray, octave_divider: int) -> SmoothingTable:
    """
    Build the Gaussian smoothing table for a bin layout.

    Args:
        frequency_bins: Bin center frequencies in Hz, ascending, all > 0
        octave_divider: O, e.g. 3 for 1/3-octave smoothing

    Returns:
        SmoothingTable with Shape (N, 31) weights

    Raises:
        InvalidArgumentError: Divider <= 0, empty/non-1D bins, or bins <= 0
    """
    frequencies = np.array(frequency_bins, dtype=float)
    if frequencies.ndim != 1 or len(frequencies) == 0:
        raise InvalidArgumentError("Frequency bins must be a non-empty 1D sequence")
    if not np.all(frequencies > 0):
        # log(0) is undefined; drop the DC bin before smoothing
        raise InvalidArgumentError("Frequency bins must be positive (drop the DC bin first)")
    if np.any(np.diff(frequencies) <= 0):
        warnings.warn(
            "Frequency bins are not strictly ascending; smoothing windows "
            "will not be contiguous in frequency",
            UserWarning,
        )

    window_width = gaussian_window_width(octave_divider)

    indices, used = _window_indices(len(frequencies))
    log_frequencies = np.log(frequencies)
    log_ratio = log_frequencies[indices] - log_frequencies[:, np.newaxis]
    weights = np.where(used, np.exp(-log_ratio ** 2 / window_width), 0.0)

    frequencies.flags.writeable = False
    weights.flags.writeable = False
    window_start = indices[:, 0].copy()
    window_start.flags.writeable = False

    return SmoothingTable(
        frequencies=frequencies,
        octave_divider=octave_divider,
        weights=weights,
        window_start=window_start,
    )


def build_smoothing_tables(frequency_bins: np.ndarray) -> dict[int, SmoothingTable]:
    """Build the third- and sixth-octave tables for a bin layout, keyed by divider."""
    return {
        divider: build_smoothing_table(frequency_bins, divider)
        for divider in SUPPORTED_SMOOTHING_DIVIDERS
    }


def apply_smoothing(
    table: SmoothingTable,
    data: np.ndarray,
    octave_divider: int,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Smooth a magnitude vector with a precomputed table.

    Every output bin is the weighted average of the input over the same
    window the table was built with, normalized by the sum of weights used.

    Note: octave_divider only gates the call; the weights come from the
    table alone.

    Args:
        table: Table built for the bin layout of data
        data: Magnitude (linear or dB) per bin, Shape: (N,)
        octave_divider: Must be 3 or 6
        out: Optional preallocated output array (must not alias data)

    Returns:
        Smoothed vector, Shape: (N,); out if it was given

    Raises:
        UnsupportedSmoothingError: Divider other than 3 or 6
        InvalidArgumentError: data length differs from the table
    """
    if octave_divider not in SUPPORTED_SMOOTHING_DIVIDERS:
        raise UnsupportedSmoothingError(octave_divider)

    data = np.asarray(data, dtype=float)
    if data.ndim != 1 or len(data) != table.num_bins:
        raise InvalidArgumentError(
            f"Data must be 1D with {table.num_bins} bins, got shape {data.shape}"
        )

    indices, used = table.window_indices()
    # Unused positions must not leak NaN/inf through 0 * x
    with np.errstate(invalid="ignore"):
        weighted_sum = np.sum(np.where(used, table.weights * data[indices], 0.0), axis=1)
    weight_sum = np.sum(table.weights, axis=1)

    result = np.zeros(table.num_bins)
    np.divide(weighted_sum, weight_sum, out=result, where=weight_sum > 0)

    if out is None:
        return result
    if out.shape != result.shape:
        raise InvalidArgumentError(f"Output must have shape {result.shape}, got {out.shape}")
    out[:] = result
    return out


class GaussianSmoother:
    """
    Fractional-octave smoother for a fixed bin layout.

    Builds the 1/3- and 1/6-octave tables once at creation and reuses
    them for every call to smooth().

    Usage:
        smoother = GaussianSmoother(frequencies)
        smoothed_db = smoother.smooth(magnitude_db, Smoothing.THIRD_OCTAVE_BAND)
    """

    def __init__(self, frequency_bins: np.ndarray):
        """
        Initialize smoother.

        Args:
            frequency_bins: Bin center frequencies in Hz, ascending, all > 0
        """
        self._tables = build_smoothing_tables(frequency_bins)
        self.frequencies = self._tables[SUPPORTED_SMOOTHING_DIVIDERS[0]].frequencies

    @property
    def num_bins(self) -> int:
        return len(self.frequencies)

    def get_table(self, octave_divider: int) -> SmoothingTable:
        """Precomputed table for divider 3 or 6."""
        if octave_divider not in self._tables:
            raise UnsupportedSmoothingError(octave_divider)
        return self._tables[octave_divider]

    def smooth(
        self,
        data: np.ndarray,
        smoothing: Union[Smoothing, int] = Smoothing.THIRD_OCTAVE_BAND,
    ) -> np.ndarray:
        """
        Smooth a magnitude vector.

        Args:
            data: Magnitude per bin, Shape: (N,)
            smoothing: Smoothing setting or octave divider (0, 3 or 6)

        Returns:
            New smoothed array. Smoothing.NARROW_BAND (divider 0) returns
            an unmodified copy.
        """
        if smoothing == Smoothing.NARROW_BAND.octave_divider:
            smoothing = Smoothing.NARROW_BAND
        if smoothing is Smoothing.NARROW_BAND:
            data = np.array(data, dtype=float)
            if data.shape != (self.num_bins,):
                raise InvalidArgumentError(
                    f"Data must be 1D with {self.num_bins} bins, got shape {data.shape}"
                )
            return data

        octave_divider = smoothing.octave_divider if isinstance(smoothing, Smoothing) else smoothing
        return apply_smoothing(self.get_table(octave_divider), data, octave_divider)
