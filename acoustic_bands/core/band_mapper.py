"""
Band Mapping

Converts between raw frequency, band number, octave range and center
frequency.

Technical assumptions:
- Analytic center frequency: fc = 1000 × 2^((n - n1k) / O)
  with n1k = round((O/3) × 30), the band number of 1 kHz for divider O
- Band number 30 at O=3 is exactly 1 kHz; the nominal tables in
  band_table are rounded ("preferred") values of the same grid
- Octave range lookup uses the fixed boundary table, not the formula

Documented legacy behavior (preserved, tested):
- Frequencies below 10 Hz or at/above 20 kHz clamp to the first/last
  range, no error is raised
- Unknown labels in octave_offset_from_reference() give offset 0
"""

import math
from dataclasses import dataclass, field
from typing import Optional, Union

import numpy as np

from .band_table import (
    NARROW_OCTAVE_RANGES,
    NOMINAL_FULL_OCTAVE_CENTER_FREQUENCIES,
    NOMINAL_THIRD_OCTAVE_CENTER_FREQUENCIES,
    OCTAVE_RANGE_BOUNDARIES,
    OCTAVE_RANGE_WIDE_DEFAULT,
    OctaveRange,
    RelativeBandwidth,
)
from .errors import InvalidArgumentError


REFERENCE_FREQUENCY = 1000.0  # Hz
REFERENCE_BAND_NUMBER_THIRD_OCTAVE = 30

# Lower edges of ranges 1..10; searching these gives the range ordinal
_INNER_EDGES = OCTAVE_RANGE_BOUNDARIES[1:-1]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _check_octave_divider(octave_divider: float) -> None:
    if not octave_divider > 0:
        raise InvalidArgumentError(f"Octave divider must be positive, got {octave_divider}")


def _check_frequency(frequency: float) -> None:
    if math.isnan(frequency) or frequency < 0:
        raise InvalidArgumentError(f"Frequency must be a non-negative number, got {frequency}")


def band_for_frequency(frequency: float) -> OctaveRange:
    """
    Classify a frequency into one of the 11 octave ranges.

    Args:
        frequency: Frequency in Hz (>= 0)

    Returns:
        The octave range containing the frequency. Frequencies below 10 Hz
        give the first range, frequencies at/above 20 kHz the last one.

    Raises:
        InvalidArgumentError: Negative or NaN frequency
    """
    frequency = float(frequency)
    _check_frequency(frequency)
    ordinal = int(np.searchsorted(_INNER_EDGES, frequency, side="right"))
    return NARROW_OCTAVE_RANGES[ordinal]


def band_indices_for_frequencies(frequencies: np.ndarray) -> np.ndarray:
    """
    Vectorized band_for_frequency(), returning range ordinals (0..10).

    Useful to classify every bin of a narrow-band spectrum at once.
    """
    frequencies = np.asarray(frequencies, dtype=float)
    if np.any(np.isnan(frequencies)) or np.any(frequencies < 0):
        raise InvalidArgumentError("Frequencies must be non-negative numbers")
    return np.searchsorted(_INNER_EDGES, frequencies, side="right")


def nominal_center_frequency(band: OctaveRange, narrow_band: bool = False) -> float:
    """
    Nominal center frequency of an octave range.

    The narrow-band convention differs for the three lowest ranges
    (15.6 vs 16, 31.2 vs 31.5, 62.5 vs 63 Hz). The wide band gives 4 kHz.
    """
    if narrow_band:
        return band.narrow_band_center_frequency
    return band.nominal_center_frequency


def reference_band_number(octave_divider: float) -> int:
    """Band number of 1 kHz for the given octave divider."""
    _check_octave_divider(octave_divider)
    return _round_half_up(octave_divider / 3.0 * REFERENCE_BAND_NUMBER_THIRD_OCTAVE)


def center_frequency_from_band_number(band_number: int, octave_divider: float) -> float:
    """
    Exact center frequency of a fractional-octave band.

    fc = 1000 × 2^((n - n1k) / O), where n1k is the band number of 1 kHz.

    Args:
        band_number: Band index on the fractional-octave grid
        octave_divider: O, e.g. 3 for third-octave bands

    Returns:
        Center frequency in Hz

    Raises:
        InvalidArgumentError: Divider is zero or negative
    """
    band_number_at_1khz = reference_band_number(octave_divider)
    return REFERENCE_FREQUENCY * 2.0 ** ((band_number - band_number_at_1khz) / octave_divider)


def band_number_for_center_frequency(center_frequency: float, octave_divider: float) -> int:
    """Nearest band number for a frequency (inverse of center_frequency_from_band_number)."""
    if not center_frequency > 0:
        raise InvalidArgumentError(f"Center frequency must be positive, got {center_frequency}")
    band_number_at_1khz = reference_band_number(octave_divider)
    bands_from_1khz = octave_divider * math.log2(center_frequency / REFERENCE_FREQUENCY)
    return band_number_at_1khz + _round_half_up(bands_from_1khz)


def nominal_band_center_frequency(
    band_number: int,
    relative_bandwidth: RelativeBandwidth = RelativeBandwidth.THIRD_OCTAVE,
) -> float:
    """
    Nominal ("musical") center frequency for a band number.

    Uses the preferred-number tables for full and third octaves, e.g.
    band 31 at 1/3 octave gives 1250 Hz instead of 1259.9 Hz. Band numbers
    outside the tables and finer bandwidths use the exact formula.
    """
    if relative_bandwidth is RelativeBandwidth.ONE_OCTAVE:
        table = NOMINAL_FULL_OCTAVE_CENTER_FREQUENCIES
    elif relative_bandwidth is RelativeBandwidth.THIRD_OCTAVE:
        table = NOMINAL_THIRD_OCTAVE_CENTER_FREQUENCIES
    else:
        table = None

    if table is not None and 0 <= band_number < len(table) and not np.isnan(table[band_number]):
        return float(table[band_number])
    return center_frequency_from_band_number(band_number, relative_bandwidth.octave_divider)


def octave_offset_from_reference(octave_range: Union[OctaveRange, str]) -> int:
    """
    Offset (0..10) of an octave range from the 10 Hz origin.

    Used to index parallel per-range arrays.

    Note: Unknown labels and the wide band give 0. This is a legacy
    fallback that callers rely on; it does NOT raise.
    """
    if isinstance(octave_range, str):
        try:
            octave_range = OctaveRange.from_label(octave_range)
        except InvalidArgumentError:
            return 0
    if octave_range.is_wide_band:
        return 0
    return octave_range.ordinal


def is_center_frequency_in_octave_range(octave_range: OctaveRange, center_frequency: float) -> bool:
    """
    Check whether a center frequency belongs to an octave range.

    The first and last ranges are open towards the outside, so that
    frequencies beyond 10 Hz - 20 kHz still give a closest match. The wide
    band accepts every frequency.
    """
    if octave_range.is_wide_band:
        return True
    if octave_range is NARROW_OCTAVE_RANGES[0]:
        return center_frequency < octave_range.high_hz
    if octave_range is NARROW_OCTAVE_RANGES[-1]:
        return center_frequency >= octave_range.low_hz
    return octave_range.low_hz <= center_frequency < octave_range.high_hz


@dataclass
class FrequencyRangeSelection:
    """
    User or analysis selection of bandwidth, octave range and center frequency.

    Mutable. The octave range is always an OctaveRange member; labels are
    converted on assignment and unknown labels are rejected. The center
    frequency is expected to lie inside the octave range, except for the
    wide band which accepts anything (see is_consistent()).

    Attributes:
        relative_bandwidth: Fractional-octave resolution
        octave_range: Selected octave range (or the wide band)
        center_frequency: Selected center frequency in Hz
    """
    relative_bandwidth: RelativeBandwidth = field(default_factory=RelativeBandwidth.default)
    octave_range: OctaveRange = OCTAVE_RANGE_WIDE_DEFAULT
    center_frequency: float = OCTAVE_RANGE_WIDE_DEFAULT.nominal_center_frequency

    def __post_init__(self):
        """Normalize labels and None values, reject a negative center frequency."""
        self.set_relative_bandwidth(self.relative_bandwidth)
        self.set_octave_range(self.octave_range)
        self.set_center_frequency(self.center_frequency)

    @property
    def octave_divider(self) -> int:
        return self.relative_bandwidth.octave_divider

    def set_relative_bandwidth(self, relative_bandwidth: Optional[RelativeBandwidth]) -> None:
        """Set bandwidth; None restores the default."""
        self.relative_bandwidth = relative_bandwidth if relative_bandwidth is not None \
            else RelativeBandwidth.default()

    def set_octave_range(self, octave_range: Union[OctaveRange, str, None]) -> None:
        """Set octave range from a member or its exact label; None restores the wide band."""
        if octave_range is None:
            octave_range = OCTAVE_RANGE_WIDE_DEFAULT
        elif isinstance(octave_range, str):
            octave_range = OctaveRange.from_label(octave_range)
        self.octave_range = octave_range

    def set_center_frequency(self, center_frequency: float) -> None:
        if center_frequency < 0:
            raise InvalidArgumentError(f"Center frequency must not be negative, got {center_frequency}")
        self.center_frequency = float(center_frequency)

    def set_from(self, other: "FrequencyRangeSelection") -> None:
        """Copy all values from another selection."""
        self.set_relative_bandwidth(other.relative_bandwidth)
        self.set_octave_range(other.octave_range)
        self.set_center_frequency(other.center_frequency)

    def copy(self) -> "FrequencyRangeSelection":
        return FrequencyRangeSelection(self.relative_bandwidth, self.octave_range, self.center_frequency)

    def reset(self) -> None:
        """Restore defaults: 1/3 octave, wide band, 4 kHz."""
        self.set_relative_bandwidth(None)
        self.set_octave_range(None)
        self.set_center_frequency(nominal_center_frequency(self.octave_range))

    def select_octave_range(
        self,
        octave_range: Union[OctaveRange, str],
        narrow_band: bool = False,
    ) -> None:
        """
        Change the octave range, keeping the selection consistent.

        If the current center frequency lies outside the new range, it is
        replaced by the range's nominal center frequency.
        """
        self.set_octave_range(octave_range)
        if not is_center_frequency_in_octave_range(self.octave_range, self.center_frequency):
            self.center_frequency = nominal_center_frequency(self.octave_range, narrow_band)

    def select_center_frequency(self, center_frequency: float) -> None:
        """
        Change the center frequency, keeping the selection consistent.

        A narrow octave range follows the frequency if it falls outside;
        the wide band is kept.
        """
        self.set_center_frequency(center_frequency)
        if not is_center_frequency_in_octave_range(self.octave_range, self.center_frequency):
            self.octave_range = band_for_frequency(self.center_frequency)

    def is_consistent(self) -> bool:
        """True if the center frequency belongs to the octave range."""
        return is_center_frequency_in_octave_range(self.octave_range, self.center_frequency)
