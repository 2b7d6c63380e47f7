"""
Octave Range Reference Tables

Static reference data for band classification and smoothing:
- The 11 fixed octave ranges from 10 Hz to 20 kHz plus the wide band
- Nominal center frequency per range (standard and narrow-band convention)
- Relative bandwidth to octave divider mapping
- Nominal ("musical") full-octave and third-octave center frequencies

Technical assumptions:
- Range boundaries are offset from pure log-midpoints (20, 39, 78, ... Hz)
  to match historical measurement convention. They are reproduced as-is,
  NOT derived from a formula.
- Ranges are half-open [low, high), except the last one which is closed
  at 20 kHz.
- The label strings are a wire format (persisted selections, legends) and
  must match exactly, including the wide band "20 Hz To 20 kHz".
"""

from enum import Enum
from functools import total_ordering

import numpy as np

from .errors import InvalidArgumentError


# Lower edges of the 11 octave ranges followed by the upper edge of the last
OCTAVE_RANGE_BOUNDARIES = np.array([
    10.0, 20.0, 39.0, 78.0, 156.0, 312.0, 624.0,
    1248.0, 2496.0, 4992.0, 9986.0, 20000.0,
])

LOWEST_FREQUENCY = float(OCTAVE_RANGE_BOUNDARIES[0])
HIGHEST_FREQUENCY = float(OCTAVE_RANGE_BOUNDARIES[-1])

CENTER_FREQUENCY_DEFAULT = 4000.0


class OctaveRange(Enum):
    """
    Named octave range.

    Values are (label, ordinal); ordinal is the offset from the 10 Hz
    origin and is None for the wide band.
    """
    HZ_10_20 = ("10 Hz to 20 Hz", 0)
    HZ_20_40 = ("20 Hz to 40 Hz", 1)
    HZ_40_80 = ("40 Hz to 80 Hz", 2)
    HZ_80_160 = ("80 Hz to 160 Hz", 3)
    HZ_160_315 = ("160 Hz to 315 Hz", 4)
    HZ_315_630 = ("315 Hz to 630 Hz", 5)
    HZ_630_1K25 = ("630 Hz to 1.25 kHz", 6)
    KHZ_1K25_2K5 = ("1.25 kHz to 2.5 kHz", 7)
    KHZ_2K5_5 = ("2.5 kHz to 5 kHz", 8)
    KHZ_5_10 = ("5 kHz to 10 kHz", 9)
    KHZ_10_20 = ("10 kHz to 20 kHz", 10)
    WIDE_BAND = ("20 Hz To 20 kHz", None)

    def __init__(self, label: str, ordinal):
        self.label = label
        self.ordinal = ordinal

    @property
    def is_wide_band(self) -> bool:
        return self.ordinal is None

    @property
    def low_hz(self) -> float:
        """Lower edge (inclusive)."""
        if self.is_wide_band:
            return LOWEST_FREQUENCY
        return float(OCTAVE_RANGE_BOUNDARIES[self.ordinal])

    @property
    def high_hz(self) -> float:
        """Upper edge (exclusive, except for the last range)."""
        if self.is_wide_band:
            return HIGHEST_FREQUENCY
        return float(OCTAVE_RANGE_BOUNDARIES[self.ordinal + 1])

    @property
    def nominal_center_frequency(self) -> float:
        return NOMINAL_CENTER_FREQUENCIES[self]

    @property
    def narrow_band_center_frequency(self) -> float:
        return NARROW_BAND_CENTER_FREQUENCIES.get(self, NOMINAL_CENTER_FREQUENCIES[self])

    @classmethod
    def from_label(cls, label: str) -> "OctaveRange":
        """
        Look up a range by its exact label.

        Raises:
            InvalidArgumentError: Label is not one of the 12 known strings
        """
        try:
            return _RANGES_BY_LABEL[label]
        except KeyError:
            raise InvalidArgumentError(f"Unknown octave range: {label!r}") from None

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "OctaveRange":
        """Range at offset 0..10 from the 10 Hz origin."""
        if not 0 <= ordinal < len(NARROW_OCTAVE_RANGES):
            raise InvalidArgumentError(f"Octave range ordinal out of bounds: {ordinal}")
        return NARROW_OCTAVE_RANGES[ordinal]

    def __str__(self) -> str:
        return self.label


# The 11 narrow ranges in frequency order (wide band excluded)
NARROW_OCTAVE_RANGES = tuple(r for r in OctaveRange if not r.is_wide_band)

OCTAVE_RANGE_LABELS = tuple(r.label for r in NARROW_OCTAVE_RANGES)

OCTAVE_RANGE_WIDE_DEFAULT = OctaveRange.WIDE_BAND
OCTAVE_RANGE_NARROW_DEFAULT = OctaveRange.HZ_80_160

_RANGES_BY_LABEL = {r.label: r for r in OctaveRange}

NOMINAL_CENTER_FREQUENCIES = {
    OctaveRange.HZ_10_20: 16.0,
    OctaveRange.HZ_20_40: 31.5,
    OctaveRange.HZ_40_80: 63.0,
    OctaveRange.HZ_80_160: 125.0,
    OctaveRange.HZ_160_315: 250.0,
    OctaveRange.HZ_315_630: 500.0,
    OctaveRange.HZ_630_1K25: 1000.0,
    OctaveRange.KHZ_1K25_2K5: 2000.0,
    OctaveRange.KHZ_2K5_5: 4000.0,
    OctaveRange.KHZ_5_10: 8000.0,
    OctaveRange.KHZ_10_20: 16000.0,
    OctaveRange.WIDE_BAND: CENTER_FREQUENCY_DEFAULT,
}

# Narrow-band convention for the lowest ranges (exact powers of two);
# all other ranges share the standard value.
NARROW_BAND_CENTER_FREQUENCIES = {
    OctaveRange.HZ_10_20: 15.6,
    OctaveRange.HZ_20_40: 31.2,
    OctaveRange.HZ_40_80: 62.5,
}


@total_ordering
class RelativeBandwidth(Enum):
    """
    Fractional-octave bandwidth. The value is the octave divider O.

    Smaller divider means coarser resolution.
    """
    ONE_OCTAVE = 1
    THIRD_OCTAVE = 3
    SIXTH_OCTAVE = 6
    TWELFTH_OCTAVE = 12
    TWENTYFOURTH_OCTAVE = 24
    FORTYEIGHTH_OCTAVE = 48

    @classmethod
    def default(cls) -> "RelativeBandwidth":
        return cls.THIRD_OCTAVE

    @property
    def octave_divider(self) -> int:
        return self.value

    @property
    def abbreviation(self) -> str:
        """Short form, e.g. "1/3"."""
        return "1" if self.value == 1 else f"1/{self.value}"

    @property
    def label(self) -> str:
        """Presentation form, e.g. "1/3 octave"."""
        return f"{self.abbreviation} octave"

    @classmethod
    def from_octave_divider(cls, octave_divider: int) -> "RelativeBandwidth":
        try:
            return cls(octave_divider)
        except ValueError:
            raise InvalidArgumentError(f"No relative bandwidth for divider {octave_divider}") from None

    @classmethod
    def from_label(cls, label: str) -> "RelativeBandwidth":
        """Parse a presentation string; unknown strings give the default."""
        for bandwidth in cls:
            if bandwidth.label == label:
                return bandwidth
        return cls.default()

    @classmethod
    def from_abbreviation(cls, abbreviation: str) -> "RelativeBandwidth":
        """Parse an abbreviated string; unknown strings give the default."""
        return cls.from_label(f"{abbreviation} octave")

    def __lt__(self, other):
        if not isinstance(other, RelativeBandwidth):
            return NotImplemented
        return self.value < other.value


RELATIVE_BANDWIDTH_DIVIDERS = {bw: bw.octave_divider for bw in RelativeBandwidth}


class Smoothing(Enum):
    """
    Smoothing setting for narrow-band data.

    The value is the octave divider of the smoothing kernel, 0 for none.
    """
    NARROW_BAND = 0
    SIXTH_OCTAVE_BAND = 6
    THIRD_OCTAVE_BAND = 3

    @classmethod
    def default(cls) -> "Smoothing":
        return cls.NARROW_BAND

    @property
    def octave_divider(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return _SMOOTHING_LABELS[self]

    @classmethod
    def from_octave_divider(cls, octave_divider: int) -> "Smoothing":
        """Unknown dividers give the default (no smoothing)."""
        try:
            return cls(octave_divider)
        except ValueError:
            return cls.default()

    @classmethod
    def from_label(cls, label: str) -> "Smoothing":
        """Unknown strings give the default (no smoothing)."""
        for smoothing, smoothing_label in _SMOOTHING_LABELS.items():
            if smoothing_label == label:
                return smoothing
        return cls.default()


_SMOOTHING_LABELS = {
    Smoothing.NARROW_BAND: "No Smoothing",
    Smoothing.SIXTH_OCTAVE_BAND: "1/6 Octave Smoothing",
    Smoothing.THIRD_OCTAVE_BAND: "1/3 Octave Smoothing",
}


# Nominal center frequencies indexed by band number (see
# band_mapper.center_frequency_from_band_number). NaN marks band numbers
# below the table; these are understood by most people and concise enough
# for axis tick labels.
NOMINAL_FULL_OCTAVE_CENTER_FREQUENCIES = np.array([
    np.nan, np.nan, np.nan,
    8.5, 16, 31.5, 63, 125, 250, 500,
    1000, 2000, 4000, 8000, 16000, 31500,
])

NOMINAL_THIRD_OCTAVE_CENTER_FREQUENCIES = np.concatenate([
    np.full(10, np.nan),
    [
        10.0, 12.5, 16, 20, 25, 31.5, 40, 50, 63, 80,
        100, 125, 160, 200, 250, 315, 400, 500, 630, 800,
        1000, 1250, 1600, 2000, 2500, 3150, 4000, 5000, 6300, 8000,
        10000, 12500, 16000, 20000, 25000, 31500,
    ],
])

NOMINAL_FULL_OCTAVE_CENTER_FREQUENCIES.flags.writeable = False
NOMINAL_THIRD_OCTAVE_CENTER_FREQUENCIES.flags.writeable = False
OCTAVE_RANGE_BOUNDARIES.flags.writeable = False
