"""
Core module - pure numeric functions, no GUI or file dependencies.

This module contains all band mapping and conditioning logic:
- Octave range tables and band classification
- Fractional-octave center frequencies
- Gaussian 1/3- and 1/6-octave smoothing
- Phase/polarity conditioning
- Level conversions and time signal helpers
"""

from .errors import AcousticBandsError, InvalidArgumentError, UnsupportedSmoothingError
from .levels import (
    voltage_ratio,
    peaking_voltage_ratio,
    power_ratio_db,
    magnitude_to_db,
    magnitude_from_db,
    power_ratio_to_db,
    power_ratio_from_db,
    angular_frequency,
    s_domain_frequency,
    bandwidth_to_q,
)
from .band_table import (
    OctaveRange,
    RelativeBandwidth,
    Smoothing,
    OCTAVE_RANGE_BOUNDARIES,
    OCTAVE_RANGE_LABELS,
)
from .band_mapper import (
    FrequencyRangeSelection,
    band_for_frequency,
    band_indices_for_frequencies,
    nominal_center_frequency,
    center_frequency_from_band_number,
    band_number_for_center_frequency,
    nominal_band_center_frequency,
    octave_offset_from_reference,
    is_center_frequency_in_octave_range,
)
from .phase import (
    unwrap_phase_value,
    unwrap_phase,
    normalize_adjacent_phase,
    cleanup_edge_flutter,
    normalize_polarity_reversal,
    condition_phase,
)
from .smoothing import (
    SMOOTHING_WINDOW_RADIUS,
    SmoothingTable,
    GaussianSmoother,
    build_smoothing_table,
    build_smoothing_tables,
    apply_smoothing,
)
from .spectral import compute_narrowband_spectrum, SpectrumConfig, NarrowBandSpectrum
from .time_signal import adjust_time_signal, peak_time_index, peak_time_ms

__all__ = [
    "AcousticBandsError",
    "InvalidArgumentError",
    "UnsupportedSmoothingError",
    "voltage_ratio",
    "peaking_voltage_ratio",
    "power_ratio_db",
    "magnitude_to_db",
    "magnitude_from_db",
    "power_ratio_to_db",
    "power_ratio_from_db",
    "angular_frequency",
    "s_domain_frequency",
    "bandwidth_to_q",
    "OctaveRange",
    "RelativeBandwidth",
    "Smoothing",
    "OCTAVE_RANGE_BOUNDARIES",
    "OCTAVE_RANGE_LABELS",
    "FrequencyRangeSelection",
    "band_for_frequency",
    "band_indices_for_frequencies",
    "nominal_center_frequency",
    "center_frequency_from_band_number",
    "band_number_for_center_frequency",
    "nominal_band_center_frequency",
    "octave_offset_from_reference",
    "is_center_frequency_in_octave_range",
    "unwrap_phase_value",
    "unwrap_phase",
    "normalize_adjacent_phase",
    "cleanup_edge_flutter",
    "normalize_polarity_reversal",
    "condition_phase",
    "SMOOTHING_WINDOW_RADIUS",
    "SmoothingTable",
    "GaussianSmoother",
    "build_smoothing_table",
    "build_smoothing_tables",
    "apply_smoothing",
    "compute_narrowband_spectrum",
    "SpectrumConfig",
    "NarrowBandSpectrum",
    "adjust_time_signal",
    "peak_time_index",
    "peak_time_ms",
]
