"""
Narrow-Band Spectrum

Computes the per-bin frequency, magnitude and phase vectors consumed by
band classification, smoothing and phase conditioning.

Technical assumptions:
- Single windowed real FFT over the first fft_size samples (zero-padded
  if the signal is shorter), no averaging
- Phase is returned in DEGREES, wrapped to [-180, 180] as delivered by
  the FFT; conditioning is left to the phase module
- The DC bin is dropped by default, as log-frequency smoothing is
  undefined at 0 Hz
"""

from dataclasses import dataclass
from typing import Literal, Optional

import numpy as np
from scipy import fft, signal

from .levels import magnitude_to_db


@dataclass
class SpectrumConfig:
    """
    Configuration for narrow-band spectrum computation.

    Attributes:
        fft_size: FFT size (should be power of 2)
        window: Window function
        include_dc: Keep the 0 Hz bin
        kaiser_beta: Beta parameter for the Kaiser window
    """
    fft_size: int = 4096
    window: Literal["hann", "hamming", "blackman", "kaiser", "rectangular"] = "hann"
    include_dc: bool = False
    kaiser_beta: float = 14.0

    def __post_init__(self):
        """Validate parameters."""
        if self.fft_size < 32:
            raise ValueError("FFT size must be at least 32")
        if self.window not in ("hann", "hamming", "blackman", "kaiser", "rectangular"):
            raise ValueError(f"Unknown window function: {self.window}")

    def frequency_resolution(self, sample_rate: int) -> float:
        """Bin spacing in Hz."""
        return sample_rate / self.fft_size


@dataclass
class NarrowBandSpectrum:
    """
    Result of a narrow-band spectrum computation.

    Attributes:
        frequencies: Bin center frequencies in Hz, ascending
        magnitude: Linear magnitude per bin (window-gain compensated)
        phase_deg: Phase per bin in degrees
        sample_rate: Sample rate of input data
        config: Used configuration
    """
    frequencies: np.ndarray
    magnitude: np.ndarray
    phase_deg: np.ndarray
    sample_rate: int
    config: SpectrumConfig

    @property
    def num_bins(self) -> int:
        return len(self.frequencies)

    def magnitude_db(self, min_db: float = -120.0) -> np.ndarray:
        """Magnitude in dB (re 1.0), floored at min_db."""
        return magnitude_to_db(self.magnitude, min_db=min_db)


def compute_narrowband_spectrum(
    data: np.ndarray,
    sample_rate: int,
    config: Optional[SpectrumConfig] = None,
) -> NarrowBandSpectrum:
    """
    Compute the narrow-band spectrum of a signal or impulse response.

    Magnitudes are scaled so that a full-scale sine at a bin frequency
    reads ~1.0 (coherent window gain compensated, one-sided spectrum).

    Args:
        data: Signal (1D)
        sample_rate: Sample rate in Hz
        config: Spectrum configuration

    Returns:
        NarrowBandSpectrum with frequency, magnitude and phase per bin
    """
    if config is None:
        config = SpectrumConfig()

    if data.ndim != 1:
        raise ValueError("Spectrum requires 1D signal (mono or single channel)")
    if sample_rate <= 0:
        raise ValueError("Sample rate must be positive")

    segment = np.zeros(config.fft_size)
    n = min(len(data), config.fft_size)
    segment[:n] = data[:n]

    window = _create_window(config.window, config.fft_size, config.kaiser_beta)
    spectrum = fft.rfft(segment * window)
    frequencies = fft.rfftfreq(config.fft_size, d=1.0 / sample_rate)

    magnitude = 2.0 * np.abs(spectrum) / np.sum(window)
    phase_deg = np.angle(spectrum, deg=True)

    if not config.include_dc:
        frequencies = frequencies[1:]
        magnitude = magnitude[1:]
        phase_deg = phase_deg[1:]

    return NarrowBandSpectrum(
        frequencies=frequencies,
        magnitude=magnitude,
        phase_deg=phase_deg,
        sample_rate=sample_rate,
        config=config,
    )


def _create_window(
    window_type: str,
    size: int,
    kaiser_beta: float = 14.0,
) -> np.ndarray:
    """Create window function."""
    if window_type == "kaiser":
        return signal.get_window(("kaiser", kaiser_beta), size, fftbins=True)
    elif window_type == "rectangular":
        return np.ones(size)
    return signal.get_window(window_type, size, fftbins=True)
