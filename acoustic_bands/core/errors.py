"""
Error taxonomy for the band mapping and smoothing engine.

All conditions are raised synchronously to the caller. Nothing is retried
and nothing is logged here; reporting is the caller's job.

Frequencies outside 10 Hz - 20 kHz are NOT an error: they clamp to the
first or last octave range.
"""


class AcousticBandsError(Exception):
    """Base class for all engine errors."""


class InvalidArgumentError(AcousticBandsError, ValueError):
    """Input is outside the mathematical domain (negative frequency, divider <= 0, ...)."""


class UnsupportedSmoothingError(AcousticBandsError, ValueError):
    """Smoothing was requested for an octave divider other than 3 or 6."""

    def __init__(self, octave_divider: int):
        self.octave_divider = octave_divider
        super().__init__(
            f"Smoothing is only supported for 1/3 and 1/6 octave, got divider {octave_divider}"
        )
