"""
Utility module for Acoustic Bands.

Contains display helpers used by charting and legend code.
"""

from .formatting import (
    format_frequency,
    parse_frequency,
    format_db,
    format_octave_divider,
)

__all__ = [
    "format_frequency",
    "parse_frequency",
    "format_db",
    "format_octave_divider",
]
