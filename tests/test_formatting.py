"""
Tests für Formatierungsfunktionen.
"""

import pytest

from acoustic_bands.core.band_table import NARROW_OCTAVE_RANGES
from acoustic_bands.core.errors import InvalidArgumentError
from acoustic_bands.utils.formatting import (
    format_db,
    format_frequency,
    format_octave_divider,
    parse_frequency,
)


class TestFormatFrequency:
    """Tests für Frequenzformatierung."""

    def test_below_1khz(self):
        """Unter 1 kHz: höchstens eine Nachkommastelle."""
        assert format_frequency(15.6) == "15.6 Hz"
        assert format_frequency(16.0) == "16 Hz"
        assert format_frequency(31.25) == "31.2 Hz"
        assert format_frequency(125) == "125 Hz"

    def test_khz(self):
        """Ab 1 kHz: kHz mit bis zu vier Nachkommastellen."""
        assert format_frequency(1000) == "1 kHz"
        assert format_frequency(1250) == "1.25 kHz"
        assert format_frequency(4000) == "4 kHz"
        assert format_frequency(12500) == "12.5 kHz"
        assert format_frequency(1234.0) == "1.234 kHz"


class TestParseFrequency:
    """Tests für Frequenz-Parsing."""

    def test_units(self):
        """Hz und kHz, mit und ohne Leerzeichen."""
        assert parse_frequency("125 Hz") == 125.0
        assert parse_frequency("125Hz") == 125.0
        assert parse_frequency("1.25 kHz") == 1250.0
        assert parse_frequency("4kHz") == 4000.0

    def test_plain_number(self):
        """Reine Zahl wird als Hz gelesen."""
        assert parse_frequency("250") == 250.0
        assert parse_frequency(" 1,000 ") == 1000.0

    def test_invalid(self):
        """Ungültige Strings werden abgelehnt."""
        for text in ("", "kHz", "abc Hz"):
            with pytest.raises(InvalidArgumentError):
                parse_frequency(text)

    def test_round_trip_nominal_centers(self):
        """Nominelle Mittenfrequenzen überstehen Formatierung und Parsing."""
        for band in NARROW_OCTAVE_RANGES:
            for fc in (band.nominal_center_frequency, band.narrow_band_center_frequency):
                assert parse_frequency(format_frequency(fc)) == pytest.approx(fc)


class TestOtherFormats:
    """Tests für weitere Formate."""

    def test_format_db(self):
        """dB-Formatierung."""
        assert format_db(-12.345) == "-12.3 dB"
        assert format_db(float("-inf")) == "-∞ dB"

    def test_format_octave_divider(self):
        """Oktavteiler als relative Bandbreite."""
        assert format_octave_divider(1) == "1 octave"
        assert format_octave_divider(3) == "1/3 octave"
        assert format_octave_divider(48) == "1/48 octave"

    def test_format_octave_divider_invalid(self):
        """Unbekannter Teiler wird abgelehnt."""
        with pytest.raises(InvalidArgumentError):
            format_octave_divider(5)
