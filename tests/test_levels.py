"""
Tests für Pegelumrechnungen.
"""

import pytest
import numpy as np

from acoustic_bands.core.errors import InvalidArgumentError
from acoustic_bands.core.levels import (
    angular_frequency,
    bandwidth_to_q,
    magnitude_from_db,
    magnitude_to_db,
    peaking_voltage_ratio,
    power_ratio_db,
    power_ratio_from_db,
    power_ratio_to_db,
    s_domain_frequency,
    voltage_ratio,
)


class TestVoltageRatio:
    """Tests für Spannungsverhältnis."""

    def test_minus_6db(self):
        """-6 dB ≈ 0.501."""
        assert voltage_ratio(-6.0) == pytest.approx(0.501187, rel=1e-5)

    def test_zero_db(self):
        """0 dB = 1."""
        assert voltage_ratio(0.0) == 1.0

    def test_round_trip(self):
        """dB → linear → dB."""
        for db in (-40.0, -6.0, 0.0, 12.0):
            assert power_ratio_db(voltage_ratio(db)) == pytest.approx(db)

    def test_peaking(self):
        """Peaking-Filter verwenden dB/40."""
        assert peaking_voltage_ratio(-6.0) == pytest.approx(np.sqrt(voltage_ratio(-6.0)))

    def test_zero_ratio(self):
        """Verhältnis 0 ergibt -inf dB."""
        assert power_ratio_db(0.0) == -np.inf

    def test_negative_ratio(self):
        """Negatives Verhältnis wird abgelehnt."""
        with pytest.raises(InvalidArgumentError):
            power_ratio_db(-1.0)


class TestMagnitude:
    """Tests für Magnitude ↔ dB."""

    def test_scalar(self):
        """Skalare Werte."""
        assert magnitude_to_db(0.1) == pytest.approx(-20.0)
        assert magnitude_from_db(-20.0) == pytest.approx(0.1)
        assert isinstance(magnitude_to_db(1.0), float)

    def test_array(self):
        """Arrays werden elementweise umgerechnet."""
        result = magnitude_to_db(np.array([1.0, 10.0, 0.0]))

        np.testing.assert_allclose(result[:2], [0.0, 20.0])
        assert result[2] == -np.inf

    def test_floor(self):
        """Untergrenze vermeidet -inf."""
        result = magnitude_to_db(np.array([0.0, 1.0]), min_db=-120.0)

        np.testing.assert_allclose(result, [-120.0, 0.0])

    def test_negative_rejected(self):
        """Negative Magnitude wird abgelehnt."""
        with pytest.raises(InvalidArgumentError):
            magnitude_to_db(np.array([1.0, -1.0]))


class TestPowerRatio:
    """Tests für Leistungsverhältnis."""

    def test_values(self):
        """10·log10."""
        assert power_ratio_to_db(100.0) == pytest.approx(20.0)
        assert power_ratio_from_db(-10.0) == pytest.approx(0.1)


class TestFilterHelpers:
    """Tests für Filter-Hilfsfunktionen."""

    def test_bandwidth_to_q(self):
        """Güte aus Bandbreite in Oktaven."""
        assert bandwidth_to_q(1.0) == pytest.approx(1.43)
        assert bandwidth_to_q(1 / 3) == pytest.approx(4.29)

    def test_bandwidth_invalid(self):
        """Bandbreite <= 0 wird abgelehnt."""
        with pytest.raises(InvalidArgumentError):
            bandwidth_to_q(0.0)

    def test_angular_frequency(self):
        """ω = 2πf."""
        assert angular_frequency(1000.0) == pytest.approx(2 * np.pi * 1000.0)

    def test_s_domain_frequency(self):
        """s = jω liegt auf der imaginären Achse."""
        s = s_domain_frequency(1000.0)

        assert s.real == 0.0
        assert s.imag == pytest.approx(2 * np.pi * 1000.0)
