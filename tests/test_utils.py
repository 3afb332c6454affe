"""
Unit tests for numeric primitives (modulo helpers and unit conversions).
"""

import math

import mpmath
import pytest
import libmeeus as meeus
from libmeeus.utils import deg2hours, deg2rad, hours2deg, rad2deg


@pytest.mark.unit
class TestFmod:
    """Tests for the true modulo helpers."""

    def test_fmod_reference_values(self):
        assert meeus.fmod(-0.5, 1) == 0.5
        assert meeus.fmod(1, 1) == 0
        assert meeus.fmod(10000.5, 1) == 0.5

    @pytest.mark.parametrize(
        "x", [-1e6, -720.25, -360.0, -1.5, -1e-17, 0.0, 0.3, 359.999, 360.0, 1e6 + 0.25]
    )
    @pytest.mark.parametrize("m", [1, 24, 360])
    def test_fmod_bounds(self, x, m):
        result = meeus.fmod(x, m)
        assert 0 <= result < m
        # Congruent to x modulo m
        k = (x - result) / m
        assert abs(k - round(k)) < 1e-9

    def test_fmod_tiny_negative(self):
        """-1e-17 % 1 rounds to 1.0 in floating point."""
        result = meeus.fmod(-1e-17, 1)
        assert 0 <= result < 1

    def test_fmod_mpmath(self):
        ctx = mpmath.MPContext()
        ctx.dps = 30
        result = meeus.fmod(ctx.mpf("-0.25"), 1)
        assert result == ctx.mpf("0.75")

    def test_fmod360(self):
        assert meeus.fmod360(-30) == 330
        assert meeus.fmod360(720.5) == 0.5
        assert meeus.fmod360(360) == 0

    def test_fmod24(self):
        assert meeus.fmod24(-1) == 23
        assert meeus.fmod24(24) == 0
        assert meeus.fmod24(49.5) == 1.5

    @pytest.mark.parametrize(
        "value, expected",
        [(0, 0), (180, 180), (181, -179), (-180, 180), (-181, 179), (540, 180), (359, -1)],
    )
    def test_fmod180(self, value, expected):
        assert meeus.fmod180(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [(45, 45), (91, 89), (-91, -89), (180, 0), (90, 90), (-90, -90), (271, -89), (0, 0)],
    )
    def test_fmod90_folds_back(self, value, expected):
        assert meeus.fmod90(value) == expected


@pytest.mark.unit
class TestConversions:
    """Tests for degree/radian/hour conversions."""

    def test_deg_rad(self):
        assert deg2rad(180) == pytest.approx(math.pi)
        assert rad2deg(math.pi / 2) == pytest.approx(90)

    def test_deg_hours(self):
        assert deg2hours(360) == pytest.approx(24)
        assert hours2deg(1) == pytest.approx(15)
        assert hours2deg(deg2hours(123.456)) == pytest.approx(123.456)


@pytest.mark.unit
class TestDifdeg2n:
    """Tests for the signed angular difference."""

    def test_difdeg2n(self):
        assert meeus.difdeg2n(10, 20) == -10.0
        assert meeus.difdeg2n(350, 10) == -20.0
        assert meeus.difdeg2n(10, 350) == 20.0
        assert meeus.difdeg2n(180, 0) == 180.0
