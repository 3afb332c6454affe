"""
Unit tests for three-point interpolation.
"""

import pytest
from libmeeus.interpolation import interpolate, interpolate_angles
from libmeeus.precision import FLOAT, HighPrecisionArithmetic


@pytest.mark.unit
class TestInterpolate:
    """Tests for interpolate()."""

    def test_aa_example_3a(self):
        """AA ex.3.a: distance Earth-Mars on 1992 November 8.18125."""
        value = interpolate(0.884226, 0.877366, 0.870531, 0.18125)
        assert value == pytest.approx(0.876125, abs=1e-6)

    @pytest.mark.parametrize("arithmetic", [FLOAT, HighPrecisionArithmetic()])
    def test_exact_at_sample_points(self, arithmetic):
        y1, y2, y3 = 41.0, 41.73129, 42.5
        assert float(interpolate(y1, y2, y3, 0, arithmetic)) == y2
        assert float(interpolate(y1, y2, y3, -1, arithmetic)) == pytest.approx(y1)
        assert float(interpolate(y1, y2, y3, 1, arithmetic)) == pytest.approx(y3)

    def test_quadratic_is_reproduced(self):
        """A parabola sampled at -1, 0, 1 is interpolated exactly."""

        def f(x):
            return 3 * x * x - 2 * x + 5

        for n in (-0.75, -0.2, 0.4, 0.9):
            assert interpolate(f(-1), f(0), f(1), n) == pytest.approx(f(n))

    def test_both_arithmetics_agree(self):
        args = (18.0483, 18.4409, 18.8274, 0.3456)
        fast = interpolate(*args)
        precise = interpolate(*args, arithmetic=HighPrecisionArithmetic(40))
        assert float(precise) == pytest.approx(fast, abs=1e-12)


@pytest.mark.unit
class TestInterpolateAngles:
    """Tests for interpolate_angles()."""

    def test_no_wrap_matches_interpolate(self):
        args = (40.68, 41.73, 42.78, 0.25)
        assert interpolate_angles(*args) == pytest.approx(interpolate(*args))

    def test_wrap_through_zero(self):
        value = interpolate_angles(359.0, 0.5, 2.0, 0.5)
        assert value == pytest.approx(1.25)

    def test_wrap_before_zero(self):
        value = interpolate_angles(358.0, 359.5, 1.0, -0.5)
        assert value == pytest.approx(358.75)

    def test_result_in_range(self):
        value = interpolate_angles(359.0, 359.8, 0.6, 0.9)
        assert 0 <= value < 360
