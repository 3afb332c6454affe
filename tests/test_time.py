"""
Unit tests for time functions (Julian Day, Delta T, conversions).
"""

from datetime import datetime, timezone

import pytest
import swisseph as swe
import libmeeus as meeus
from libmeeus.constants import *
from libmeeus.time_utils import julian_century


@pytest.mark.unit
class TestJulianDay:
    """Tests for Julian Day calculation functions."""

    def test_julday_j2000(self):
        """Test Julian Day calculation for J2000.0."""
        jd_py = meeus.julday(2000, 1, 1, 12.0)
        jd_swe = swe.julday(2000, 1, 1, 12.0)
        assert abs(jd_py - jd_swe) < 1e-10
        assert abs(jd_py - 2451545.0) < 1e-10

    def test_julday_various_dates(self, test_dates):
        """Test Julian Day for various dates."""
        for year, month, day, hour, _ in test_dates:
            jd_py = meeus.julday(year, month, day, hour)
            jd_swe = swe.julday(year, month, day, hour)
            assert abs(jd_py - jd_swe) < 1e-10, f"Failed for {year}-{month}-{day}"

    def test_julday_sputnik(self):
        """AA ex.7.a: 1957 October 4.81."""
        assert meeus.julday(1957, 10, 4, 0.81 * 24) == pytest.approx(2436116.31)

    def test_julday_julian_calendar(self):
        """AA ex.7.b: 333 January 27, 12h in the Julian calendar."""
        assert meeus.julday(333, 1, 27, 12.0, JUL_CAL) == pytest.approx(1842713.0)

    def test_julday_leap_year(self):
        """Test Julian Day for leap years."""
        jd_feb29 = meeus.julday(2000, 2, 29, 12.0)
        jd_mar1 = meeus.julday(2000, 3, 1, 12.0)
        assert abs((jd_mar1 - jd_feb29) - 1.0) < 1e-10


@pytest.mark.unit
class TestReverseJulianDay:
    """Tests for reverse Julian Day (JD to calendar date) functions."""

    def test_revjul_j2000(self):
        """Test reverse Julian Day for J2000.0."""
        year, month, day, hour = meeus.revjul(2451545.0)
        assert (year, month, day) == (2000, 1, 1)
        assert abs(hour - 12.0) < 1e-10

    def test_revjul_vs_swisseph(self, test_dates):
        """Calendar dates agree with SwissEph."""
        for year, month, day, hour, _ in test_dates:
            jd = swe.julday(year, month, day, hour)
            y_swe, m_swe, d_swe, h_swe = swe.revjul(jd)
            y_py, m_py, d_py, h_py = meeus.revjul(jd)
            assert (y_py, m_py, d_py) == (y_swe, m_swe, d_swe)
            assert abs(h_py - h_swe) < 1e-8

    def test_revjul_roundtrip(self, test_dates):
        """Test Julian Day round-trip conversion."""
        for year_orig, month_orig, day_orig, hour_orig, _ in test_dates:
            jd = meeus.julday(year_orig, month_orig, day_orig, hour_orig)
            year, month, day, hour = meeus.revjul(jd)

            assert year == year_orig
            assert month == month_orig
            assert day == day_orig
            assert abs(hour - hour_orig) < 1e-8


@pytest.mark.unit
class TestDatetimeConversions:
    """Tests for datetime <-> Julian Day conversions."""

    def test_datetime_j2000(self):
        dt = datetime(2000, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert meeus.julian_day_from_datetime(dt) == pytest.approx(2451545.0, abs=1e-9)

    def test_naive_datetime_is_utc(self):
        naive = datetime(1988, 3, 20, 6, 30)
        aware = naive.replace(tzinfo=timezone.utc)
        assert meeus.julian_day_from_datetime(naive) == meeus.julian_day_from_datetime(aware)

    def test_unix_epoch(self):
        dt = datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert meeus.julian_day_from_datetime(dt) == J1970

    def test_datetime_from_julian_day(self):
        dt = meeus.datetime_from_julian_day(2451545.25)
        assert dt == datetime(2000, 1, 1, 18, 0, 0, tzinfo=timezone.utc)
        assert dt.tzinfo is timezone.utc


@pytest.mark.unit
class TestMidnight:
    """Tests for 0h UT of the day of a Julian Day."""

    @pytest.mark.parametrize(
        "jd, expected",
        [
            (2447240.5, 2447240.5),
            (2447240.8, 2447240.5),
            (2447241.4999, 2447240.5),
            (2451545.0, 2451544.5),
        ],
    )
    def test_julian_day_midnight(self, jd, expected):
        assert meeus.julian_day_midnight(jd) == expected

    def test_midnight_dynamical_time_is_later_by_delta_t(self):
        jd = meeus.julday(1988, 3, 20, 15.0)
        jd0 = meeus.julian_day_midnight(jd)
        jde0 = meeus.julian_day_midnight_dynamical_time(jd)
        diff_seconds = (jde0 - jd0) * 86400
        assert diff_seconds == pytest.approx(meeus.deltat(jd0), abs=1e-3)
        assert 50 < diff_seconds < 60

    def test_jd_at_utc(self):
        jd = meeus.julday(1988, 3, 20, 15.0)
        assert meeus.jd_at_utc(jd, 12.0) == pytest.approx(2447241.0, abs=1e-10)

    def test_jd_at_utc_carries_over_day(self):
        jd = meeus.julday(1988, 3, 20, 0.0)
        assert meeus.jd_at_utc(jd, 25.0) == pytest.approx(
            meeus.julday(1988, 3, 21, 1.0), abs=1e-10
        )
        assert meeus.jd_at_utc(jd, -1.0) == pytest.approx(
            meeus.julday(1988, 3, 19, 23.0), abs=1e-10
        )

    def test_julian_century(self):
        """AA ex.12.a: T for 1987 April 10, 0h UT."""
        assert julian_century(2446895.5) == pytest.approx(-0.127296372348, abs=1e-12)


@pytest.mark.unit
class TestDeltaT:
    """Tests for Delta T (TT - UT) calculation."""

    def test_deltat_j2000(self):
        """Delta T is returned in SECONDS, about 64 s at J2000."""
        dt_py = meeus.deltat(2451545.0)
        assert 60 < dt_py < 70

    def test_deltat_vs_swisseph(self, test_dates):
        """Delta T agrees with SwissEph (which returns days) within a second."""
        for year, month, day, hour, _ in test_dates:
            jd = swe.julday(year, month, day, hour)
            dt_py = meeus.deltat(jd)
            dt_swe = swe.deltat(jd) * 86400
            assert abs(dt_py - dt_swe) < 1.0, f"Failed for {year}-{month}-{day}"

    def test_deltat_1988(self, venus_jd):
        """AA p.103 uses 56 s for 1988 March 20."""
        assert meeus.deltat(venus_jd) == pytest.approx(56.0, abs=1.0)
