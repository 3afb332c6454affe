"""
Sidereal time and nutation for libmeeus.

- Mean sidereal time: AA eq.12.4 (Meeus, ch.12)
- Nutation in longitude and obliquity: IAU 2000B model via Skyfield
- Mean obliquity of the ecliptic: AA eq.22.2
- Apparent sidereal time: mean sidereal time corrected by the equation of
  the equinoxes (Delta psi * cos(epsilon))

Sidereal times are returned in hours, longitudes are EAST positive.
"""

import math
from typing import Optional, Tuple

from skyfield.nutationlib import iau2000b_radians

from .constants import GMST_J2000, GMST_RATE, GMST_T2, GMST_T3_DIVISOR, J2000
from .precision import FLOAT, get_arithmetic
from .state import get_timescale
from .time_utils import julian_century
from .utils import deg2hours, fmod24, fmod360


def greenwich_sidereal_degrees(jd, arithmetic=FLOAT):
    """
    Greenwich mean sidereal time in degrees, in [0, 360).

    Args:
        jd: Julian Day (UT)
        arithmetic: Numeric strategy (see precision module)

    Returns:
        Sidereal angle in the arithmetic's number type
    """
    num = arithmetic.number
    T = julian_century(jd, arithmetic)
    gmst = (
        num(GMST_J2000)
        + num(GMST_RATE) * (num(jd) - num(J2000))
        + num(GMST_T2) * T * T
        - T * T * T / num(GMST_T3_DIVISOR)
    )
    return fmod360(gmst)


def mean_sidereal_time(
    jd: float, longitude: float = 0.0, high_precision: Optional[bool] = None
) -> float:
    """
    Local mean sidereal time.

    Args:
        jd: Julian Day (UT)
        longitude: Observer longitude in degrees (East positive), 0 for Greenwich
        high_precision: Use mpmath arithmetic (None = library default)

    Returns:
        float: Sidereal time in hours (0-24)

    Example:
        >>> mean_sidereal_time(2446895.5)  # 1987-04-10 0h UT, AA ex.12.a
        13.17954...
    """
    arithmetic = get_arithmetic(high_precision)
    theta = greenwich_sidereal_degrees(jd, arithmetic) + arithmetic.number(longitude)
    return arithmetic.to_float(fmod24(deg2hours(theta)))


def nutation(jd: float) -> Tuple[float, float]:
    """
    Nutation in longitude and in obliquity.

    Args:
        jd: Julian Day (UT)

    Returns:
        (delta_psi, delta_epsilon) in degrees

    Note:
        Uses Skyfield's IAU 2000B model (77 luni-solar terms), which agrees
        with the IAU 1980 theory of AA ch.22 to a few milliarcseconds.
    """
    t = get_timescale().ut1_jd(float(jd))
    dpsi_rad, deps_rad = iau2000b_radians(t)
    return math.degrees(float(dpsi_rad)), math.degrees(float(deps_rad))


def mean_obliquity(jd: float) -> float:
    """
    Mean obliquity of the ecliptic in degrees (AA eq.22.2).

    Valid within a few thousand years of J2000.
    """
    T = julian_century(jd)
    return 23.43929111 - (46.8150 + (0.00059 - 0.001813 * T) * T) * T / 3600.0


def true_obliquity(jd: float) -> float:
    """Mean obliquity plus the nutation in obliquity, in degrees."""
    return mean_obliquity(jd) + nutation(jd)[1]


def apparent_sidereal_time(
    jd: float, longitude: float = 0.0, high_precision: Optional[bool] = None
) -> float:
    """
    Local apparent sidereal time.

    Args:
        jd: Julian Day (UT)
        longitude: Observer longitude in degrees (East positive)
        high_precision: Use mpmath arithmetic (None = library default)

    Returns:
        float: Apparent sidereal time in hours (0-24)
    """
    dpsi, deps = nutation(jd)
    epsilon = mean_obliquity(jd) + deps
    equation_of_equinoxes = deg2hours(dpsi * math.cos(math.radians(epsilon)))
    return fmod24(mean_sidereal_time(jd, longitude, high_precision) + equation_of_equinoxes)
