"""
Time conversion utilities for libmeeus.

Implements standard astronomical time functions for conversions between:
- Calendar dates and Julian Day numbers
- Python datetimes and Julian Day numbers
- UT clock times on a given day and absolute Julian Days
- UT1 (Universal Time) and TT (Terrestrial Time), via Delta T

All algorithms follow Meeus "Astronomical Algorithms" (1998).
"""

import math
from datetime import datetime, timedelta, timezone

from .constants import (
    GREG_CAL,
    GREGORIAN_START_JD,
    J1970,
    J2000,
    JULIAN_CENTURY,
    ONE_DAY_IN_SECONDS,
)
from .precision import FLOAT
from .state import get_timescale

_UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def julday(
    year: int, month: int, day: int, hour: float = 0.0, gregflag: int = GREG_CAL
) -> float:
    """
    Convert calendar date to Julian Day number.

    Args:
        year: Calendar year (negative for BCE)
        month: Month (1-12)
        day: Day of month (1-31)
        hour: Decimal hour (0.0-23.999...)
        gregflag: GREG_CAL (1) for Gregorian, JUL_CAL (0) for Julian

    Returns:
        float: Julian Day number (days since JD 0.0 = noon Jan 1, 4713 BCE)

    Note:
        JD 2451545.0 = Jan 1, 2000 12:00 (J2000.0 epoch). AA ch.7.
    """
    if month <= 2:
        year -= 1
        month += 12

    a = int(year / 100)

    if gregflag == GREG_CAL:
        b = 2 - a + int(a / 4)
    else:
        b = 0

    jd = (
        int(365.25 * (year + 4716))
        + int(30.6001 * (month + 1))
        + day
        + hour / 24.0
        + b
        - 1524.5
    )
    return jd


def revjul(jd: float, gregflag: int = GREG_CAL) -> tuple[int, int, int, float]:
    """
    Convert Julian Day number to calendar date.

    Args:
        jd: Julian Day number
        gregflag: GREG_CAL (1) for Gregorian, JUL_CAL (0) for Julian

    Returns:
        tuple: (year, month, day, hour) with a decimal hour

    Note:
        The Julian calendar is always used before JD 2299161 (1582-10-15).
    """
    jd = jd + 0.5
    z = int(jd)
    f = jd - z

    if z < GREGORIAN_START_JD or gregflag != GREG_CAL:
        a = z
    else:
        alpha = int((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - int(alpha / 4)

    b = a + 1524
    c = int((b - 122.1) / 365.25)
    d = int(365.25 * c)
    e = int((b - d) / 30.6001)

    day = b - d - int(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715

    d_int = int(day)
    hour = (day - d_int) * 24.0

    return year, month, d_int, hour


def julian_day_from_datetime(dt: datetime) -> float:
    """
    Julian Day of a datetime.

    Args:
        dt: Datetime; naive values are taken as UTC

    Returns:
        float: Julian Day (UT)
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return (dt - _UNIX_EPOCH).total_seconds() / ONE_DAY_IN_SECONDS + J1970


def datetime_from_julian_day(jd: float) -> datetime:
    """
    UTC datetime of a Julian Day.

    Args:
        jd: Julian Day (UT)

    Returns:
        datetime: Timezone-aware UTC datetime, rounded to the microsecond
    """
    days = jd - J1970
    return _UNIX_EPOCH + timedelta(microseconds=round(days * ONE_DAY_IN_SECONDS * 1e6))


def julian_day_midnight(jd: float) -> float:
    """
    Julian Day of 0h UT on the calendar day of jd.

    Example:
        >>> julian_day_midnight(2447240.8)
        2447240.5
    """
    return math.floor(jd - 0.5) + 0.5


def julian_day_midnight_dynamical_time(jd: float) -> float:
    """
    0h UT of the calendar day of jd, expressed in Dynamical Time (JDE).

    Positions fed to the rise/transit/set computations are evaluated at
    this instant (AA p.103).
    """
    jd0 = julian_day_midnight(jd)
    return jd0 + deltat(jd0) / ONE_DAY_IN_SECONDS


def julian_century(jd, arithmetic=FLOAT):
    """
    Julian centuries elapsed since J2000.0 (AA eq.12.1).

    Args:
        jd: Julian Day
        arithmetic: Numeric strategy (see precision module)
    """
    return (arithmetic.number(jd) - arithmetic.number(J2000)) / arithmetic.number(JULIAN_CENTURY)


def jd_at_utc(jd: float, utc: float) -> float:
    """
    Julian Day at a UT clock time on the calendar day of jd.

    Args:
        jd: Any Julian Day within the day of interest
        utc: Clock time in decimal hours

    Returns:
        float: Absolute Julian Day

    Note:
        Values outside [0, 24) carry into the previous or next day, so
        jd_at_utc(jd, 25.0) is 1h UT of the day after.
    """
    return julian_day_midnight(jd) + float(utc) / 24.0


def deltat(jd: float) -> float:
    """
    Calculate Delta T (TT - UT1) for a given Julian Day.

    Args:
        jd: Julian Day number in UT1

    Returns:
        float: Delta T in SECONDS

    Note:
        Values come from Skyfield's bundled IERS tables for modern dates and
        from the Morrison & Stephenson long-term model outside them.
        About 55.8 s in 1988 and 69 s in 2024.
    """
    ts = get_timescale()
    t = ts.ut1_jd(float(jd))
    return float(t.delta_t)
