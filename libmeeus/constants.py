"""
Constants for libmeeus.

Astronomical and mathematical constants used across the library, with the
page of "Astronomical Algorithms" (Meeus, 2nd ed., 1998) they come from
where relevant.
"""

import math

# =============================================================================
# CALENDAR FLAGS
# =============================================================================

JUL_CAL = 0
GREG_CAL = 1

# =============================================================================
# EPOCHS (Julian Days)
# =============================================================================

J1970 = 2440587.5  # 1970-01-01 00:00 UT (Unix epoch)
J2000 = 2451545.0  # 2000-01-01 12:00 TT

# First day of the Gregorian calendar (1582-10-15)
GREGORIAN_START_JD = 2299161

# =============================================================================
# ANGLES AND TIME UNITS
# =============================================================================

DEG2RAD = math.pi / 180.0
RAD2DEG = 180.0 / math.pi
H2DEG = 360.0 / 24.0
DEG2H = 24.0 / 360.0

ONE_DAY_IN_SECONDS = 86400.0
JULIAN_CENTURY = 36525.0

# =============================================================================
# EARTH ROTATION
# =============================================================================

# Sidereal degrees swept per mean solar day (AA eq.15.2 and p.103)
SIDEREAL_DEGREES_PER_DAY = 360.985647

# Greenwich mean sidereal time polynomial, AA eq.12.4 (degrees)
GMST_J2000 = "280.46061837"
GMST_RATE = "360.98564736629"
GMST_T2 = "0.000387933"
GMST_T3_DIVISOR = "38710000"

ECLIPTIC_OBLIQUITY_J2000_0 = 23.4392911  # AA p.92

# =============================================================================
# STANDARD ALTITUDES FOR RISE AND SET (AA p.101)
# =============================================================================

STANDARD_ALTITUDE_STARS = -0.5667  # works for planets too
STANDARD_ALTITUDE_SUN = -0.8333
STANDARD_ALTITUDE_MOON = 0.125

# Sun altitudes (degrees) of the sunrise/sunset and the three twilights
SUN_EVENTS_ALTITUDES = {
    "sun": STANDARD_ALTITUDE_SUN,
    "civil": -6.0,
    "nautical": -12.0,
    "astronomical": -18.0,
}

# =============================================================================
# NUMERIC PRECISION
# =============================================================================

DEFAULT_PRECISION_DIGITS = 30
MIN_PRECISION_DIGITS = 15
DEFAULT_ITERATIONS = 1
