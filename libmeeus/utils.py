"""
Numeric primitives for libmeeus.

Modulo helpers that always return a value in a fixed range (true modulo,
not remainder) and unit conversions between degrees, radians and hours.

Every function accepts native floats as well as mpmath numbers, so the same
helpers serve both numeric-precision strategies.
"""

from .constants import DEG2H, DEG2RAD, H2DEG, RAD2DEG


def fmod(x, m):
    """
    Modulo with a result in [0, m) for any sign of x.

    Args:
        x: Value to reduce
        m: Positive modulus

    Returns:
        x reduced to [0, m)

    Examples:
        >>> fmod(-0.5, 1)
        0.5
        >>> fmod(1, 1)
        0
        >>> fmod(10000.5, 1)
        0.5
    """
    result = x % m
    # Float rounding can land exactly on m for tiny negative x
    if result < 0:
        result += m
    if result >= m:
        result -= m
    return result


def fmod360(degrees):
    """Reduce an angle to [0, 360)."""
    return fmod(degrees, 360)


def fmod24(hours):
    """Reduce a time of day or an hour angle to [0, 24)."""
    return fmod(hours, 24)


def fmod180(degrees):
    """Reduce an angle to (-180, 180]."""
    result = fmod360(degrees)
    if result > 180:
        result -= 360
    return result


def fmod90(degrees):
    """
    Fold a latitude-like angle back into [-90, 90].

    This is not a modulo: values past +/-90 are reflected toward 0, so
    91 gives 89 and -91 gives -89.

    Examples:
        >>> fmod90(91)
        89
        >>> fmod90(-91)
        -89
    """
    result = fmod360(degrees)
    if result > 270:
        result -= 360
    elif result > 90:
        result = 180 - result
    return result


def deg2rad(degrees):
    return degrees * DEG2RAD


def rad2deg(radians):
    return radians * RAD2DEG


def deg2hours(degrees):
    return degrees * DEG2H


def hours2deg(hours):
    return hours * H2DEG


def difdeg2n(p1: float, p2: float) -> float:
    """
    Calculate distance in degrees p1 - p2 normalized to [-180;180].

    Args:
        p1: First angle in degrees
        p2: Second angle in degrees

    Returns:
        Normalized difference in range [-180, 180]

    Examples:
        >>> difdeg2n(10, 20)
        -10.0
        >>> difdeg2n(350, 10)
        -20.0
        >>> difdeg2n(180, 0)
        180.0
    """
    diff = (p1 - p2) % 360.0
    if diff > 180.0:
        diff -= 360.0
    return diff
