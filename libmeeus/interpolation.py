"""
Three-point interpolation of tabular values (AA ch.3).

Used by the rise/transit/set engine to evaluate right ascension and
declination between three daily ephemeris samples.
"""

from .precision import FLOAT
from .utils import fmod360


def interpolate(y1, y2, y3, n, arithmetic=FLOAT):
    """
    Interpolate between three equally spaced values (AA eq.3.3).

    Args:
        y1, y2, y3: Tabulated values at x - 1, x, x + 1
        n: Interpolating factor, offset from the central value in units of
            the tabular interval (usually between -1 and 1)
        arithmetic: Numeric strategy (see precision module)

    Returns:
        Interpolated value at x + n, in the arithmetic's number type

    Example:
        >>> interpolate(0.884226, 0.877366, 0.870531, 0.18125)  # AA ex.3.a
        0.876125...
    """
    num = arithmetic.number
    y1, y2, y3, n = num(y1), num(y2), num(y3), num(n)
    a = y2 - y1
    b = y3 - y2
    c = b - a
    return y2 + n / 2 * (a + b + n * c)


def interpolate_angles(y1, y2, y3, n, arithmetic=FLOAT):
    """
    Interpolate three angles (degrees) that may cross the 0/360 boundary.

    The samples are unwrapped around the central one before interpolating,
    so 359.5, 0.5 and 1.5 are treated as a continuous sequence.

    Returns:
        Interpolated angle in [0, 360)
    """
    num = arithmetic.number
    y1, y2, y3 = num(y1), num(y2), num(y3)
    if y1 - y2 > 180:
        y1 -= 360
    elif y2 - y1 > 180:
        y1 += 360
    if y3 - y2 > 180:
        y3 -= 360
    elif y2 - y3 > 180:
        y3 += 360
    return fmod360(interpolate(y1, y2, y3, n, arithmetic))
