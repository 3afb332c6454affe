"""
Numeric-precision strategies for libmeeus.

The rise/transit/set engine and its collaborators are written once against
the small arithmetic interface defined here, and evaluated either with
native floats (fast) or with arbitrary-precision mpmath numbers (slow).

The choice is a fidelity/performance trade-off only: both strategies run
the same formulas and must satisfy the same reference scenarios within
their tolerances.

Each HighPrecisionArithmetic owns a private mpmath context, so changing
the working precision never touches mpmath's global ``mp`` context and
concurrent callers do not interfere with each other.
"""

import math
from typing import Optional

import mpmath

from . import state


class FloatArithmetic:
    """Native double-precision arithmetic backed by the math module."""

    high_precision = False

    def number(self, value):
        return float(value)

    def sin(self, x):
        return math.sin(x)

    def cos(self, x):
        return math.cos(x)

    def asin(self, x):
        return math.asin(x)

    def acos(self, x):
        return math.acos(x)

    def atan2(self, y, x):
        return math.atan2(y, x)

    def floor(self, x):
        return float(math.floor(x))

    def radians(self, degrees):
        return math.radians(degrees)

    def degrees(self, radians):
        return math.degrees(radians)

    def to_float(self, x) -> float:
        return float(x)

    def __repr__(self) -> str:
        return "FloatArithmetic()"


class HighPrecisionArithmetic:
    """
    Arbitrary-precision arithmetic backed by a private mpmath context.

    Args:
        dps: Working precision in decimal digits (default: library setting)

    Note:
        Numbers are built from their decimal string representation, so
        literals such as "360.985647" are exact and float inputs keep the
        value they print as.
    """

    high_precision = True

    def __init__(self, dps: Optional[int] = None):
        self.ctx = mpmath.MPContext()
        self.ctx.dps = dps if dps is not None else state.get_precision_digits()

    @property
    def dps(self) -> int:
        return self.ctx.dps

    def number(self, value):
        if isinstance(value, str):
            return self.ctx.mpf(value.replace("_", ""))
        if isinstance(value, float):
            return self.ctx.mpf(repr(value))
        return self.ctx.mpf(value)

    def sin(self, x):
        return self.ctx.sin(x)

    def cos(self, x):
        return self.ctx.cos(x)

    def asin(self, x):
        return self.ctx.asin(x)

    def acos(self, x):
        return self.ctx.acos(x)

    def atan2(self, y, x):
        return self.ctx.atan2(y, x)

    def floor(self, x):
        return self.ctx.floor(x)

    def radians(self, degrees):
        return degrees * self.ctx.pi / 180

    def degrees(self, radians):
        return radians * 180 / self.ctx.pi

    def to_float(self, x) -> float:
        return float(x)

    def __repr__(self) -> str:
        return f"HighPrecisionArithmetic(dps={self.dps})"


FLOAT = FloatArithmetic()


def get_arithmetic(high_precision: Optional[bool] = None):
    """
    Select the arithmetic for a computation.

    Args:
        high_precision: True for mpmath, False for native floats, None to use
            the library default (see state.set_high_precision)

    Returns:
        FloatArithmetic or a fresh HighPrecisionArithmetic
    """
    if high_precision is None:
        high_precision = state.get_high_precision()
    if high_precision:
        return HighPrecisionArithmetic()
    return FLOAT
