"""
Sexagesimal helpers for libmeeus.

Split decimal hours or degrees into (radix, minutes, seconds) and back.
"""

import math
from typing import NamedTuple


class Sexagesimal(NamedTuple):
    """Sexagesimal value; radix, minutes and seconds are non-negative."""

    sign: int
    radix: int
    minutes: int
    seconds: float


def to_sexagesimal(value: float) -> Sexagesimal:
    """
    Split a decimal value into sexagesimal parts.

    Args:
        value: Decimal hours or degrees

    Returns:
        Sexagesimal: (sign, radix, minutes, seconds), sign is +1 or -1

    Example:
        >>> to_sexagesimal(12.5)
        Sexagesimal(sign=1, radix=12, minutes=30, seconds=0.0)
    """
    value = float(value)
    sign = -1 if value < 0 else 1
    value = abs(value)

    radix = math.floor(value)
    fraction_minutes = (value - radix) * 60.0
    minutes = math.floor(fraction_minutes)
    seconds = (fraction_minutes - minutes) * 60.0

    return Sexagesimal(sign, int(radix), int(minutes), seconds)


def from_sexagesimal(
    radix: float, minutes: float = 0, seconds: float = 0, positive: bool = True
) -> float:
    """
    Join sexagesimal parts into a decimal value.

    Args:
        radix: Hours or degrees (non-negative when positive is False)
        minutes: Minutes
        seconds: Seconds
        positive: False to negate the whole value (e.g. -0d30m)

    Returns:
        float: Decimal value

    Example:
        >>> from_sexagesimal(18, 26, 27.3)
        18.44091...
    """
    value = radix + minutes / 60.0 + seconds / 3600.0
    return value if positive else -value


def format_sexagesimal(value: float, unit: str = "h") -> str:
    """
    Format a decimal value, e.g. 12.4354 -> "12h26m07.44s".

    Seconds are rounded to hundredths first, so 12.999999 reads "13h00m00.00s".

    Args:
        value: Decimal hours or degrees
        unit: "h" for hours, "d" for degrees
    """
    if unit not in ("h", "d"):
        raise ValueError(f"Unknown sexagesimal unit: {unit!r}")

    value = float(value)
    # Whole hundredths of a second
    total = round(abs(value) * 360000)
    sign = "-" if value < 0 and total else ""
    radix, rest = divmod(total, 360000)
    minutes, centiseconds = divmod(rest, 6000)
    seconds = centiseconds / 100.0

    if unit == "h":
        return f"{sign}{radix}h{minutes:02d}m{seconds:05.2f}s"
    return f"{sign}{radix}°{minutes:02d}'{seconds:05.2f}\""
