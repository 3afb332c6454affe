"""
Position of the Sun and its rise, transit and set times.

Positions use the low-accuracy theory of AA ch.25 (0.01 degree), which is
ample for rise and set times: one hundredth of a degree is about two
seconds of time.

Event times follow the rise/transit/set engine, with the standard solar
altitude of -0.8333 degrees for sunrise and sunset, and -6, -12, -18
degrees for the twilights.
"""

import logging
import math
from typing import Dict, Optional

from .constants import STANDARD_ALTITUDE_SUN, SUN_EVENTS_ALTITUDES
from .coordinates import (
    EclipticCoordinates,
    EquatorialCoordinates,
    GeographicCoordinates,
    ecliptic_to_equatorial,
)
from .risetransitset import (
    RiseSetEvent,
    RiseTransitSet,
    get_accurate_rise_transit_set_times,
    get_rise_transit_set_times,
)
from .sidereal import mean_obliquity
from .time_utils import julian_century, julian_day_midnight_dynamical_time
from .utils import fmod360

logger = logging.getLogger(__name__)

_TWILIGHT_EVENT_NAMES = {
    "sun": ("sunrise", "sunset"),
    "civil": ("civil_dawn", "civil_dusk"),
    "nautical": ("nautical_dawn", "nautical_dusk"),
    "astronomical": ("astronomical_dawn", "astronomical_dusk"),
}


# =============================================================================
# POSITION (AA ch.25)
# =============================================================================


def mean_longitude(jd: float) -> float:
    """Geometric mean longitude of the Sun, degrees (AA eq.25.2)."""
    T = julian_century(jd)
    return fmod360(280.46646 + (36000.76983 + 0.0003032 * T) * T)


def mean_anomaly(jd: float) -> float:
    """Mean anomaly of the Sun, degrees (AA eq.25.3)."""
    T = julian_century(jd)
    return fmod360(357.52911 + (35999.05029 - 0.0001537 * T) * T)


def equation_of_center(jd: float) -> float:
    """Equation of the center of the Sun, degrees (AA p.164)."""
    T = julian_century(jd)
    M = math.radians(mean_anomaly(jd))
    return (
        (1.914602 - (0.004817 + 0.000014 * T) * T) * math.sin(M)
        + (0.019993 - 0.000101 * T) * math.sin(2 * M)
        + 0.000289 * math.sin(3 * M)
    )


def geometric_longitude(jd: float) -> float:
    """True geometric longitude of the Sun, mean equinox of date, degrees."""
    return fmod360(mean_longitude(jd) + equation_of_center(jd))


def _omega(jd: float) -> float:
    # Longitude of the Moon's ascending node, low accuracy (AA p.164)
    return 125.04 - 1934.136 * julian_century(jd)


def apparent_longitude(jd: float) -> float:
    """
    Apparent longitude of the Sun, degrees.

    Geometric longitude corrected for nutation and aberration (AA p.164).
    """
    omega = math.radians(_omega(jd))
    return fmod360(geometric_longitude(jd) - 0.00569 - 0.00478 * math.sin(omega))


def apparent_equatorial_coordinates(
    jd: float, high_precision: Optional[bool] = None
) -> EquatorialCoordinates:
    """
    Apparent right ascension and declination of the Sun.

    Args:
        jd: Julian Ephemeris Day (TT)
        high_precision: Use mpmath arithmetic (None = library default)

    Returns:
        EquatorialCoordinates: Degrees, with epoch set to jd

    Example:
        >>> apparent_equatorial_coordinates(2448908.5)  # AA ex.25.a
        EquatorialCoordinates(right_ascension=198.3808..., declination=-7.7850..., ...)
    """
    # Obliquity corrected like the longitude (AA eq.25.8)
    epsilon = mean_obliquity(jd) + 0.00256 * math.cos(math.radians(_omega(jd)))
    equ = ecliptic_to_equatorial(
        EclipticCoordinates(longitude=apparent_longitude(jd), latitude=0.0),
        epsilon,
        high_precision,
    )
    return EquatorialCoordinates(equ.right_ascension, equ.declination, epoch=jd)


# =============================================================================
# RISE, TRANSIT AND SET
# =============================================================================


def get_rise_transit_set(
    jd: float,
    geo_coords: GeographicCoordinates,
    alt: float = STANDARD_ALTITUDE_SUN,
    high_precision: Optional[bool] = None,
) -> RiseTransitSet:
    """
    Approximate sunrise, transit and sunset on the day of jd.

    Args:
        jd: Julian Day (UT) of the day of interest
        geo_coords: Observer location
        alt: Altitude of the Sun's center at rise and set, degrees
        high_precision: Use mpmath arithmetic (None = library default)

    Returns:
        RiseTransitSet: Polar day or night is reported as circumpolar
    """
    sun_coords = apparent_equatorial_coordinates(
        julian_day_midnight_dynamical_time(jd), high_precision
    )
    return get_rise_transit_set_times(jd, sun_coords, geo_coords, alt, high_precision)


def get_accurate_rise_transit_set(
    jd: float,
    geo_coords: GeographicCoordinates,
    alt: float = STANDARD_ALTITUDE_SUN,
    iterations: Optional[int] = None,
    high_precision: Optional[bool] = None,
) -> RiseTransitSet:
    """
    Accurate sunrise, transit and sunset on the day of jd.

    Positions of the Sun are taken on the day before, the day of interest
    and the day after, at 0h dynamical time.

    Args:
        jd: Julian Day (UT) of the day of interest
        geo_coords: Observer location
        alt: Altitude of the Sun's center at rise and set, degrees
        iterations: Number of refinement rounds (None = library default)
        high_precision: Use mpmath arithmetic (None = library default)
    """
    jd0 = julian_day_midnight_dynamical_time(jd)
    samples = [
        apparent_equatorial_coordinates(jd0 + offset, high_precision)
        for offset in (-1, 0, 1)
    ]
    return get_accurate_rise_transit_set_times(
        jd, samples, geo_coords, alt, iterations, high_precision
    )


def get_twilight_times(
    jd: float,
    geo_coords: GeographicCoordinates,
    accurate: bool = False,
    iterations: Optional[int] = None,
    high_precision: Optional[bool] = None,
) -> Dict[str, RiseSetEvent]:
    """
    Sunrise, sunset and the civil, nautical and astronomical twilights.

    Args:
        jd: Julian Day (UT) of the day of interest
        geo_coords: Observer location
        accurate: Use the iterative computation instead of the approximate one
        iterations: Refinement rounds of the accurate computation
            (None = library default)
        high_precision: Use mpmath arithmetic (None = library default)

    Returns:
        dict: Event name -> RiseSetEvent. Names are "sunrise", "sunset",
        "civil_dawn", "civil_dusk", "nautical_dawn", "nautical_dusk",
        "astronomical_dawn" and "astronomical_dusk". Events the Sun does not
        reach that day (e.g. astronomical dusk in a summer night at high
        latitude) are absent.
    """
    events: Dict[str, RiseSetEvent] = {}
    for key, altitude in SUN_EVENTS_ALTITUDES.items():
        if accurate:
            rts = get_accurate_rise_transit_set(
                jd, geo_coords, altitude, iterations, high_precision
            )
        else:
            rts = get_rise_transit_set(jd, geo_coords, altitude, high_precision)

        if rts.transit.is_circumpolar:
            logger.debug("No %s events on JD %s", key, jd)
            continue

        dawn, dusk = _TWILIGHT_EVENT_NAMES[key]
        events[dawn] = rts.rise
        events[dusk] = rts.set

    return events
