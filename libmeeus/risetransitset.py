"""
Rise, transit and set times of celestial bodies (AA ch.15).

Two entry points:
- get_rise_transit_set_times(): approximate times from a single position
  of the body, no iteration (AA eq.15.1 and 15.2).
- get_accurate_rise_transit_set_times(): starts from the same estimate and
  refines it with three daily positions interpolated at the corrected
  instants (AA p.103). One iteration is usually enough for sub-minute
  accuracy.

Times are expressed as fractions of a day (m0 = transit, m1 = rise,
m2 = set) counted from 0h UT of the day of interest, then converted to
UT hours and Julian Days.

Bodies that never cross the reference altitude on that day are reported
with ``transit.is_circumpolar = True`` and no rise nor set.

Geographic longitudes are EAST positive. The AA formulas use WEST positive
longitudes, hence the sign flips below.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, NamedTuple, Optional, Sequence

from .constants import (
    ONE_DAY_IN_SECONDS,
    SIDEREAL_DEGREES_PER_DAY,
    STANDARD_ALTITUDE_STARS,
)
from .coordinates import (
    EquatorialCoordinates,
    GeographicCoordinates,
    horizontal_altitude,
)
from .interpolation import interpolate, interpolate_angles
from .precision import FLOAT, get_arithmetic
from .sidereal import greenwich_sidereal_degrees
from .state import get_default_iterations, validate_iterations
from .time_utils import deltat, jd_at_utc, julian_day_midnight
from .utils import fmod, fmod180, fmod360

logger = logging.getLogger(__name__)


# =============================================================================
# INTERMEDIATE VALUES
# =============================================================================


@dataclass(frozen=True)
class MTimes:
    """
    Estimated transit, rise and set instants as fractions of a day.

    Attributes:
        m0: Transit
        m1: Rise (None for circumpolar bodies)
        m2: Set (None for circumpolar bodies)
        is_circumpolar: True when |cos_h0| > 1
        altitude: Altitude of the body at transit, degrees
        cos_h0: Cosine of the hour angle at rise and set (AA eq.15.1)

    Note:
        Values are in the number type of the arithmetic that produced them
        (float or mpmath mpf). Refinement returns new instances.
    """

    m0: Any
    m1: Any
    m2: Any
    is_circumpolar: bool
    altitude: Any
    cos_h0: Any


class DeltaMTimes(NamedTuple):
    """Correction of one m-time, with the hour angle and altitude it came from."""

    delta_m: Any
    hour_angle: Any
    local_altitude: Any


# =============================================================================
# RESULTS
# =============================================================================


@dataclass
class RiseSetEvent:
    utc: Optional[float] = None
    julian_day: Optional[float] = None


@dataclass
class TransitInternals:
    m0: Optional[float] = None
    cos_h0: Optional[float] = None


@dataclass
class Transit:
    """
    Transit of the body across the local meridian.

    Attributes:
        utc: UT of the transit in hours
        julian_day: Julian Day of the transit
        altitude: Altitude at transit in degrees
        ref_altitude: Reference altitude used for rise and set
        is_above_horizon: Altitude at transit above STANDARD_ALTITUDE_STARS
        is_above_altitude: Altitude at transit above ref_altitude
        is_circumpolar: The body never crosses ref_altitude on that day
        internals: Initial m0 and cos_h0 of the computation
    """

    utc: Optional[float] = None
    julian_day: Optional[float] = None
    altitude: Optional[float] = None
    ref_altitude: Optional[float] = None
    is_above_horizon: bool = False
    is_above_altitude: bool = False
    is_circumpolar: bool = False
    internals: TransitInternals = field(default_factory=TransitInternals)


@dataclass
class RiseTransitSet:
    rise: RiseSetEvent = field(default_factory=RiseSetEvent)
    transit: Transit = field(default_factory=Transit)
    set: RiseSetEvent = field(default_factory=RiseSetEvent)


# =============================================================================
# M-TIMES
# =============================================================================


def _m_times(jd, equ_coords, geo_coords, alt, arithmetic) -> MTimes:
    num = arithmetic.number

    # 0h UT of day D (AA p.102), not the 0h TD the coordinates refer to
    jd0 = julian_day_midnight(jd)
    theta0 = greenwich_sidereal_degrees(jd0, arithmetic)

    ra = num(equ_coords.right_ascension)
    longitude = num(geo_coords.longitude)
    # AA eq.15.2 with an east positive longitude
    m0 = fmod((ra - longitude - theta0) / 360, 1)

    phi = arithmetic.radians(num(geo_coords.latitude))
    delta = arithmetic.radians(num(equ_coords.declination))
    sin_h0 = arithmetic.sin(arithmetic.radians(num(alt)))

    # AA eq.15.1
    cos_h0 = (sin_h0 - arithmetic.sin(phi) * arithmetic.sin(delta)) / (
        arithmetic.cos(phi) * arithmetic.cos(delta)
    )
    is_circumpolar = abs(cos_h0) > 1

    # AA eq.13.6 at H = 0: highest point of the body
    altitude = horizontal_altitude(
        0, equ_coords.declination, geo_coords.latitude, arithmetic
    )

    m1 = m2 = None
    if not is_circumpolar:
        H0 = arithmetic.degrees(arithmetic.acos(cos_h0)) / 360
        m1 = fmod(m0 - H0, 1)
        m2 = fmod(m0 + H0, 1)

    return MTimes(
        m0=m0,
        m1=m1,
        m2=m2,
        is_circumpolar=is_circumpolar,
        altitude=altitude,
        cos_h0=cos_h0,
    )


def get_m_times(
    jd: float,
    equ_coords: EquatorialCoordinates,
    geo_coords: GeographicCoordinates,
    alt: float = STANDARD_ALTITUDE_STARS,
    high_precision: Optional[bool] = None,
) -> MTimes:
    """
    First estimate of the transit, rise and set instants (AA p.102).

    Args:
        jd: Julian Day of the day of interest
        equ_coords: Position of the body at 0h TD of that day
        geo_coords: Observer location
        alt: Altitude of the body's center at rise and set, degrees
        high_precision: Use mpmath arithmetic (None = library default)

    Returns:
        MTimes: m0 always set; m1 and m2 only for non-circumpolar bodies

    Example:
        >>> boston = GeographicCoordinates(longitude=-71.0833, latitude=42.3333)
        >>> venus = EquatorialCoordinates(41.73129, 18.44092)
        >>> get_m_times(2447240.5, venus, boston, high_precision=False).m0
        0.8198...
    """
    return _m_times(jd, equ_coords, geo_coords, alt, get_arithmetic(high_precision))


# =============================================================================
# CORRECTIONS
# =============================================================================


def _delta_m_times(
    m, is_transit, theta0, delta_t, equ_coords, geo_coords, alt, arithmetic
) -> DeltaMTimes:
    num = arithmetic.number
    m = num(m)

    # Sidereal time at Greenwich at the estimated instant (AA p.103)
    theta = fmod360(num(theta0) + num(SIDEREAL_DEGREES_PER_DAY) * m)
    n = m + num(delta_t) / num(ONE_DAY_IN_SECONDS)

    alpha = interpolate_angles(
        equ_coords[0].right_ascension,
        equ_coords[1].right_ascension,
        equ_coords[2].right_ascension,
        n,
        arithmetic,
    )
    delta = interpolate(
        equ_coords[0].declination,
        equ_coords[1].declination,
        equ_coords[2].declination,
        n,
        arithmetic,
    )

    H = fmod180(theta + num(geo_coords.longitude) - alpha)
    h = horizontal_altitude(H, delta, geo_coords.latitude, arithmetic)

    if is_transit:
        delta_m = -H / 360
    else:
        delta_m = (h - num(alt)) / (
            360
            * arithmetic.cos(arithmetic.radians(delta))
            * arithmetic.cos(arithmetic.radians(num(geo_coords.latitude)))
            * arithmetic.sin(arithmetic.radians(H))
        )

    return DeltaMTimes(delta_m=delta_m, hour_angle=H, local_altitude=h)


def get_delta_m_times(
    m: float,
    is_transit: bool,
    theta0: float,
    delta_t: float,
    equ_coords: Sequence[EquatorialCoordinates],
    geo_coords: GeographicCoordinates,
    alt: float = STANDARD_ALTITUDE_STARS,
    high_precision: Optional[bool] = None,
) -> DeltaMTimes:
    """
    Correction to one estimated instant (AA p.103).

    Args:
        m: Estimated instant, fraction of a day from 0h UT
        is_transit: True for the transit, False for rise or set
        theta0: Greenwich sidereal time at 0h UT, degrees
        delta_t: TT - UT in seconds
        equ_coords: Positions at 0h TD on the day before, the day, the day after
        geo_coords: Observer location
        alt: Reference altitude for rise and set, degrees
        high_precision: Use mpmath arithmetic (None = library default)

    Returns:
        DeltaMTimes: (delta_m, hour_angle, local_altitude)

    Note:
        For rise and set the correction divides by sin(H). An hour angle of
        exactly 0 or 180 degrees raises ZeroDivisionError; it only arises
        for a body tangent to alt, which refine_m_times() handles apart.
    """
    return _delta_m_times(
        m,
        is_transit,
        theta0,
        delta_t,
        equ_coords,
        geo_coords,
        alt,
        get_arithmetic(high_precision),
    )


_TANGENT_TOLERANCE = 1e-9


def _is_tangent(cos_h0) -> bool:
    return abs(abs(cos_h0) - 1) <= _TANGENT_TOLERANCE


def refine_m_times(
    m_times: MTimes,
    theta0,
    delta_t,
    equ_coords: Sequence[EquatorialCoordinates],
    geo_coords: GeographicCoordinates,
    alt=STANDARD_ALTITUDE_STARS,
    iterations: int = 1,
    arithmetic=FLOAT,
) -> MTimes:
    """
    Apply ``iterations`` rounds of corrections to the m-times.

    Each round corrects m0, m1 and m2 independently from the previous
    values, and takes the transit altitude from the transit correction.
    When cos_h0 is +1 or -1 (the body is tangent to alt) only m0 is
    corrected and the zero-duration rise and set follow it.

    Returns:
        MTimes: A new value; circumpolar m-times are returned unchanged

    Raises:
        ValueError: If iterations is not a positive integer
    """
    validate_iterations(iterations)
    if m_times.is_circumpolar:
        return m_times

    if _is_tangent(m_times.cos_h0):
        # The body only touches alt at transit: rise and set stay on m0
        logger.debug("Tangent case, rise and set follow the transit")
        for _ in range(iterations):
            transit = _delta_m_times(
                m_times.m0, True, theta0, delta_t, equ_coords, geo_coords, alt, arithmetic
            )
            m0 = m_times.m0 + transit.delta_m
            m_times = dataclasses.replace(
                m_times, m0=m0, m1=m0, m2=m0, altitude=transit.local_altitude
            )
        return m_times

    for i in range(iterations):
        transit = _delta_m_times(
            m_times.m0, True, theta0, delta_t, equ_coords, geo_coords, alt, arithmetic
        )
        rise = _delta_m_times(
            m_times.m1, False, theta0, delta_t, equ_coords, geo_coords, alt, arithmetic
        )
        setting = _delta_m_times(
            m_times.m2, False, theta0, delta_t, equ_coords, geo_coords, alt, arithmetic
        )
        logger.debug(
            "Iteration %d: delta m0=%.3g m1=%.3g m2=%.3g",
            i + 1,
            float(transit.delta_m),
            float(rise.delta_m),
            float(setting.delta_m),
        )
        m_times = dataclasses.replace(
            m_times,
            m0=m_times.m0 + transit.delta_m,
            m1=m_times.m1 + rise.delta_m,
            m2=m_times.m2 + setting.delta_m,
            altitude=transit.local_altitude,
        )

    return m_times


# =============================================================================
# ENTRY POINTS
# =============================================================================


def _build_result(jd, m_times, initial, alt, arithmetic) -> RiseTransitSet:
    to_float = arithmetic.to_float
    result = RiseTransitSet()
    transit = result.transit

    transit.ref_altitude = float(alt)
    transit.internals.m0 = to_float(initial.m0)
    transit.internals.cos_h0 = to_float(initial.cos_h0)

    transit.utc = to_float(m_times.m0 * 24)
    transit.julian_day = jd_at_utc(jd, transit.utc)
    transit.altitude = to_float(m_times.altitude)

    transit.is_circumpolar = bool(m_times.is_circumpolar)
    transit.is_above_horizon = transit.altitude > STANDARD_ALTITUDE_STARS
    transit.is_above_altitude = transit.altitude > float(alt)

    if m_times.is_circumpolar:
        return result

    result.rise.utc = to_float(m_times.m1 * 24)
    result.set.utc = to_float(m_times.m2 * 24)
    result.rise.julian_day = jd_at_utc(jd, result.rise.utc)
    result.set.julian_day = jd_at_utc(jd, result.set.utc)

    # m1 and m2 are taken modulo one day and may belong to the adjacent day
    if result.rise.julian_day > transit.julian_day:
        logger.debug("Rise after transit, moved to the previous day")
        result.rise.julian_day -= 1
    if result.set.julian_day < transit.julian_day:
        logger.debug("Set before transit, moved to the next day")
        result.set.julian_day += 1

    return result


def get_rise_transit_set_times(
    jd: float,
    equ_coords: EquatorialCoordinates,
    geo_coords: GeographicCoordinates,
    alt: float = STANDARD_ALTITUDE_STARS,
    high_precision: Optional[bool] = None,
) -> RiseTransitSet:
    """
    Approximate times of rise, transit and set of a body on a given day.

    Args:
        jd: Julian Day of the day of interest
        equ_coords: Apparent position of the body at 0h TD of that day
            (see time_utils.julian_day_midnight_dynamical_time)
        geo_coords: Observer location
        alt: Altitude of the body's center at rise and set, degrees.
            -0.5667 for stars and planets, -0.8333 for the Sun.
        high_precision: Use mpmath arithmetic (None = library default)

    Returns:
        RiseTransitSet: Rise and set are left empty for circumpolar bodies

    Note:
        Accuracy is a few minutes for bodies moving like the Sun. Use
        get_accurate_rise_transit_set_times() for better results.
    """
    arithmetic = get_arithmetic(high_precision)
    m_times = _m_times(jd, equ_coords, geo_coords, alt, arithmetic)
    logger.debug(
        "m-times for JD %s: m0=%s m1=%s m2=%s circumpolar=%s",
        jd,
        m_times.m0,
        m_times.m1,
        m_times.m2,
        m_times.is_circumpolar,
    )
    return _build_result(jd, m_times, m_times, alt, arithmetic)


def get_accurate_rise_transit_set_times(
    jd: float,
    equ_coords: Sequence[EquatorialCoordinates],
    geo_coords: GeographicCoordinates,
    alt: float = STANDARD_ALTITUDE_STARS,
    iterations: Optional[int] = None,
    high_precision: Optional[bool] = None,
) -> RiseTransitSet:
    """
    Accurate times of rise, transit and set of a body on a given day.

    Args:
        jd: Julian Day of the day of interest
        equ_coords: Apparent positions of the body at 0h TD on the day
            before, the day of interest and the day after
        geo_coords: Observer location
        alt: Altitude of the body's center at rise and set, degrees
        iterations: Number of refinement rounds (None = library default, 1)
        high_precision: Use mpmath arithmetic (None = library default)

    Returns:
        RiseTransitSet: Rise and set are left empty for circumpolar bodies

    Raises:
        ValueError: If equ_coords does not hold exactly three positions, or
            iterations is not a positive integer

    Example:
        >>> result = get_accurate_rise_transit_set_times(jd, [before, day, after], site)
        >>> result.rise.utc, result.transit.utc, result.set.utc
    """
    if len(equ_coords) != 3:
        raise ValueError(
            f"Three daily equatorial coordinates are required, got {len(equ_coords)}"
        )
    if iterations is None:
        iterations = get_default_iterations()
    validate_iterations(iterations)

    arithmetic = get_arithmetic(high_precision)

    # Greenwich sidereal time at 0h UT of day D (AA p.102)
    theta0 = greenwich_sidereal_degrees(julian_day_midnight(jd), arithmetic)
    initial = _m_times(jd, equ_coords[1], geo_coords, alt, arithmetic)
    logger.debug(
        "Initial m-times for JD %s: m0=%s m1=%s m2=%s circumpolar=%s",
        jd,
        initial.m0,
        initial.m1,
        initial.m2,
        initial.is_circumpolar,
    )

    m_times = initial
    if not initial.is_circumpolar:
        delta_t = deltat(jd)
        m_times = refine_m_times(
            initial,
            theta0,
            delta_t,
            equ_coords,
            geo_coords,
            alt,
            iterations,
            arithmetic,
        )

    return _build_result(jd, m_times, initial, alt, arithmetic)
