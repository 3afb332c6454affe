"""
Coordinate value types and transforms for libmeeus.

All angles are in degrees. Geographic longitudes are EAST positive, the
horizontal azimuth is measured westward from the South (AA ch.13).
"""

from dataclasses import dataclass
from typing import Optional

from .constants import ECLIPTIC_OBLIQUITY_J2000_0
from .precision import FLOAT, get_arithmetic
from .sidereal import greenwich_sidereal_degrees
from .utils import fmod90, fmod360


@dataclass(frozen=True)
class EquatorialCoordinates:
    """
    Position of a body on the celestial sphere.

    Attributes:
        right_ascension: Right ascension in degrees (not hours)
        declination: Declination in degrees
        epoch: Optional Julian Day the position refers to
    """

    right_ascension: float
    declination: float
    epoch: Optional[float] = None


@dataclass(frozen=True)
class GeographicCoordinates:
    """
    Observer location on Earth.

    Attributes:
        longitude: Longitude in degrees, EAST positive
        latitude: Geodetic latitude in degrees (-90 to 90)
        height: Height above sea level in meters
    """

    longitude: float
    latitude: float
    height: float = 0.0

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(
                f"Latitude must be between -90 and 90 degrees, got {self.latitude}"
            )


@dataclass(frozen=True)
class HorizontalCoordinates:
    azimuth: float
    altitude: float


@dataclass(frozen=True)
class EclipticCoordinates:
    longitude: float
    latitude: float


def horizontal_altitude(hour_angle, declination, latitude, arithmetic=FLOAT):
    """
    Altitude of a body above the horizon (AA eq.13.6).

    Args:
        hour_angle: Local hour angle in degrees
        declination: Declination in degrees
        latitude: Observer latitude in degrees
        arithmetic: Numeric strategy (see precision module)

    Returns:
        Altitude in degrees, in the arithmetic's number type
    """
    num = arithmetic.number
    H = arithmetic.radians(num(hour_angle))
    delta = arithmetic.radians(num(declination))
    phi = arithmetic.radians(num(latitude))

    sin_h = (
        arithmetic.sin(phi) * arithmetic.sin(delta)
        + arithmetic.cos(phi) * arithmetic.cos(delta) * arithmetic.cos(H)
    )
    # Rounding can push |sin h| a hair past 1 at the zenith
    sin_h = max(min(sin_h, num(1)), num(-1))
    return arithmetic.degrees(arithmetic.asin(sin_h))


def equatorial_to_horizontal(
    jd: float,
    equ_coords: EquatorialCoordinates,
    geo_coords: GeographicCoordinates,
    high_precision: Optional[bool] = None,
) -> HorizontalCoordinates:
    """
    Transform equatorial coordinates to local horizontal coordinates.

    Args:
        jd: Julian Day (UT)
        equ_coords: Equatorial coordinates of the body
        geo_coords: Observer location
        high_precision: Use mpmath arithmetic (None = library default)

    Returns:
        HorizontalCoordinates: Azimuth (from South, 0-360) and altitude

    Note:
        Uses the local mean sidereal time, like the rise/transit/set engine.
        No refraction is applied.
    """
    arithmetic = get_arithmetic(high_precision)
    num = arithmetic.number

    lmst = greenwich_sidereal_degrees(jd, arithmetic) + num(geo_coords.longitude)
    hour_angle = lmst - num(equ_coords.right_ascension)

    H = arithmetic.radians(hour_angle)
    delta = arithmetic.radians(num(equ_coords.declination))
    phi = arithmetic.radians(num(geo_coords.latitude))

    # AA eq.13.5 with both terms multiplied by cos(delta)
    azimuth = arithmetic.degrees(
        arithmetic.atan2(
            arithmetic.sin(H) * arithmetic.cos(delta),
            arithmetic.cos(H) * arithmetic.sin(phi) * arithmetic.cos(delta)
            - arithmetic.sin(delta) * arithmetic.cos(phi),
        )
    )
    altitude = horizontal_altitude(
        hour_angle, equ_coords.declination, geo_coords.latitude, arithmetic
    )

    return HorizontalCoordinates(
        azimuth=arithmetic.to_float(fmod360(azimuth)),
        altitude=arithmetic.to_float(fmod90(altitude)),
    )


def ecliptic_to_equatorial(
    ecl_coords: EclipticCoordinates,
    obliquity: float = ECLIPTIC_OBLIQUITY_J2000_0,
    high_precision: Optional[bool] = None,
) -> EquatorialCoordinates:
    """
    Transform ecliptic coordinates to equatorial coordinates (AA eq.13.3, 13.4).

    Args:
        ecl_coords: Ecliptic longitude and latitude
        obliquity: Obliquity of the ecliptic in degrees. Use the true
            obliquity (sidereal.true_obliquity) for apparent positions.
        high_precision: Use mpmath arithmetic (None = library default)

    Returns:
        EquatorialCoordinates: Right ascension (0-360) and declination
    """
    arithmetic = get_arithmetic(high_precision)
    num = arithmetic.number

    lam = arithmetic.radians(num(ecl_coords.longitude))
    beta = arithmetic.radians(num(ecl_coords.latitude))
    eps = arithmetic.radians(num(obliquity))

    sin_lam = arithmetic.sin(lam)
    cos_beta = arithmetic.cos(beta)
    sin_beta = arithmetic.sin(beta)

    ra = arithmetic.atan2(
        sin_lam * arithmetic.cos(eps) * cos_beta - sin_beta * arithmetic.sin(eps),
        arithmetic.cos(lam) * cos_beta,
    )
    dec = arithmetic.asin(
        sin_beta * arithmetic.cos(eps) + cos_beta * arithmetic.sin(eps) * sin_lam
    )

    return EquatorialCoordinates(
        right_ascension=arithmetic.to_float(fmod360(arithmetic.degrees(ra))),
        declination=arithmetic.to_float(arithmetic.degrees(dec)),
    )
