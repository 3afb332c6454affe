from .constants import *
from .time_utils import (
    julday,
    revjul,
    deltat,
    julian_day_from_datetime,
    datetime_from_julian_day,
    julian_day_midnight,
    julian_day_midnight_dynamical_time,
    jd_at_utc,
)
from .sidereal import (
    mean_sidereal_time,
    apparent_sidereal_time,
    nutation,
    mean_obliquity,
    true_obliquity,
)
from .coordinates import (
    EquatorialCoordinates,
    GeographicCoordinates,
    HorizontalCoordinates,
    EclipticCoordinates,
    equatorial_to_horizontal,
    ecliptic_to_equatorial,
)
from .interpolation import interpolate, interpolate_angles
from .sexagesimal import (
    Sexagesimal,
    to_sexagesimal,
    from_sexagesimal,
    format_sexagesimal,
)
from .risetransitset import (
    RiseTransitSet,
    RiseSetEvent,
    Transit,
    get_rise_transit_set_times,
    get_accurate_rise_transit_set_times,
)
from .state import (
    set_data_path,
    set_high_precision,
    set_precision_digits,
    set_default_iterations,
)
from .utils import fmod, fmod360, fmod180, fmod90, fmod24, difdeg2n
from . import sun

__version__ = "0.1.0"
__license__ = "LGPL-3.0"

__all__ = [
    # Time functions
    "julday",
    "revjul",
    "deltat",
    "julian_day_from_datetime",
    "datetime_from_julian_day",
    "julian_day_midnight",
    "julian_day_midnight_dynamical_time",
    "jd_at_utc",
    # Sidereal time and nutation
    "mean_sidereal_time",
    "apparent_sidereal_time",
    "nutation",
    "mean_obliquity",
    "true_obliquity",
    # Coordinates
    "EquatorialCoordinates",
    "GeographicCoordinates",
    "HorizontalCoordinates",
    "EclipticCoordinates",
    "equatorial_to_horizontal",
    "ecliptic_to_equatorial",
    # Interpolation
    "interpolate",
    "interpolate_angles",
    # Sexagesimal
    "Sexagesimal",
    "to_sexagesimal",
    "from_sexagesimal",
    "format_sexagesimal",
    # Rise, transit and set
    "RiseTransitSet",
    "RiseSetEvent",
    "Transit",
    "get_rise_transit_set_times",
    "get_accurate_rise_transit_set_times",
    "sun",
    # Configuration
    "set_data_path",
    "set_high_precision",
    "set_precision_digits",
    "set_default_iterations",
    # Utilities
    "fmod",
    "fmod360",
    "fmod180",
    "fmod90",
    "fmod24",
    "difdeg2n",
    # Constants
    "STANDARD_ALTITUDE_STARS",
    "STANDARD_ALTITUDE_SUN",
    "STANDARD_ALTITUDE_MOON",
    "SUN_EVENTS_ALTITUDES",
    "J2000",
    "GREG_CAL",
    "JUL_CAL",
    "H2DEG",
    "DEG2H",
]
