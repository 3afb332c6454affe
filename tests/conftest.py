"""
pytest configuration and shared fixtures for libmeeus tests.
"""

import pytest
import libmeeus as meeus
from libmeeus import state
from libmeeus.coordinates import EquatorialCoordinates, GeographicCoordinates
from libmeeus.constants import *
from libmeeus.sexagesimal import from_sexagesimal


# ============================================================================
# TEST DATA FIXTURES
# ============================================================================


@pytest.fixture
def standard_jd():
    """Standard Julian Day for testing (J2000.0)."""
    return 2451545.0  # 2000-01-01 12:00:00 TT


@pytest.fixture
def test_dates():
    """Collection of test dates spanning different eras."""
    return [
        (2000, 1, 1, 12.0, "J2000"),
        (1980, 5, 20, 0.0, "Past"),
        (2024, 11, 5, 18.0, "Recent"),
        (1950, 10, 15, 6.0, "Mid-century"),
    ]


@pytest.fixture
def test_locations():
    """Collection of test locations with various latitudes."""
    return [
        ("Rome", 41.9028, 12.4964, 0),
        ("London", 51.5074, -0.1278, 0),
        ("New York", 40.7128, -74.0060, 0),
        ("Sydney", -33.8688, 151.2093, 0),
        ("Tromso", 69.6492, 18.9553, 0),  # Arctic
        ("McMurdo", -77.8419, 166.6863, 0),  # Antarctic
        ("Equator", 0.0, 0.0, 0),  # Equator
    ]


@pytest.fixture
def boston():
    """Boston, the observer of AA ex.15.a."""
    return GeographicCoordinates(longitude=-71.0833, latitude=42.3333)


@pytest.fixture
def venus_jd():
    """1988 March 20, 0h UT (AA ex.15.a)."""
    return meeus.julday(1988, 3, 20, 0.0)


@pytest.fixture
def venus_coords():
    """Apparent position of Venus on 1988 March 20 at 0h TD."""
    return EquatorialCoordinates(right_ascension=41.73129, declination=18.44092)


@pytest.fixture
def venus_samples():
    """Apparent positions of Venus on 1988 March 19, 20 and 21 at 0h TD."""
    return [
        EquatorialCoordinates(
            from_sexagesimal(2, 42, 43.25) * H2DEG, from_sexagesimal(18, 2, 54.4)
        ),
        EquatorialCoordinates(
            from_sexagesimal(2, 46, 55.51) * H2DEG, from_sexagesimal(18, 26, 27.3)
        ),
        EquatorialCoordinates(
            from_sexagesimal(2, 51, 7.69) * H2DEG, from_sexagesimal(18, 49, 38.7)
        ),
    ]


# ============================================================================
# TOLERANCE FIXTURES
# ============================================================================


@pytest.fixture
def default_tolerances():
    """Default tolerance values for comparisons."""
    return {
        "julian_day": 1e-10,  # days
        "sidereal": 1e-6,  # hours
        "angle": 1e-4,  # degrees
        "event_minutes": 1.0,  # rise/transit/set, minutes of time
    }


# ============================================================================
# SETUP/TEARDOWN
# ============================================================================


@pytest.fixture(autouse=True)
def reset_library_state():
    """Reset library configuration before and after each test."""
    state.reset()

    yield

    state.reset()


# ============================================================================
# MARKERS
# ============================================================================


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")
