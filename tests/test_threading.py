"""
Thread safety test for the rise/transit/set computations.

Each high-precision call owns a private mpmath context, so concurrent calls
must give exactly the results of sequential ones.
"""

import concurrent.futures

import pytest
from libmeeus.coordinates import EquatorialCoordinates, GeographicCoordinates
from libmeeus.precision import HighPrecisionArithmetic
from libmeeus.risetransitset import get_accurate_rise_transit_set_times

LOCATIONS = [
    (0, 0.0, 0.0),  # Equator
    (1, 12.5, 41.9),  # Rome
    (2, -0.1, 51.5),  # London
    (3, 139.7, 35.7),  # Tokyo
    (4, -74.0, 40.7),  # New York
    (5, 151.2, -33.9),  # Sydney
    (6, -122.4, 37.8),  # San Francisco
    (7, 2.3, 48.9),  # Paris
    (8, 13.4, 52.5),  # Berlin
    (9, -43.2, -22.9),  # Rio de Janeiro
]


@pytest.mark.integration
class TestConcurrentCalls:
    """Concurrent callers do not interfere with each other."""

    def test_concurrent_results_match_sequential(self, venus_jd, venus_samples):
        def calculate_for_location(worker_id, lon, lat):
            geo = GeographicCoordinates(longitude=lon, latitude=lat)
            result = get_accurate_rise_transit_set_times(
                venus_jd, venus_samples, geo, iterations=2, high_precision=True
            )
            return worker_id, result

        sequential = dict(calculate_for_location(*loc) for loc in LOCATIONS)

        with concurrent.futures.ThreadPoolExecutor(max_workers=10) as executor:
            futures = [
                executor.submit(calculate_for_location, wid, lon, lat)
                for wid, lon, lat in LOCATIONS
            ]
            concurrent_results = dict(f.result() for f in futures)

        assert concurrent_results == sequential

        # Different sites give different transit times
        transits = {round(r.transit.utc, 4) for r in sequential.values()}
        assert len(transits) > 1

    def test_private_precision_contexts(self):
        def working_precision(dps):
            arithmetic = HighPrecisionArithmetic(dps)
            value = arithmetic.number("1") / 3
            return arithmetic.dps, len(str(value))

        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(working_precision, [20, 40, 60, 80]))

        assert [dps for dps, _ in results] == [20, 40, 60, 80]
        lengths = [length for _, length in results]
        assert lengths == sorted(lengths)
        assert len(set(lengths)) == 4
