"""
Sunrise/Transit/Sunset Comparison Script

Compares the rise, transit and set times of the Sun between pyswisseph
(swe.rise_trans, Moshier ephemeris) and libmeeus, for the approximate
and the accurate computations.
"""

import swisseph as swe
import libmeeus as meeus
from libmeeus import sun
from libmeeus.coordinates import GeographicCoordinates
from comparison_utils import (
    format_diff,
    format_hours,
    format_status,
    time_diff_minutes,
    TestStatistics,
    print_header,
    parse_args,
    ALL_SUBJECTS,
    Tolerances,
)
import sys

EVENTS = {
    "rise": swe.CALC_RISE,
    "transit": swe.CALC_MTRANSIT,
    "set": swe.CALC_SET,
}

# ============================================================================
# COMPARISON FUNCTIONS
# ============================================================================


def swe_event(jd_start: float, event: str, lon: float, lat: float, alt: float):
    """Next event after jd_start from SwissEph, or None when it does not occur."""
    flags = swe.FLG_MOSEPH
    res, tret = swe.rise_trans(
        jd_start, swe.SUN, EVENTS[event], (lon, lat, alt), 0.0, 0.0, flags
    )
    # -2 means circumpolar
    if res == -2:
        return None
    return tret[0]


def compare_riseset(
    subject_name: str,
    date_str: str,
    jd: float,
    lat: float,
    lon: float,
    alt: float,
    accurate: bool,
    verbose: bool = False,
) -> list:
    """
    Compare sunrise, transit and sunset on one day at one location.

    Returns:
        list of (passed, diff_minutes, error_occurred), one per event
    """
    mode = "acc" if accurate else "apx"
    geo = GeographicCoordinates(longitude=lon, latitude=lat, height=alt)

    try:
        if accurate:
            result = sun.get_accurate_rise_transit_set(jd, geo, high_precision=False)
        else:
            result = sun.get_rise_transit_set(jd, geo, high_precision=False)
    except Exception as e:
        if verbose:
            print(f"[{subject_name}] [{date_str}] [{mode}]: PY ERROR {e}")
        return [(False, 0.0, True)]

    transit_jd = result.transit.julian_day
    starts = {
        "rise": transit_jd - 0.75,
        "transit": transit_jd - 0.5,
        "set": transit_jd,
    }
    ours = {
        "rise": result.rise.julian_day,
        "transit": transit_jd,
        "set": result.set.julian_day,
    }
    tolerance = (
        Tolerances.RISESET_ACCURATE if accurate else Tolerances.RISESET_APPROXIMATE
    )

    outcomes = []
    for event in EVENTS:
        try:
            jd_swe = swe_event(starts[event], event, lon, lat, alt)
        except Exception as e:
            if verbose:
                print(f"[{subject_name}] [{date_str}] [{mode}] {event}: SWE ERROR {e}")
            outcomes.append((False, 0.0, True))
            continue

        jd_py = ours[event]
        if event != "transit" and (jd_swe is None or jd_py is None):
            # Both must agree that the Sun does not cross the horizon
            passed = jd_swe is None and jd_py is None
            diff = 0.0
            text = "circumpolar" if passed else f"SWE={jd_swe} PY={jd_py}"
        else:
            diff = time_diff_minutes(jd_swe, jd_py)
            limit = Tolerances.TRANSIT if event == "transit" else tolerance
            passed = diff < limit
            text = (
                f"SWE={format_hours(jd_swe, 5, 13)} PY={format_hours(jd_py, 5, 13)} "
                f"Diff={format_diff(diff, 2, 6)}min"
            )

        status = format_status(passed)
        if verbose:
            utc = meeus.revjul(jd_py)[3] if jd_py is not None else None
            when = meeus.format_sexagesimal(utc) if utc is not None else "-"
            print(
                f"{subject_name} - {date_str} - {mode} - {event:<8} {text} "
                f"UT={when} {status}"
            )
        else:
            print(f"[{subject_name:<20}] [{date_str}] [{mode}] {event:<8} {text} {status}")

        outcomes.append((passed, diff, False))

    return outcomes


# ============================================================================
# MAIN COMPARISON RUNNER
# ============================================================================


def run_all_comparisons(verbose: bool = False, accurate_only: bool = False) -> tuple:
    """
    Run all rise/transit/set comparison tests.

    Args:
        verbose: If True, print detailed output
        accurate_only: If True, skip the approximate computation

    Returns:
        (passed_count, total_count)
    """
    print_header("SUNRISE/TRANSIT/SUNSET COMPARISON")

    stats = TestStatistics()
    modes = [True] if accurate_only else [False, True]

    for name, year, month, day, hour, lat, lon, alt in ALL_SUBJECTS:
        jd = swe.julday(year, month, day, 0.0)
        date_str = f"{year}-{month:02d}-{day:02d}"
        for accurate in modes:
            for passed, diff, error in compare_riseset(
                subject_name=name,
                date_str=date_str,
                jd=jd,
                lat=lat,
                lon=lon,
                alt=alt,
                accurate=accurate,
                verbose=verbose,
            ):
                stats.add_result(passed, diff, error)

    stats.print_summary("SUNRISE/TRANSIT/SUNSET COMPARISON SUMMARY")

    return stats.passed, stats.total


# ============================================================================
# COMMAND LINE INTERFACE
# ============================================================================


def print_help():
    """Print usage help."""
    print("Usage: python compare_riseset.py [OPTIONS]")
    print()
    print("Options:")
    print("  -v, --verbose           Show detailed output for each test")
    print("  --accurate-only         Test only the iterative computation")
    print("  -h, --help              Show this help message")
    print()


def main():
    """Main entry point."""
    args = parse_args(sys.argv)

    if args["help"]:
        print_help()
        sys.exit(0)

    passed, total = run_all_comparisons(
        verbose=args["verbose"],
        accurate_only="--accurate-only" in sys.argv,
    )

    # Exit with appropriate code
    sys.exit(0 if passed == total else 1)


if __name__ == "__main__":
    main()
