"""
Sidereal Time Comparison Script

Compares Greenwich and local apparent sidereal time between pyswisseph and
libmeeus, with both float and mpmath arithmetic, across several dates.
"""

import swisseph as swe
import libmeeus as meeus
from comparison_utils import (
    format_diff,
    format_hours,
    format_status,
    hours_diff_seconds,
    TestStatistics,
    print_header,
    parse_args,
    ALL_SUBJECTS,
    Tolerances,
)
import sys

# Extra epochs far from J2000, where Delta T and precession terms grow
EXTRA_DATES = [
    (1600, 1, 1, 0.0),
    (1850, 7, 14, 18.5),
    (1987, 4, 10, 19.0 + 21.0 / 60.0),  # AA example 12.b
    (2100, 12, 31, 23.9),
]

# ============================================================================
# COMPARISON FUNCTIONS
# ============================================================================


def compare_sidereal_time(
    subject_name: str,
    date_str: str,
    jd: float,
    lon: float,
    high_precision: bool,
    verbose: bool = False,
) -> tuple:
    """
    Compare local apparent sidereal time for one instant and longitude.

    Returns:
        (passed, diff_seconds, error_occurred)
    """
    mode = "mp" if high_precision else "fl"

    try:
        # swe.sidtime is Greenwich apparent sidereal time, hours
        st_swe = (swe.sidtime(jd) + lon / 15.0) % 24.0
    except Exception as e:
        if verbose:
            print(f"[{subject_name}] [{date_str}] [{mode}]: SWE ERROR {e}")
        return False, 0.0, True

    try:
        st_py = meeus.apparent_sidereal_time(jd, lon, high_precision=high_precision)
    except Exception as e:
        if verbose:
            print(f"[{subject_name}] [{date_str}] [{mode}]: PY ERROR {e}")
        return False, 0.0, True

    diff = hours_diff_seconds(st_swe, st_py)
    passed = diff < Tolerances.SIDEREAL_SECONDS
    status = format_status(passed)

    if verbose:
        print(f"\n{'=' * 80}")
        print(f"{subject_name} - {date_str} - lon {lon:.4f} - {mode}")
        print(f"{'=' * 80}")
        print(
            f"  LAST:  SWE={format_hours(st_swe)}h  PY={format_hours(st_py)}h  "
            f"Diff={format_diff(diff)}s"
        )
        print(f"  Text:  {meeus.format_sexagesimal(st_py)}")
        print(f"\nStatus: {'PASSED ✓' if passed else 'FAILED ✗'}")
    else:
        print(
            f"[{subject_name:<20}] [{date_str}] [{mode}] "
            f"LAST={format_hours(st_swe)}/{format_hours(st_py)} "
            f"Diff={format_diff(diff)}s {status}"
        )

    return passed, diff, False


# ============================================================================
# MAIN COMPARISON RUNNER
# ============================================================================


def run_all_comparisons(verbose: bool = False, float_only: bool = False) -> tuple:
    """
    Run all sidereal time comparison tests.

    Args:
        verbose: If True, print detailed output
        float_only: If True, skip the mpmath arithmetic runs

    Returns:
        (passed_count, total_count)
    """
    print_header("SIDEREAL TIME COMPARISON")

    stats = TestStatistics()
    modes = [False] if float_only else [False, True]

    print("\n--- Local Apparent Sidereal Time ---\n")
    for name, year, month, day, hour, lat, lon, alt in ALL_SUBJECTS:
        jd = swe.julday(year, month, day, hour)
        date_str = f"{year}-{month:02d}-{day:02d}"
        for high_precision in modes:
            passed, diff, error = compare_sidereal_time(
                subject_name=name,
                date_str=date_str,
                jd=jd,
                lon=lon,
                high_precision=high_precision,
                verbose=verbose,
            )
            stats.add_result(passed, diff, error)

    print("\n--- Greenwich Apparent Sidereal Time ---\n")
    for year, month, day, hour in EXTRA_DATES:
        jd = swe.julday(year, month, day, hour)
        date_str = f"{year}-{month:02d}-{day:02d}"
        for high_precision in modes:
            passed, diff, error = compare_sidereal_time(
                subject_name="Greenwich",
                date_str=date_str,
                jd=jd,
                lon=0.0,
                high_precision=high_precision,
                verbose=verbose,
            )
            stats.add_result(passed, diff, error)

    stats.print_summary("SIDEREAL TIME COMPARISON SUMMARY")

    return stats.passed, stats.total


# ============================================================================
# COMMAND LINE INTERFACE
# ============================================================================


def print_help():
    """Print usage help."""
    print("Usage: python compare_sidereal.py [OPTIONS]")
    print()
    print("Options:")
    print("  -v, --verbose           Show detailed output for each test")
    print("  --float-only            Skip the high precision (mpmath) runs")
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
        float_only="--float-only" in sys.argv,
    )

    # Exit with appropriate code
    sys.exit(0 if passed == total else 1)


if __name__ == "__main__":
    main()
