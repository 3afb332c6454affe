"""
Shared utilities for comparison scripts.

This module provides common classes, functions, and constants used across
all comparison scripts in the suite.
"""

from typing import List

# ============================================================================
# TOLERANCE THRESHOLDS
# ============================================================================


class Tolerances:
    """Tolerance thresholds for different comparison types."""

    # Sidereal time tolerance (seconds of time)
    SIDEREAL_SECONDS = 0.1

    # Rise/set tolerances (minutes of time)
    # The approximate path ignores the motion of the body during the day
    RISESET_ACCURATE = 2.0
    RISESET_APPROXIMATE = 5.0

    # Transit tolerance (minutes of time)
    TRANSIT = 1.0


# ============================================================================
# TEST SUBJECTS
# ============================================================================

# Format: (Name, Year, Month, Day, Hour, Lat, Lon, Alt)
STANDARD_SUBJECTS = [
    ("Standard J2000", 2000, 1, 1, 12.0, 0.0, 0.0, 0),
    ("Rome", 1980, 5, 20, 14.5, 41.9028, 12.4964, 0),
    ("New York", 2024, 11, 5, 9.0, 40.7128, -74.0060, 0),
    ("Sydney", 1950, 10, 15, 22.0, -33.8688, 151.2093, 0),
]

HIGH_LATITUDE_SUBJECTS = [
    ("Tromso (Arctic)", 1990, 1, 15, 12.0, 69.6492, 18.9553, 0),
    ("McMurdo (Antarctic)", 2005, 6, 21, 0.0, -77.8463, 166.6681, 0),
]

EQUATORIAL_SUBJECTS = [
    ("Equator", 1975, 3, 21, 12.0, 0.0, 45.0, 0),
]

ALL_SUBJECTS = STANDARD_SUBJECTS + HIGH_LATITUDE_SUBJECTS + EQUATORIAL_SUBJECTS

# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================


def time_diff_minutes(jd1: float, jd2: float) -> float:
    """Absolute difference between two Julian Days, in minutes."""
    return abs(jd1 - jd2) * 1440.0


def hours_diff_seconds(h1: float, h2: float) -> float:
    """Difference between two clock times in hours, accounting for 24h wrap, in seconds."""
    d = abs(h1 - h2) % 24.0
    if d > 12:
        d = 24 - d
    return d * 3600.0


def format_hours(value: float, decimals: int = 6, width: int = 10) -> str:
    """Format clock time value with consistent width."""
    return f"{value:{width}.{decimals}f}"


def format_diff(value: float, decimals: int = 4, width: int = 8) -> str:
    """Format difference value with consistent width."""
    return f"{value:{width}.{decimals}f}"


def format_status(passed: bool) -> str:
    """Format pass/fail status."""
    return "✓" if passed else "✗"


# ============================================================================
# SUMMARY STATISTICS
# ============================================================================


class TestStatistics:
    """Tracks and reports test statistics."""

    def __init__(self):
        self.total = 0
        self.passed = 0
        self.failed = 0
        self.errors = 0
        self.max_diff = 0.0
        self.diff_sum = 0.0

    def add_result(self, passed: bool, diff: float = 0.0, error: bool = False):
        """Add a test result."""
        self.total += 1
        if error:
            self.errors += 1
        elif passed:
            self.passed += 1
        else:
            self.failed += 1

        if not error:
            self.max_diff = max(self.max_diff, diff)
            self.diff_sum += diff

    def avg_diff(self) -> float:
        """Calculate average difference (excluding errors)."""
        count = self.total - self.errors
        return self.diff_sum / count if count > 0 else 0.0

    def pass_rate(self) -> float:
        """Calculate pass rate (excluding errors)."""
        count = self.total - self.errors
        return (self.passed / count * 100) if count > 0 else 0.0

    def print_summary(self, title: str = "SUMMARY"):
        """Print formatted summary."""
        print()
        print("=" * 80)
        print(title)
        print("=" * 80)
        print(f"Total tests:   {self.total}")
        print(f"Passed:        {self.passed} ✓")
        print(f"Failed:        {self.failed} ✗")
        print(f"Errors:        {self.errors}")
        if self.total > self.errors:
            print(f"Pass rate:     {self.pass_rate():.1f}%")
            print(f"Max diff:      {self.max_diff:.6f}")
            print(f"Avg diff:      {self.avg_diff():.6f}")
        print("=" * 80)


# ============================================================================
# COMMAND LINE HELPERS
# ============================================================================


def parse_args(args: List[str]) -> dict:
    """Parse common command line arguments."""
    return {
        "verbose": "--verbose" in args or "-v" in args,
        "quiet": "--quiet" in args or "-q" in args,
        "help": "--help" in args or "-h" in args,
    }


def print_header(title: str):
    """Print formatted header."""
    print("=" * 80)
    print(title)
    print("=" * 80)
    print()
