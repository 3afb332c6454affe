"""
Global state management for libmeeus.

This module maintains the library's configuration:
- Skyfield data loader and timescale (Delta T tables, nutation)
- Default numeric-precision strategy (native floats or mpmath)
- Working precision of the mpmath strategy
- Default number of refinement iterations for accurate rise/transit/set

All configuration is stored in module-level globals and read at call time.
Computations never write to it, so concurrent calls are safe as long as
the configuration is not changed while they run.
"""

import logging
import os
from typing import Optional

from skyfield.api import Loader
from skyfield.timelib import Timescale

from .constants import (
    DEFAULT_ITERATIONS,
    DEFAULT_PRECISION_DIGITS,
    MIN_PRECISION_DIGITS,
)

logger = logging.getLogger(__name__)

# =============================================================================
# GLOBAL STATE VARIABLES
# =============================================================================

_DATA_PATH: Optional[str] = None  # Custom Skyfield data directory
_LOADER: Optional[Loader] = None  # Skyfield data loader
_TS: Optional[Timescale] = None  # Timescale object
_HIGH_PRECISION: bool = True  # Default numeric strategy
_PRECISION_DIGITS: int = DEFAULT_PRECISION_DIGITS  # mpmath decimal digits
_ITERATIONS: int = DEFAULT_ITERATIONS  # Accurate rise/transit/set iterations


def get_loader() -> Loader:
    """
    Get or create the Skyfield data loader.

    Returns:
        Loader: Skyfield Loader instance

    Note:
        Data files are cached in the parent directory of this module unless
        a directory was configured with set_data_path().
    """
    global _LOADER
    if _LOADER is None:
        data_dir = _DATA_PATH or os.path.join(os.path.dirname(__file__), "..")
        logger.debug("Creating Skyfield loader in %s", data_dir)
        _LOADER = Loader(data_dir, verbose=False)
    return _LOADER


def get_timescale() -> Timescale:
    """
    Get or create the Skyfield timescale object.

    Returns:
        Timescale: Skyfield timescale for time conversions (UT1, TT, Delta T)

    Note:
        Uses the Delta T and leap second tables bundled with Skyfield, so no
        file is ever downloaded.
    """
    global _TS
    if _TS is None:
        _TS = get_loader().timescale(builtin=True)
    return _TS


def set_data_path(path: Optional[str]) -> None:
    """
    Set the directory used by the Skyfield loader.

    Args:
        path: Directory for Skyfield data files, or None for the default

    Note:
        Clears the cached loader and timescale to force their re-creation.
    """
    global _DATA_PATH, _LOADER, _TS
    _DATA_PATH = path
    _LOADER = None
    _TS = None


def get_data_path() -> Optional[str]:
    return _DATA_PATH


def set_high_precision(flag: bool) -> None:
    """
    Select the default numeric strategy.

    Args:
        flag: True for arbitrary-precision mpmath arithmetic (default),
            False for native floats

    Note:
        Functions taking a ``high_precision`` argument use this default when
        the argument is None.
    """
    global _HIGH_PRECISION
    _HIGH_PRECISION = bool(flag)


def get_high_precision() -> bool:
    return _HIGH_PRECISION


def set_precision_digits(dps: int) -> None:
    """
    Set the working precision of the arbitrary-precision strategy.

    Args:
        dps: Number of significant decimal digits

    Raises:
        ValueError: If dps is not an integer >= MIN_PRECISION_DIGITS
    """
    global _PRECISION_DIGITS
    if isinstance(dps, bool) or not isinstance(dps, int) or dps < MIN_PRECISION_DIGITS:
        raise ValueError(
            f"Precision digits must be an integer >= {MIN_PRECISION_DIGITS}, got {dps!r}"
        )
    _PRECISION_DIGITS = dps


def get_precision_digits() -> int:
    return _PRECISION_DIGITS


def set_default_iterations(iterations: int) -> None:
    """
    Set the default number of refinement iterations of the accurate
    rise/transit/set computation.

    Args:
        iterations: Positive number of iterations

    Raises:
        ValueError: If iterations is not a positive integer
    """
    global _ITERATIONS
    _ITERATIONS = validate_iterations(iterations)


def get_default_iterations() -> int:
    return _ITERATIONS


def validate_iterations(iterations) -> int:
    """Return iterations unchanged if it is a positive int, else raise ValueError."""
    if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 1:
        raise ValueError(
            f"Iterations must be a positive integer, got {iterations!r}"
        )
    return iterations


def reset() -> None:
    """
    Restore every setting to its default.

    Use this between unrelated calculation contexts (and in tests).
    """
    global _HIGH_PRECISION, _PRECISION_DIGITS, _ITERATIONS
    _HIGH_PRECISION = True
    _PRECISION_DIGITS = DEFAULT_PRECISION_DIGITS
    _ITERATIONS = DEFAULT_ITERATIONS
    set_data_path(None)
