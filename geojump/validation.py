"""
Coordinate range validation module.

Provides the range and structural checks shared by the parser (after a
notation has been converted to decimal degrees) and by direct Coordinate
construction. Validation is purely numeric: it knows nothing about
notations.
"""

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Any, Tuple

logger = logging.getLogger(__name__)


# Geographic range constants (both bounds inclusive)
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

# Zoom hint range, matching the map-control slider
MIN_ZOOM = 1
MAX_ZOOM = 18


@dataclass(frozen=True)
class RangeViolation:
    """A single axis value that falls outside its valid domain.

    Attributes:
        axis: Name of the offending axis ("latitude" or "longitude").
        value: The rejected value as supplied by the caller.
        minimum: Lower bound of the valid range (inclusive).
        maximum: Upper bound of the valid range (inclusive).
    """

    axis: str
    value: Any
    minimum: float
    maximum: float

    @property
    def message(self) -> str:
        """Human-readable description of the violation."""
        if not _is_valid_finite_number(self.value):
            if isinstance(self.value, numbers.Number) and not isinstance(self.value, bool):
                return (
                    f"{self.axis} must be a finite number, got {self.value} "
                    f"(NaN and Infinity are not allowed)"
                )
            return f"{self.axis} must be a number, got {type(self.value).__name__}"
        return (
            f"{self.axis} {self.value} outside valid range "
            f"[{self.minimum}, {self.maximum}]"
        )


class CoordinateRangeError(ValueError):
    """Raised when a Coordinate is constructed directly from invalid values.

    The parser never raises this; it reports range problems through
    ParseFailure instead.
    """

    def __init__(self, violations: Tuple[RangeViolation, ...]):
        self.violations = violations
        super().__init__("; ".join(v.message for v in violations))


def _is_valid_finite_number(value: Any) -> bool:
    """Check if a value is a valid finite real number.

    Args:
        value: Value to check

    Returns:
        True if value is a finite int or float (bool excluded), False otherwise
    """
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        return False

    try:
        if math.isnan(value) or math.isinf(value):
            return False
    except (TypeError, ValueError):
        return False

    return True


def is_valid_latitude(latitude: Any) -> bool:
    """Return True if latitude is finite and within [-90, 90]."""
    return _is_valid_finite_number(latitude) and MIN_LATITUDE <= latitude <= MAX_LATITUDE


def is_valid_longitude(longitude: Any) -> bool:
    """Return True if longitude is finite and within [-180, 180].

    Both antimeridian values are valid; 180 and -180 are not collapsed.
    """
    return _is_valid_finite_number(longitude) and MIN_LONGITUDE <= longitude <= MAX_LONGITUDE


def is_valid_zoom(zoom: Any) -> bool:
    """Return True if zoom is an integer within [1, 18]."""
    if not isinstance(zoom, numbers.Integral) or isinstance(zoom, bool):
        return False
    return MIN_ZOOM <= zoom <= MAX_ZOOM


def validate(latitude: Any, longitude: Any) -> Tuple[RangeViolation, ...]:
    """Validate a latitude/longitude pair.

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees

    Returns:
        Tuple of RangeViolation, one per invalid axis. An empty tuple means
        the pair is valid.

    Example:
        >>> validate(90, 0)
        ()
        >>> [v.axis for v in validate(91, 181)]
        ['latitude', 'longitude']
    """
    violations = []

    if not is_valid_latitude(latitude):
        violations.append(
            RangeViolation('latitude', latitude, MIN_LATITUDE, MAX_LATITUDE)
        )

    if not is_valid_longitude(longitude):
        violations.append(
            RangeViolation('longitude', longitude, MIN_LONGITUDE, MAX_LONGITUDE)
        )

    if violations:
        logger.debug(f"Validation failed for ({latitude}, {longitude}): {len(violations)} violation(s)")

    return tuple(violations)
