"""
Angle conversion utilities.

This module provides pure functions for converting between signed decimal
degrees and the sexagesimal components used by the DMS (degrees, minutes,
seconds) and DDM (degrees, decimal minutes) notations.
"""

import math
from typing import NamedTuple, Optional, Union

from geojump.types import Degrees, Minutes, Seconds

# Number of decimal places reported for the fractional component
SECONDS_PRECISION = 2
MINUTES_PRECISION = 3

LATITUDE_CARDINALS = frozenset("NS")
LONGITUDE_CARDINALS = frozenset("EW")
NEGATIVE_CARDINALS = frozenset("SW")


class AngleComponents(NamedTuple):
    """Sexagesimal breakdown of one axis value.

    Attributes:
        degrees: Whole degrees (non-negative).
        minutes: Whole minutes for DMS, decimal minutes for DDM.
        seconds: Seconds for DMS, None for DDM.
        cardinal: Hemisphere letter (N/S for latitude, E/W for longitude).
    """

    degrees: int
    minutes: Union[int, float]
    seconds: Optional[float]
    cardinal: str


def cardinal_for(value: float, is_latitude: bool) -> str:
    """Return the hemisphere letter for a signed value.

    Zero (including -0.0) is treated as non-negative and maps to N or E.
    """
    if is_latitude:
        return 'N' if value >= 0 else 'S'
    return 'E' if value >= 0 else 'W'


def axis_for(cardinal: str) -> Optional[bool]:
    """Return True for a latitude letter, False for a longitude letter, else None."""
    letter = cardinal.upper()
    if letter in LATITUDE_CARDINALS:
        return True
    if letter in LONGITUDE_CARDINALS:
        return False
    return None


def apply_cardinal(magnitude: float, cardinal: str) -> float:
    """Negate magnitude for the southern and western hemispheres."""
    if cardinal.upper() in NEGATIVE_CARDINALS:
        return -magnitude
    return magnitude


def dms_to_decimal(
    degrees: float,
    minutes: Minutes,
    seconds: Seconds,
    cardinal: str
) -> Optional[Degrees]:
    """
    Convert degrees, minutes, seconds to signed decimal degrees.

    Args:
        degrees: Whole degrees (must be non-negative)
        minutes: Minutes in [0, 60)
        seconds: Seconds in [0, 60)
        cardinal: Hemisphere letter; S and W produce a negative result

    Returns:
        Decimal degrees, or None if any component is outside its domain

    Example:
        >>> round(dms_to_decimal(40, 42, 46, 'N'), 4)
        40.7128
    """
    if degrees < 0 or minutes < 0 or seconds < 0 or minutes >= 60 or seconds >= 60:
        return None

    dd = degrees + minutes / 60 + seconds / 3600
    return Degrees(apply_cardinal(dd, cardinal))


def ddm_to_decimal(degrees: float, minutes: Minutes, cardinal: str) -> Optional[Degrees]:
    """
    Convert degrees and decimal minutes to signed decimal degrees.

    Args:
        degrees: Whole degrees (must be non-negative)
        minutes: Decimal minutes in [0, 60)
        cardinal: Hemisphere letter; S and W produce a negative result

    Returns:
        Decimal degrees, or None if any component is outside its domain
    """
    if degrees < 0 or minutes < 0 or minutes >= 60:
        return None

    dd = degrees + minutes / 60
    return Degrees(apply_cardinal(dd, cardinal))


def decimal_to_dms(value: float, is_latitude: bool) -> AngleComponents:
    """
    Break a signed decimal-degree value into degrees, minutes and seconds.

    Seconds are rounded to SECONDS_PRECISION places. A rounding result of
    60 seconds is carried into the minutes (and 60 minutes into the
    degrees) so the components always stay parseable.

    Args:
        value: Signed decimal degrees
        is_latitude: True for the latitude axis (N/S), False for longitude (E/W)

    Returns:
        AngleComponents with integer degrees and minutes and float seconds
    """
    absolute = abs(value)
    degrees = math.floor(absolute)
    minutes_float = (absolute - degrees) * 60
    minutes = math.floor(minutes_float)
    seconds = round((minutes_float - minutes) * 60, SECONDS_PRECISION)

    if seconds >= 60:
        seconds = 0.0
        minutes += 1
    if minutes >= 60:
        minutes = 0
        degrees += 1

    return AngleComponents(int(degrees), int(minutes), seconds, cardinal_for(value, is_latitude))


def decimal_to_ddm(value: float, is_latitude: bool) -> AngleComponents:
    """
    Break a signed decimal-degree value into degrees and decimal minutes.

    Minutes are rounded to MINUTES_PRECISION places, carrying 60 minutes
    into the degrees.

    Args:
        value: Signed decimal degrees
        is_latitude: True for the latitude axis (N/S), False for longitude (E/W)

    Returns:
        AngleComponents with integer degrees, float minutes and seconds=None
    """
    absolute = abs(value)
    degrees = math.floor(absolute)
    minutes = round((absolute - degrees) * 60, MINUTES_PRECISION)

    if minutes >= 60:
        minutes = 0.0
        degrees += 1

    return AngleComponents(int(degrees), minutes, None, cardinal_for(value, is_latitude))
