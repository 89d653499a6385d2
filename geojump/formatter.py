"""Render canonical coordinates as text in any supported notation."""

import logging
from typing import Union

from geojump.converters import decimal_to_ddm, decimal_to_dms
from geojump.coordinate import Coordinate, Notation

logger = logging.getLogger(__name__)

DECIMAL_PLACES = 6


def _resolve_notation(notation: Union[Notation, str, None]) -> Notation:
    """Map a notation or its string value to a Notation, defaulting to decimal degrees."""
    if isinstance(notation, Notation):
        return notation
    try:
        return Notation(notation)
    except ValueError:
        logger.debug(f"Unknown notation {notation!r}, falling back to decimal degrees")
        return Notation.DECIMAL_DEGREES


def _format_axis(value: float, notation: Notation, is_latitude: bool) -> str:
    if notation is Notation.DEGREES_MINUTES_SECONDS:
        deg, mins, secs, cardinal = decimal_to_dms(value, is_latitude)
        return f"{deg}°{mins}'{secs:.2f}\"{cardinal}"

    if notation is Notation.DEGREES_DECIMAL_MINUTES:
        deg, mins, _, cardinal = decimal_to_ddm(value, is_latitude)
        return f"{deg}°{mins:.3f}'{cardinal}"

    # Signed zero renders without a minus sign
    return f"{value + 0.0:.{DECIMAL_PLACES}f}"


def format_latitude(value: float, notation: Union[Notation, str] = Notation.DECIMAL_DEGREES) -> str:
    """Render a single latitude value, e.g. ``40°42'46.08"N``."""
    return _format_axis(value, _resolve_notation(notation), is_latitude=True)


def format_longitude(value: float, notation: Union[Notation, str] = Notation.DECIMAL_DEGREES) -> str:
    """Render a single longitude value, e.g. ``74°0'21.60"W``."""
    return _format_axis(value, _resolve_notation(notation), is_latitude=False)


def format_coordinate(
    coordinate: Coordinate,
    notation: Union[Notation, str] = Notation.DECIMAL_DEGREES
) -> str:
    """
    Format a coordinate in the requested notation.

    Decimal degrees use six fixed decimal places separated by a comma and a
    space and can be fed straight back to the parser. DMS and DDM render
    latitude then longitude separated by a single space, with seconds to two
    places and decimal minutes to three. An unknown notation falls back to
    decimal degrees.

    Args:
        coordinate: Coordinate to render
        notation: Target notation (member or string value)

    Returns:
        Formatted coordinate text

    Example:
        >>> format_coordinate(Coordinate(40.7128, -74.006))
        '40.712800, -74.006000'
        >>> format_coordinate(Coordinate(40.7128, -74.006), Notation.DEGREES_DECIMAL_MINUTES)
        "40°42.768'N 74°0.360'W"
    """
    resolved = _resolve_notation(notation)
    lat_text = _format_axis(coordinate.latitude, resolved, is_latitude=True)
    lon_text = _format_axis(coordinate.longitude, resolved, is_latitude=False)

    if resolved is Notation.DECIMAL_DEGREES:
        return f"{lat_text}, {lon_text}"
    return f"{lat_text} {lon_text}"
