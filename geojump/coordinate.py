"""Canonical coordinate model and supported notations."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional

from geojump.types import Degrees, ZoomLevel
from geojump.validation import (
    MAX_ZOOM,
    MIN_ZOOM,
    CoordinateRangeError,
    RangeViolation,
    is_valid_zoom,
    validate,
)

DEFAULT_ZOOM_LEVEL = ZoomLevel(10)


class Notation(Enum):
    """Enumeration of supported textual coordinate notations."""

    DECIMAL_DEGREES = "decimal_degrees"
    """One signed real number per axis, e.g. ``40.7128, -74.0060``.
    Also accepted with a cardinal letter, e.g. ``37.7749° N, 122.4194° W``."""

    DEGREES_MINUTES_SECONDS = "degrees_minutes_seconds"
    """Sexagesimal subdivision, e.g. ``40°42'46"N 74°0'21"W``."""

    DEGREES_DECIMAL_MINUTES = "degrees_decimal_minutes"
    """Whole degrees with decimal minutes, e.g. ``40°42.767'N 74°0.35'W``."""

    @property
    def label(self) -> str:
        """Human-readable name of the notation."""
        return _LABELS[self]

    @property
    def example(self) -> str:
        """Concrete example of text written in this notation."""
        return FORMAT_EXAMPLES[self]


_LABELS = {
    Notation.DECIMAL_DEGREES: "Decimal Degrees",
    Notation.DEGREES_MINUTES_SECONDS: "Degrees, Minutes, Seconds",
    Notation.DEGREES_DECIMAL_MINUTES: "Degrees, Decimal Minutes",
}

FORMAT_EXAMPLES = {
    Notation.DECIMAL_DEGREES: "40.7128, -74.0060",
    Notation.DEGREES_MINUTES_SECONDS: "40°42'46\"N 74°0'21\"W",
    Notation.DEGREES_DECIMAL_MINUTES: "40°42.767'N 74°0.35'W",
}


@dataclass(frozen=True)
class Coordinate:
    """Geographic point in signed decimal degrees.

    Every instance is range-validated on construction, so an out-of-range
    Coordinate cannot exist.

    Attributes:
        latitude: Latitude in degrees, [-90, 90].
        longitude: Longitude in degrees, [-180, 180]. 180 and -180 are
            kept distinct.
        zoom: Optional map zoom hint, [1, 18]. Carries no geographic meaning.

    Raises:
        CoordinateRangeError: If any value is outside its domain.
    """

    latitude: Degrees
    longitude: Degrees
    zoom: Optional[ZoomLevel] = None

    def __post_init__(self) -> None:
        violations = validate(self.latitude, self.longitude)
        if self.zoom is not None and not is_valid_zoom(self.zoom):
            violations += (RangeViolation('zoom', self.zoom, MIN_ZOOM, MAX_ZOOM),)
        if violations:
            raise CoordinateRangeError(violations)

    @property
    def lat(self) -> Degrees:
        """Alias for latitude."""
        return self.latitude

    @property
    def lon(self) -> Degrees:
        """Alias for longitude."""
        return self.longitude

    def with_zoom(self, zoom: Optional[int]) -> "Coordinate":
        """Return a copy carrying the given zoom hint (None clears it)."""
        return replace(self, zoom=zoom)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data form consumed by a map host.

        Returns:
            Dictionary with 'lat' and 'lon', plus 'zoom' when a hint is set.
        """
        data: Dict[str, Any] = {'lat': self.latitude, 'lon': self.longitude}
        if self.zoom is not None:
            data['zoom'] = self.zoom
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Coordinate":
        """Create a Coordinate from plain data.

        Accepts either 'lat'/'lon' or 'latitude'/'longitude' keys, and an
        optional 'zoom'.

        Raises:
            ValueError: If a required key is missing or a value is invalid.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Coordinate data must be a dictionary, got {type(data)}")

        latitude = data.get('lat', data.get('latitude'))
        longitude = data.get('lon', data.get('longitude'))
        if latitude is None or longitude is None:
            raise ValueError(
                "Coordinate data requires 'lat' and 'lon' (or 'latitude' and 'longitude') keys"
            )

        return cls(latitude=latitude, longitude=longitude, zoom=data.get('zoom'))
