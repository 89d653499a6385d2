"""
Unit type annotations for coordinate components.

This module defines NewType aliases for the angular units and display hints
used across the geojump package. They document expected units in function
signatures and let static type checkers catch mix-ups (e.g. passing minutes
where degrees are expected) while remaining transparent at runtime.

Usage Example:
    >>> from geojump.types import Degrees, Minutes, Seconds
    >>>
    >>> def to_decimal(deg: Degrees, mins: Minutes, secs: Seconds) -> Degrees:
    ...     return Degrees(deg + mins / 60 + secs / 3600)
"""

from typing import NewType

# Angular units
Degrees = NewType('Degrees', float)
"""Angle in decimal degrees (e.g., latitude, longitude)"""

Minutes = NewType('Minutes', float)
"""Arc-minutes, 1/60 of a degree (whole or decimal)"""

Seconds = NewType('Seconds', float)
"""Arc-seconds, 1/3600 of a degree"""

# Display hints
ZoomLevel = NewType('ZoomLevel', int)
"""Map zoom hint attached to a coordinate (1 = whole world, 18 = street level)"""
