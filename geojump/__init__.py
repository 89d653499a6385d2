"""
Geographic Coordinate Parsing and Formatting Package.

This package resolves human-entered coordinate text into a normalized
latitude/longitude model and renders canonical coordinates back to text.

Supported notations:
    - Decimal Degrees: "40.7128, -74.0060" or "37.7749° N, 122.4194° W"
    - Degrees, Minutes, Seconds: "40°42'46\"N 74°0'21\"W"
    - Degrees, Decimal Minutes: "40°42.767'N 74°0.35'W"

Example Usage:
    >>> from geojump import parse, format_coordinate, Notation, ParseFailure
    >>>
    >>> result = parse("40°42'46\"N 74°0'21\"W")
    >>> if isinstance(result, ParseFailure):
    ...     print(result.message)
    ... else:
    ...     print(format_coordinate(result, Notation.DECIMAL_DEGREES))
    40.712778, -74.005833

Available Classes:
    Model:
        - Coordinate: Immutable, range-validated latitude/longitude with optional zoom hint
        - Notation: Enum of supported notations

    Parsing:
        - ParseFailure: Failure outcome with kind and user-displayable message
        - FailureKind: EMPTY_INPUT, UNRECOGNIZED_NOTATION, OUT_OF_RANGE
        - InputCheck: Result of check_input

    Validation:
        - RangeViolation: Single out-of-range axis value
        - CoordinateRangeError: Raised by direct Coordinate construction
"""

# Model
from geojump.coordinate import (
    DEFAULT_ZOOM_LEVEL,
    FORMAT_EXAMPLES,
    Coordinate,
    Notation,
)

# Parsing and formatting
from geojump.parser import (
    FailureKind,
    InputCheck,
    ParseFailure,
    ParseResult,
    check_input,
    detect_notation,
    parse,
)
from geojump.formatter import format_coordinate, format_latitude, format_longitude

# Conversion and validation
from geojump.converters import (
    AngleComponents,
    ddm_to_decimal,
    decimal_to_ddm,
    decimal_to_dms,
    dms_to_decimal,
)
from geojump.validation import CoordinateRangeError, RangeViolation, validate

# Configuration
from geojump.config import GeojumpConfig, get_default_config

# Define public API
__all__ = [
    # Model
    'Coordinate',
    'Notation',
    'DEFAULT_ZOOM_LEVEL',
    'FORMAT_EXAMPLES',

    # Parsing and formatting
    'parse',
    'detect_notation',
    'check_input',
    'format_coordinate',
    'format_latitude',
    'format_longitude',
    'ParseFailure',
    'ParseResult',
    'FailureKind',
    'InputCheck',

    # Conversion and validation
    'AngleComponents',
    'dms_to_decimal',
    'ddm_to_decimal',
    'decimal_to_dms',
    'decimal_to_ddm',
    'validate',
    'RangeViolation',
    'CoordinateRangeError',

    # Configuration
    'GeojumpConfig',
    'get_default_config',
]

# Package metadata
__version__ = '0.1.0'
__description__ = 'Parse and format geographic coordinates in DD, DMS and DDM notations'
