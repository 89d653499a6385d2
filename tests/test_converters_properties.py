#!/usr/bin/env python3
"""
Property-based tests for angle conversion and text round trips using Hypothesis.

Mathematical Properties Verified:
1. DMS Bijection: components → decimal → components recovers degrees, minutes
   and seconds at the formatter's 2-place seconds precision
2. DDM Bijection: the same for decimal minutes at 3 places
3. Decimal Round Trip: parse(format(c)) == c for coordinates rounded to 6 places
4. Sexagesimal Round Trip: parse(format(c, DMS/DDM)) stays within the
   precision the notation can express
5. Formatted output never reports 60 seconds or 60 minutes
"""

from hypothesis import given, settings, strategies as st
from hypothesis.strategies import composite

from geojump.converters import (
    ddm_to_decimal,
    decimal_to_ddm,
    decimal_to_dms,
    dms_to_decimal,
)
from geojump.coordinate import Coordinate, Notation
from geojump.formatter import format_coordinate
from geojump.parser import parse

# Half a hundredth of an arc-second, in degrees
DMS_TOLERANCE_DEG = 0.005 / 3600 + 1e-9
# Half a thousandth of an arc-minute, in degrees
DDM_TOLERANCE_DEG = 0.0005 / 60 + 1e-9


# ============================================================================
# Hypothesis Strategies for Test Data Generation
# ============================================================================

@composite
def dms_components(draw):
    """
    Generate DMS components with seconds already at 2-place precision.

    Returns:
        Tuple of (degrees, minutes, seconds, cardinal)
    """
    degrees = draw(st.integers(min_value=0, max_value=179))
    minutes = draw(st.integers(min_value=0, max_value=59))
    seconds = draw(st.integers(min_value=0, max_value=5999)) / 100
    cardinal = draw(st.sampled_from("NSEW"))
    return degrees, minutes, seconds, cardinal


@composite
def ddm_components(draw):
    """
    Generate DDM components with minutes already at 3-place precision.

    Returns:
        Tuple of (degrees, minutes, cardinal)
    """
    degrees = draw(st.integers(min_value=0, max_value=179))
    minutes = draw(st.integers(min_value=0, max_value=59999)) / 1000
    cardinal = draw(st.sampled_from("NSEW"))
    return degrees, minutes, cardinal


@composite
def coordinates(draw, places=None):
    """
    Generate valid coordinates, optionally rounded to a number of decimal places.

    Returns:
        Coordinate within the full legal domain
    """
    lat = draw(st.floats(min_value=-90.0, max_value=90.0, allow_nan=False, allow_infinity=False))
    lon = draw(st.floats(min_value=-180.0, max_value=180.0, allow_nan=False, allow_infinity=False))
    if places is not None:
        lat, lon = round(lat, places), round(lon, places)
    return Coordinate(lat, lon)


# ============================================================================
# Property 1 and 2: Component Bijection
# ============================================================================

@given(dms_components())
@settings(deadline=None)
def test_property_dms_bijection(components):
    """
    Property: dms_to_decimal followed by decimal_to_dms recovers the components.

    Seconds are compared at the 2-place precision decimal_to_dms reports.
    The sign of zero is lost, so the cardinal is only checked for non-zero values.
    """
    degrees, minutes, seconds, cardinal = components
    is_latitude = cardinal in "NS"

    value = dms_to_decimal(degrees, minutes, seconds, cardinal)
    recovered = decimal_to_dms(value, is_latitude)

    assert recovered.degrees == degrees
    assert recovered.minutes == minutes
    assert abs(recovered.seconds - seconds) < 0.005
    if value != 0:
        assert recovered.cardinal == cardinal


@given(ddm_components())
@settings(deadline=None)
def test_property_ddm_bijection(components):
    """Property: ddm_to_decimal followed by decimal_to_ddm recovers the components."""
    degrees, minutes, cardinal = components
    is_latitude = cardinal in "NS"

    value = ddm_to_decimal(degrees, minutes, cardinal)
    recovered = decimal_to_ddm(value, is_latitude)

    assert recovered.degrees == degrees
    assert abs(recovered.minutes - minutes) < 0.0005
    if value != 0:
        assert recovered.cardinal == cardinal


# ============================================================================
# Property 3 and 4: Text Round Trip
# ============================================================================

@given(coordinates(places=6))
@settings(deadline=None)
def test_property_decimal_round_trip_is_exact(coordinate):
    """Property: parse(format(c)) == c for coordinates rounded to 6 decimal places."""
    assert parse(format_coordinate(coordinate, Notation.DECIMAL_DEGREES)) == coordinate


@given(coordinates())
@settings(deadline=None)
def test_property_dms_round_trip_within_precision(coordinate):
    """Property: DMS text parses back to within half a hundredth of an arc-second."""
    result = parse(format_coordinate(coordinate, Notation.DEGREES_MINUTES_SECONDS))

    assert isinstance(result, Coordinate)
    assert abs(result.latitude - coordinate.latitude) <= DMS_TOLERANCE_DEG
    assert abs(result.longitude - coordinate.longitude) <= DMS_TOLERANCE_DEG


@given(coordinates())
@settings(deadline=None)
def test_property_ddm_round_trip_within_precision(coordinate):
    """Property: DDM text parses back to within half a thousandth of an arc-minute."""
    result = parse(format_coordinate(coordinate, Notation.DEGREES_DECIMAL_MINUTES))

    assert isinstance(result, Coordinate)
    assert abs(result.latitude - coordinate.latitude) <= DDM_TOLERANCE_DEG
    assert abs(result.longitude - coordinate.longitude) <= DDM_TOLERANCE_DEG


# ============================================================================
# Property 5: Reported Components Stay In Domain
# ============================================================================

@given(st.floats(min_value=-180.0, max_value=180.0, allow_nan=False, allow_infinity=False))
@settings(deadline=None)
def test_property_reported_components_below_sixty(value):
    """Property: rounding never yields 60 seconds or 60 minutes."""
    dms = decimal_to_dms(value, is_latitude=False)
    ddm = decimal_to_ddm(value, is_latitude=False)

    assert 0 <= dms.minutes < 60
    assert 0 <= dms.seconds < 60
    assert 0 <= ddm.minutes < 60
