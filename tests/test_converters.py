"""Unit tests for geojump.converters module."""

import pytest

from geojump.converters import (
    AngleComponents,
    apply_cardinal,
    axis_for,
    cardinal_for,
    ddm_to_decimal,
    decimal_to_ddm,
    decimal_to_dms,
    dms_to_decimal,
)


class TestDmsToDecimal:
    """Tests for dms_to_decimal."""

    @pytest.mark.parametrize(
        "degrees,minutes,seconds,cardinal,expected",
        [
            (40, 42, 46, "N", 40.712778),
            (74, 0, 21, "W", -74.005833),
            (33, 52, 7.68, "S", -33.8688),
            (151, 12, 33.48, "E", 151.2093),
            (0, 0, 0, "N", 0.0),
            (40, 42, 46, "s", -40.712778),
        ],
        ids=["nyc-lat", "nyc-lon", "sydney-lat", "sydney-lon", "origin", "lowercase-cardinal"],
    )
    def test_conversion(
        self, degrees: int, minutes: int, seconds: float, cardinal: str, expected: float
    ) -> None:
        """Test DMS components convert to signed decimal degrees."""
        assert dms_to_decimal(degrees, minutes, seconds, cardinal) == pytest.approx(expected, abs=1e-6)

    @pytest.mark.parametrize(
        "degrees,minutes,seconds",
        [(-1, 0, 0), (0, -1, 0), (0, 0, -0.5), (0, 60, 0), (0, 0, 60), (10, 75, 0)],
        ids=["negative-deg", "negative-min", "negative-sec", "min-60", "sec-60", "min-75"],
    )
    def test_invalid_components_return_none(self, degrees: int, minutes: int, seconds: float) -> None:
        """Test out-of-domain components are rejected rather than clamped."""
        assert dms_to_decimal(degrees, minutes, seconds, "N") is None

    def test_upper_bounds_are_exclusive(self) -> None:
        """Test values just below 60 are still accepted."""
        assert dms_to_decimal(0, 59, 59.99, "E") == pytest.approx(59 / 60 + 59.99 / 3600)


class TestDdmToDecimal:
    """Tests for ddm_to_decimal."""

    def test_conversion(self) -> None:
        assert ddm_to_decimal(40, 42.767, "N") == pytest.approx(40.712783, abs=1e-6)
        assert ddm_to_decimal(74, 0.35, "W") == pytest.approx(-74.005833, abs=1e-6)

    @pytest.mark.parametrize(
        "degrees,minutes",
        [(-1, 0.0), (0, -0.1), (0, 60.0), (0, 61.5)],
        ids=["negative-deg", "negative-min", "min-60", "min-61.5"],
    )
    def test_invalid_components_return_none(self, degrees: int, minutes: float) -> None:
        assert ddm_to_decimal(degrees, minutes, "S") is None


class TestDecimalToDms:
    """Tests for decimal_to_dms."""

    def test_latitude(self) -> None:
        assert decimal_to_dms(40.7128, True) == AngleComponents(40, 42, 46.08, "N")

    def test_longitude(self) -> None:
        assert decimal_to_dms(-74.0060, False) == AngleComponents(74, 0, 21.6, "W")

    def test_seconds_rounded_to_two_places(self) -> None:
        components = decimal_to_dms(12.3456789, True)
        assert components.seconds == round(components.seconds, 2)

    def test_rounding_carries_into_minutes_and_degrees(self) -> None:
        """Test 59.999... seconds rounds up into the next degree, not 60.00 seconds."""
        assert decimal_to_dms(10.999999999, True) == AngleComponents(11, 0, 0.0, "N")

    def test_components_are_integers(self) -> None:
        components = decimal_to_dms(-33.8688, True)
        assert isinstance(components.degrees, int)
        assert isinstance(components.minutes, int)
        assert components.cardinal == "S"


class TestDecimalToDdm:
    """Tests for decimal_to_ddm."""

    def test_latitude(self) -> None:
        assert decimal_to_ddm(40.7128, True) == AngleComponents(40, 42.768, None, "N")

    def test_longitude(self) -> None:
        assert decimal_to_ddm(-74.0060, False) == AngleComponents(74, 0.36, None, "W")

    def test_rounding_carries_into_degrees(self) -> None:
        assert decimal_to_ddm(-10.9999999, False) == AngleComponents(11, 0.0, None, "W")


class TestCardinals:
    """Tests for cardinal helpers."""

    @pytest.mark.parametrize(
        "value,is_latitude,expected",
        [
            (1.0, True, "N"),
            (-1.0, True, "S"),
            (1.0, False, "E"),
            (-1.0, False, "W"),
            (0.0, True, "N"),
            (0.0, False, "E"),
            (-0.0, True, "N"),
            (-0.0, False, "E"),
        ],
        ids=["north", "south", "east", "west", "zero-lat", "zero-lon", "neg-zero-lat", "neg-zero-lon"],
    )
    def test_cardinal_for(self, value: float, is_latitude: bool, expected: str) -> None:
        """Test zero is treated as non-negative on both axes."""
        assert cardinal_for(value, is_latitude) == expected

    def test_axis_for(self) -> None:
        assert axis_for("N") is True
        assert axis_for("s") is True
        assert axis_for("E") is False
        assert axis_for("w") is False
        assert axis_for("X") is None

    def test_apply_cardinal(self) -> None:
        assert apply_cardinal(5.0, "S") == -5.0
        assert apply_cardinal(5.0, "w") == -5.0
        assert apply_cardinal(5.0, "N") == 5.0
        assert apply_cardinal(5.0, "E") == 5.0
