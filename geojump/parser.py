"""
Coordinate text parsing module.

Recognizes free-form coordinate text written in one of the supported
notations and converts it to a range-validated Coordinate. Every expected
failure (empty input, unrecognized text, out-of-range values) is returned as
a ParseFailure value rather than raised, so callers handle it at the call
site.

Notations are tried in a fixed order, first structural match wins:
    1. Decimal degrees, bare:          "40.7128, -74.0060"
    2. Decimal degrees with cardinal:  "37.7749° N, 122.4194° W"
    3. Degrees, minutes, seconds:      "40°42'46\"N 74°0'21\"W"
    4. Degrees, decimal minutes:       "40°42.767'N 74°0.35'W"
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple, Union

from geojump.converters import apply_cardinal, axis_for, ddm_to_decimal, dms_to_decimal
from geojump.coordinate import FORMAT_EXAMPLES, Coordinate, Notation
from geojump.validation import RangeViolation, validate

logger = logging.getLogger(__name__)

DECIMAL_EXAMPLE = FORMAT_EXAMPLES[Notation.DECIMAL_DEGREES]
DMS_EXAMPLE = FORMAT_EXAMPLES[Notation.DEGREES_MINUTES_SECONDS]

EMPTY_INPUT_MESSAGE = f'Please enter coordinates. Try: "{DECIMAL_EXAMPLE}"'
UNRECOGNIZED_MESSAGE = f'Invalid coordinate format. Try: "{DECIMAL_EXAMPLE}" or "{DMS_EXAMPLE}"'

# (latitude, longitude) candidate produced by a matcher before range validation
Candidate = Tuple[float, float]


class FailureKind(Enum):
    """Reasons a text could not be resolved to a Coordinate."""

    EMPTY_INPUT = "empty_input"
    """Text is empty or whitespace only."""

    UNRECOGNIZED_NOTATION = "unrecognized_notation"
    """Text matches no supported notation, or a component such as DMS
    minutes is outside its local domain."""

    OUT_OF_RANGE = "out_of_range"
    """Text matched a notation but latitude or longitude is out of range."""


@dataclass(frozen=True)
class ParseFailure:
    """Unsuccessful parse outcome.

    Falsy in boolean context, so ``if result:`` separates success from
    failure.

    Attributes:
        kind: Failure category.
        message: User-displayable message including a format example.
        notation: Notation that matched (OUT_OF_RANGE only).
        latitude: Parsed latitude (OUT_OF_RANGE only).
        longitude: Parsed longitude (OUT_OF_RANGE only).
        violations: Range violations (OUT_OF_RANGE only).
    """

    kind: FailureKind
    message: str
    notation: Optional[Notation] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    violations: Tuple[RangeViolation, ...] = ()

    def __bool__(self) -> bool:
        return False


ParseResult = Union[Coordinate, ParseFailure]


@dataclass(frozen=True)
class InputCheck:
    """Result of check_input.

    Attributes:
        valid: True if the text parses to a valid Coordinate.
        error: User-displayable message when invalid, else None.
        notation: Notation the text matched, or None if it matched none.
    """

    valid: bool
    error: Optional[str] = None
    notation: Optional[Notation] = None


# ============================================================================
# Regular expressions
# ============================================================================

_WHITESPACE_RE = re.compile(r"\s+")
_DECIMAL_SPLIT_RE = re.compile(r"[,\s]+")
# Bare decimal token; a trailing degree sign is allowed and dropped
_DECIMAL_TOKEN_RE = re.compile(r"([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)°?")

_UNSIGNED = r"\d+(?:\.\d+)?"
_SIGNED = r"[-+]?" + _UNSIGNED
_GROUP_SEPARATOR = r"(?:\s*,\s*|\s+)"


def _cardinal_decimal_group(name: str) -> str:
    # Either "N 40.7128°" or "40.7128° N"; the degree sign is optional
    return (
        rf"(?:(?P<{name}_pre>[NSEW])\s*(?P<{name}_num1>{_SIGNED})\s*°?"
        rf"|(?P<{name}_num2>{_SIGNED})\s*°?\s*(?P<{name}_post>[NSEW]))"
    )


def _dms_group(name: str) -> str:
    return (
        rf"(?P<{name}_deg>\d{{1,3}})\s*°\s*"
        rf"(?P<{name}_min>\d{{1,2}})\s*['′]\s*"
        rf"(?P<{name}_sec>\d{{1,2}}(?:\.\d+)?)\s*[\"″]?\s*"
        rf"(?P<{name}_card>[NSEW])"
    )


def _ddm_group(name: str) -> str:
    return (
        rf"(?P<{name}_deg>\d{{1,3}})\s*°\s*"
        rf"(?P<{name}_min>{_UNSIGNED})\s*['′]?\s*"
        rf"(?P<{name}_card>[NSEW])"
    )


_CARDINAL_DECIMAL_RE = re.compile(
    _cardinal_decimal_group("first") + _GROUP_SEPARATOR + _cardinal_decimal_group("second"),
    re.IGNORECASE,
)
_DMS_RE = re.compile(_dms_group("first") + r"\s*,?\s*" + _dms_group("second"), re.IGNORECASE)
_DDM_RE = re.compile(_ddm_group("first") + r"\s*,?\s*" + _ddm_group("second"), re.IGNORECASE)


# ============================================================================
# Notation matchers
# ============================================================================

def _assign_axes(
    first: Tuple[float, str],
    second: Tuple[float, str]
) -> Optional[Candidate]:
    """Order two (value, cardinal) groups as (latitude, longitude).

    The cardinal letters decide the axis, so longitude-first input is
    reordered. Two groups on the same axis are rejected.
    """
    first_is_lat = axis_for(first[1])
    second_is_lat = axis_for(second[1])
    if first_is_lat is None or second_is_lat is None or first_is_lat == second_is_lat:
        logger.debug(f"Cardinals {first[1]!r} and {second[1]!r} do not name one axis each")
        return None

    if first_is_lat:
        return first[0], second[0]
    return second[0], first[0]


def _match_decimal_degrees(text: str) -> Optional[Candidate]:
    parts = _DECIMAL_SPLIT_RE.split(text)
    if len(parts) != 2:
        return None
    matches = [_DECIMAL_TOKEN_RE.fullmatch(part) for part in parts]
    if not all(matches):
        return None
    return float(matches[0].group(1)), float(matches[1].group(1))


def _match_cardinal_decimal_degrees(text: str) -> Optional[Candidate]:
    match = _CARDINAL_DECIMAL_RE.fullmatch(text)
    if not match:
        return None

    groups = []
    for name in ("first", "second"):
        number = match.group(f"{name}_num1") or match.group(f"{name}_num2")
        cardinal = (match.group(f"{name}_pre") or match.group(f"{name}_post")).upper()
        # An explicit sign is discarded; the cardinal letter alone decides it
        groups.append((apply_cardinal(abs(float(number)), cardinal), cardinal))

    return _assign_axes(groups[0], groups[1])


def _match_dms(text: str) -> Optional[Candidate]:
    match = _DMS_RE.fullmatch(text)
    if not match:
        return None

    groups = []
    for name in ("first", "second"):
        cardinal = match.group(f"{name}_card").upper()
        value = dms_to_decimal(
            int(match.group(f"{name}_deg")),
            int(match.group(f"{name}_min")),
            float(match.group(f"{name}_sec")),
            cardinal,
        )
        if value is None:
            logger.debug(f"Malformed DMS component in {text!r}")
            return None
        groups.append((value, cardinal))

    return _assign_axes(groups[0], groups[1])


def _match_ddm(text: str) -> Optional[Candidate]:
    match = _DDM_RE.fullmatch(text)
    if not match:
        return None

    groups = []
    for name in ("first", "second"):
        cardinal = match.group(f"{name}_card").upper()
        value = ddm_to_decimal(
            int(match.group(f"{name}_deg")),
            float(match.group(f"{name}_min")),
            cardinal,
        )
        if value is None:
            logger.debug(f"Malformed DDM component in {text!r}")
            return None
        groups.append((value, cardinal))

    return _assign_axes(groups[0], groups[1])


# Fixed priority order; the first structural match wins
_MATCHERS: Tuple[Tuple[Notation, Callable[[str], Optional[Candidate]]], ...] = (
    (Notation.DECIMAL_DEGREES, _match_decimal_degrees),
    (Notation.DECIMAL_DEGREES, _match_cardinal_decimal_degrees),
    (Notation.DEGREES_MINUTES_SECONDS, _match_dms),
    (Notation.DEGREES_DECIMAL_MINUTES, _match_ddm),
)


def _match(text: str) -> Optional[Tuple[Notation, Candidate]]:
    for notation, matcher in _MATCHERS:
        candidate = matcher(text)
        if candidate is not None:
            logger.debug(f"Matched {text!r} as {notation.value} via {matcher.__name__}")
            return notation, candidate
    return None


# ============================================================================
# Public API
# ============================================================================

def _normalize(text: str) -> str:
    # Whitespace runs collapse to one space before any matcher sees the text
    return _WHITESPACE_RE.sub(" ", text.strip())


def _resolve(text: Optional[str]) -> Tuple[Optional[Notation], ParseResult]:
    """Parse text, also returning the notation it matched (if any)."""
    if text is None or (isinstance(text, str) and not text.strip()):
        return None, ParseFailure(FailureKind.EMPTY_INPUT, EMPTY_INPUT_MESSAGE)

    if not isinstance(text, str):
        logger.debug(f"Rejecting non-string input of type {type(text).__name__}")
        return None, ParseFailure(FailureKind.UNRECOGNIZED_NOTATION, UNRECOGNIZED_MESSAGE)

    normalized = _normalize(text)
    matched = _match(normalized)
    if matched is None:
        logger.debug(f"No notation matched {normalized!r}")
        return None, ParseFailure(FailureKind.UNRECOGNIZED_NOTATION, UNRECOGNIZED_MESSAGE)

    notation, (latitude, longitude) = matched
    violations = validate(latitude, longitude)
    if violations:
        details = "; ".join(v.message for v in violations)
        logger.info(f"Coordinates out of range in {normalized!r}: {details}")
        return notation, ParseFailure(
            FailureKind.OUT_OF_RANGE,
            f'Coordinates out of range: {details}. Try: "{DECIMAL_EXAMPLE}"',
            notation=notation,
            latitude=latitude,
            longitude=longitude,
            violations=violations,
        )

    return notation, Coordinate(latitude=latitude, longitude=longitude)


def parse(text: Optional[str]) -> ParseResult:
    """
    Parse coordinate text into a Coordinate.

    Args:
        text: Coordinate text in any supported notation

    Returns:
        Coordinate on success, otherwise ParseFailure describing why

    Example:
        >>> parse("40.7128, -74.0060")
        Coordinate(latitude=40.7128, longitude=-74.006, zoom=None)
        >>> parse("91, 0").kind
        <FailureKind.OUT_OF_RANGE: 'out_of_range'>
    """
    return _resolve(text)[1]


def detect_notation(text: Optional[str]) -> Optional[Notation]:
    """Return the notation text is written in, ignoring range validity.

    Returns:
        Matching Notation, or None if the text matches none
    """
    if not isinstance(text, str) or not text.strip():
        return None
    matched = _match(_normalize(text))
    return matched[0] if matched else None


def check_input(text: Optional[str]) -> InputCheck:
    """
    Check user-entered coordinate text.

    Args:
        text: Raw text from a text-entry surface

    Returns:
        InputCheck with valid=True and the matched notation, or valid=False
        and an error message that always contains a decimal-degrees example

    Example:
        >>> check_input("40.7128, -74.0060").notation
        <Notation.DECIMAL_DEGREES: 'decimal_degrees'>
        >>> check_input("").error
        'Please enter coordinates. Try: "40.7128, -74.0060"'
    """
    notation, result = _resolve(text)
    if isinstance(result, ParseFailure):
        return InputCheck(valid=False, error=result.message, notation=notation)
    return InputCheck(valid=True, notation=notation)
