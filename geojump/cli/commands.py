"""Coordinate CLI commands."""

import json
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from geojump.cli.main import app
from geojump.config import GeojumpConfig, get_default_config
from geojump.coordinate import FORMAT_EXAMPLES, Coordinate, Notation
from geojump.formatter import format_coordinate
from geojump.parser import ParseFailure, check_input, parse
from geojump.validation import MAX_ZOOM, MIN_ZOOM, CoordinateRangeError


class NotationChoice(str, Enum):
    """Notation options accepted on the command line."""

    DD = "dd"
    DMS = "dms"
    DDM = "ddm"

    @property
    def notation(self) -> Notation:
        return _CHOICE_NOTATIONS[self]


_CHOICE_NOTATIONS = {
    NotationChoice.DD: Notation.DECIMAL_DEGREES,
    NotationChoice.DMS: Notation.DEGREES_MINUTES_SECONDS,
    NotationChoice.DDM: Notation.DEGREES_DECIMAL_MINUTES,
}


class OutputFormat(str, Enum):
    """Output format options."""

    HUMAN = "human"
    JSON = "json"


def _load_config(config_path: Optional[Path]) -> GeojumpConfig:
    """Load configuration from file, or defaults when no file is given."""
    if config_path is None:
        return get_default_config()
    try:
        return GeojumpConfig.from_yaml(config_path)
    except FileNotFoundError:
        typer.echo(f"Error: Configuration file not found: {config_path}", err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def _parse_or_exit(text: str) -> Coordinate:
    result = parse(text)
    if isinstance(result, ParseFailure):
        typer.echo(f"Error: {result.message}", err=True)
        raise typer.Exit(1)
    return result


def _emit(coordinate: Coordinate, notation: Notation, output_format: OutputFormat) -> None:
    text = format_coordinate(coordinate, notation)
    if output_format == OutputFormat.JSON:
        payload = coordinate.to_dict()
        payload["notation"] = notation.value
        payload["text"] = text
        typer.echo(json.dumps(payload, ensure_ascii=False))
    else:
        typer.echo(text)


@app.command("parse")
def parse_command(
    text: str = typer.Argument(..., help="Coordinate text in any supported notation"),
    to: Optional[NotationChoice] = typer.Option(
        None, "--to", "-t", help="Output notation (default: from configuration)"
    ),
    zoom: Optional[int] = typer.Option(
        None, min=MIN_ZOOM, max=MAX_ZOOM, help="Zoom hint to attach (default: from configuration)"
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.HUMAN, "--format", "-f", help="Output format"
    ),
    config: Optional[Path] = typer.Option(None, help="Path to geojump YAML configuration"),
) -> None:
    """
    Parse coordinate text and print it in canonical form.

    Example:
        geojump parse "40°42'46\\"N 74°0'21\\"W"
        geojump parse "40.7128, -74.0060" --to dms
        geojump parse "37.7749° N, 122.4194° W" --format json --zoom 12
    """
    settings = _load_config(config)
    coordinate = _parse_or_exit(text)

    hint = zoom if zoom is not None else settings.default_zoom
    coordinate = coordinate.with_zoom(hint)

    notation = to.notation if to is not None else settings.default_notation
    _emit(coordinate, notation, output_format)


@app.command("format")
def format_command(
    latitude: float = typer.Argument(..., help="Latitude in decimal degrees"),
    longitude: float = typer.Argument(..., help="Longitude in decimal degrees"),
    notation: Optional[NotationChoice] = typer.Option(
        None, "--notation", "-n", help="Output notation (default: from configuration)"
    ),
    config: Optional[Path] = typer.Option(None, help="Path to geojump YAML configuration"),
) -> None:
    """
    Format a decimal-degree coordinate in the requested notation.

    Use "--" before negative values so they are not read as options.

    Example:
        geojump format --notation dms -- 40.7128 -74.006
    """
    settings = _load_config(config)
    try:
        coordinate = Coordinate(latitude=latitude, longitude=longitude)
    except CoordinateRangeError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    target = notation.notation if notation is not None else settings.default_notation
    typer.echo(format_coordinate(coordinate, target))


@app.command("check")
def check_command(
    text: str = typer.Argument(..., help="Coordinate text to check"),
) -> None:
    """
    Check whether coordinate text is valid.

    Prints "valid" and the detected notation, or the error message and exits
    with status 1.

    Example:
        geojump check "40.7128, -74.0060"
    """
    result = check_input(text)
    if not result.valid:
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(1)

    typer.echo(f"valid ({result.notation.label})")


@app.command("convert")
def convert_command(
    text: str = typer.Argument(..., help="Coordinate text in any supported notation"),
) -> None:
    """
    Print a coordinate in every supported notation.

    Example:
        geojump convert "40.7128, -74.0060"
    """
    coordinate = _parse_or_exit(text)
    width = max(len(n.label) for n in Notation)
    for notation in Notation:
        typer.echo(f"{notation.label:<{width}}  {format_coordinate(coordinate, notation)}")


@app.command("examples")
def examples_command() -> None:
    """List accepted coordinate formats with an example of each."""
    width = max(len(n.label) for n in Notation)
    for notation in Notation:
        typer.echo(f"{notation.label:<{width}}  {FORMAT_EXAMPLES[notation]}")
    typer.echo(f"{'With cardinal letters':<{width}}  37.7749° N, 122.4194° W")
