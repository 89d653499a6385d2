"""
Configuration for the coordinate entry surface.

Holds the defaults a text-entry surface (such as the command line) applies
when the caller does not specify them: the notation used for output and the
zoom hint attached to parsed coordinates.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml

from geojump.coordinate import DEFAULT_ZOOM_LEVEL, Notation
from geojump.validation import MAX_ZOOM, MIN_ZOOM, is_valid_zoom

logger = logging.getLogger(__name__)

CONFIG_SECTION = 'geojump'


@dataclass
class GeojumpConfig:
    """Defaults for coordinate input and output.

    Attributes:
        default_notation: Notation used to render coordinates when none is requested
        default_zoom: Zoom hint attached to parsed coordinates, or None for no hint
    """
    default_notation: Notation = Notation.DECIMAL_DEGREES
    default_zoom: Optional[int] = DEFAULT_ZOOM_LEVEL

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'GeojumpConfig':
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            GeojumpConfig instance loaded from file

        Raises:
            FileNotFoundError: If configuration file does not exist
            ValueError: If configuration file is malformed or contains invalid values

        Example:
            >>> config = GeojumpConfig.from_yaml('geojump.yaml')
            >>> print(config.default_notation)
            Notation.DEGREES_MINUTES_SECONDS
        """
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {path}\n"
                f"Please create a configuration file or use get_default_config()"
            )

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML configuration file: {e}") from e

        if not data:
            raise ValueError(
                f"Configuration file is empty: {path}\n"
                f"Expected a '{CONFIG_SECTION}' section"
            )

        if not isinstance(data, dict) or CONFIG_SECTION not in data:
            raise ValueError(
                f"Configuration file missing '{CONFIG_SECTION}' section: {path}\n"
                f"Expected structure: {CONFIG_SECTION}:\n  default_notation: ...\n  default_zoom: ..."
            )

        logger.debug(f"Loaded configuration from {config_path}")
        return cls.from_dict(data[CONFIG_SECTION])

    @staticmethod
    def _parse_notation(notation_str: str) -> Notation:
        """Parse a notation string into a Notation enum.

        Raises:
            ValueError: If notation_str is not a valid notation
        """
        try:
            return Notation(notation_str)
        except ValueError:
            valid_notations = [n.value for n in Notation]
            raise ValueError(
                f"Invalid default_notation '{notation_str}'. "
                f"Must be one of: {', '.join(valid_notations)}"
            ) from None

    @classmethod
    def from_dict(cls, config: dict) -> 'GeojumpConfig':
        """Create configuration from dictionary.

        Args:
            config: Dictionary with optional keys:
                - 'default_notation': Notation name (string)
                - 'default_zoom': Integer zoom hint in [1, 18], or null

        Returns:
            GeojumpConfig instance

        Raises:
            ValueError: If configuration is invalid
        """
        if config is None:
            config = {}
        if not isinstance(config, dict):
            raise ValueError(f"Configuration must be a dictionary, got {type(config)}")

        default_notation = Notation.DECIMAL_DEGREES
        if 'default_notation' in config:
            default_notation = cls._parse_notation(config['default_notation'])

        default_zoom = DEFAULT_ZOOM_LEVEL
        if 'default_zoom' in config:
            default_zoom = config['default_zoom']
            if default_zoom is not None and not is_valid_zoom(default_zoom):
                raise ValueError(
                    f"Invalid default_zoom {default_zoom!r}. "
                    f"Must be an integer in [{MIN_ZOOM}, {MAX_ZOOM}] or null"
                )

        unknown = set(config) - {'default_notation', 'default_zoom'}
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(sorted(unknown))}")

        return cls(default_notation=default_notation, default_zoom=default_zoom)

    def to_dict(self) -> dict:
        """Convert configuration to dictionary.

        Returns:
            Dictionary representation suitable for YAML serialization
        """
        return {
            'default_notation': self.default_notation.value,
            'default_zoom': self.default_zoom,
        }


def get_default_config() -> GeojumpConfig:
    """Return default configuration: decimal degrees output, zoom hint 10."""
    return GeojumpConfig()
