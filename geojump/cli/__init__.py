"""CLI module for coordinate tools.

Provides the `geojump` command-line interface for parsing, checking and
converting coordinate text.
"""

from geojump.cli.main import app

__all__ = ["app"]
