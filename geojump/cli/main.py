"""Main Typer CLI application for coordinate tools."""

import logging

import typer

app = typer.Typer(
    help="Parse, check and convert geographic coordinate text",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Parse, check and convert geographic coordinate text."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s - %(message)s',
    )


def _register_commands() -> None:
    """
    Import command modules to register commands with the app.

    Commands use the @app.command() decorator, which registers them when the
    module is imported.
    """
    from geojump.cli import commands

    # Avoid "imported but unused" warnings by explicitly using the module
    _ = commands


_register_commands()


if __name__ == "__main__":
    app()
