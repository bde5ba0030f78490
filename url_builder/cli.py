"""CLI part of the project."""
import logging
from pathlib import Path
from typing import Callable, Optional, TypeVar

from typer import Argument, Exit, Option, Typer, echo

from .errors import (
    AlreadySetError,
    InvalidParameter,
    InvalidPreset,
    MissingHostnameError,
    UnknownPreset,
)

Return = TypeVar("Return")

DEFAULT_PRESETS = Path("presets.toml")

UserError = (
    AlreadySetError,
    InvalidParameter,
    InvalidPreset,
    MissingHostnameError,
    UnknownPreset,
    OSError,
)


def run_or_exit(function: Callable[[], Return]) -> Return:
    """
    Runs `function`, turning library errors into an error message and exit
    status 1.
    """
    try:
        return function()
    except UserError as error:
        # KeyError subclasses quote their message when turned into strings.
        message = error.args[0] if isinstance(error, KeyError) else error
        echo(f"Error: {message}", err=True)
        raise Exit(1) from error


def make_app() -> Typer:
    """Creates CLI application."""
    app = Typer()

    @app.callback()
    def main(  # pylint: disable=unused-variable
        verbose: bool = Option(False, "--verbose", "-v", help="Show debug logs."),
    ) -> None:
        """Builds URLs out of a hostname, resources and query parameters."""
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )

    @app.command()
    def build(  # pylint: disable=unused-variable
        hostname: str = Argument(..., help="Base URL, e.g. http://example.com"),
        resources: Optional[list[str]] = Option(
            None, "--resource", "-r", help="Resource appended to the path."
        ),
        params: Optional[list[str]] = Option(
            None, "--param", "-p", help='Query parameter as "<key>=<value>".'
        ),
    ) -> None:
        """
        Builds a URL. Resources and parameters are used in the order they
        are given.

        Example:

            url-builder build http://www.example.com -r resource -p a=1

        Result:

            http://www.example.com/resource?a=1
        """
        from .url import build_url, parse_parameter

        def _build() -> str:
            pairs = [parse_parameter(param) for param in params or []]
            return build_url(hostname, resources or [], pairs)

        echo(run_or_exit(_build))

    @app.command()
    def preset(  # pylint: disable=unused-variable
        name: str = Argument(..., help="Name of the preset."),
        config: Path = Option(DEFAULT_PRESETS, "--config", "-c"),
    ) -> None:
        """Builds the URL of a preset declared in a TOML file."""
        from .presets import load_presets

        echo(run_or_exit(lambda: load_presets(config).get(name).build()))

    @app.command("presets")
    def list_presets(  # pylint: disable=unused-variable
        config: Path = Option(DEFAULT_PRESETS, "--config", "-c"),
    ) -> None:
        """Lists every preset declared in a TOML file."""
        from .presets import load_presets

        presets = run_or_exit(lambda: load_presets(config))
        if not presets.presets:
            echo(f"No presets in {config}")
            return

        for name, url_preset in presets.presets.items():
            echo(f"{name}: {run_or_exit(url_preset.build)}")

    return app
