"""Command-line interface for agpversion."""

from pathlib import Path
from typing import Annotated

import typer

from ..compatibility import check_compatibility
from ..exceptions import AGPVersionError
from ..model_version import Ordering, SimpleAGPVersion, compare
from ._helpers import console, print_error, print_success
from .config import ConfigError, load_config

app = typer.Typer(help="Parse and compare Android Gradle Plugin versions")

_SYMBOLS = {Ordering.LESS: "<", Ordering.EQUAL: "==", Ordering.GREATER: ">"}

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to config file (pyproject.toml or agpversion.toml)",
    ),
]


@app.command()
def parse(
    version: Annotated[str, typer.Argument(..., help="AGP version string")],
) -> None:
    """Parse a version and print its major.minor form."""
    try:
        console.print(str(SimpleAGPVersion.parse(version)))
    except AGPVersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


@app.command(name="compare")
def compare_versions(
    left: Annotated[str, typer.Argument(..., help="First AGP version")],
    right: Annotated[str, typer.Argument(..., help="Second AGP version")],
) -> None:
    """Compare two versions on major and minor only."""
    try:
        a = SimpleAGPVersion.parse(left)
        b = SimpleAGPVersion.parse(right)
    except AGPVersionError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    result = compare(a, b)
    console.print(f"{a} {_SYMBOLS[result]} {b} [dim]({result.name})[/dim]")


@app.command()
def check(
    version: Annotated[
        str | None,
        typer.Argument(..., help="AGP version in use (default: from config)"),
    ] = None,
    minimum: Annotated[
        str | None,
        typer.Option(..., "--minimum", "-m", help="Minimum supported version"),
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Check that an AGP version meets the minimum supported version."""
    try:
        settings = load_config(config)
        found = version or settings.agp_version
        if found is None:
            print_error("No AGP version given and none configured")
            raise typer.Exit(1)

        checked = check_compatibility(found, minimum or settings.minimum_version)
        print_success(f"AGP {checked} is supported")

    except (ConfigError, AGPVersionError) as e:
        print_error(str(e))
        raise typer.Exit(1) from e


if __name__ == "__main__":
    app()
