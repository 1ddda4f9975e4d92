"""Main CLI application."""

from enum import Enum
from typing import Optional

import typer
from rich.console import Console

from midcar import __version__
from midcar.logging import setup_logging

app = typer.Typer(
    name="midcar",
    help="Validate and format dealership data: IDs, VINs, plates, prices.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


class FormatKind(str, Enum):
    """Formatters exposed on the command line."""

    CURRENCY = "currency"
    NUMBER = "number"
    PERCENTAGE = "percentage"
    DATE = "date"
    SHORT_DATE = "short-date"
    RELATIVE = "relative"
    SLUG = "slug"
    TRUNCATE = "truncate"


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
    ),
) -> None:
    """midcar - dealership data validation toolkit."""
    if version:
        console.print(f"midcar v{__version__}")
        raise typer.Exit()
    setup_logging()


@app.command("id")
def check_id(
    value: str = typer.Argument(..., help="DNI, NIE or CIF to check"),
) -> None:
    """Classify and validate a Spanish identity document."""
    from midcar.cli.commands.identity import run_id

    run_id(value)


@app.command()
def vin(
    value: str = typer.Argument(..., help="17-character VIN"),
    online: bool = typer.Option(
        False, "--online", help="Query the NHTSA decoder for full details"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
) -> None:
    """Validate and decode a VIN."""
    from midcar.cli.commands.vehicle import run_vin

    run_vin(value, online=online, verbose=verbose)


@app.command()
def plate(
    value: str = typer.Argument(..., help="Registration plate, e.g. '1234 BCD'"),
) -> None:
    """Validate a Spanish registration plate."""
    from midcar.cli.commands.vehicle import run_plate

    run_plate(value)


@app.command("format")
def format_value(
    kind: FormatKind = typer.Argument(..., help="Formatter to apply"),
    value: str = typer.Argument(..., help="Value to format"),
    length: int = typer.Option(30, "--length", "-n", help="Maximum length for truncate"),
) -> None:
    """Format a value for display (es-ES)."""
    from midcar.cli.commands.formatting import run_format

    run_format(kind.value, value, length=length)


@app.command()
def access(
    code: Optional[str] = typer.Option(
        None, "--code", help="Check this code once instead of prompting"
    ),
    key: str = typer.Option("cli", "--key", help="Client key for rate limiting"),
) -> None:
    """Verify the shared full-view access code."""
    from midcar.cli.commands.access import run_access

    run_access(code=code, key=key)


@app.command()
def config(
    show: bool = typer.Option(False, "--show", help="Show current settings"),
    save: bool = typer.Option(False, "--save", help="Write settings file with current values"),
    set_code: bool = typer.Option(False, "--set-code", help="Store the access code in the OS keychain"),
    clear_code: bool = typer.Option(False, "--clear-code", help="Remove the stored access code"),
    reset: bool = typer.Option(False, "--reset", help="Delete the settings file"),
) -> None:
    """Manage settings and the stored access code."""
    from midcar.cli.commands.config import run_config

    run_config(
        show=show,
        save=save,
        set_code=set_code,
        clear_code=clear_code,
        reset=reset,
    )


if __name__ == "__main__":
    app()
