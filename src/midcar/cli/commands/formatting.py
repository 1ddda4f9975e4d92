"""Format command implementation."""

from decimal import Decimal, InvalidOperation

import typer
from rich.console import Console

from midcar.cli.ui import error_panel
from midcar.core import formatting

console = Console()

NUMERIC_KINDS = {
    "currency": formatting.format_currency,
    "number": formatting.format_number,
    "percentage": formatting.format_percentage,
}

TEXT_KINDS = {
    "date": formatting.format_date,
    "short-date": formatting.format_short_date,
    "relative": formatting.format_relative_time,
    "slug": formatting.slugify,
}


def _parse_number(value: str) -> Decimal:
    """Accept both '1234.5' and '1234,5'."""
    try:
        number = Decimal(value.strip().replace(",", "."))
    except InvalidOperation:
        console.print(error_panel(f"Not a number: {value}"))
        raise typer.Exit(1)
    if not number.is_finite():
        console.print(error_panel(f"Not a finite number: {value}"))
        raise typer.Exit(1)
    return number


def run_format(kind: str, value: str, length: int = 30) -> None:
    """Run the format command."""
    if kind in NUMERIC_KINDS:
        number = _parse_number(value)
        if kind == "percentage":
            result = formatting.format_percentage(float(number))
        else:
            result = NUMERIC_KINDS[kind](number)
    elif kind in TEXT_KINDS:
        result = TEXT_KINDS[kind](value)
    elif kind == "truncate":
        result = formatting.truncate(value, length)
    else:
        console.print(error_panel(f"Unknown format: {kind}"))
        raise typer.Exit(1)

    console.print(result, markup=False, highlight=False)
