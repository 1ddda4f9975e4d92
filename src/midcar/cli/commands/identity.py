"""Identity document command implementation."""

import logging

import typer
from rich.console import Console

from midcar.cli.ui import create_details_table, error_panel, success_panel, validity_marker
from midcar.core.national_id import dni_letter, validate_national_id
from midcar.models import IdType, NationalIdResult

logger = logging.getLogger(__name__)
console = Console()


def _failure_details(result: NationalIdResult) -> str:
    """Explain why a document was rejected."""
    if result.type == IdType.UNKNOWN:
        return "Expected a DNI (12345678Z), NIE (X1234567L) or CIF (B12345674)."
    if result.type == IdType.DNI:
        expected = dni_letter(int(result.formatted[:8]))
        return f"The check letter does not match. Expected {result.formatted[:8]}{expected}."
    return "The check character does not match."


def run_id(value: str) -> None:
    """Run the id command."""
    console.print()

    result = validate_national_id(value)
    logger.info("ID check: type=%s valid=%s", result.type.value, result.is_valid)

    console.print(create_details_table([
        ("Type", result.type_display),
        ("Normalized", result.formatted),
        ("Status", validity_marker(result.is_valid)),
    ]))
    console.print()

    if result.is_valid:
        console.print(success_panel(f"{result.type.value} {result.formatted} is valid."))
        return

    console.print(error_panel(
        f"'{value}' is not a valid identity document.",
        _failure_details(result),
    ))
    raise typer.Exit(1)
