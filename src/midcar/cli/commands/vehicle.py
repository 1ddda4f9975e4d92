"""VIN and plate command implementations."""

import asyncio
import logging

import typer
from rich.console import Console

from midcar.cli.ui import create_details_table, error_panel, success_panel, warning_panel
from midcar.core.config import ConfigManager
from midcar.core.plate import classify_plate, normalize_plate
from midcar.core.vin import VinDecoder, decode_vin_basic, validate_vin
from midcar.exceptions import ConfigError
from midcar.models import PlateFormat, VinDecodedInfo

logger = logging.getLogger(__name__)
console = Console()

PLATE_FORMAT_LABELS = {
    PlateFormat.MODERN: "National (0000 BBB)",
    PlateFormat.LEGACY: "Provincial (M 0000 AB)",
}


def run_vin(value: str, online: bool = False, verbose: bool = False) -> None:
    """Run the vin command."""
    console.print()

    vin = "".join(value.split())
    if not validate_vin(vin):
        console.print(error_panel(
            f"Invalid VIN: {value}",
            "A VIN has 17 letters and digits; I, O and Q are never used.",
        ))
        raise typer.Exit(1)
    vin = vin.upper()

    if not online:
        basic = decode_vin_basic(vin)
        console.print(create_details_table([
            ("VIN", vin),
            ("Manufacturer", basic.manufacturer),
            ("Year", basic.year),
        ]))
        console.print()
        console.print(success_panel("VIN structure is valid."))
        return

    try:
        config = ConfigManager().load_or_default()
    except ConfigError as e:
        console.print(error_panel(e.message, e.details))
        raise typer.Exit(1)

    if verbose:
        console.print(f"[dim]  Service: {config.vin_service.base_url}[/dim]")
        console.print(f"[dim]  Timeout: {config.vin_service.timeout_seconds:g}s[/dim]")

    with console.status("Decoding VIN..."):
        info = asyncio.run(VinDecoder(config.vin_service).decode(vin))

    _print_decoded(vin, info)

    if not info.is_valid:
        console.print(warning_panel(
            info.error_message or "VIN rejected by decoder.",
            "Offline manufacturer and year are shown above.",
        ))
        raise typer.Exit(1)

    console.print(success_panel(info.description or "VIN decoded."))


def _print_decoded(vin: str, info: VinDecodedInfo) -> None:
    """Display an extended decode."""
    console.print(create_details_table([
        ("VIN", vin),
        ("Manufacturer", info.manufacturer),
        ("Make", info.make),
        ("Model", info.model),
        ("Year", info.year),
        ("Type", info.vehicle_type),
        ("Body", info.body_class),
        ("Drive", info.drive_type),
        ("Fuel", info.fuel_type),
        ("Cylinders", info.engine_cylinders),
        ("Displacement (L)", info.engine_displacement),
        ("Transmission", info.transmission),
        ("Doors", info.doors),
        ("Plant", ", ".join(p for p in (info.plant_city, info.plant_country) if p)),
    ]))
    console.print()


def run_plate(value: str) -> None:
    """Run the plate command."""
    console.print()

    plate_format = classify_plate(value)
    if plate_format is None:
        console.print(error_panel(
            f"Invalid plate: {value}",
            "Expected 4 digits + 3 consonants (1234 BCD) "
            "or province + 4 digits + 2 letters (M 1234 AB).",
        ))
        raise typer.Exit(1)

    console.print(create_details_table([
        ("Plate", normalize_plate(value)),
        ("Format", PLATE_FORMAT_LABELS[plate_format]),
    ]))
    console.print()
    console.print(success_panel("Plate is valid."))
