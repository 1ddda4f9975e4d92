"""Config command implementation."""

import logging
import os

import typer
from keyring.errors import KeyringError
from rich.console import Console
from rich.prompt import Confirm, Prompt

from midcar.cli.ui import create_details_table, error_panel, masked_value, success_panel
from midcar.core.access import ACCESS_CODE_ENV_VARS
from midcar.core.config import ConfigManager
from midcar.core.keychain import AccessCodeKeychain
from midcar.exceptions import ConfigError
from midcar.logging import log_file_path

logger = logging.getLogger(__name__)
console = Console()


def _access_code_source() -> str:
    """Describe where the access code would be read from."""
    for name in ACCESS_CODE_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return f"${name} ({masked_value(value)})"
    try:
        if AccessCodeKeychain.exists():
            return "OS keychain"
    except KeyringError:
        return "[yellow]keychain unavailable[/yellow]"
    return "[red]not configured[/red]"


def run_config(
    show: bool = False,
    save: bool = False,
    set_code: bool = False,
    clear_code: bool = False,
    reset: bool = False,
) -> None:
    """Run the config command."""
    console.print()
    manager = ConfigManager()

    if reset:
        _handle_reset(manager)
    elif set_code:
        _handle_set_code()
    elif clear_code:
        _handle_clear_code()
    elif save:
        _handle_save(manager)
    else:
        _handle_show(manager)


def _load(manager: ConfigManager):
    try:
        return manager.load_or_default()
    except ConfigError as e:
        console.print(error_panel(e.message, e.details))
        raise typer.Exit(1)


def _handle_show(manager: ConfigManager) -> None:
    """Display effective settings."""
    config = _load(manager)
    source = str(manager.config_path) if manager.exists else "defaults (no settings file)"

    console.print(create_details_table([
        ("Settings", source),
        ("Max attempts", str(config.access.max_attempts)),
        ("Lockout", f"{config.access.lockout_minutes:g} min"),
        ("VIN service", config.vin_service.base_url),
        ("VIN timeout", f"{config.vin_service.timeout_seconds:g} s"),
        ("Access code", _access_code_source()),
        ("Debug log", str(log_file_path())),
    ], title="midcar settings"))


def _handle_save(manager: ConfigManager) -> None:
    """Write the current settings to disk."""
    config = _load(manager)
    manager.save(config)
    console.print(success_panel(f"Settings written to {manager.config_path}"))


def _handle_reset(manager: ConfigManager) -> None:
    """Delete the settings file after confirmation."""
    if not manager.exists:
        console.print("[dim]  No settings file to delete.[/dim]")
        return
    if not Confirm.ask("  Delete the settings file?", default=False):
        console.print("[dim]  Cancelled.[/dim]")
        return
    manager.delete()
    console.print(success_panel("Settings file deleted."))


def _handle_set_code() -> None:
    """Prompt for the access code and store it in the keychain."""
    code = Prompt.ask("  New access code", password=True)
    if not code:
        console.print(error_panel("Access code cannot be empty."))
        raise typer.Exit(1)
    if Prompt.ask("  Repeat access code", password=True) != code:
        console.print(error_panel("Codes do not match."))
        raise typer.Exit(1)

    try:
        AccessCodeKeychain.store(code)
    except KeyringError as e:
        logger.error("Keychain write failed: %s", e)
        console.print(error_panel("Could not write to the OS keychain.", str(e)))
        raise typer.Exit(1)

    console.print(success_panel("Access code stored in the OS keychain."))


def _handle_clear_code() -> None:
    """Remove the keychain access code."""
    try:
        AccessCodeKeychain.delete()
    except KeyringError as e:
        console.print(error_panel("Could not access the OS keychain.", str(e)))
        raise typer.Exit(1)
    console.print(success_panel("Stored access code removed."))
