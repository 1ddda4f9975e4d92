"""Access command implementation."""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.prompt import Prompt

from midcar.cli.ui import error_panel, success_panel, warning_panel
from midcar.core.access import AccessGuard
from midcar.core.config import ConfigManager
from midcar.exceptions import MidcarError
from midcar.models import AccessResult

logger = logging.getLogger(__name__)
console = Console()


def _build_guard() -> AccessGuard:
    """Load settings and the access code, exiting on configuration errors."""
    try:
        config = ConfigManager().load_or_default()
        return AccessGuard.from_config(config)
    except MidcarError as e:
        logger.error("Access guard unavailable: %s", e.message)
        console.print(error_panel(e.message, e.details))
        raise typer.Exit(1)


def _show_result(result: AccessResult) -> None:
    if result.success:
        console.print(success_panel(result.message or "Access granted"))
    elif result.locked:
        console.print(error_panel(result.error or "Locked", "Too many failed attempts."))
    elif result.remaining_attempts is None:
        console.print(warning_panel(result.error or "Code required"))
    else:
        console.print(error_panel(
            result.error or "Wrong code",
            f"{result.remaining_attempts} attempt(s) left.",
        ))


def run_access(code: Optional[str] = None, key: str = "cli") -> None:
    """Run the access command."""
    console.print()
    guard = _build_guard()

    if code is not None:
        result = guard.verify(key, code)
        _show_result(result)
        if not result.success:
            raise typer.Exit(1)
        return

    while True:
        if not guard.limiter.check_rate_limit(key).allowed:
            _show_result(guard.verify(key, None))
            raise typer.Exit(1)

        submitted = Prompt.ask("  Access code", password=True)
        result = guard.verify(key, submitted)
        _show_result(result)
        if result.success:
            return
        console.print()
