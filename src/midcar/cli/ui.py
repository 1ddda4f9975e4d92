"""Rich console UI helpers."""

from rich.panel import Panel
from rich.table import Table

STATUS_STYLES = {
    "success": ("green", "✓", None),
    "error": ("red", "✗", "Error"),
    "warning": ("yellow", "⚠", None),
}


def status_panel(kind: str, message: str, details: str | None = None) -> Panel:
    """Panel with a coloured status icon and optional dimmed details."""
    color, icon, title = STATUS_STYLES[kind]
    content = f"[{color}]{icon}[/{color}] {message}"
    if details:
        content += f"\n\n[dim]{details}[/dim]"
    return Panel(content, title=title, border_style=color, padding=(0, 1))


def success_panel(message: str) -> Panel:
    return status_panel("success", message)


def error_panel(message: str, details: str | None = None) -> Panel:
    return status_panel("error", message, details)


def warning_panel(message: str, details: str | None = None) -> Panel:
    return status_panel("warning", message, details)


def masked_value(value: str, visible_chars: int = 2) -> str:
    """Mask a value, showing only last N characters."""
    if len(value) <= visible_chars:
        return "*" * len(value)
    return "*" * (len(value) - visible_chars) + value[-visible_chars:]


def validity_marker(is_valid: bool) -> str:
    """Green check or red cross for a validity flag."""
    return "[green]✓ valid[/green]" if is_valid else "[red]✗ invalid[/red]"


def create_details_table(rows: list[tuple[str, str]], title: str | None = None) -> Table:
    """Create a two-column field/value table, skipping empty values."""
    table = Table(title=title, show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="dim")
    table.add_column("Value")

    for field, value in rows:
        if value:
            table.add_row(field, value)

    return table
