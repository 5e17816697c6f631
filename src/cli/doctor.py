"""Doctor command for environment diagnostics."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from adapters.dateutil_parser import parse_date_string
from core.config import get_settings, get_user_env_file, write_user_env_vars
from core.services.date_utils import format_date

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_parser() -> tuple[bool, str]:
    """Parse a known ISO string to detect a broken dateutil install."""

    parsed = parse_date_string("2024-03-15T13:05:00")
    if parsed is None:
        return False, "dateutil could not parse an ISO timestamp"
    return True, parsed.isoformat()


@app.command()
def run() -> None:
    """Show the effective configuration and baseline checks."""

    settings = get_settings()

    table = Table(title="date-utils Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Date format", "OK", settings.date_format)
    table.add_row("Hour format", "OK", settings.hour_format)
    table.add_row("Separator", "OK", repr(settings.separator))
    table.add_row("24 hours", "OK", str(settings.use_24_hours))
    table.add_row("Log level", "OK", settings.log_level)
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    ok_parser, detail_parser = _check_parser()
    table.add_row("Parser", "OK" if ok_parser else "FAIL", detail_parser)
    table.add_row("Sample", "OK", format_date(include_hour=True))

    _console.print(table)


@app.command(name="set-defaults")
def set_defaults(
    date_format: Optional[str] = typer.Option(None, "--date-format", help="Default date template."),
    hour_format: Optional[str] = typer.Option(None, "--hour-format", help="Default hour template."),
    separator: Optional[str] = typer.Option(None, "--separator", help="Default date/hour separator."),
    use_24_hours: Optional[bool] = typer.Option(None, "--use-24-hours/--use-12-hours", help="Default clock."),
) -> None:
    """Store formatting defaults in the user config .env."""

    values = {
        "DATE_UTILS_DATE_FORMAT": date_format,
        "DATE_UTILS_HOUR_FORMAT": hour_format,
        "DATE_UTILS_SEPARATOR": separator,
        "DATE_UTILS_USE_24_HOURS": None if use_24_hours is None else str(use_24_hours).lower(),
    }
    if all(v is None for v in values.values()):
        raise typer.BadParameter("pass at least one default to store")

    env_path = write_user_env_vars(values)
    get_settings.cache_clear()
    _console.print(f"[green]Saved defaults to:[/green] {env_path}")
