"""CLI de date-utils (Typer + Rich).

Por qué una CLI delgada:
- Expone las mismas funciones de `core.services.date_utils` para scripts de
  shell y para probar plantillas sin abrir un intérprete.
- No contiene lógica de fechas: solo traduce argumentos y pinta resultados.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from cli import doctor
from cli.ui_components import build_bounds_table, build_months_table
from core.domain.errors import DateUtilsError
from core.domain.units import DurationUnit
from core.logging_config import configure_logging
from core.services import date_utils

app = typer.Typer(no_args_is_help=True, help="Format, parse and shift calendar dates.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING..."),
) -> None:
    configure_logging(log_level)


@app.command("format")
def format_command(
    date: Optional[str] = typer.Argument(None, help="Date to format (default: now)."),
    date_format: Optional[str] = typer.Option(None, "--date-format", "-f"),
    hour_format: Optional[str] = typer.Option(None, "--hour-format", "-H"),
    include_hour: Optional[bool] = typer.Option(None, "--include-hour/--no-include-hour"),
    only_hour: bool = typer.Option(False, "--only-hour"),
    separator: Optional[str] = typer.Option(None, "--separator", "-s"),
    use_24_hours: Optional[bool] = typer.Option(None, "--use-24-hours/--use-12-hours"),
) -> None:
    """Render a date with dd/mm/yyyy and hh/mm/ss/a templates."""

    _console.print(
        date_utils.format_date(
            date,
            date_format=date_format,
            hour_format=hour_format,
            include_hour=include_hour,
            only_hour=only_hour,
            separator=separator,
            use_24_hours=use_24_hours,
        ),
        highlight=False,
        markup=False,
    )


@app.command("parse")
def parse_command(text: str = typer.Argument(..., help="DD/MM/YYYY - hh:mm AM|PM or any date text.")) -> None:
    """Parse a date string and print it as ISO 8601."""

    parsed = date_utils.convert_string_to_date(text)
    if parsed is None:
        _console.print(f"[red]Invalid date:[/red] {text!r}")
        raise typer.Exit(code=1)
    _console.print(parsed.isoformat(), highlight=False)


@app.command("diff-hours")
def diff_hours_command(
    start: str = typer.Argument(...),
    end: Optional[str] = typer.Argument(None, help="Default: now."),
) -> None:
    """Signed difference in hours (end - start)."""

    result = date_utils.diff_hours(start, end)
    if result is None:
        _console.print("[red]Could not resolve one of the dates.[/red]")
        raise typer.Exit(code=1)
    _console.print(f"{result:g}", highlight=False)


@app.command("diff-days")
def diff_days_command(
    start: str = typer.Argument(...),
    end: Optional[str] = typer.Argument(None, help="Default: now."),
) -> None:
    """Whole days between two dates (order independent)."""

    result = date_utils.diff_days(start, end)
    if result is None:
        _console.print("[red]Could not resolve one of the dates.[/red]")
        raise typer.Exit(code=1)
    _console.print(str(result), highlight=False)


def _shift(value: float, unit: DurationUnit, date: Optional[str], *, negate: bool) -> None:
    try:
        result = (date_utils.subtract if negate else date_utils.add)(value, unit, date)
    except (DateUtilsError, OverflowError) as exc:
        raise typer.BadParameter(str(exc)) from exc
    _console.print(result.isoformat(sep=" "), highlight=False)


@app.command("add")
def add_command(
    value: float = typer.Argument(...),
    unit: DurationUnit = typer.Argument(...),
    date: Optional[str] = typer.Argument(None, help="Default: now."),
) -> None:
    """Add VALUE UNIT to DATE."""

    _shift(value, unit, date, negate=False)


@app.command("subtract")
def subtract_command(
    value: float = typer.Argument(...),
    unit: DurationUnit = typer.Argument(...),
    date: Optional[str] = typer.Argument(None, help="Default: now."),
) -> None:
    """Subtract VALUE UNIT from DATE."""

    _shift(value, unit, date, negate=True)


@app.command("compare")
def compare_command(start: str = typer.Argument(...), end: str = typer.Argument(...)) -> None:
    """Print 1 if END is later, -1 if earlier, 0 if equal (or unresolvable)."""

    _console.print(str(date_utils.compare_dates(start, end)), highlight=False)


@app.command("months")
def months_command() -> None:
    """List month numbers and their Spanish names."""

    _console.print(build_months_table())


@app.command("bounds")
def bounds_command(
    year: Optional[int] = typer.Option(None, "--year", "-y"),
    month: Optional[int] = typer.Option(None, "--month", "-m", min=1, max=12),
    date_format: Optional[str] = typer.Option(None, "--date-format", "-f"),
) -> None:
    """First/last day of the year and of the month."""

    rows = [
        ("first day of year", date_utils.get_first_day_of_year(year, date_format=date_format)),
        ("last day of year", date_utils.get_last_day_of_year(year, date_format=date_format)),
        ("first day of month", date_utils.get_first_day_of_month(month, year, date_format=date_format)),
        ("last day of month", date_utils.get_last_day_of_month(month, year, date_format=date_format)),
    ]
    _console.print(build_bounds_table(rows))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
