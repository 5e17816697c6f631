"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from datetime import datetime

from rich.table import Table

from core.domain.months import Month


def build_months_table() -> Table:
    """Tabla número -> nombre de mes."""

    table = Table(title="Meses")
    table.add_column("#", style="cyan", no_wrap=True, justify="right")
    table.add_column("Nombre", style="white")
    for month in Month:
        table.add_row(str(int(month)), month.label())
    return table


def build_bounds_table(rows: list[tuple[str, datetime | str]]) -> Table:
    """Tabla de límites (primer/último día) ya calculados."""

    table = Table(title="Límites")
    table.add_column("Límite", style="cyan", no_wrap=True)
    table.add_column("Fecha", style="green")
    for label, value in rows:
        table.add_row(label, value if isinstance(value, str) else value.isoformat(sep=" "))
    return table
