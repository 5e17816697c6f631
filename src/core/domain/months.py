"""Tabla de meses en español.

Este módulo centraliza los nombres de los meses soportados por la librería.
Vive en la capa de dominio para que servicios y CLI compartan una única
fuente de verdad sin importar nada de `services`.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType


class Month(IntEnum):
    """Meses del calendario gregoriano (1 - 12)."""

    ENERO = 1
    FEBRERO = 2
    MARZO = 3
    ABRIL = 4
    MAYO = 5
    JUNIO = 6
    JULIO = 7
    AGOSTO = 8
    SEPTIEMBRE = 9
    OCTUBRE = 10
    NOVIEMBRE = 11
    DICIEMBRE = 12

    def label(self) -> str:
        """Nombre canónico en minúsculas (p.ej. `marzo`)."""

        return self.name.lower()


# Orden canónico enero -> diciembre.
MONTH_LABELS: tuple[str, ...] = tuple(month.label() for month in Month)

MONTH_NUMBERS = MappingProxyType({month.label(): int(month) for month in Month})


def month_label(number_of_month: int) -> str | None:
    """Devuelve el nombre del mes para `number_of_month` (1 - 12).

    Fuera de rango devuelve `None` en lugar de lanzar.

    >>> month_label(3)
    'marzo'
    """

    if isinstance(number_of_month, bool) or not isinstance(number_of_month, int):
        return None
    if not 1 <= number_of_month <= 12:
        return None
    return MONTH_LABELS[number_of_month - 1]


def months_label_array() -> list[str]:
    """Los 12 nombres de enero a diciembre (lista nueva en cada llamada)."""

    return list(MONTH_LABELS)


def month_number(label: str) -> int | None:
    """Número de mes (1 - 12) para un nombre en español, o `None`."""

    if not isinstance(label, str):
        return None
    return MONTH_NUMBERS.get(label.strip().lower())
