"""Representación de instantes inválidos.

`datetime` no puede representar una fecha inválida, así que la resolución de
entradas mal formadas devuelve el centinela `INVALID_DATE`. Es un valor
"date-like" sin instante subyacente: `is_empty(INVALID_DATE)` es True.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Union


class InvalidDate:
    """Centinela único para fechas que no se pudieron resolver."""

    _instance: "InvalidDate | None" = None

    def __new__(cls) -> "InvalidDate":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Invalid Date"

    __str__ = __repr__

    def __bool__(self) -> bool:
        return False


INVALID_DATE = InvalidDate()

# Entrada aceptada por las funciones de fecha: instante nativo, texto u omitido.
InstantInput = Union[datetime, date, str, None]
