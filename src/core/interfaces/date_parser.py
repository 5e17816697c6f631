"""Contrato del parser genérico de fechas.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el parser basado en dateutil por otro (o por un stub en
  tests) sin acoplar los servicios a una implementación concreta.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class DateStringParser(Protocol):
    """Contrato mínimo para interpretar texto libre como fecha.

    Reglas de diseño:
    - Nunca lanza por texto mal formado: devuelve `None`.
    - Devuelve `datetime` naive en hora local.
    """

    def __call__(self, text: str) -> datetime | None:
        ...
