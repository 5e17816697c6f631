"""Detección de valores "vacíos".

Por qué existe:
- Las funciones de fecha aplican defaults cuando un argumento viene ausente
  o vacío; este módulo define qué significa "vacío" en un único lugar.
- `0` y `False` NO son vacíos: son valores válidos de un parámetro.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any

from core.domain.instant import InvalidDate


def is_empty(value: Any) -> bool:
    """True si `value` debe tratarse como ausente.

    Vacío: None, texto en blanco, colecciones sin elementos, mapeos sin
    claves y el centinela `INVALID_DATE`.

    >>> is_empty("   "), is_empty(0), is_empty([])
    (True, False, True)
    """

    if value is None:
        return True
    if isinstance(value, str):
        return len(value.strip()) == 0
    if isinstance(value, InvalidDate):
        return True
    if isinstance(value, Mapping):
        return len(value) == 0
    if isinstance(value, Collection):
        return len(value) == 0
    return False


def has_value(value: Any) -> bool:
    """Negación exacta de `is_empty`."""

    return not is_empty(value)
