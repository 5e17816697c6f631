"""Resolución de instantes.

Todas las funciones que aceptan "fecha, texto u omitido" pasan por
`resolve_instant`, una sola vez por argumento:

1) omitido -> ahora (leído en cada llamada, nunca memoizado)
2) `datetime` -> tal cual (con zona -> hora local naive); `date` -> medianoche
3) texto `HH:mm` -> esa hora el 1970-01-01
4) otro texto -> parser genérico; si falla -> `INVALID_DATE`
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Any

from adapters.dateutil_parser import parse_date_string, to_local_naive
from core.domain.errors import InvalidDateError
from core.domain.instant import INVALID_DATE, InvalidDate
from core.interfaces.date_parser import DateStringParser

logger = logging.getLogger(__name__)

HOUR_MINUTE_RE = re.compile(r"(?:[01][0-9]|2[0-3]):[0-5][0-9]")

EPOCH_DATE = date(1970, 1, 1)


def now() -> datetime:
    """Instante actual en hora local (naive)."""

    return datetime.now()


def is_valid_date(value: Any) -> bool:
    """True si `value` es un instante nativo utilizable."""

    return isinstance(value, datetime)


def resolve_instant(
    value: Any = None,
    *,
    parser: DateStringParser | None = None,
) -> datetime | InvalidDate:
    """Resuelve `value` a un `datetime` o al centinela `INVALID_DATE`.

    Nunca lanza: cualquier entrada no reconocida es inválida.
    """

    if value is None:
        return now()

    if isinstance(value, datetime):
        try:
            return to_local_naive(value)
        except (OverflowError, ValueError):
            logger.debug("Could not localize %r", value)
            return INVALID_DATE

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    if isinstance(value, str):
        if HOUR_MINUTE_RE.fullmatch(value):
            hours, minutes = value.split(":")
            return datetime(EPOCH_DATE.year, EPOCH_DATE.month, EPOCH_DATE.day, int(hours), int(minutes))

        parsed = (parser or parse_date_string)(value)
        if parsed is None:
            return INVALID_DATE
        return parsed

    logger.debug("Unsupported instant type %s", type(value).__name__)
    return INVALID_DATE


def resolve_instant_strict(value: Any = None, *, parser: DateStringParser | None = None) -> datetime:
    """Como `resolve_instant`, pero lanza `InvalidDateError` si no resuelve."""

    resolved = resolve_instant(value, parser=parser)
    if not is_valid_date(resolved):
        raise InvalidDateError(f"Could not resolve {value!r} to a valid date")
    return resolved
