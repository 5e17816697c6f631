"""Parser genérico de fechas basado en python-dateutil.

Por qué un adaptador:
- Es el equivalente al parseo "del host": acepta ISO 8601, RFC 2822,
  `March 15, 2024`, etc.
- Aísla la dependencia: los servicios solo conocen `DateStringParser`.
"""

from __future__ import annotations

import logging
from datetime import datetime

from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)

# Mes, día y hora ausentes -> 1 de enero a medianoche.
PARSE_DEFAULT = datetime(1970, 1, 1)


def to_local_naive(value: datetime) -> datetime:
    """Convierte un datetime con zona a hora local naive; los naive pasan tal cual."""

    if value.tzinfo is None:
        return value
    if value.utcoffset() is None:
        return value.replace(tzinfo=None)
    return value.astimezone().replace(tzinfo=None)


def parse_date_string(text: str, *, dayfirst: bool = False) -> datetime | None:
    """Interpreta `text` como fecha/hora o devuelve `None`.

    Los campos ausentes se completan desde `PARSE_DEFAULT`: "2024-03" es el
    1 de marzo y "2024" el 1 de enero, sin depender del día en que se ejecuta.
    """

    if not isinstance(text, str) or not text.strip():
        return None
    try:
        parsed = dateutil_parser.parse(text, dayfirst=dayfirst, default=PARSE_DEFAULT)
        return to_local_naive(parsed)
    except (ValueError, OverflowError) as exc:
        logger.debug("Could not parse %r as a date: %s", text, exc)
        return None
