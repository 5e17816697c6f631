"""Utilidades de fechas: formateo, parseo, comparación y aritmética.

Política de errores:
- Entradas de fecha mal formadas nunca lanzan: cada función devuelve su
  valor de respaldo documentado (`None`, `0`, un "ahora" nuevo o un texto
  con `NaN`).
- La única validación dura es la cantidad/unidad de `add`/`subtract`.

Todas las funciones son puras salvo la lectura del reloj cuando se omite
una fecha.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import datetime, timedelta
from numbers import Real
from typing import Any

from pydantic import ValidationError

from adapters.dateutil_parser import parse_date_string
from core.config import AppSettings, get_settings
from core.domain.errors import InvalidAmountError, InvalidUnitError
from core.domain.instant import InvalidDate
from core.domain.models import FormatSpec
from core.domain.months import MONTH_NUMBERS, month_label, month_number, months_label_array
from core.domain.units import DurationUnit
from core.services import instants
from core.services.emptiness import has_value, is_empty
from core.services.instants import is_valid_date, resolve_instant

logger = logging.getLogger(__name__)

__all__ = [
    "MONTH_NUMBERS",
    "add",
    "add_days",
    "add_hours",
    "compare_dates",
    "convert_string_to_date",
    "diff_days",
    "diff_hours",
    "format_date",
    "get_actual_month",
    "get_first_day_of_month",
    "get_first_day_of_year",
    "get_last_day_of_month",
    "get_last_day_of_year",
    "is_valid_date",
    "month_label",
    "month_number",
    "months_label_array",
    "resolve_format_spec",
    "subtract",
    "subtract_days",
    "subtract_hours",
]

_NAN = "NaN"

DATE_HOUR_MERIDIEM_RE = re.compile(
    r"([0-9]{2})/([0-9]{2})/([0-9]{4}) - ([0-9]{1,2}):([0-9]{2}) (AM|PM)",
    re.IGNORECASE,
)


# ---------------------------------------------------------------------------
# Formateo
# ---------------------------------------------------------------------------


def _safe_settings() -> AppSettings:
    """Settings del entorno; si están mal formados se usan los defaults."""

    try:
        return get_settings()
    except ValidationError as exc:
        logger.warning("Ignoring invalid DATE_UTILS_* settings, using defaults: %s", exc)
        return AppSettings.model_construct()


def resolve_format_spec(
    *,
    date_format: str | None = None,
    only_hour: bool | None = None,
    include_hour: bool | None = None,
    hour_format: str | None = None,
    separator: str | None = None,
    use_24_hours: bool | None = None,
    settings: AppSettings | None = None,
) -> FormatSpec:
    """Aplica defaults (settings + reglas de inclusión) y congela el resultado.

    `include_hour` por defecto es True solo si `only_hour` está activo o se
    pasó un `hour_format` explícito. `separator` solo se reemplaza cuando es
    `None`: un separador en blanco es un valor legítimo.
    """

    settings = settings or _safe_settings()

    resolved_only_hour = bool(only_hour) if has_value(only_hour) else False
    explicit_hour_format = has_value(hour_format)
    if has_value(include_hour):
        resolved_include_hour = bool(include_hour)
    else:
        resolved_include_hour = resolved_only_hour or explicit_hour_format

    return FormatSpec(
        date_format=date_format if has_value(date_format) else settings.date_format,
        hour_format=hour_format if explicit_hour_format else settings.hour_format,
        only_hour=resolved_only_hour,
        include_hour=resolved_include_hour,
        use_24_hours=bool(use_24_hours) if has_value(use_24_hours) else settings.use_24_hours,
        separator=separator if separator is not None else settings.separator,
    )


def _substitute_once(template: str, replacements: list[tuple[str, str]]) -> str:
    """Reemplaza la primera aparición de cada token en la plantilla original.

    Los tokens se buscan sobre `template`, no sobre el texto ya sustituido,
    así un valor insertado (p.ej. `NaN`) nunca se confunde con un token.
    """

    claimed: list[tuple[int, int, str]] = []
    for token, value in replacements:
        start = template.find(token)
        while start != -1:
            end = start + len(token)
            if all(end <= s or start >= e for s, e, _ in claimed):
                claimed.append((start, end, value))
                break
            start = template.find(token, start + 1)

    out: list[str] = []
    cursor = 0
    for start, end, value in sorted(claimed):
        out.append(template[cursor:start])
        out.append(value)
        cursor = end
    out.append(template[cursor:])
    return "".join(out)


def _render_date_part(instant: datetime | InvalidDate, template: str) -> str:
    if isinstance(instant, datetime):
        day, month, year = f"{instant.day:02d}", f"{instant.month:02d}", str(instant.year)
    else:
        day = month = year = _NAN
    return _substitute_once(template.lower(), [("dd", day), ("mm", month), ("yyyy", year)])


def _render_hour_part(instant: datetime | InvalidDate, template: str, use_24_hours: bool) -> str:
    if isinstance(instant, datetime):
        hour_value = instant.hour if use_24_hours else (instant.hour % 12 or 12)
        hours = f"{hour_value:02d}"
        minutes = f"{instant.minute:02d}"
        seconds = f"{instant.second:02d}"
        meridiem = "pm" if instant.hour >= 12 else "am"
    else:
        hours = minutes = seconds = _NAN
        meridiem = "am"

    rendered = _substitute_once(
        template.lower(),
        [
            ("hh", hours),
            ("mm", minutes),
            ("ss", seconds),
            ("a", "" if use_24_hours else meridiem),
        ],
    )
    return rendered.strip() if use_24_hours else rendered


def format_date(
    date: Any = None,
    *,
    date_format: str | None = None,
    only_hour: bool | None = None,
    include_hour: bool | None = None,
    hour_format: str | None = None,
    separator: str | None = None,
    use_24_hours: bool | None = None,
    settings: AppSettings | None = None,
) -> str:
    """Formatea una fecha según las opciones proporcionadas.

    - date: fecha a formatear (por defecto, ahora). Acepta `datetime`,
      `date` o texto.
    - date_format: plantilla de fecha, por defecto `DD/MM/YYYY`.
    - only_hour: renderizar solo la hora.
    - include_hour: incluir la hora (por defecto solo con `only_hour` o
      `hour_format` explícito).
    - hour_format: plantilla de hora, por defecto `hh:mm a`.
    - separator: texto entre fecha y hora, por defecto `" "`.
    - use_24_hours: reloj de 24 horas (sin am/pm).

    Nunca lanza: una fecha irreconocible se renderiza con `NaN`.

    >>> format_date(datetime(2024, 3, 15, 13, 5), include_hour=True)
    '15/03/2024 01:05 pm'
    """

    spec = resolve_format_spec(
        date_format=date_format,
        only_hour=only_hour,
        include_hour=include_hour,
        hour_format=hour_format,
        separator=separator,
        use_24_hours=use_24_hours,
        settings=settings,
    )
    instant = resolve_instant(date) if has_value(date) else instants.now()
    if not is_valid_date(instant):
        logger.debug("format_date received an unresolvable date: %r", date)

    rendered = ""
    if not spec.only_hour:
        rendered = _render_date_part(instant, spec.date_format)

    if spec.include_hour:
        hour_part = _render_hour_part(instant, spec.hour_format, spec.use_24_hours)
        rendered += f"{spec.separator if rendered else ''}{hour_part}"

    return rendered


# ---------------------------------------------------------------------------
# Parseo
# ---------------------------------------------------------------------------


def convert_string_to_date(
    date_string: Any,
    *,
    include_hour: bool | None = None,
    separator: str | None = None,
) -> datetime | None:
    """Convierte `DD/MM/YYYY - H:mm AM|PM` (o cualquier texto de fecha) a datetime.

    Si el texto no sigue el patrón estricto se usa el parser genérico.
    Los campos fuera de rango desbordan como en el constructor de calendario:
    31/02 pasa al 2 de marzo, el mes 13 al enero siguiente y `13:00 PM` a la
    01:00 del día siguiente. Devuelve `None` cuando el resultado no es una
    fecha válida.
    `include_hour` y `separator` se aceptan por simetría con `format_date`.
    """

    if not isinstance(date_string, str):
        logger.debug("convert_string_to_date expects a string, got %s", type(date_string).__name__)
        return None

    match = DATE_HOUR_MERIDIEM_RE.fullmatch(date_string)
    if match is None:
        parsed = parse_date_string(date_string)
        return parsed if is_valid_date(parsed) else None

    day, month, year, hour, minute, period = match.groups()
    parsed_hour = int(hour)
    period = period.upper()
    if period == "PM" and parsed_hour != 12:
        parsed_hour += 12
    elif period == "AM" and parsed_hour == 12:
        parsed_hour = 0

    try:
        return _month_start(int(year), int(month)) + timedelta(
            days=int(day) - 1, hours=parsed_hour, minutes=int(minute)
        )
    except OverflowError as exc:
        logger.debug("Calendar fields out of range in %r: %s", date_string, exc)
        return None


# ---------------------------------------------------------------------------
# Diferencias y comparación
# ---------------------------------------------------------------------------


def diff_hours(start: Any, end: Any = None) -> float | None:
    """Diferencia con signo en horas (`end - start`); `None` si alguna es inválida.

    >>> diff_hours("03:12", "15:30")
    12.3
    """

    start_instant = resolve_instant(start)
    end_instant = resolve_instant(end)
    if not (is_valid_date(start_instant) and is_valid_date(end_instant)):
        logger.debug("diff_hours could not resolve %r / %r", start, end)
        return None
    return (end_instant - start_instant).total_seconds() / 3600


def diff_days(start: Any, end: Any = None) -> int | None:
    """Días completos entre dos fechas (siempre >= 0, sin importar el orden).

    Ambas fechas se normalizan a la 01:00 de su día antes de restar.
    """

    start_instant = resolve_instant(start)
    end_instant = resolve_instant(end)
    if not (is_valid_date(start_instant) and is_valid_date(end_instant)):
        logger.debug("diff_days could not resolve %r / %r", start, end)
        return None

    first = start_instant.replace(hour=1, minute=0, second=0, microsecond=0)
    second = end_instant.replace(hour=1, minute=0, second=0, microsecond=0)
    return abs(second - first) // timedelta(days=1)


def compare_dates(start_date: Any, end_date: Any) -> int:
    """1 si `end_date` es posterior, -1 si es anterior, 0 si son iguales.

    Si alguna fecha no se puede resolver también devuelve 0.
    """

    start_instant = resolve_instant(start_date)
    end_instant = resolve_instant(end_date)
    if not (is_valid_date(start_instant) and is_valid_date(end_instant)):
        logger.debug("compare_dates could not resolve %r / %r", start_date, end_date)
        return 0
    if end_instant > start_instant:
        return 1
    if end_instant < start_instant:
        return -1
    return 0


# ---------------------------------------------------------------------------
# Aritmética
# ---------------------------------------------------------------------------


def _check_amount(value: Any) -> int | float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidAmountError(f"Amount must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")
    return value if isinstance(value, int) else float(value)


def _check_unit(unit: Any) -> DurationUnit:
    if isinstance(unit, str) and not isinstance(unit, DurationUnit):
        unit = unit.strip().lower()
    try:
        return DurationUnit(unit)
    except (ValueError, TypeError):
        allowed = ", ".join(u.value for u in DurationUnit)
        raise InvalidUnitError(f"Unknown unit {unit!r}; expected one of: {allowed}") from None


def _shift_months(instant: datetime, months: int) -> datetime:
    """Mueve el campo mes; el excedente de días pasa al mes siguiente.

    2024-01-31 + 1 mes -> 2024-02-31 -> 2024-03-02.
    """

    year, month_index = divmod(instant.year * 12 + instant.month - 1 + months, 12)
    try:
        first_of_month = instant.replace(year=year, month=month_index + 1, day=1)
    except ValueError as exc:
        raise OverflowError(f"Date out of range: {exc}") from exc
    return first_of_month + timedelta(days=instant.day - 1)


def add(value: Any, unit: DurationUnit | str, date: Any = None) -> datetime:
    """Suma `value` unidades a `date` (por defecto, ahora) y devuelve un datetime nuevo.

    - `value` debe ser un número finito; si no, `InvalidAmountError`.
    - La parte decimal se trunca hacia cero en todas las unidades (1.5 horas
      suma 1 hora). Meses y años usan aritmética de campos de calendario.
    - Si `date` no se puede resolver se devuelve un "ahora" nuevo.
    """

    amount = _check_amount(value)
    duration_unit = _check_unit(unit)

    instant = resolve_instant(date)
    if not is_valid_date(instant):
        logger.debug("add could not resolve %r; returning now", date)
        return instants.now()

    whole = math.trunc(amount)
    if duration_unit.is_calendar_field:
        months = whole * (12 if duration_unit is DurationUnit.YEARS else 1)
        return _shift_months(instant, months)
    return instant + timedelta(**{duration_unit.value: whole})


def subtract(value: Any, unit: DurationUnit | str, date: Any = None) -> datetime:
    """Equivalente a `add(-value, unit, date)`."""

    return add(-_check_amount(value), unit, date)


def add_hours(hours_to_add: Any, date: Any = None) -> datetime:
    return add(hours_to_add, DurationUnit.HOURS, date)


def add_days(days_to_add: Any, date: Any = None) -> datetime:
    return add(days_to_add, DurationUnit.DAYS, date)


def subtract_hours(hours_to_subtract: Any, date: Any = None) -> datetime:
    return subtract(hours_to_subtract, DurationUnit.HOURS, date)


def subtract_days(days_to_subtract: Any, date: Any = None) -> datetime:
    return subtract(days_to_subtract, DurationUnit.DAYS, date)


# ---------------------------------------------------------------------------
# Límites de año/mes
# ---------------------------------------------------------------------------


def get_actual_month() -> int:
    """Número del mes actual (1 - 12)."""

    return instants.now().month


def _month_start(year: int, month: int) -> datetime:
    """Primer día de `month` (1 - 12); meses fuera de rango desbordan al año vecino.

    Años fuera de 1 - 9999 lanzan `OverflowError`, igual que la aritmética.
    """

    normalized_year, month_index = divmod(year * 12 + month - 1, 12)
    try:
        return datetime(normalized_year, month_index + 1, 1)
    except ValueError as exc:
        raise OverflowError(f"Date out of range: {exc}") from exc


def _maybe_format(value: datetime, date_format: str | None) -> datetime | str:
    if has_value(date_format):
        return format_date(value, date_format=date_format)
    return value


def _default_year(year: int | None) -> int:
    return instants.now().year if is_empty(year) else int(year)


def _default_month(month: int | None) -> int:
    return instants.now().month if is_empty(month) else int(month)


def get_first_day_of_year(year: int | None = None, *, date_format: str | None = None) -> datetime | str:
    """1 de enero de `year` (por defecto, el año actual).

    `year` debe estar en 1 - 9999; fuera de ese rango lanza `OverflowError`.
    """

    return _maybe_format(_month_start(_default_year(year), 1), date_format)


def get_last_day_of_year(year: int | None = None, *, date_format: str | None = None) -> datetime | str:
    """31 de diciembre de `year` (por defecto, el año actual).

    El último año representable es 9998: 9999 necesita el 1 de enero de 10000
    y lanza `OverflowError`.
    """

    last_day = _month_start(_default_year(year) + 1, 1) - timedelta(days=1)
    return _maybe_format(last_day, date_format)


def get_first_day_of_month(
    month: int | None = None,
    year: int | None = None,
    *,
    date_format: str | None = None,
) -> datetime | str:
    """Primer día del mes indicado.

    >>> get_first_day_of_month(3, 2024)
    datetime.datetime(2024, 3, 1, 0, 0)
    """

    return _maybe_format(_month_start(_default_year(year), _default_month(month)), date_format)


def get_last_day_of_month(
    month: int | None = None,
    year: int | None = None,
    *,
    date_format: str | None = None,
) -> datetime | str:
    """Último día del mes indicado (el "día 0" del mes siguiente)."""

    next_month = _month_start(_default_year(year), _default_month(month) + 1)
    return _maybe_format(next_month - timedelta(days=1), date_format)
