"""Unidades de duración para la aritmética de fechas."""

from __future__ import annotations

from enum import Enum


class DurationUnit(str, Enum):
    """Discriminador de unidad usado por `add`/`subtract`."""

    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    @property
    def is_calendar_field(self) -> bool:
        """True para unidades que mueven mes/año (no son un intervalo fijo)."""

        return self in (DurationUnit.MONTHS, DurationUnit.YEARS)
