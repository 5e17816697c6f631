"""Errores del dominio.

Por qué una jerarquía propia:
- Los llamadores pueden capturar `DateUtilsError` sin conocer cada caso.
- Cada error hereda además del builtin equivalente (`TypeError`,
  `ValueError`) para no romper código que ya captura esos tipos.
"""

from __future__ import annotations


class DateUtilsError(Exception): ...


class InvalidAmountError(DateUtilsError, TypeError): ...


class InvalidUnitError(DateUtilsError, ValueError): ...


class InvalidDateError(DateUtilsError, ValueError): ...
