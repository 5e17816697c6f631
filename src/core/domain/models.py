"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field).
- `frozen=True` garantiza que una configuración resuelta no se modifica
  después de construirla.

Nota:
- Estos modelos describen *cómo* se renderiza una fecha, no *qué* fecha.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


DEFAULT_DATE_FORMAT = "DD/MM/YYYY"
DEFAULT_HOUR_FORMAT = "hh:mm a"
DEFAULT_SEPARATOR = " "


class FormatSpec(BaseModel):
    """Configuración completamente resuelta para `format_date`.

    Por qué un modelo separado de los argumentos:
    - Los argumentos del llamador son opcionales y pueden venir vacíos.
    - Aquí todos los defaults ya están aplicados; el render solo lee.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    date_format: str = Field(
        default=DEFAULT_DATE_FORMAT,
        description="Plantilla de la parte fecha (tokens dd, mm, yyyy).",
    )
    hour_format: str = Field(
        default=DEFAULT_HOUR_FORMAT,
        description="Plantilla de la parte hora (tokens hh, mm, ss, a).",
    )
    only_hour: bool = Field(
        default=False,
        description="Omitir por completo la parte fecha.",
    )
    include_hour: bool = Field(
        default=False,
        description="Renderizar la parte hora.",
    )
    use_24_hours: bool = Field(
        default=False,
        description="Reloj de 24 horas (sin marcador am/pm).",
    )
    separator: str = Field(
        default=DEFAULT_SEPARATOR,
        description="Texto entre la parte fecha y la parte hora.",
    )
