"""Configuración del Core.

Por qué aquí:
- Centraliza los defaults de formateo (pydantic-settings) sin contaminar los
  servicios con lectura de variables de entorno.
- Los argumentos explícitos de cada función siempre ganan sobre estos valores.
"""

from __future__ import annotations

import os
import sys
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import DEFAULT_DATE_FORMAT, DEFAULT_HOUR_FORMAT, DEFAULT_SEPARATOR


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "date-utils"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "date-utils"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "date-utils"
    return Path.home() / ".config" / "date-utils"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        # Solo se quitan comillas envolventes: un separador " " debe sobrevivir.
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# date-utils user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f'{key}="{existing[key]}"')
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Defaults de formateo y logging.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar los servicios.
    - Un único contrato de configuración para librería y CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="DATE_UTILS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    date_format: str = Field(
        default=DEFAULT_DATE_FORMAT,
        min_length=1,
        description="Plantilla por defecto de la parte fecha.",
    )
    hour_format: str = Field(
        default=DEFAULT_HOUR_FORMAT,
        min_length=1,
        description="Plantilla por defecto de la parte hora.",
    )
    separator: str = Field(
        default=DEFAULT_SEPARATOR,
        description="Separador por defecto entre fecha y hora.",
    )
    use_24_hours: bool = Field(
        default=False,
        description="Usar reloj de 24 horas por defecto.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging para la CLI (DEBUG, INFO, WARNING...).",
    )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Settings cacheados; `get_settings.cache_clear()` fuerza una relectura."""

    return AppSettings()
