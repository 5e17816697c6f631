"""Configuración central de logging.

- Formato legible en terminal vía `rich.logging.RichHandler`.
- Nivel desde settings (`DATE_UTILS_LOG_LEVEL`), por defecto WARNING.
- La librería solo crea loggers por módulo; configurar handlers es cosa del
  punto de entrada (CLI o aplicación anfitriona).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from core.config import get_settings

_HANDLER_NAME = "date-utils-rich"


def configure_logging(level: str | None = None, *, console: Console | None = None) -> None:
    """Configura los loggers `core`, `adapters` y `cli`. Idempotente."""

    level_name = (level or get_settings().log_level or "WARNING").upper()
    numeric_level = getattr(logging, level_name, logging.WARNING)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s | %(message)s"))

    for name in ("core", "adapters", "cli"):
        logger = logging.getLogger(name)
        logger.handlers = [h for h in logger.handlers if h.get_name() != _HANDLER_NAME]
        logger.addHandler(handler)
        logger.setLevel(numeric_level)
        logger.propagate = False
