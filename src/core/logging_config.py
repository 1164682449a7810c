"""Configuración de logging.

Por qué aquí:
- Los módulos solo hacen `logging.getLogger(__name__)`; quién decide el
  formato y el nivel es el entry-point (CLI), una sola vez.
- Usamos `RichHandler` para que los logs convivan con las tablas de la CLI.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def configure_logging(level: str = "WARNING", *, console: Console | None = None) -> None:
    """Configura el logger raíz con un `RichHandler`.

    Raises:
        ValueError: si el nivel de log no es válido.
    """

    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {level}. Valid: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setLevel(level_upper)

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Reemplaza handlers previos para no duplicar salida.
    root.handlers = [handler]

    # httpx loguea cada request a INFO; solo lo queremos en modo verbose.
    logging.getLogger("httpx").setLevel(level_upper if level_upper == "DEBUG" else "WARNING")
