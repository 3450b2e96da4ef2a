"""
Configuración centralizada de logging usando Loguru.

Todo el logging de consola va a stderr: stdout es el canal del transporte
stdio de MCP y cualquier línea extra rompe el protocolo.
"""

import json
from pathlib import Path
import sys
from typing import TYPE_CHECKING, Any

from loguru import logger


if TYPE_CHECKING:
    from loguru import Logger

from actual_budget_mcp.config.settings import settings


# Nombre del servicio para observability
SERVICE_NAME = "actual-budget-mcp"


def json_serializer(record: dict[str, Any]) -> str:
    """Serializa un record de log a una línea JSON."""
    subset = {
        "ts": record["time"].strftime("%Y-%m-%dT%H:%M:%S.%fZ"),
        "level": record["level"].name,
        "service": SERVICE_NAME,
        "msg": record["message"],
        "module": record["extra"].get("name", record["name"]),
        "function": record["function"],
        "line": record["line"],
    }

    # Extra fields (month, tool, etc.)
    if record.get("extra"):
        extra = {k: v for k, v in record["extra"].items() if k != "name"}
        subset.update(extra)

    if record["exception"]:
        subset["error"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else None,
            "message": str(record["exception"].value) if record["exception"].value else None,
        }

    return json.dumps(subset, default=str)


def json_sink(message: Any) -> None:
    """Sink que escribe JSON a stderr."""
    record = message.record
    print(json_serializer(record), file=sys.stderr, flush=True)  # noqa: T201


def setup_logging() -> None:
    """
    Configura el sistema de logging de la aplicación.

    - Development: formato colorizado legible
    - Production/testing: JSON estructurado
    - Archivo con rotación solo si LOG_TO_FILE está activo
    """
    # Remover el handler por defecto (escribe a stderr sin formato)
    logger.remove()

    # === LOGGING A CONSOLA (stderr) ===
    if settings.is_development():
        console_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )
        logger.add(
            sys.stderr,
            format=console_format,
            level=settings.log_level,
            colorize=True,
            backtrace=True,
            diagnose=True,
        )
    else:
        logger.add(
            json_sink,
            level=settings.log_level,
            backtrace=False,
            diagnose=False,
        )

    # === LOGGING A ARCHIVO ===
    if settings.log_to_file:
        logs_dir = Path(settings.logs_directory)
        logs_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            logs_dir / "actual_budget_mcp_{time:YYYY-MM-DD}.log",
            format=(
                "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
                "{level: <8} | "
                "{process} | "
                "{name}:{function}:{line} | "
                "{message}\n"
                "{exception}"
            ),
            level=settings.log_level,
            rotation=settings.log_rotation,
            retention=settings.log_retention,
            compression="zip",
            encoding="utf-8",
            backtrace=True,
            diagnose=False,
        )

    logger.debug(
        f"Sistema de logging configurado - Nivel: {settings.log_level} - "
        f"Entorno: {settings.environment}"
    )


def get_logger(name: str) -> "Logger":
    """
    Obtiene un logger con el nombre especificado.

    Args:
        name: Nombre del logger (normalmente __name__ del módulo)

    Returns:
        Logger de loguru configurado

    Example:
        >>> from actual_budget_mcp.core.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Mensaje de log")
    """
    return logger.bind(name=name)


# Configurar logging al importar el módulo
setup_logging()

__all__ = ["logger", "get_logger", "setup_logging"]
