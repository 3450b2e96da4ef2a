"""
Excepciones de la aplicación.

Dos tipos de error llegan al llamador del pipeline de reportes:
- ValidationError: input inválido, se lanza antes de cualquier I/O
- UpstreamFetchError: falló alguna consulta a la API de Actual

La capa de herramientas MCP es la que traduce cada tipo a su formato de respuesta.
"""

from typing import Any


class AppException(Exception):
    """
    Excepción base de la aplicación.

    Todas las excepciones personalizadas heredan de esta clase.
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class ValidationError(AppException):
    """Error de validación de datos de entrada."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        code = "VALIDATION_ERROR"
        if field:
            code = f"INVALID_{field.upper()}"

        self.field = field
        super().__init__(message=message, code=code, details=details)


class UpstreamFetchError(AppException):
    """
    Error de la API externa del ledger.

    El mensaje es el del error original, sin prefijos, para que el
    llamador lo vea tal cual.
    """

    def __init__(
        self,
        message: str,
        service: str = "actual",
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.service = service
        self.status_code = status_code
        super().__init__(message=message, code="UPSTREAM_ERROR", details=details)


__all__ = ["AppException", "ValidationError", "UpstreamFetchError"]
