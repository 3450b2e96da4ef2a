"""
Configuración centralizada del proyecto usando Pydantic Settings.

Este módulo maneja las variables de entorno necesarias para conectarse
a la API de Actual Budget y para levantar el servidor MCP, con validación
automática al arrancar.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración principal de la aplicación."""

    # === Actual Budget (actual-http-api) ===
    actual_api_url: str = Field(
        default="http://localhost:5007",
        description="URL base del servidor actual-http-api",
    )
    actual_api_key: str = Field(
        ...,
        description="API key enviada en el header x-api-key",
    )
    actual_budget_sync_id: str = Field(
        ...,
        description="Sync ID del presupuesto (Settings → Advanced en Actual)",
    )
    actual_encryption_password: str | None = Field(
        default=None,
        description="Contraseña de cifrado end-to-end del presupuesto (opcional)",
    )
    actual_request_timeout: float = Field(
        default=30.0,
        description="Timeout en segundos para cada request a la API",
        gt=0,
        le=300,
    )

    # === Configuración de la aplicación ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Nivel de logging",
    )
    environment: Literal["development", "production", "testing"] = Field(
        default="development",
        description="Entorno de ejecución",
    )

    # === Configuración de logging ===
    log_to_file: bool = Field(
        default=False,
        description="Si se escriben logs rotativos a disco además de stderr",
    )
    log_rotation: str = Field(
        default="10 MB",
        description="Tamaño máximo de los archivos de log antes de rotar",
    )
    log_retention: str = Field(
        default="1 month",
        description="Tiempo de retención de logs antiguos",
    )
    logs_directory: Path = Field(
        default=Path("logs"),
        description="Directorio donde se guardan los logs",
    )

    # === Servidor MCP ===
    mcp_transport: Literal["stdio", "sse"] = Field(
        default="stdio",
        description="Transporte del servidor MCP",
    )
    mcp_host: str = Field(
        default="127.0.0.1",
        description="Host para el transporte SSE",
    )
    mcp_port: int = Field(
        default=3000,
        description="Puerto para el transporte SSE",
        ge=1,
        le=65535,
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("actual_api_key", "actual_budget_sync_id")
    @classmethod
    def validate_secrets(cls, value: str) -> str:
        """Valida que las credenciales no estén vacías."""
        if not value or value.strip() == "":
            raise ValueError("Las credenciales de Actual no pueden estar vacías")
        return value

    @field_validator("actual_api_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normaliza la URL base sin slash final."""
        return value.rstrip("/")

    def is_development(self) -> bool:
        """
        Verifica si el entorno es de desarrollo.

        Returns:
            bool: True si es desarrollo
        """
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """
    Obtiene una instancia singleton de Settings.

    Esta función está decorada con lru_cache para asegurar que solo
    se cree una instancia de Settings durante la vida de la aplicación.

    Returns:
        Settings: Instancia singleton de configuración
    """
    return Settings()  # type: ignore[call-arg]


# Instancia global de configuración
settings = get_settings()
