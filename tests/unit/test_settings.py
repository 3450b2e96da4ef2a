"""
Tests unitarios para el módulo de configuración.

Estos tests verifican que la configuración se carga correctamente
y que las validaciones funcionan como se espera.
"""

from pydantic import ValidationError
import pytest

from actual_budget_mcp.config.settings import Settings, get_settings


def _set_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ACTUAL_API_KEY", "test-api-key")
    monkeypatch.setenv("ACTUAL_BUDGET_SYNC_ID", "test-sync-id")


def test_settings_with_valid_env_vars(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test que verifica que Settings se carga correctamente con variables válidas."""
    _set_required(monkeypatch)
    monkeypatch.setenv("ACTUAL_API_URL", "http://actual.local:5007/")
    monkeypatch.setenv("ACTUAL_ENCRYPTION_PASSWORD", "pw")

    settings = Settings()  # type: ignore[call-arg]

    assert settings.actual_api_key == "test-api-key"
    assert settings.actual_budget_sync_id == "test-sync-id"
    assert settings.actual_api_url == "http://actual.local:5007"
    assert settings.actual_encryption_password == "pw"


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test de valores por defecto."""
    _set_required(monkeypatch)
    for var in ("ACTUAL_API_URL", "ACTUAL_ENCRYPTION_PASSWORD", "MCP_TRANSPORT", "MCP_PORT"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings(_env_file=None)  # type: ignore[call-arg]

    assert settings.actual_api_url == "http://localhost:5007"
    assert settings.actual_encryption_password is None
    assert settings.actual_request_timeout == 30.0
    assert settings.mcp_transport == "stdio"
    assert settings.mcp_port == 3000


def test_settings_rejects_empty_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test que verifica que se rechacen credenciales vacías."""
    _set_required(monkeypatch)
    monkeypatch.setenv("ACTUAL_API_KEY", "   ")

    with pytest.raises(ValidationError):
        Settings()  # type: ignore[call-arg]


def test_settings_requires_sync_id(monkeypatch: pytest.MonkeyPatch) -> None:
    """Sin sync ID no hay presupuesto que consultar."""
    _set_required(monkeypatch)
    monkeypatch.delenv("ACTUAL_BUDGET_SYNC_ID")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)  # type: ignore[call-arg]


def test_settings_rejects_invalid_transport(monkeypatch: pytest.MonkeyPatch) -> None:
    """Solo stdio y sse son transportes válidos."""
    _set_required(monkeypatch)
    monkeypatch.setenv("MCP_TRANSPORT", "websocket")

    with pytest.raises(ValidationError):
        Settings()  # type: ignore[call-arg]


def test_settings_environment_checks(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test que verifica la detección del entorno de desarrollo."""
    _set_required(monkeypatch)
    monkeypatch.setenv("ENVIRONMENT", "development")

    settings = Settings()  # type: ignore[call-arg]

    assert settings.is_development() is True


def test_get_settings_is_cached() -> None:
    """get_settings devuelve siempre la misma instancia."""
    assert get_settings() is get_settings()
