"""Cliente async para la API REST de Actual Budget (actual-http-api)."""

from types import TracebackType
from typing import Any

import httpx

from actual_budget_mcp.config.settings import Settings, settings as default_settings
from actual_budget_mcp.core.errors import UpstreamFetchError
from actual_budget_mcp.core.logging import get_logger


logger = get_logger(__name__)


class ActualAPIClient:
    """
    Cliente de solo lectura para un presupuesto de Actual.

    Todas las respuestas de actual-http-api vienen envueltas en
    {"data": ...}; los errores traen {"error": "..."}. Cualquier falla
    (red, status no-2xx, JSON inválido) se convierte en UpstreamFetchError
    con el mensaje original. No hay reintentos.

    Example:
        >>> async with ActualAPIClient.from_settings() as client:
        ...     month = await client.get_budget_month("2024-01")
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        budget_sync_id: str,
        encryption_password: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"x-api-key": api_key, "accept": "application/json"}
        if encryption_password:
            headers["budget-encryption-password"] = encryption_password

        self.budget_sync_id = budget_sync_id
        self._client = httpx.AsyncClient(
            base_url=f"{base_url.rstrip('/')}/v1/budgets/{budget_sync_id}",
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ActualAPIClient":
        """Crea el cliente con la configuración de entorno."""
        config = settings or default_settings
        return cls(
            base_url=config.actual_api_url,
            api_key=config.actual_api_key,
            budget_sync_id=config.actual_budget_sync_id,
            encryption_password=config.actual_encryption_password,
            timeout=config.actual_request_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "ActualAPIClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # ========================================================================
    # ENDPOINTS
    # ========================================================================

    async def get_budget_month(self, month: str) -> dict[str, Any]:
        """
        Obtiene el agregado de presupuesto de un mes.

        Args:
            month: Mes en formato YYYY-MM

        Returns:
            dict con totales del mes y categoryGroups con montos por categoría
        """
        data = await self._get(f"/months/{month}")
        if not isinstance(data, dict):
            raise UpstreamFetchError(f"Unexpected response for budget month {month}")
        return data

    async def get_categories(self) -> list[dict[str, Any]]:
        """Lista completa de categorías del presupuesto."""
        return await self._get_list("/categories")

    async def get_category_groups(self) -> list[dict[str, Any]]:
        """Lista completa de grupos de categorías."""
        return await self._get_list("/categorygroups")

    # ========================================================================
    # HTTP
    # ========================================================================

    async def _get_list(self, path: str) -> list[dict[str, Any]]:
        data = await self._get(path)
        if not isinstance(data, list):
            raise UpstreamFetchError(f"Unexpected response for {path}")
        return [item for item in data if isinstance(item, dict)]

    async def _get(self, path: str) -> Any:
        try:
            response = await self._client.get(path)
        except httpx.HTTPError as e:
            logger.warning(f"Error de red consultando Actual ({path}): {e}")
            raise UpstreamFetchError(str(e) or type(e).__name__) from e

        if response.is_error:
            message = _error_message(response)
            logger.warning(f"Actual respondió {response.status_code} en {path}: {message}")
            raise UpstreamFetchError(message, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamFetchError(f"Invalid JSON from {path}") from e

        if isinstance(payload, dict) and "data" in payload:
            return payload["data"]
        return payload


def _error_message(response: httpx.Response) -> str:
    """Extrae el mensaje de error del body, o usa el status HTTP."""
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        for key in ("error", "message"):
            if isinstance(body.get(key), str) and body[key]:
                return body[key]

    return f"HTTP {response.status_code} {response.reason_phrase}".strip()


__all__ = ["ActualAPIClient"]
