"""Obtención concurrente de los datos del reporte mensual."""

import asyncio

from actual_budget_mcp.core.errors import UpstreamFetchError
from actual_budget_mcp.core.logging import get_logger
from actual_budget_mcp.schemas.budget_month import FetchedData
from actual_budget_mcp.services.actual_api import ActualAPIClient
from actual_budget_mcp.services.categories import (
    fetch_all_categories,
    fetch_all_category_groups,
)


logger = get_logger(__name__)


class BudgetMonthDataFetcher:
    """Único punto de I/O del pipeline de reportes."""

    def __init__(self, client: ActualAPIClient) -> None:
        self.client = client

    async def fetch_all(self, month: str) -> FetchedData:
        """
        Obtiene el agregado del mes, las categorías y los grupos en paralelo.

        Todo o nada: la primera falla cancela las consultas pendientes y se
        propaga como UpstreamFetchError con el mensaje original.

        Args:
            month: Mes validado en formato YYYY-MM

        Returns:
            FetchedData con los tres datasets sin transformar
        """
        tasks = [
            asyncio.ensure_future(self.client.get_budget_month(month)),
            asyncio.ensure_future(fetch_all_categories(self.client)),
            asyncio.ensure_future(fetch_all_category_groups(self.client)),
        ]

        try:
            budget_data, categories, category_groups = await asyncio.gather(*tasks)
        except UpstreamFetchError:
            _cancel_pending(tasks)
            raise
        except Exception as e:
            _cancel_pending(tasks)
            raise UpstreamFetchError(str(e) or type(e).__name__) from e

        logger.debug(
            f"Datos de {month} obtenidos: {len(categories)} categorías, "
            f"{len(category_groups)} grupos"
        )

        return FetchedData(
            budget_data=budget_data,
            categories=categories,
            category_groups=category_groups,
        )


def _cancel_pending(tasks: list[asyncio.Future]) -> None:
    for task in tasks:
        if not task.done():
            task.cancel()


__all__ = ["BudgetMonthDataFetcher"]
