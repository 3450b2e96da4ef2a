"""Lectura de categorías y grupos de categorías desde Actual."""

from typing import Any

from actual_budget_mcp.schemas.budget_month import Category, CategoryGroup
from actual_budget_mcp.services.actual_api import ActualAPIClient


async def fetch_all_categories(client: ActualAPIClient) -> list[Category]:
    """
    Obtiene todas las categorías del presupuesto.

    El endpoint puede mezclar registros de grupos con los de categorías;
    solo los que traen la llave group_id son categorías.
    """
    results = await client.get_categories()
    return [Category.from_api(item) for item in results if "group_id" in item and _has_id(item)]


async def fetch_all_category_groups(client: ActualAPIClient) -> list[CategoryGroup]:
    """Obtiene todos los grupos de categorías."""
    results = await client.get_category_groups()
    return [CategoryGroup.from_api(item) for item in results if _has_id(item)]


def _has_id(item: dict[str, Any]) -> bool:
    return item.get("id") is not None


__all__ = ["fetch_all_categories", "fetch_all_category_groups"]
