"""
Configuración de fixtures para pytest.

Este archivo contiene fixtures compartidos que pueden ser usados
en todos los tests del proyecto.

Estrategia de Testing:
- Ningún test habla con un servidor de Actual real
- El pipeline se prueba con un cliente falso en memoria
- El cliente HTTP se prueba con httpx.MockTransport
"""

import os
from typing import Any

import pytest


# Setup de variables de entorno ANTES de cualquier import de la app
os.environ.setdefault("ACTUAL_API_KEY", "test-api-key")
os.environ.setdefault("ACTUAL_BUDGET_SYNC_ID", "test-sync-id")
os.environ.setdefault("ACTUAL_API_URL", "http://actual.test")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("LOG_LEVEL", "WARNING")


class FakeActualClient:
    """
    Cliente en memoria con la misma interfaz que ActualAPIClient.

    Cada dataset puede ser un valor o una excepción a lanzar.
    """

    def __init__(
        self,
        budget_month: Any = None,
        categories: Any = None,
        category_groups: Any = None,
    ) -> None:
        self.budget_month = budget_month if budget_month is not None else {}
        self.categories = categories if categories is not None else []
        self.category_groups = category_groups if category_groups is not None else []
        self.calls: list[tuple[str, ...]] = []

    async def get_budget_month(self, month: str) -> dict[str, Any]:
        self.calls.append(("get_budget_month", month))
        return self._resolve(self.budget_month)

    async def get_categories(self) -> list[dict[str, Any]]:
        self.calls.append(("get_categories",))
        return self._resolve(self.categories)

    async def get_category_groups(self) -> list[dict[str, Any]]:
        self.calls.append(("get_category_groups",))
        return self._resolve(self.category_groups)

    @staticmethod
    def _resolve(value: Any) -> Any:
        if isinstance(value, BaseException):
            raise value
        return value


@pytest.fixture
def fake_client_factory() -> type[FakeActualClient]:
    """Clase del cliente falso, para construirlo con datos por test."""
    return FakeActualClient


@pytest.fixture
def budget_month_data() -> dict[str, Any]:
    """
    Agregado de enero 2024 con un grupo y una categoría.

    Returns:
        dict: Respuesta de /months/2024-01 (sin el envoltorio "data")
    """
    return {
        "month": "2024-01",
        "incomeAvailable": 500000,
        "lastMonthOverspent": 0,
        "forNextMonth": 0,
        "totalBudgeted": 400000,
        "toBudget": 100000,
        "fromLastMonth": 0,
        "totalIncome": 500000,
        "totalSpent": 350000,
        "totalBalance": 50000,
        "categoryGroups": [
            {
                "id": "g1",
                "name": "Food",
                "budgeted": 999999,
                "categories": [
                    {"id": "c1", "name": "Groceries", "budgeted": 200000, "spent": 150000, "balance": 50000},
                ],
            },
        ],
    }


@pytest.fixture
def categories_data() -> list[dict[str, Any]]:
    """Respuesta de /categories."""
    return [{"id": "c1", "name": "Groceries", "group_id": "g1", "is_income": False}]


@pytest.fixture
def category_groups_data() -> list[dict[str, Any]]:
    """Respuesta de /categorygroups."""
    return [{"id": "g1", "name": "Food", "is_income": False}]
