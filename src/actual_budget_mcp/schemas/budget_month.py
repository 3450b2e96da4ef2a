"""Schemas del reporte mensual de presupuesto."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Category:
    """Categoría tal como la devuelve Actual (sin montos)."""

    id: str
    name: str
    group_id: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Category":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            group_id=data.get("group_id"),
        )


@dataclass(frozen=True)
class CategoryGroup:
    """Grupo de categorías."""

    id: str
    name: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "CategoryGroup":
        return cls(id=str(data["id"]), name=str(data.get("name") or ""))


@dataclass(frozen=True)
class ParsedInput:
    """Input validado de la herramienta get-budget-month."""

    month: str


@dataclass
class FetchedData:
    """
    Los tres datasets que necesita el reporte.

    budget_data es el agregado del mes sin transformar (dict de la API).
    """

    budget_data: dict[str, Any]
    categories: list[Category]
    category_groups: list[CategoryGroup]


@dataclass
class ReportCategoryEntry:
    """Montos de una categoría, en centavos."""

    id: str
    name: str
    budgeted: int | float = 0
    spent: int | float = 0
    balance: int | float = 0


@dataclass
class ReportGroupEntry:
    """
    Un grupo con sus categorías incluidas.

    Los totales se acumulan desde las categorías incluidas, nunca se
    copian del agregado de la API.
    """

    id: str
    name: str
    categories: list[ReportCategoryEntry] = field(default_factory=list)
    total_budgeted: int | float = 0
    total_spent: int | float = 0
    total_balance: int | float = 0

    def add(self, entry: ReportCategoryEntry) -> None:
        self.categories.append(entry)
        self.total_budgeted += entry.budgeted
        self.total_spent += entry.spent
        self.total_balance += entry.balance


@dataclass(frozen=True)
class ReportSummary:
    """Totales del mes copiados del agregado."""

    total_budgeted: int | float = 0
    total_spent: int | float = 0
    total_balance: int | float = 0
    to_budget: int | float = 0
    income_available: int | float = 0


@dataclass
class ReportModel:
    """Modelo completo del reporte; única entrada del render."""

    month: str
    summary: ReportSummary
    groups: list[ReportGroupEntry] = field(default_factory=list)


__all__ = [
    "Category",
    "CategoryGroup",
    "FetchedData",
    "ParsedInput",
    "ReportCategoryEntry",
    "ReportGroupEntry",
    "ReportModel",
    "ReportSummary",
]
