"""Construcción y render del reporte mensual de presupuesto."""

from typing import Any

from actual_budget_mcp.schemas.budget_month import (
    Category,
    CategoryGroup,
    ReportCategoryEntry,
    ReportGroupEntry,
    ReportModel,
    ReportSummary,
)
from actual_budget_mcp.utils.formatting import coerce_amount, format_amount


class BudgetMonthReportGenerator:
    """
    Une el agregado del mes con los nombres de categorías y grupos,
    y lo renderiza como Markdown.

    Ninguno de los dos pasos lanza excepciones: ids que no cruzan entre
    las fuentes o montos ausentes se omiten o quedan en 0.
    """

    # ========================================================================
    # JOIN
    # ========================================================================

    def build_report_data(
        self,
        budget_data: dict[str, Any],
        categories: list[Category],
        category_groups: list[CategoryGroup],
        month: str | None = None,
    ) -> ReportModel:
        """
        Construye el modelo del reporte a partir de los datos obtenidos.

        Args:
            budget_data: Agregado del mes tal como lo devuelve la API
            categories: Lista plana de categorías
            category_groups: Lista de grupos de categorías
            month: Mes pedido, se usa si el agregado no trae "month"

        Returns:
            ReportModel con los grupos que tienen al menos una categoría
        """
        # Un acumulador por grupo, en el orden de la lista de grupos
        group_map: dict[str, ReportGroupEntry] = {}
        for group in category_groups:
            group_map.setdefault(group.id, ReportGroupEntry(id=group.id, name=group.name))

        # Primer match gana, igual que una búsqueda lineal
        category_map: dict[str, Category] = {}
        for category in categories:
            category_map.setdefault(category.id, category)

        for group_data in _budget_groups(budget_data):
            group = group_map.get(str(group_data.get("id")))
            category_entries = group_data.get("categories")
            if group is None or not isinstance(category_entries, list):
                continue

            for cat_budget in category_entries:
                if not isinstance(cat_budget, dict):
                    continue
                category = category_map.get(str(cat_budget.get("id")))
                if category is None:
                    continue

                group.add(
                    ReportCategoryEntry(
                        id=category.id,
                        name=category.name,
                        budgeted=coerce_amount(cat_budget.get("budgeted")),
                        spent=coerce_amount(cat_budget.get("spent")),
                        balance=coerce_amount(cat_budget.get("balance")),
                    )
                )

        return ReportModel(
            month=str(budget_data.get("month") or month or ""),
            summary=ReportSummary(
                total_budgeted=coerce_amount(budget_data.get("totalBudgeted")),
                total_spent=coerce_amount(budget_data.get("totalSpent")),
                total_balance=coerce_amount(budget_data.get("totalBalance")),
                to_budget=coerce_amount(budget_data.get("toBudget")),
                income_available=coerce_amount(budget_data.get("incomeAvailable")),
            ),
            groups=[g for g in group_map.values() if g.categories],
        )

    # ========================================================================
    # RENDER
    # ========================================================================

    def generate(self, data: ReportModel) -> str:
        """
        Genera el reporte en Markdown.

        Args:
            data: Modelo del reporte

        Returns:
            str: Texto del reporte, idéntico para el mismo modelo
        """
        lines: list[str] = []

        lines.append(f"# Budget for {data.month}")
        lines.append("")

        summary = data.summary
        lines.append("## Summary")
        lines.append(f"- Total Budgeted: {format_amount(summary.total_budgeted)}")
        lines.append(f"- Total Spent: {format_amount(summary.total_spent)}")
        lines.append(f"- Total Balance: {format_amount(summary.total_balance)}")
        lines.append(f"- To Budget: {format_amount(summary.to_budget)}")
        lines.append(f"- Income Available: {format_amount(summary.income_available)}")
        lines.append("")

        if data.groups:
            lines.append("## Category Groups")
            lines.append("")

            for group in data.groups:
                lines.append(f"### {group.name}")
                lines.append(
                    f"Group Total: {_figures(group.total_budgeted, group.total_spent, group.total_balance)}"
                )
                for category in group.categories:
                    lines.append(
                        f"- {category.name}: "
                        f"{_figures(category.budgeted, category.spent, category.balance)}"
                    )
                lines.append("")

        return "\n".join(lines)


def _budget_groups(budget_data: dict[str, Any]) -> list[dict[str, Any]]:
    """Grupos con montos del agregado (Actual los llama categoryGroups)."""
    groups = budget_data.get("categoryGroups")
    if groups is None:
        groups = budget_data.get("groups")
    if not isinstance(groups, list):
        return []
    return [g for g in groups if isinstance(g, dict)]


def _figures(budgeted: Any, spent: Any, balance: Any) -> str:
    return (
        f"Budgeted {format_amount(budgeted)} | "
        f"Spent {format_amount(spent)} | "
        f"Balance {format_amount(balance)}"
    )


__all__ = ["BudgetMonthReportGenerator"]
