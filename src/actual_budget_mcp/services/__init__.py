"""Servicios del pipeline de reportes - Actual Budget MCP."""

from actual_budget_mcp.services.actual_api import ActualAPIClient
from actual_budget_mcp.services.budget_month_fetcher import BudgetMonthDataFetcher
from actual_budget_mcp.services.budget_month_parser import (
    BudgetMonthInputParser,
    GetBudgetMonthArgs,
)
from actual_budget_mcp.services.budget_month_report import BudgetMonthReportGenerator
from actual_budget_mcp.services.budget_month_service import build_budget_month_report
from actual_budget_mcp.services.categories import (
    fetch_all_categories,
    fetch_all_category_groups,
)


__all__ = [
    "ActualAPIClient",
    "BudgetMonthDataFetcher",
    "BudgetMonthInputParser",
    "BudgetMonthReportGenerator",
    "GetBudgetMonthArgs",
    "build_budget_month_report",
    "fetch_all_categories",
    "fetch_all_category_groups",
]
