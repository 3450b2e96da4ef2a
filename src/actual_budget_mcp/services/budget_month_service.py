"""Pipeline completo del reporte mensual: validar → obtener → unir → renderizar."""

from typing import Any

from actual_budget_mcp.core.logging import get_logger
from actual_budget_mcp.services.actual_api import ActualAPIClient
from actual_budget_mcp.services.budget_month_fetcher import BudgetMonthDataFetcher
from actual_budget_mcp.services.budget_month_parser import BudgetMonthInputParser
from actual_budget_mcp.services.budget_month_report import BudgetMonthReportGenerator


logger = get_logger(__name__)


async def build_budget_month_report(
    raw_input: Any,
    client: ActualAPIClient | None = None,
) -> str:
    """
    Genera el reporte de presupuesto de un mes.

    Cada llamada construye sus propias estructuras; no hay estado
    compartido entre requests.

    Args:
        raw_input: Argumentos crudos de la herramienta ({"month": "YYYY-MM"})
        client: Cliente de Actual a usar. Si es None se crea uno con la
            configuración de entorno y se cierra al terminar.

    Returns:
        str: Reporte en Markdown

    Raises:
        ValidationError: Input inválido (antes de cualquier I/O)
        UpstreamFetchError: Falló alguna de las consultas a Actual
    """
    parsed = BudgetMonthInputParser().parse(raw_input)
    logger.info(f"Generando reporte de presupuesto para {parsed.month}")

    if client is None:
        async with ActualAPIClient.from_settings() as owned_client:
            fetched = await BudgetMonthDataFetcher(owned_client).fetch_all(parsed.month)
    else:
        fetched = await BudgetMonthDataFetcher(client).fetch_all(parsed.month)

    generator = BudgetMonthReportGenerator()
    report_data = generator.build_report_data(
        fetched.budget_data,
        fetched.categories,
        fetched.category_groups,
        month=parsed.month,
    )
    report = generator.generate(report_data)

    logger.info(f"Reporte {parsed.month} generado: {len(report_data.groups)} grupos")
    return report


__all__ = ["build_budget_month_report"]
