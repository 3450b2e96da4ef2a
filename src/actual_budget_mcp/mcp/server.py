"""
MCP Server para Actual Budget.

Expone el reporte mensual de presupuesto como herramienta MCP.
La lógica vive en services/; aquí solo se traduce cada tipo de
error a una respuesta estructurada.

Uso:
    python -m actual_budget_mcp.mcp
"""

import asyncio
from dataclasses import dataclass
from enum import Enum
import json
from typing import Any, NoReturn

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from actual_budget_mcp.config.settings import settings
from actual_budget_mcp.core.errors import UpstreamFetchError, ValidationError
from actual_budget_mcp.core.logging import get_logger
from actual_budget_mcp.services.budget_month_service import build_budget_month_report


# =============================================================================
# CONFIGURACIÓN Y TIPOS
# =============================================================================

logger = get_logger(__name__)


class ErrorCode(Enum):
    """Códigos de error estándar."""

    INVALID_INPUT = "INVALID_INPUT"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass
class MCPError:
    """Error estructurado para respuestas MCP."""

    code: ErrorCode
    message: str
    field: str | None = None
    suggestion: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"error": True, "code": self.code.value, "message": self.message}
        if self.field:
            result["field"] = self.field
        if self.suggestion:
            result["suggestion"] = self.suggestion
        return result

    def raise_as_tool_error(self) -> NoReturn:
        """Lanza el error como ToolError para que la respuesta MCP lleve isError."""
        raise ToolError(json.dumps(self.to_dict(), ensure_ascii=False))


# =============================================================================
# SERVIDOR MCP
# =============================================================================

mcp = FastMCP(
    name="actual-budget",
    instructions="""MCP server for an Actual Budget ledger.

AVAILABLE TOOLS:
- get-budget-month: budgeted, spent and balance for every category of a
  month, organized by category group, plus the month totals.

Months use the YYYY-MM format. Amounts are shown in the budget currency
with two decimals.
""",
    host=settings.mcp_host,
    port=settings.mcp_port,
)


# =============================================================================
# HERRAMIENTAS
# =============================================================================


@mcp.tool(
    name="get-budget-month",
    description=(
        "Get detailed budget information for a specific month, including budgeted amounts, "
        "spent amounts, and balances for all categories organized by category groups."
    ),
)
async def get_budget_month(month: str) -> str:
    """
    📅 Reporte de presupuesto de un mes.

    Args:
        month: Mes en formato YYYY-MM

    Returns:
        Reporte en Markdown

    Raises:
        ToolError: Con el error estructurado serializado como JSON
    """
    try:
        return await build_budget_month_report({"month": month})
    except ValidationError as e:
        logger.warning(f"Input inválido para get-budget-month: {e.message}")
        MCPError(
            code=ErrorCode.INVALID_INPUT,
            message=e.message,
            field=e.field,
            suggestion="Use a month like 2024-01",
        ).raise_as_tool_error()
    except UpstreamFetchError as e:
        logger.warning(f"Actual falló al generar el reporte de {month}: {e.message}")
        MCPError(code=ErrorCode.UPSTREAM_ERROR, message=e.message).raise_as_tool_error()
    except Exception as e:
        logger.exception(f"Error inesperado en get-budget-month: {e}")
        MCPError(
            code=ErrorCode.INTERNAL_ERROR,
            message=str(e) or type(e).__name__,
        ).raise_as_tool_error()


# =============================================================================
# PUNTO DE ENTRADA
# =============================================================================


async def run_server() -> None:
    """Ejecuta el servidor MCP con el transporte configurado."""
    logger.info(f"🚀 MCP Server iniciando ({settings.mcp_transport})...")
    if settings.mcp_transport == "sse":
        logger.info(f"Escuchando en http://{settings.mcp_host}:{settings.mcp_port}/sse")
        await mcp.run_sse_async()
    else:
        await mcp.run_stdio_async()


def main() -> None:
    """Entry point CLI."""
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
