"""
MCP Server para Actual Budget.

Este módulo implementa un servidor MCP (Model Context Protocol)
usando FastMCP para consultar un presupuesto de Actual desde un LLM.

Herramientas disponibles:
- get-budget-month: Reporte del mes por grupo y categoría
"""

from actual_budget_mcp.mcp.server import main, mcp, run_server


__all__ = ["mcp", "run_server", "main"]
