#!/usr/bin/env python3
"""
Script para ejecutar el servidor MCP de Actual Budget.

Uso:
    python -m actual_budget_mcp.mcp

    O como script instalado:
    actual-budget-mcp
"""

from actual_budget_mcp.mcp.server import main


if __name__ == "__main__":
    main()
