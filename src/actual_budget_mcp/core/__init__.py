"""Módulo core con funcionalidades fundamentales del proyecto."""

from actual_budget_mcp.core.errors import AppException, UpstreamFetchError, ValidationError
from actual_budget_mcp.core.logging import get_logger


__all__ = [
    # Errors
    "AppException",
    "UpstreamFetchError",
    "ValidationError",
    # Logging
    "get_logger",
]
