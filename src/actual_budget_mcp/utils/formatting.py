"""Utilidades para montos en unidades menores (centavos)."""

from decimal import ROUND_HALF_UP, Decimal, localcontext
import math
from typing import Any


_CENTS = Decimal("0.01")


def coerce_amount(value: Any) -> int | float:
    """
    Normaliza un monto opcional de la API.

    Ausente, nulo o no numérico se trata como 0. Los booleanos no
    cuentan como números aunque Python los acepte como int.

    Examples:
        >>> coerce_amount(1500)
        1500
        >>> coerce_amount(None)
        0
        >>> coerce_amount("12")
        0
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return value


def format_amount(minor_units: Any) -> str:
    """
    Formatea centavos como moneda: siempre símbolo y dos decimales.

    Sin separadores de miles y sin depender del locale, así un mismo
    reporte se renderiza igual en cualquier máquina.

    Args:
        minor_units: Monto en centavos (int o float)

    Returns:
        str: Monto formateado, por ejemplo "$4000.00" o "-$12.50"

    Examples:
        >>> format_amount(400000)
        '$4000.00'
        >>> format_amount(-1250)
        '-$12.50'
        >>> format_amount(None)
        '$0.00'
    """
    amount = Decimal(str(coerce_amount(minor_units)))

    # La precisión por defecto (28 dígitos) no alcanza para montos enormes
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        dollars = (amount / 100).quantize(_CENTS, rounding=ROUND_HALF_UP)
        if dollars < 0:
            return f"-${-dollars:f}"
        return f"${abs(dollars):f}"


__all__ = ["coerce_amount", "format_amount"]
