"""Validación del input de la herramienta get-budget-month."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from actual_budget_mcp.core.errors import ValidationError
from actual_budget_mcp.schemas.budget_month import ParsedInput


# Solo formato: "2024-13" es válido, no se revisa el rango del mes
MONTH_PATTERN = r"^[0-9]{4}-[0-9]{2}$"


class GetBudgetMonthArgs(BaseModel):
    """Argumentos de get-budget-month."""

    model_config = ConfigDict(extra="ignore", strict=True)

    month: str = Field(
        ...,
        pattern=MONTH_PATTERN,
        description="Budget month in YYYY-MM format",
        examples=["2024-01"],
    )


class BudgetMonthInputParser:
    """Valida y normaliza el mes pedido."""

    def parse(self, args: Any) -> ParsedInput:
        """
        Valida los argumentos crudos de la herramienta.

        Args:
            args: Objeto de input (normalmente un dict con "month")

        Returns:
            ParsedInput con el mes tal cual vino

        Raises:
            ValidationError: Si falta month o no tiene formato YYYY-MM
        """
        if isinstance(args, BaseModel):
            args = args.model_dump()

        try:
            validated = GetBudgetMonthArgs.model_validate(args)
        except PydanticValidationError as e:
            raise ValidationError(
                message=_describe(e),
                field="month",
                details={"errors": [{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()]},
            ) from e

        return ParsedInput(month=validated.month)


def _describe(error: PydanticValidationError) -> str:
    for item in error.errors():
        if item["type"] == "missing":
            return "month is required (format YYYY-MM)"
    return "month must be in YYYY-MM format"


__all__ = ["BudgetMonthInputParser", "GetBudgetMonthArgs", "MONTH_PATTERN"]
