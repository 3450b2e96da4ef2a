"""Tests para la validación del mes de get-budget-month."""

import pytest

from actual_budget_mcp.core.errors import ValidationError
from actual_budget_mcp.services.budget_month_parser import (
    BudgetMonthInputParser,
    GetBudgetMonthArgs,
)


@pytest.fixture
def parser() -> BudgetMonthInputParser:
    return BudgetMonthInputParser()


class TestBudgetMonthInputParser:
    """Tests para BudgetMonthInputParser."""

    def test_parses_valid_month(self, parser: BudgetMonthInputParser) -> None:
        """Verifica que un mes YYYY-MM pasa sin cambios."""
        result = parser.parse({"month": "2024-01"})

        assert result.month == "2024-01"

    @pytest.mark.parametrize("month", ["2024-01", "2023-12", "2025-06", "2020-11"])
    def test_parses_various_valid_months(
        self, parser: BudgetMonthInputParser, month: str
    ) -> None:
        """Verifica varios meses válidos."""
        assert parser.parse({"month": month}).month == month

    def test_accepts_month_number_out_of_range(self, parser: BudgetMonthInputParser) -> None:
        """El patrón solo valida formato, no el valor del mes."""
        assert parser.parse({"month": "2024-13"}).month == "2024-13"
        assert parser.parse({"month": "2024-00"}).month == "2024-00"

    @pytest.mark.parametrize(
        "month",
        [
            "2024-1",  # Mes de un dígito
            "24-01",  # Año de dos dígitos
            "2024/01",  # Separador incorrecto
            "202401",  # Sin separador
            "January 2024",  # Texto
            "2024-01-15",  # Fecha completa
            " 2024-01",
            "2024-01\n",
            "2024--01",
            "",
            "٢٠٢٤-٠١",  # Dígitos no ASCII
        ],
    )
    def test_rejects_invalid_formats(self, parser: BudgetMonthInputParser, month: str) -> None:
        """Verifica que formatos inválidos lanzan ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            parser.parse({"month": month})

        assert exc_info.value.field == "month"
        assert exc_info.value.code == "INVALID_MONTH"

    def test_rejects_missing_month(self, parser: BudgetMonthInputParser) -> None:
        """Verifica error cuando falta el campo month."""
        with pytest.raises(ValidationError) as exc_info:
            parser.parse({})

        assert exc_info.value.field == "month"
        assert "required" in exc_info.value.message

    @pytest.mark.parametrize("raw", [None, "2024-01", 202401, ["2024-01"]])
    def test_rejects_non_mapping_input(self, parser: BudgetMonthInputParser, raw: object) -> None:
        """Verifica que el input debe ser un objeto."""
        with pytest.raises(ValidationError):
            parser.parse(raw)

    def test_rejects_non_string_month(self, parser: BudgetMonthInputParser) -> None:
        """Un número no se convierte a string."""
        with pytest.raises(ValidationError):
            parser.parse({"month": 202401})

    def test_ignores_extra_fields(self, parser: BudgetMonthInputParser) -> None:
        """Campos extra no afectan la validación."""
        assert parser.parse({"month": "2024-01", "foo": "bar"}).month == "2024-01"

    def test_accepts_args_model(self, parser: BudgetMonthInputParser) -> None:
        """También acepta el modelo pydantic ya construido."""
        args = GetBudgetMonthArgs(month="2024-02")

        assert parser.parse(args).month == "2024-02"

    def test_parsed_input_is_immutable(self, parser: BudgetMonthInputParser) -> None:
        """El mes validado no se puede modificar."""
        result = parser.parse({"month": "2024-01"})

        with pytest.raises(AttributeError):
            result.month = "2024-02"  # type: ignore[misc]
