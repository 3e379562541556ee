"""
Тесты для domain моделей Code и CodeArea

Проверяет:
1. Создание Code из строки (валидация, верхний регистр)
2. Immutability моделей
3. Классификацию full / short / padded
4. Границы и центр CodeArea, contains()
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.core.contracts.grammar import CodeKind
from src.core.domain import Code, CodeArea
from src.core.errors import CodeGrammarError, InvalidArgumentError


# =============================================================================
# CODE
# =============================================================================


class TestCodeParse:
    """Тесты для Code.parse"""

    def test_upper_cased(self) -> None:
        assert Code.parse("7jvw52gr+2v").value == "7JVW52GR+2V"

    def test_invalid_raises_grammar_error(self) -> None:
        with pytest.raises(CodeGrammarError):
            Code.parse("7JVW52GR+2")

    def test_non_string_raises_grammar_error(self) -> None:
        with pytest.raises(CodeGrammarError):
            Code.parse(None)  # type: ignore[arg-type]

    def test_direct_construction_validates(self) -> None:
        """Прямое создание модели тоже проверяет грамматику"""
        with pytest.raises(ValidationError):
            Code(value="7JVW52GR+2")

    def test_immutable(self) -> None:
        code = Code.parse("7JVW52GR+2V")
        with pytest.raises(ValidationError):
            code.value = "52GR+2V"  # type: ignore[misc]

    def test_equality_by_value(self) -> None:
        assert Code.parse("7jvw52gr+2v") == Code.parse("7JVW52GR+2V")

    def test_str(self) -> None:
        assert str(Code.parse("52gr+2v")) == "52GR+2V"


class TestCodeClassification:
    """Тесты классификации Code"""

    def test_full(self) -> None:
        code = Code.parse("7JVW52GR+2V")
        assert code.is_full
        assert not code.is_short
        assert code.kind is CodeKind.FULL
        assert code.separator_index == 8

    def test_short(self) -> None:
        code = Code.parse("52GR+2V")
        assert code.is_short
        assert not code.is_full
        assert code.kind is CodeKind.SHORT
        assert code.separator_index == 4

    def test_short_with_separator_first(self) -> None:
        code = Code.parse("+2VX")
        assert code.is_short
        assert code.separator_index == 0

    def test_padded(self) -> None:
        assert Code.parse("7FG49Q00+").is_padded
        assert not Code.parse("7FG49QCJ+2V").is_padded

    def test_digits_strip_separator_and_padding(self) -> None:
        assert Code.parse("7FG49Q00+").digits == "7FG49Q"
        assert Code.parse("7FG49QCJ+2VX").digits == "7FG49QCJ2VX"

    def test_code_length_excludes_separator(self) -> None:
        assert Code.parse("7FG49QCJ+2VX").code_length == 11
        assert Code.parse("7FG49Q00+").code_length == 8


# =============================================================================
# CODE AREA
# =============================================================================


@pytest.fixture
def taj_mahal_area() -> CodeArea:
    """Область кода 7JVW52GR+2V."""
    return CodeArea(
        south=Decimal("27.175"),
        west=Decimal("78.042125"),
        north=Decimal("27.175125"),
        east=Decimal("78.04225"),
    )


class TestCodeArea:
    """Тесты для CodeArea"""

    def test_center(self, taj_mahal_area: CodeArea) -> None:
        assert taj_mahal_area.center_latitude == Decimal("27.1750625")
        assert taj_mahal_area.center_longitude == Decimal("78.0421875")

    def test_dimensions(self, taj_mahal_area: CodeArea) -> None:
        assert taj_mahal_area.latitude_height == Decimal("0.000125")
        assert taj_mahal_area.longitude_width == Decimal("0.000125")

    def test_contains_inclusive_south_west(self, taj_mahal_area: CodeArea) -> None:
        assert taj_mahal_area.contains(27.175, 78.042125)

    def test_contains_exclusive_north_east(self, taj_mahal_area: CodeArea) -> None:
        assert not taj_mahal_area.contains(27.175125, 78.0422)
        assert not taj_mahal_area.contains(27.17506, 78.04225)

    def test_contains_interior(self, taj_mahal_area: CodeArea) -> None:
        assert taj_mahal_area.contains(27.175063, 78.042188)

    def test_contains_rejects_nan(self, taj_mahal_area: CodeArea) -> None:
        with pytest.raises(InvalidArgumentError):
            taj_mahal_area.contains(float("nan"), 78.0422)

    def test_bounds_order_validated(self) -> None:
        with pytest.raises(ValidationError, match="exceeds north"):
            CodeArea(south=1, west=0, north=0, east=1)
        with pytest.raises(ValidationError, match="exceeds east"):
            CodeArea(south=0, west=1, north=1, east=0)

    def test_domain_validated(self) -> None:
        with pytest.raises(ValidationError):
            CodeArea(south=-91, west=0, north=0, east=1)

    def test_immutable(self, taj_mahal_area: CodeArea) -> None:
        with pytest.raises(ValidationError):
            taj_mahal_area.south = Decimal(0)  # type: ignore[misc]

    def test_to_contract(self, taj_mahal_area: CodeArea) -> None:
        data = taj_mahal_area.to_contract()
        assert set(data) == {"south", "west", "north", "east", "centerLat", "centerLon"}
        assert data["centerLat"] == pytest.approx(27.1750625)
        assert data["centerLon"] == pytest.approx(78.0421875)
        assert all(isinstance(value, float) for value in data.values())
