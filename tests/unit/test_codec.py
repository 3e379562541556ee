"""
Тесты для Encoder и Decoder

Проверяет:
1. Известные пары координата → код (pair stage, grid stage, padding)
2. Декодирование в границы и центр
3. Инвариант: decode(encode(p)) содержит p для всех длин
4. Граничные случаи: полюс, wrap долготы, точки на границе ячейки
5. Независимость от глобального decimal-контекста
"""

from decimal import Decimal, localcontext

import pytest

from src.core.contracts.grammar import is_valid_code
from src.core.domain import Code
from src.core.errors import InvalidArgumentError, InvalidOperationError
from src.olc.decoder import decode_code
from src.olc.encoder import encode_code

# =============================================================================
# ENCODE
# =============================================================================


class TestEncodeKnownValues:
    """Известные значения кодирования"""

    @pytest.mark.parametrize(
        "latitude,longitude,code_length,expected",
        [
            (27.175063, 78.042188, 10, "7JVW52GR+2V"),
            (20.375, 2.775, 6, "7FG49Q00+"),
            (20.3700625, 2.7821875, 10, "7FG49QCJ+2V"),
            (20.3701125, 2.782234375, 11, "7FG49QCJ+2VX"),
            (47.0000625, 8.0000625, 10, "8FVC2222+22"),
            (-89.9999375, -179.9999375, 10, "22222222+22"),
            (1, 1, 11, "6FH32222+222"),
            (0, 0, 4, "6FG20000+"),
            (90, 1, 4, "CFX30000+"),
            (92, 1, 4, "CFX30000+"),
            (1, 180, 4, "62H20000+"),
            (1, 181, 4, "62H30000+"),
        ],
    )
    def test_known_codes(
        self, latitude: float, longitude: float, code_length: int, expected: str
    ) -> None:
        assert encode_code(latitude, longitude, code_length).value == expected

    def test_default_length_is_ten(self) -> None:
        code = encode_code(27.175063, 78.042188)
        assert code.value == "7JVW52GR+2V"
        assert code.separator_index == 8
        assert len(code.value) == 11

    def test_separator_without_suffix_at_eight_digits(self) -> None:
        assert encode_code(27.175063, 78.042188, 8).value == "7JVW52GR+"

    def test_string_and_decimal_inputs(self) -> None:
        assert encode_code("27.175063", Decimal("78.042188")).value == "7JVW52GR+2V"


class TestEncodeLength:
    """Проверка длины кода"""

    @pytest.mark.parametrize("code_length", [0, 2, 3, 5, 7, 9, 16])
    def test_invalid_lengths(self, code_length: int) -> None:
        with pytest.raises(InvalidArgumentError, match="Illegal code length"):
            encode_code(0, 0, code_length)

    @pytest.mark.parametrize("code_length", [4, 6, 8, 10, 11, 12, 13, 14, 15])
    def test_generated_code_is_valid(self, code_length: int) -> None:
        """Любой сгенерированный код проходит грамматику"""
        code = encode_code(-41.2730625, 174.7859375, code_length)
        assert is_valid_code(code.value)
        assert code.is_full
        assert len(code.digits) == code_length

    def test_non_numeric_coordinate(self) -> None:
        with pytest.raises(InvalidArgumentError):
            encode_code("north", 0)
        with pytest.raises(InvalidArgumentError):
            encode_code(0, float("inf"))


class TestEncodeBoundaries:
    """Граничные случаи кодирования"""

    def test_north_pole_decodable(self) -> None:
        """Код для широты 90 декодируется, north <= 90"""
        code = encode_code(90, 0)
        area = decode_code(code)
        assert code.value == "CFX2X2X2+X2"
        assert area.north <= 90
        assert area.south < 90

    def test_south_pole(self) -> None:
        area = decode_code(encode_code(-90, 0))
        assert area.south == Decimal(-90)
        assert area.contains(-90, 0)

    def test_longitude_wraps_multiple_turns(self) -> None:
        assert encode_code(10, 900).value == encode_code(10, -180).value
        assert encode_code(10, -900).value == encode_code(10, 180).value

    def test_cell_boundary_is_exact(self) -> None:
        """0.05 лежит ровно на границе ячейки: во float 90.05 - 80 - 10 < 0.05"""
        code = encode_code(0.05, 0, 6)
        assert code.value == "6FG23200+"
        assert decode_code(code).south == Decimal("0.05")

    def test_caller_decimal_context_ignored(self) -> None:
        """Узкий глобальный decimal-контекст не меняет результат"""
        with localcontext() as ctx:
            ctx.prec = 3
            assert encode_code(20.3701125, 2.782234375, 11).value == "7FG49QCJ+2VX"

    def test_caller_decimal_context_ignored_when_wrapping(self) -> None:
        """Wrap долготы тоже выполняется в фиксированном контексте"""
        expected = encode_code(10, 178.123456).value
        with localcontext() as ctx:
            ctx.prec = 3
            assert encode_code(10, 538.123456).value == expected
            assert encode_code(10, -181.876544).value == expected

    def test_longest_decoded_code_reencodes(self) -> None:
        """Любой код, принятый грамматикой, кодируется обратно той же длины"""
        area = decode_code(Code.parse("7JVW52GR+2VXXXXX"))
        code = encode_code(area.center_latitude, area.center_longitude, 15)
        assert code.value == "7JVW52GR+2VXXXXX"


# =============================================================================
# DECODE
# =============================================================================


class TestDecode:
    """Тесты для decode_code"""

    def test_taj_mahal(self) -> None:
        area = decode_code(Code.parse("7JVW52GR+2V"))
        assert area.south == Decimal("27.175")
        assert area.north == Decimal("27.175125")
        assert area.west == Decimal("78.042125")
        assert area.east == Decimal("78.04225")
        assert float(area.center_latitude) == pytest.approx(27.175, abs=1e-3)
        assert float(area.center_longitude) == pytest.approx(78.042, abs=1e-3)

    def test_padded_code(self) -> None:
        area = decode_code(Code.parse("7FG49Q00+"))
        assert area.south == Decimal("20.35")
        assert area.north == Decimal("20.40")
        assert area.west == Decimal("2.75")
        assert area.east == Decimal("2.80")
        assert area.center_latitude == Decimal("20.375")
        assert area.center_longitude == Decimal("2.775")

    def test_grid_stage(self) -> None:
        area = decode_code(Code.parse("7FG49QCJ+2VX"))
        assert area.center_latitude == Decimal("20.3701125")
        assert area.center_longitude == Decimal("2.782234375")
        assert area.latitude_height == Decimal("0.000025")
        assert area.longitude_width == Decimal("0.00003125")

    def test_lower_case(self) -> None:
        assert decode_code(Code.parse("7fg49qcj+2vx")) == decode_code(Code.parse("7FG49QCJ+2VX"))

    def test_short_code_rejected(self) -> None:
        with pytest.raises(InvalidOperationError, match="full codes"):
            decode_code(Code.parse("52GR+2V"))


# =============================================================================
# ROUND TRIP
# =============================================================================


@pytest.mark.parametrize(
    "latitude,longitude",
    [
        (27.175063, 78.042188),
        (-41.2730625, 174.7859375),
        (51.3701125, -1.217765625),
        (0, 0),
        (-89.5, -179.5),
        (89.9999, 179.9999),
        (-33.8688, 151.2093),
    ],
)
@pytest.mark.parametrize("code_length", [4, 6, 8, 10, 11, 12, 13, 14, 15])
def test_decoded_area_contains_encoded_point(
    latitude: float, longitude: float, code_length: int
) -> None:
    """Инвариант: decode(encode(p)) содержит p"""
    area = decode_code(encode_code(latitude, longitude, code_length))
    assert area.contains(latitude, longitude)
