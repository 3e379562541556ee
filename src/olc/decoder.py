"""
Decoder — Декодирование полного кода в CodeArea

Обратный проход Encoder: разделитель и padding удаляются, затем каждая
цифра добавляет digit_value * precision к накопителям south/west по тому же
расписанию точности (pair stage, затем grid 4x5).
"""

import logging
from decimal import Decimal, localcontext

from src.core.domain.code import Code
from src.core.domain.code_area import CodeArea
from src.core.errors import InvalidOperationError
from src.core.math.fixed_point import DECIMAL_CONTEXT
from src.core.math.precision import (
    ENCODING_BASE,
    GRID_COLUMNS,
    GRID_ROWS,
    INITIAL_PRECISION,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PAIR_CODE_LENGTH,
    digit_value,
)

logger = logging.getLogger(__name__)


def decode_code(code: Code) -> CodeArea:
    """
    Декодирование полного кода в прямоугольник координат.

    Args:
        code: Валидный Code

    Returns:
        CodeArea с границами south/west/north/east

    Raises:
        InvalidOperationError: Если код не полный (short код требует reference)
    """
    if not code.is_full:
        raise InvalidOperationError(
            f"Method decode() could only be called on valid full codes, code was {code.value}."
        )

    digits = code.digits

    with localcontext(DECIMAL_CONTEXT):
        lat_precision = INITIAL_PRECISION
        lon_precision = INITIAL_PRECISION
        south_latitude = Decimal(0)
        west_longitude = Decimal(0)

        position = 0
        while position < len(digits):
            if position < PAIR_CODE_LENGTH:
                # Пара цифр: широта, затем долгота
                lat_precision = lat_precision / ENCODING_BASE
                lon_precision = lon_precision / ENCODING_BASE
                south_latitude = south_latitude + lat_precision * digit_value(digits[position])
                west_longitude = west_longitude + lon_precision * digit_value(digits[position + 1])
                position += 2
            else:
                # Grid 4x5 для цифр после 10-й
                value = digit_value(digits[position])
                row, col = divmod(value, GRID_COLUMNS)
                lat_precision = lat_precision / GRID_ROWS
                lon_precision = lon_precision / GRID_COLUMNS
                south_latitude = south_latitude + lat_precision * row
                west_longitude = west_longitude + lon_precision * col
                position += 1

        south = south_latitude - LATITUDE_MAX
        west = west_longitude - LONGITUDE_MAX
        area = CodeArea(
            south=south,
            west=west,
            north=south + lat_precision,
            east=west + lon_precision,
        )

    logger.debug("Decoded %s to %s", code.value, area)
    return area
