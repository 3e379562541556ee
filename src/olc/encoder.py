"""
Encoder — Кодирование координат в код

Алгоритм:
1. Pair stage (первые 10 цифр): точность начинается с 20² и делится на 20
   на каждой итерации; итерация даёт одну цифру широты и одну долготы
2. Grid stage (цифры 11+): широта делится на 5 рядов, долгота на 4 колонки;
   одна цифра на итерацию кодирует row * 4 + col

Разделитель ставится после ровно 8 цифр. Если цифр меньше 8, код
дополняется padding до позиции 8 и затем разделителем.

Остатки координат хранятся в Decimal, а не в двоичном float.
"""

import logging
from decimal import localcontext

from src.core.domain.code import Code
from src.core.math.fixed_point import DECIMAL_CONTEXT, Numeric, floor_digit
from src.core.math.precision import (
    CODE_PRECISION_NORMAL,
    ENCODING_BASE,
    GRID_COLUMNS,
    GRID_ROWS,
    INITIAL_PRECISION,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    PADDING_CHARACTER,
    PAIR_CODE_LENGTH,
    SEPARATOR,
    SEPARATOR_POSITION,
    digit_char,
    validate_code_length,
)
from src.olc.normalizer import adjust_pole_latitude, clip_latitude, normalize_longitude

logger = logging.getLogger(__name__)


def encode_code(
    latitude: Numeric,
    longitude: Numeric,
    code_length: int = CODE_PRECISION_NORMAL,
) -> Code:
    """
    Кодирование пары координат в код заданной длины.

    Args:
        latitude: Широта в десятичных градусах
        longitude: Долгота в десятичных градусах
        code_length: Количество цифр (4, 6, 8, 10, 11..15)

    Returns:
        Code, корректный по построению

    Raises:
        InvalidArgumentError: Если длина недопустима или координата не число

    Examples:
        >>> str(encode_code(27.175063, 78.042188))
        '7JVW52GR+2V'
        >>> str(encode_code(0, 0, 4))
        '6FG20000+'
    """
    validate_code_length(code_length)

    lat = clip_latitude(latitude)
    lon = normalize_longitude(longitude)
    lat = adjust_pole_latitude(lat, code_length)

    chars = []
    generated_digits = 0

    with localcontext(DECIMAL_CONTEXT):
        # Перевод в положительные диапазоны
        remaining_lat = lat + LATITUDE_MAX
        remaining_lon = lon + LONGITUDE_MAX

        # Точность делится перед первой цифрой
        lat_precision = INITIAL_PRECISION
        lon_precision = INITIAL_PRECISION

        while generated_digits < code_length:
            if generated_digits < PAIR_CODE_LENGTH:
                lat_precision = lat_precision / ENCODING_BASE
                lon_precision = lon_precision / ENCODING_BASE
                lat_digit = floor_digit(remaining_lat, lat_precision)
                lon_digit = floor_digit(remaining_lon, lon_precision)
                remaining_lat = remaining_lat - lat_precision * lat_digit
                remaining_lon = remaining_lon - lon_precision * lon_digit
                chars.append(digit_char(lat_digit))
                chars.append(digit_char(lon_digit))
                generated_digits += 2
            else:
                lat_precision = lat_precision / GRID_ROWS
                lon_precision = lon_precision / GRID_COLUMNS
                row = floor_digit(remaining_lat, lat_precision)
                col = floor_digit(remaining_lon, lon_precision)
                remaining_lat = remaining_lat - lat_precision * row
                remaining_lon = remaining_lon - lon_precision * col
                chars.append(digit_char(row * GRID_COLUMNS + col))
                generated_digits += 1

            if generated_digits == SEPARATOR_POSITION:
                chars.append(SEPARATOR)

    if generated_digits < SEPARATOR_POSITION:
        chars.append(PADDING_CHARACTER * (SEPARATOR_POSITION - generated_digits))
        chars.append(SEPARATOR)

    code = "".join(chars)
    logger.debug("Encoded (%s, %s) at length %d as %s", lat, lon, code_length, code)
    return Code.from_trusted(code)
