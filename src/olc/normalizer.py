"""
Normalizer — Приведение координат к допустимому домену

- Широта: clamp в [-90, 90]
- Долгота: wrap в [-180, 180) циклом по 360 (точно в Decimal)
- Широта ровно 90 сдвигается вниз, чтобы код можно было декодировать
- Парсинг пары координат из текста "lat lon"
"""

from decimal import Decimal, InvalidOperation, localcontext
from typing import Tuple

from src.core.errors import InvalidArgumentError
from src.core.math.fixed_point import DECIMAL_CONTEXT, Numeric, clamp, to_decimal
from src.core.math.precision import (
    LATITUDE_MAX,
    LONGITUDE_MAX,
    compute_latitude_precision,
)

# Доля точности, на которую сдвигается широта на полюсе
POLE_ADJUSTMENT_FACTOR = Decimal("0.9")


def clip_latitude(latitude: Numeric) -> Decimal:
    """
    Ограничение широты диапазоном [-90, 90].

    Без ошибки: значения за пределами молча ограничиваются.

    Examples:
        >>> clip_latitude(95)
        Decimal('90')
        >>> clip_latitude(-100.5)
        Decimal('-90')
    """
    return clamp(to_decimal(latitude, "latitude"), -LATITUDE_MAX, LATITUDE_MAX)


def normalize_longitude(longitude: Numeric) -> Decimal:
    """
    Приведение долготы к диапазону [-180, 180).

    Сначала точный остаток от деления на 360, затем не больше одного сдвига
    на 360. Результат совпадает с пошаговым циклом, но не зависит от модуля
    входа и от глобального decimal-контекста.

    Raises:
        InvalidArgumentError: Если долгота не число или по модулю слишком
            велика для точного остатка (частное длиннее 28 цифр)

    Examples:
        >>> normalize_longitude(900)
        Decimal('-180')
        >>> normalize_longitude(-190.5)
        Decimal('169.5')
    """
    lon = to_decimal(longitude, "longitude")
    full_turn = LONGITUDE_MAX * 2

    with localcontext(DECIMAL_CONTEXT):
        try:
            # Остаток точен: знак делимого, модуль меньше 360
            lon = DECIMAL_CONTEXT.remainder(lon, full_turn)
        except InvalidOperation as exc:
            raise InvalidArgumentError(
                f"longitude is too large to normalize: {longitude}"
            ) from exc

        while lon < -LONGITUDE_MAX:
            lon = lon + full_turn
        while lon >= LONGITUDE_MAX:
            lon = lon - full_turn
    return lon


def adjust_pole_latitude(latitude: Decimal, code_length: int) -> Decimal:
    """
    Сдвиг широты 90 внутрь домена.

    Ячейка, начинающаяся на 90, не декодируется, поэтому широта 90
    уменьшается на 0.9 высоты ячейки для заданной длины кода.

    Args:
        latitude: Широта (уже ограниченная clip_latitude)
        code_length: Длина кода

    Returns:
        Широта строго меньше 90
    """
    if latitude == LATITUDE_MAX:
        return DECIMAL_CONTEXT.subtract(
            latitude,
            DECIMAL_CONTEXT.multiply(POLE_ADJUSTMENT_FACTOR, compute_latitude_precision(code_length)),
        )
    return latitude


def parse_coordinates(text: str) -> Tuple[Decimal, Decimal]:
    """
    Парсинг пары координат из строки "lat lon".

    Args:
        text: Две числовые части, разделённые пробелами

    Returns:
        (latitude, longitude) как Decimal, без нормализации

    Raises:
        InvalidArgumentError: Если частей не две или часть не число
    """
    if not isinstance(text, str):
        raise InvalidArgumentError(f"Coordinates must be a string, got {type(text).__name__}")

    parts = text.split()
    if len(parts) != 2:
        raise InvalidArgumentError(
            f"Expected 'latitude longitude', got {len(parts)} value(s): {text!r}"
        )

    return to_decimal(parts[0], "latitude"), to_decimal(parts[1], "longitude")
