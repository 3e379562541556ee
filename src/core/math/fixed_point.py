"""
Fixed Point — Десятичная арифметика для координат

Модуль обеспечивает детерминированную арифметику градусов:
- Конверсия входов (float/int/str/Decimal) в Decimal без двоичного шума
- Фиксированный decimal-контекст, не зависящий от глобального контекста
- Проверка конечности значений (NaN/Inf запрещены)

Двоичный float не используется для квантования: например, "8.95 - 8" во float
даёт 0.9499999999999, и точка на границе ячейки попадает в соседнюю ячейку.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. float конвертируется через кратчайший repr: 27.175063 → Decimal("27.175063")
2. NaN/Inf никогда не попадают в вычисления (InvalidArgumentError)
3. Все операции выполняются в DECIMAL_CONTEXT (28 значащих цифр)
"""

import math
from decimal import ROUND_FLOOR, ROUND_HALF_EVEN, Context, Decimal, InvalidOperation
from typing import Final, Union

from src.core.errors import InvalidArgumentError

# =============================================================================
# DECIMAL-КОНТЕКСТ
# =============================================================================

# 28 значащих цифр: деление на 20, 5 и 4 остаётся точным для всех длин кода
DECIMAL_PRECISION: Final[int] = 28

DECIMAL_CONTEXT: Final[Context] = Context(prec=DECIMAL_PRECISION, rounding=ROUND_HALF_EVEN)

Numeric = Union[Decimal, float, int, str]


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def to_decimal(value: Numeric, name: str = "value") -> Decimal:
    """
    Конверсия числового входа в Decimal.

    float конвертируется через repr(), а не через Decimal(float), чтобы
    получить ровно то число, которое написал вызывающий код.

    Args:
        value: Исходное значение (Decimal, float, int или строка)
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Конечное Decimal значение

    Raises:
        InvalidArgumentError: Если значение не парсится или NaN/Inf

    Examples:
        >>> to_decimal(27.175063)
        Decimal('27.175063')
        >>> to_decimal("  -33.5 ")
        Decimal('-33.5')
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidArgumentError(f"{name} must be finite, got {value}")
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise InvalidArgumentError(f"{name} is not a number: {value!r}") from exc
    else:
        raise InvalidArgumentError(
            f"{name} must be a number, got {type(value).__name__}"
        )

    if not result.is_finite():
        raise InvalidArgumentError(f"{name} must be finite, got {value}")

    return result


def floor_digit(remaining: Decimal, precision: Decimal) -> int:
    """
    Целая часть remaining / precision (округление вниз).

    Args:
        remaining: Остаток координаты (неотрицательный)
        precision: Размер ячейки текущего разряда

    Returns:
        Индекс цифры в текущем разряде
    """
    quotient = DECIMAL_CONTEXT.divide(remaining, precision)
    return int(quotient.to_integral_value(rounding=ROUND_FLOOR))


def clamp(
    value: Decimal,
    min_value: Decimal | None = None,
    max_value: Decimal | None = None,
) -> Decimal:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(Decimal("95.5"), Decimal(-90), Decimal(90))
        Decimal('90')
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result
