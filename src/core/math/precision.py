"""
Precision — Параметры кода и расписание точности

Централизованный модуль констант кодека и размеров ячеек:
- Алфавит, разделитель, padding
- Границы домена координат
- Размер ячейки (в градусах) для каждой длины кода

Все значения read-only и общие для процесса.
"""

from decimal import Decimal, localcontext
from typing import Final

from src.core.errors import InvalidArgumentError
from src.core.math.fixed_point import DECIMAL_CONTEXT


# =============================================================================
# АЛФАВИТ И РАЗДЕЛИТЕЛИ
# =============================================================================

# Набор символов для кодирования значений (без гласных и похожих символов)
CODE_ALPHABET: Final[str] = "23456789CFGHJMPQRVWX"

# Разделитель, разбивающий код на две части для запоминаемости
SEPARATOR: Final[str] = "+"

# Количество символов до разделителя в полном коде
SEPARATOR_POSITION: Final[int] = 8

# Символ для дополнения коротких (низкоточных) кодов
PADDING_CHARACTER: Final[str] = "0"

# Основание системы счисления
ENCODING_BASE: Final[int] = len(CODE_ALPHABET)


# =============================================================================
# ДОМЕН КООРДИНАТ
# =============================================================================

LATITUDE_MAX: Final[Decimal] = Decimal(90)

LONGITUDE_MAX: Final[Decimal] = Decimal(180)


# =============================================================================
# ДЛИНЫ КОДА
# =============================================================================

# Максимальная длина кода с парным (lat/lng) кодированием
PAIR_CODE_LENGTH: Final[int] = 10

# Grid refinement: 4 колонки x 5 рядов на каждую цифру после 10-й
GRID_COLUMNS: Final[int] = 4
GRID_ROWS: Final[int] = 5

# Нормальная точность, примерно 14x14 метров
CODE_PRECISION_NORMAL: Final[int] = 10

# Повышенная точность, примерно 2x3 метра
CODE_PRECISION_EXTRA: Final[int] = 11

# Минимальная допустимая длина кода
MIN_CODE_LENGTH: Final[int] = 4

# Максимальная длина: 5 цифр grid refinement после парной стадии
MAX_CODE_LENGTH: Final[int] = 15

# Начальная точность, делится на ENCODING_BASE перед первой цифрой
INITIAL_PRECISION: Final[Decimal] = Decimal(ENCODING_BASE * ENCODING_BASE)


# =============================================================================
# АЛФАВИТ: ЦИФРЫ
# =============================================================================


def digit_value(char: str) -> int:
    """
    Значение символа алфавита.

    Args:
        char: Один символ (верхний регистр)

    Returns:
        Индекс в CODE_ALPHABET или -1, если символ не из алфавита
    """
    return CODE_ALPHABET.find(char) if len(char) == 1 else -1


def digit_char(value: int) -> str:
    """Символ алфавита для значения 0..19."""
    return CODE_ALPHABET[value]


# =============================================================================
# РАЗМЕР ЯЧЕЙКИ
# =============================================================================


def compute_latitude_precision(code_length: int) -> Decimal:
    """
    Высота ячейки (в градусах широты) для заданной длины кода.

    Для длин <= 10 точность широты и долготы совпадает; для длин > 10
    grid имеет больше рядов, чем колонок, поэтому точности расходятся.

    Формула:
        code_length <= 10: 20 ** floor(code_length / -2 + 2)
        code_length > 10:  20 ** -3 / 5 ** (code_length - 10)

    Args:
        code_length: Количество цифр кода

    Returns:
        Высота ячейки в градусах

    Examples:
        >>> compute_latitude_precision(2)
        Decimal('20')
        >>> compute_latitude_precision(10)
        Decimal('0.000125')
        >>> compute_latitude_precision(11)
        Decimal('0.000025')
    """
    with localcontext(DECIMAL_CONTEXT):
        if code_length <= CODE_PRECISION_NORMAL:
            # floor(n / -2 + 2) без float: 2 - ceil(n / 2)
            exponent = 2 - (code_length + 1) // 2
            return Decimal(ENCODING_BASE) ** exponent
        return Decimal(ENCODING_BASE) ** -3 / Decimal(GRID_ROWS) ** (code_length - PAIR_CODE_LENGTH)


def compute_longitude_precision(code_length: int) -> Decimal:
    """
    Ширина ячейки (в градусах долготы) для заданной длины кода.

    Args:
        code_length: Количество цифр кода

    Returns:
        Ширина ячейки в градусах
    """
    if code_length <= CODE_PRECISION_NORMAL:
        return compute_latitude_precision(code_length)
    with localcontext(DECIMAL_CONTEXT):
        return Decimal(ENCODING_BASE) ** -3 / Decimal(GRID_COLUMNS) ** (
            code_length - PAIR_CODE_LENGTH
        )


def validate_code_length(code_length: int) -> None:
    """
    Проверка запрошенной длины кода.

    Коды короче парной стадии должны состоять из целых пар.

    Args:
        code_length: Запрошенная длина

    Raises:
        InvalidArgumentError: Если длина < 4, нечётная и < 10, или > 15
    """
    if isinstance(code_length, bool) or not isinstance(code_length, int):
        raise InvalidArgumentError(f"Illegal code length {code_length!r}")

    if code_length < MIN_CODE_LENGTH or (
        code_length < PAIR_CODE_LENGTH and code_length % 2 == 1
    ):
        raise InvalidArgumentError(f"Illegal code length {code_length}")

    if code_length > MAX_CODE_LENGTH:
        raise InvalidArgumentError(
            f"Illegal code length {code_length}: maximum is {MAX_CODE_LENGTH}"
        )
