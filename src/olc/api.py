"""
API — Строковый фасад кодека

Операции принимают и возвращают строки кода; внутри работают с Code и
CodeArea.

Предикаты:
- is_valid, is_full_code, is_short_code: никогда не бросают исключение
- is_full, is_short, is_padded: невалидная строка → CodeGrammarError
  (как при создании Code)
"""

import logging
from typing import Any, Dict

from src.core.contracts.grammar import CodeKind, classify_code, is_valid_code
from src.core.contracts.validators import validate_code_area
from src.core.domain.code import Code
from src.core.domain.code_area import CodeArea
from src.core.math.fixed_point import Numeric
from src.core.math.precision import CODE_PRECISION_NORMAL
from src.olc.decoder import decode_code
from src.olc.encoder import encode_code
from src.olc.shortener import CodeShortener

logger = logging.getLogger(__name__)

# Shortener с конфигурацией по умолчанию
_SHORTENER = CodeShortener()


# =============================================================================
# ENCODE / DECODE
# =============================================================================


def encode(latitude: Numeric, longitude: Numeric, length: int = CODE_PRECISION_NORMAL) -> str:
    """
    Кодирование координат в строку кода.

    Raises:
        InvalidArgumentError: Если длина недопустима или координата не число
    """
    return encode_code(latitude, longitude, length).value


def decode(code: str) -> CodeArea:
    """
    Декодирование полного кода.

    Raises:
        CodeGrammarError: Если строка не код
        InvalidOperationError: Если код не полный
    """
    return decode_code(Code.parse(code))


def decode_contract(code: str) -> Dict[str, Any]:
    """
    Декодирование во внешнее представление.

    Returns:
        dict {south, west, north, east, centerLat, centerLon}, проверенный
        по JSON Schema контракту code_area
    """
    data = decode(code).to_contract()
    validate_code_area(data)
    return data


# =============================================================================
# PREDICATES
# =============================================================================


def is_valid(code: object) -> bool:
    """Синтаксическая проверка строки."""
    return is_valid_code(code)


def is_full(code: str) -> bool:
    """Полный ли код. Невалидная строка → CodeGrammarError."""
    return Code.parse(code).is_full


def is_short(code: str) -> bool:
    """Короткий ли код. Невалидная строка → CodeGrammarError."""
    return Code.parse(code).is_short


def is_padded(code: str) -> bool:
    """Содержит ли код padding. Невалидная строка → CodeGrammarError."""
    return Code.parse(code).is_padded


def is_full_code(code: object) -> bool:
    """
    Является ли строка валидным полным кодом.

    Ошибка грамматики означает "точно не полный", а не "неизвестно".
    """
    kind = classify_code(code)
    if kind is CodeKind.INVALID:
        logger.debug("is_full_code: %r is not a valid code", code)
    return kind is CodeKind.FULL


def is_short_code(code: object) -> bool:
    """
    Является ли строка валидным коротким кодом.

    Ошибка грамматики означает "точно не короткий", а не "неизвестно".
    """
    kind = classify_code(code)
    if kind is CodeKind.INVALID:
        logger.debug("is_short_code: %r is not a valid code", code)
    return kind is CodeKind.SHORT


# =============================================================================
# SHORTEN / RECOVER / CONTAINS
# =============================================================================


def shorten(code: str, reference_latitude: Numeric, reference_longitude: Numeric) -> str:
    """
    Укорачивание полного кода относительно reference point.

    Raises:
        InvalidOperationError: Если код short или padded
        InvalidArgumentError: Если reference point слишком далеко
    """
    return _SHORTENER.shorten(Code.parse(code), reference_latitude, reference_longitude).value


def recover(code: str, reference_latitude: Numeric, reference_longitude: Numeric) -> str:
    """Восстановление полного кода; полный код возвращается как есть."""
    return _SHORTENER.recover(Code.parse(code), reference_latitude, reference_longitude).value


def contains(code: str, latitude: Numeric, longitude: Numeric) -> bool:
    """True если south <= lat < north и west <= lon < east."""
    return decode(code).contains(latitude, longitude)
