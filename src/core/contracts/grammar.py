"""
Code Grammar — Валидатор синтаксиса кода

Проверка строки как конечного автомата, независимо от числового смысла:
- Ровно один разделитель на чётной позиции не дальше 8
- Ограничения первой пары символов полного кода (домен lat/lng)
- Padding только с позиции 2, 4 или 6 и до разделителя
- После разделителя: без padding, не ровно один символ, не больше 7
  символов (длина кода до 15), только алфавит

Классификация трёхзначная (FULL / SHORT / INVALID): булевы предикаты строятся
поверх неё без исключений в роли control flow.
"""

from enum import Enum
from typing import Optional

from src.core.errors import CodeGrammarError
from src.core.math.precision import (
    MAX_CODE_LENGTH,
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
    digit_value,
)


# =============================================================================
# ENUMS
# =============================================================================


class CodeKind(str, Enum):
    """Класс кода по грамматике"""

    FULL = "full"
    SHORT = "short"
    INVALID = "invalid"


# Позиции, с которых может начинаться padding
_PADDING_START_POSITIONS = (2, 4, 6)

# Первый символ полного кода: только первые 9 значений (широта < 180)
_FIRST_LATITUDE_INDEX_MAX = 8

# Второй символ полного кода: только первые 18 значений (долгота < 360)
_FIRST_LONGITUDE_INDEX_MAX = 17

# Символов после разделителя не больше, чем позволяет MAX_CODE_LENGTH
_SUFFIX_LENGTH_MAX = MAX_CODE_LENGTH - SEPARATOR_POSITION


# =============================================================================
# CODE GRAMMAR
# =============================================================================


class CodeGrammar:
    """
    Грамматика кода.

    validate() бросает исключение, is_valid() возвращает bool без исключений.
    """

    def violation(self, code: object) -> Optional[str]:
        """
        Первое нарушение грамматики.

        Args:
            code: Проверяемая строка (регистр не важен)

        Returns:
            Описание нарушения или None, если строка корректна
        """
        if not isinstance(code, str) or len(code) < 2:
            return "code must be a string of at least 2 characters"

        code = code.upper()

        # Ровно один разделитель
        separator_index = code.find(SEPARATOR)
        if separator_index == -1:
            return "missing separator"
        if separator_index != code.rfind(SEPARATOR):
            return "more than one separator"
        if separator_index % 2 != 0:
            return f"separator at odd position {separator_index}"
        if separator_index > SEPARATOR_POSITION:
            return f"separator after position {SEPARATOR_POSITION}"

        # Полный код: первая пара ограничена доменом координат
        if separator_index == SEPARATOR_POSITION:
            index0 = digit_value(code[0])
            if index0 < 0 or index0 > _FIRST_LATITUDE_INDEX_MAX:
                return f"first latitude character {code[0]!r} out of range"
            index1 = digit_value(code[1])
            if index1 < 0 or index1 > _FIRST_LONGITUDE_INDEX_MAX:
                return f"first longitude character {code[1]!r} out of range"

        # Символы до разделителя
        padding_started = False
        for i in range(separator_index):
            char = code[i]
            if padding_started:
                # После начала padding допустим только padding
                if char != PADDING_CHARACTER:
                    return f"digit {char!r} after padding at position {i}"
                continue
            if digit_value(char) != -1:
                continue
            if char == PADDING_CHARACTER:
                padding_started = True
                if i not in _PADDING_START_POSITIONS:
                    return f"padding starts at position {i}"
                continue
            return f"illegal character {char!r} at position {i}"

        # Символы после разделителя
        if len(code) > separator_index + 1:
            if padding_started:
                return "digits after separator in a padded code"
            # Ровно один символ после разделителя запрещён
            if len(code) == separator_index + 2:
                return "single character after separator"
            if len(code) - separator_index - 1 > _SUFFIX_LENGTH_MAX:
                return f"more than {_SUFFIX_LENGTH_MAX} characters after separator"
            for i in range(separator_index + 1, len(code)):
                if digit_value(code[i]) == -1:
                    return f"illegal character {code[i]!r} at position {i}"

        return None

    def is_valid(self, code: object) -> bool:
        """
        Проверка валидности без exception.

        Args:
            code: Проверяемая строка

        Returns:
            True если строка синтаксически корректный код
        """
        return self.violation(code) is None

    def validate(self, code: object) -> None:
        """
        Валидация строки.

        Args:
            code: Проверяемая строка

        Raises:
            CodeGrammarError: Если строка не соответствует грамматике
        """
        reason = self.violation(code)
        if reason is not None:
            raise CodeGrammarError(code, reason)

    def classify(self, code: object) -> CodeKind:
        """
        Трёхзначная классификация кода.

        Args:
            code: Проверяемая строка

        Returns:
            FULL (разделитель на позиции 8), SHORT (раньше 8) или INVALID
        """
        if not self.is_valid(code):
            return CodeKind.INVALID
        if code.find(SEPARATOR) == SEPARATOR_POSITION:
            return CodeKind.FULL
        return CodeKind.SHORT


# Глобальный экземпляр грамматики (без состояния)
_GRAMMAR = CodeGrammar()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def is_valid_code(code: object) -> bool:
    """Проверка, является ли строка синтаксически корректным кодом."""
    return _GRAMMAR.is_valid(code)


def validate_code(code: object) -> None:
    """
    Валидация строки кода.

    Raises:
        CodeGrammarError: Если строка не соответствует грамматике
    """
    _GRAMMAR.validate(code)


def classify_code(code: object) -> CodeKind:
    """Трёхзначная классификация: FULL, SHORT или INVALID."""
    return _GRAMMAR.classify(code)
