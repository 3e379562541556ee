"""
Code — Модель кода

Immutable Pydantic модель, представляющая синтаксически корректный код.
Строка хранится в верхнем регистре. Код всегда ровно один из {full, short}.

Создание:
- Code.parse("7jvw52gr+2v"): строка вызывающего кода, валидация сразу
- Encoder: код корректен по построению и не перепроверяется
"""

from pydantic import BaseModel, Field, field_validator

from src.core.contracts.grammar import CodeKind, classify_code, validate_code
from src.core.math.precision import (
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
)


# =============================================================================
# CODE MODEL
# =============================================================================


class Code(BaseModel):
    """
    Модель кода.

    Immutable модель (frozen=True): все операции возвращают новый экземпляр.
    """

    value: str = Field(..., min_length=2, description="Код в верхнем регистре (например, '7JVW52GR+2V')")

    model_config = {"frozen": True}  # Immutable

    @field_validator("value")
    @classmethod
    def validate_grammar(cls, v: str) -> str:
        """Приведение к верхнему регистру и проверка грамматики."""
        v = v.upper()
        if classify_code(v) is CodeKind.INVALID:
            raise ValueError(f"{v!r} is not a valid Open Location Code")
        return v

    @classmethod
    def parse(cls, text: str) -> "Code":
        """
        Создание кода из строки вызывающего кода.

        Args:
            text: Строка кода (регистр не важен)

        Returns:
            Валидный Code

        Raises:
            CodeGrammarError: Если строка не соответствует грамматике
        """
        validate_code(text)
        return cls(value=text)

    @classmethod
    def from_trusted(cls, value: str) -> "Code":
        """
        Код, корректный по построению (результат Encoder).

        Пропускает повторную валидацию.
        """
        return cls.model_construct(value=value)

    # -------------------------------------------------------------------------
    # Классификация
    # -------------------------------------------------------------------------

    @property
    def separator_index(self) -> int:
        """Позиция разделителя."""
        return self.value.find(SEPARATOR)

    @property
    def kind(self) -> CodeKind:
        """FULL или SHORT."""
        if self.separator_index == SEPARATOR_POSITION:
            return CodeKind.FULL
        return CodeKind.SHORT

    @property
    def is_full(self) -> bool:
        """Разделитель на позиции 8."""
        return self.separator_index == SEPARATOR_POSITION

    @property
    def is_short(self) -> bool:
        """Разделитель раньше позиции 8."""
        return 0 <= self.separator_index < SEPARATOR_POSITION

    @property
    def is_padded(self) -> bool:
        """Код содержит padding (меньше 8 значащих цифр до разделителя)."""
        return PADDING_CHARACTER in self.value

    # -------------------------------------------------------------------------
    # Цифры
    # -------------------------------------------------------------------------

    @property
    def digits(self) -> str:
        """Значащие цифры без разделителя и padding."""
        return self.value.replace(SEPARATOR, "").replace(PADDING_CHARACTER, "")

    @property
    def code_length(self) -> int:
        """Длина кода без разделителя (padding учитывается)."""
        return len(self.value) - 1

    def __str__(self) -> str:
        return self.value
