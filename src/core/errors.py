"""
Errors — Иерархия исключений кодека

Три вида ошибок, все синхронные и без retry (нарушение предусловия, а не
временный сбой):
- InvalidArgumentError: некорректные входные значения (длина кода, NaN,
  нечисловая строка, reference point слишком далеко для shorten)
- InvalidOperationError: операция неприменима к состоянию кода
  (decode на short коде, shorten на short или padded коде)
- CodeGrammarError: строка не проходит грамматику кода
"""


class OpenLocationCodeError(Exception):
    """Базовое исключение для всех ошибок кодека."""

    pass


class InvalidArgumentError(OpenLocationCodeError, ValueError):
    """
    Некорректный аргумент.

    Наследует ValueError, чтобы вызывающий код мог ловить стандартное
    исключение для плохих значений.
    """

    pass


class InvalidOperationError(OpenLocationCodeError):
    """
    Операция неприменима к коду в его текущем состоянии (full/short/padded).
    """

    pass


class CodeGrammarError(OpenLocationCodeError):
    """
    Строка не является синтаксически корректным кодом.

    Attributes:
        code: Исходная строка
        reason: Первое найденное нарушение грамматики
    """

    def __init__(self, code: object, reason: str):
        self.code = code
        self.reason = reason
        super().__init__(f"The provided code {code!r} is not a valid Open Location Code: {reason}")
