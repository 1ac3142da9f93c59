"""
Ошибки вычисления выражений

Два независимых канала ошибок, которые никогда не смешиваются:
- ExpressionSyntaxError: структурные ошибки разбора (всегда с позицией)
- MathError: семантические ошибки вычисления (несовместимые единицы,
  деление на ноль), позиция необязательна

Позиция: индекс символа во входной строке, под который вызывающая
сторона ставит каретку.
"""

from typing import Optional


class CalculatorError(Exception):
    """
    Базовый класс ошибок калькулятора.

    Attributes:
        message: Текст ошибки для пользователя
        pos: Позиция во входной строке (или None)
    """

    def __init__(self, message: str, pos: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.pos = pos

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, pos={self.pos!r})"


class ExpressionSyntaxError(CalculatorError):
    """Структурная ошибка: неожиданный символ/токен, незакрытая скобка и т.п."""

    def __init__(self, message: str, pos: int):
        super().__init__(message, pos)


class MathError(CalculatorError):
    """
    Семантическая ошибка вычисления.

    Возникает в операциях над Value; парсер дополняет её позицией оператора.
    """

    def at(self, pos: int) -> "MathError":
        """Копия ошибки с позицией (исходная не изменяется)."""
        return MathError(self.message, pos)
