"""
Fixed-point errors

Иерархия исключений арифметического ядра SD59x18.

Политика:
1. Fail fast: исключение на первом нарушенном предусловии
2. Частичных результатов нет: либо точное значение, либо исключение
3. Underflow (результат меньше одной единицы) — НЕ ошибка, возвращается 0
"""

from typing import Any


class FixedPointError(ArithmeticError):
    """
    Базовое исключение fixed-point арифметики.

    Attributes:
        operation: Имя операции, в которой нарушено предусловие
        operands: Входные значения операции (для аудита)
    """

    def __init__(self, message: str, operation: str = "", operands: tuple[Any, ...] = ()):
        super().__init__(message)
        self.operation = operation
        self.operands = operands


class InvalidArgument(FixedPointError, ValueError):
    """
    Нарушено предусловие операции.

    Примеры: log2(0), sqrt(-1), abs(MIN), mul(MIN, y), pow(x < 0, y).
    """

    pass


class DivisionByZero(InvalidArgument, ZeroDivisionError):
    """Делитель равен нулю (div, inv, mul_div)."""

    pass


class FixedPointOverflow(FixedPointError, OverflowError):
    """
    Результат (или обязательный промежуточный результат) не помещается
    в W-битное целое либо выходит за [MIN, MAX].
    """

    pass
