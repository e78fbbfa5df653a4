"""
Numerical Safeguards — проверки домена W-bit

Модуль обеспечивает соблюдение ширины слова для всех операций ядра:
- Проверка входов: signed [MIN, MAX] и unsigned [0, UINT_MAX]
- Проверка результатов перед возвратом вызывающему коду
- Отклонение не-целых входов (float, bool, Decimal) — ядро integer-only

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение вне домена никогда не возвращается
2. Входные данные не приводятся молча: float не превращается в int
"""

import logging

from src.core.math.constants import MAX, MIN, UINT_MAX
from src.core.math.errors import FixedPointOverflow, InvalidArgument

logger = logging.getLogger(__name__)


# =============================================================================
# ТИП ВХОДА
# =============================================================================


def require_int(value: object, name: str) -> int:
    """
    Проверка, что значение — настоящий int (не bool, не float).

    Raises:
        TypeError: Если value не является int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


# =============================================================================
# ВАЛИДАЦИЯ ВХОДОВ
# =============================================================================


def require_signed(value: int, name: str, operation: str) -> int:
    """
    Валидация signed W-bit входа.

    Args:
        value: Проверяемое значение (сырое SD59x18)
        name: Имя параметра (для сообщения об ошибке)
        operation: Имя операции (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int
        InvalidArgument: Если value вне [MIN, MAX]
    """
    require_int(value, name)
    if value < MIN or value > MAX:
        logger.debug("%s: %s=%d outside signed range", operation, name, value)
        raise InvalidArgument(
            f"{operation}: {name}={value} outside [MIN, MAX]",
            operation=operation,
            operands=(value,),
        )
    return value


def require_unsigned(value: int, name: str, operation: str) -> int:
    """
    Валидация unsigned W-bit входа.

    Raises:
        TypeError: Если value не int
        InvalidArgument: Если value вне [0, UINT_MAX]
    """
    require_int(value, name)
    if value < 0 or value > UINT_MAX:
        logger.debug("%s: %s=%d outside unsigned range", operation, name, value)
        raise InvalidArgument(
            f"{operation}: {name}={value} outside [0, UINT_MAX]",
            operation=operation,
            operands=(value,),
        )
    return value


# =============================================================================
# ПРОВЕРКА РЕЗУЛЬТАТОВ
# =============================================================================


def checked_signed(result: int, operation: str, operands: tuple[int, ...] = ()) -> int:
    """
    Проверка, что результат помещается в [MIN, MAX].

    Raises:
        FixedPointOverflow: Если результат вне диапазона
    """
    if result < MIN or result > MAX:
        logger.debug("%s: result overflows signed range, operands=%s", operation, operands)
        raise FixedPointOverflow(
            f"{operation}: result does not fit in signed {MIN.bit_length()}-bit range",
            operation=operation,
            operands=operands,
        )
    return result


def checked_unsigned(result: int, operation: str, operands: tuple[int, ...] = ()) -> int:
    """
    Проверка, что результат помещается в [0, UINT_MAX].

    Raises:
        FixedPointOverflow: Если результат больше UINT_MAX
    """
    if result > UINT_MAX:
        logger.debug("%s: result overflows unsigned range, operands=%s", operation, operands)
        raise FixedPointOverflow(
            f"{operation}: result does not fit in unsigned {UINT_MAX.bit_length()}-bit range",
            operation=operation,
            operands=operands,
        )
    return result


def sdiv(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Python `//` округляет к минус бесконечности; для отрицательных
    fixed-point значений ядро использует усечение (как to_int, ln, log10).
    """
    quotient = (numerator if numerator >= 0 else -numerator) // (
        denominator if denominator >= 0 else -denominator
    )
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def srem(numerator: int, denominator: int) -> int:
    """Остаток с усечением к нулю: знак совпадает со знаком числителя."""
    return numerator - denominator * sdiv(numerator, denominator)
