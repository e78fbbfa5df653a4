"""
WideMultiplyDivide — умножение и деление без потери точности

Произведение двух W-битных значений вычисляется целиком (2W бит,
"wide intermediate") и только затем делится на SCALE. Промежуточное
значение не покидает функцию; результат проверяется на W-битный диапазон.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. mul_div_fixed_point округляет вниз (floor)
2. mul/div: знак результата = xor знаков операндов, модуль считается отдельно
3. MIN не имеет положительной пары → InvalidArgument для mul/div
"""

from src.core.math.constants import MIN, SCALE
from src.core.math.errors import DivisionByZero, InvalidArgument
from src.core.math.safeguards import (
    checked_signed,
    checked_unsigned,
    require_signed,
    require_unsigned,
    sdiv,
)


# =============================================================================
# UNSIGNED ПРИМИТИВЫ
# =============================================================================


def mul_div_fixed_point(ax: int, ay: int) -> int:
    """
    floor(ax * ay / SCALE) для unsigned модулей.

    Args:
        ax: Модуль первого множителя (unsigned W-bit)
        ay: Модуль второго множителя (unsigned W-bit)

    Returns:
        Произведение в SD59x18, округлённое вниз

    Raises:
        FixedPointOverflow: Если результат не помещается в W бит

    Examples:
        >>> mul_div_fixed_point(2 * 10**18, 3 * 10**18)
        6000000000000000000
    """
    require_unsigned(ax, "ax", "mul_div_fixed_point")
    require_unsigned(ay, "ay", "mul_div_fixed_point")

    wide = ax * ay
    return checked_unsigned(wide // SCALE, "mul_div_fixed_point", (ax, ay))


def mul_div(x: int, y: int, denominator: int) -> int:
    """
    floor(x * y / denominator) для unsigned значений с полным 2W-битным
    промежуточным произведением.

    Raises:
        DivisionByZero: Если denominator == 0
        FixedPointOverflow: Если результат не помещается в W бит
    """
    require_unsigned(x, "x", "mul_div")
    require_unsigned(y, "y", "mul_div")
    require_unsigned(denominator, "denominator", "mul_div")
    if denominator == 0:
        raise DivisionByZero(
            "mul_div: denominator is zero", operation="mul_div", operands=(x, y, denominator)
        )

    return checked_unsigned((x * y) // denominator, "mul_div", (x, y, denominator))


# =============================================================================
# SIGNED ОПЕРАЦИИ
# =============================================================================


def _reject_min(operation: str, x: int, y: int) -> None:
    if x == MIN or y == MIN:
        raise InvalidArgument(
            f"{operation}: operand equals MIN, its magnitude does not fit",
            operation=operation,
            operands=(x, y),
        )


def mul(x: int, y: int) -> int:
    """
    Умножение двух SD59x18 значений.

    Модуль результата = mul_div_fixed_point(|x|, |y|), знак = xor знаков.
    Для отрицательного результата округление идёт к нулю (модуль floor).

    Args:
        x: Множитель (SD59x18)
        y: Множитель (SD59x18)

    Returns:
        x * y в SD59x18

    Raises:
        InvalidArgument: Если x == MIN или y == MIN
        FixedPointOverflow: Если результат вне [MIN, MAX]

    Examples:
        >>> mul(2 * 10**18, -3 * 10**18)
        -6000000000000000000
    """
    require_signed(x, "x", "mul")
    require_signed(y, "y", "mul")
    _reject_min("mul", x, y)

    ax = -x if x < 0 else x
    ay = -y if y < 0 else y
    r_abs = mul_div_fixed_point(ax, ay)

    result = -r_abs if (x < 0) != (y < 0) else r_abs
    return checked_signed(result, "mul", (x, y))


def div(x: int, y: int) -> int:
    """
    Деление двух SD59x18 значений (усечение к нулю).

    Модуль результата = floor(|x| * SCALE / |y|), знак = xor знаков.

    Raises:
        InvalidArgument: Если x == MIN или y == MIN
        DivisionByZero: Если y == 0
        FixedPointOverflow: Если модуль результата больше MAX
    """
    require_signed(x, "x", "div")
    require_signed(y, "y", "div")
    _reject_min("div", x, y)

    ax = -x if x < 0 else x
    ay = -y if y < 0 else y
    if ay == 0:
        raise DivisionByZero("div: division by zero", operation="div", operands=(x, y))

    r_abs = checked_signed(mul_div(ax, SCALE, ay), "div", (x, y))
    return -r_abs if (x < 0) != (y < 0) else r_abs


def inv(x: int) -> int:
    """
    1 / x в SD59x18: SCALE^2 / x, усечение к нулю.

    Raises:
        DivisionByZero: Если x == 0
    """
    require_signed(x, "x", "inv")
    if x == 0:
        raise DivisionByZero("inv: division by zero", operation="inv", operands=(x,))
    return sdiv(SCALE * SCALE, x)


def add(x: int, y: int) -> int:
    """Сложение с проверкой переполнения."""
    require_signed(x, "x", "add")
    require_signed(y, "y", "add")
    return checked_signed(x + y, "add", (x, y))


def sub(x: int, y: int) -> int:
    """Вычитание с проверкой переполнения."""
    require_signed(x, "x", "sub")
    require_signed(y, "y", "sub")
    return checked_signed(x - y, "sub", (x, y))
