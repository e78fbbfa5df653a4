"""
Powers — pow (fixed-point показатель) и powu (целый показатель)

pow(x, y) = 2^(log2(x) * y) — определена для x >= 0.
powu(x, y) — возведение в квадрат (exponentiation by squaring),
O(log y) умножений mul_div_fixed_point, отрицательные x допустимы.

Соглашение: 0^0 = 1 (SCALE) для обеих функций.
"""

from src.core.math.constants import MIN, SCALE
from src.core.math.errors import InvalidArgument
from src.core.math.exponentials import exp2
from src.core.math.logarithms import log2
from src.core.math.mul_div import mul, mul_div_fixed_point
from src.core.math.rounding import abs as fixed_abs
from src.core.math.safeguards import checked_signed, require_signed, require_unsigned


def pow(x: int, y: int) -> int:  # noqa: A001
    """
    x^y для SD59x18 основания и показателя.

    Args:
        x: Основание (SD59x18), x >= 0
        y: Показатель (SD59x18)

    Returns:
        x^y в SD59x18

    Raises:
        InvalidArgument: Если x < 0 (log2 требует положительного основания)
        FixedPointOverflow: Если log2(x) * y или 2^(...) не помещаются

    Examples:
        >>> pow(2 * 10**18, 10 * 10**18)
        1024000000000000000000
        >>> pow(0, 0)
        1000000000000000000
    """
    require_signed(x, "x", "pow")
    require_signed(y, "y", "pow")

    if x == 0:
        return SCALE if y == 0 else 0
    if x < 0:
        raise InvalidArgument(
            f"pow: base must be non-negative, got x={x}", operation="pow", operands=(x, y)
        )

    return exp2(mul(log2(x), y))


def powu(x: int, y: int) -> int:
    """
    x^y для SD59x18 основания и целого неотрицательного показателя.

    Модуль считается возведением |x| в квадрат по битам y, каждое умножение
    округляется вниз (mul_div_fixed_point). Знак отрицательный, если x < 0
    и y нечётно.

    Args:
        x: Основание (SD59x18)
        y: Показатель — обычное целое (НЕ fixed point), y >= 0

    Returns:
        x^y в SD59x18

    Raises:
        InvalidArgument: Если x == MIN или y < 0
        FixedPointOverflow: Если промежуточный или итоговый модуль не помещается

    Examples:
        >>> powu(3 * 10**18, 3)
        27000000000000000000
        >>> powu(-2 * 10**18, 3)
        -8000000000000000000
    """
    require_signed(x, "x", "powu")
    require_unsigned(y, "y", "powu")
    if x == MIN:
        raise InvalidArgument("powu: base equals MIN", operation="powu", operands=(x, y))

    x_abs = fixed_abs(x)
    r_abs = x_abs if y & 1 else SCALE

    exponent = y >> 1
    while exponent > 0:
        x_abs = mul_div_fixed_point(x_abs, x_abs)
        if exponent & 1:
            r_abs = mul_div_fixed_point(r_abs, x_abs)
        exponent >>= 1

    result = -r_abs if x < 0 and y & 1 else r_abs
    return checked_signed(result, "powu", (x, y))
