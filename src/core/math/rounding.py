"""
RoundingOps — конверсия и округление SD59x18

Операции:
- from_int / to_int: конверсия целое ↔ fixed point
- floor / ceil: округление к -inf / +inf до целого кратного SCALE
- frac: дробная часть (усечённый остаток по модулю SCALE)
- abs, avg: модуль и среднее без промежуточного переполнения

Направления округления:
    to_int  → к нулю
    floor   → к минус бесконечности
    ceil    → к плюс бесконечности
    avg     → к минус бесконечности (floor((x + y) / 2))
"""

from src.core.math.constants import MAX_WHOLE, MIN, MIN_WHOLE, SCALE
from src.core.math.errors import InvalidArgument
from src.core.math.safeguards import checked_signed, require_int, require_signed, sdiv, srem


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def from_int(n: int) -> int:
    """
    Конверсия целого в SD59x18: n * SCALE.

    Raises:
        FixedPointOverflow: Если n * SCALE вне [MIN, MAX]

    Examples:
        >>> from_int(5)
        5000000000000000000
    """
    require_int(n, "n")
    return checked_signed(n * SCALE, "from_int", (n,))


def to_int(x: int) -> int:
    """
    Конверсия SD59x18 в целое с усечением к нулю.

    Examples:
        >>> to_int(-1_500000000000000000)
        -1
    """
    require_signed(x, "x", "to_int")
    return sdiv(x, SCALE)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def floor(x: int) -> int:
    """
    Наибольшее целое (кратное SCALE) значение <= x.

    Raises:
        InvalidArgument: Если x < MIN_WHOLE (результат не представим)

    Examples:
        >>> floor(-1_500000000000000000)
        -2000000000000000000
    """
    require_signed(x, "x", "floor")
    if x < MIN_WHOLE:
        raise InvalidArgument(
            f"floor: x={x} is below MIN_WHOLE", operation="floor", operands=(x,)
        )

    remainder = srem(x, SCALE)
    if remainder == 0:
        return x

    result = x - remainder
    if x < 0:
        result -= SCALE
    return result


def ceil(x: int) -> int:
    """
    Наименьшее целое (кратное SCALE) значение >= x.

    Raises:
        InvalidArgument: Если x > MAX_WHOLE (результат не представим)

    Examples:
        >>> ceil(1_200000000000000000)
        2000000000000000000
        >>> ceil(-1_200000000000000000)
        -1000000000000000000
    """
    require_signed(x, "x", "ceil")
    if x > MAX_WHOLE:
        raise InvalidArgument(
            f"ceil: x={x} is above MAX_WHOLE", operation="ceil", operands=(x,)
        )

    remainder = srem(x, SCALE)
    if remainder == 0:
        return x

    result = x - remainder
    if x > 0:
        result += SCALE
    return result


def frac(x: int) -> int:
    """
    Дробная часть x: остаток x mod SCALE со знаком x.

    Для положительных x совпадает с x - floor(x); для отрицательных
    возвращается отрицательный остаток (frac(-1.25) == -0.25).
    """
    require_signed(x, "x", "frac")
    return srem(x, SCALE)


# =============================================================================
# ABS / AVG
# =============================================================================


def abs(x: int) -> int:  # noqa: A001
    """
    Модуль SD59x18 значения.

    Raises:
        InvalidArgument: Если x == MIN (положительная пара не помещается)
    """
    require_signed(x, "x", "abs")
    if x == MIN:
        raise InvalidArgument("abs: MIN has no positive counterpart", operation="abs", operands=(x,))
    return -x if x < 0 else x


def avg(x: int, y: int) -> int:
    """
    Среднее арифметическое floor((x + y) / 2) без вычисления x + y.

    Полусуммы (x >> 1) + (y >> 1) теряют по 0.5 у каждого нечётного
    операнда; арифметический сдвиг округляет к минус бесконечности,
    поэтому коррекция +1 нужна только когда оба операнда нечётны.

    Examples:
        >>> avg(1, 2)
        1
        >>> avg(-1, 0)
        -1
        >>> avg(-3, -1)
        -2
    """
    require_signed(x, "x", "avg")
    require_signed(y, "y", "avg")
    return (x >> 1) + (y >> 1) + (x & y & 1)
