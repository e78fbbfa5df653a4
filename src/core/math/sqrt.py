"""
Sqrt — целочисленный квадратный корень

ВАЖНО: sqrt работает с "сырыми" целыми, а не с SD59x18:
    sqrt(16) == 4,   sqrt(from_int(4)) == 2 * 10^9 (не from_int(2))

Для fixed-point корня используется sqrt_fixed(x) = sqrt(x * SCALE).

Алгоритм: начальное приближение — степень двойки порядка sqrt(x),
найденная бинарным поиском по битовой длине x; затем семь итераций
Ньютона guess = (guess + x / guess) / 2 и финальная коррекция
min(guess, x / guess), дающая ровно floor(sqrt(x)).
"""

from typing import Final

from src.core.math.constants import MAX, SCALE
from src.core.math.errors import FixedPointOverflow, InvalidArgument
from src.core.math.safeguards import checked_signed, require_signed

# (порог, сдвиг x, сдвиг приближения): бинарный поиск по битовой длине
_SEED_STEPS: Final[tuple[tuple[int, int, int], ...]] = (
    (1 << 128, 128, 64),
    (1 << 64, 64, 32),
    (1 << 32, 32, 16),
    (1 << 16, 16, 8),
    (1 << 8, 8, 4),
    (1 << 4, 4, 2),
)

NEWTON_ITERATIONS: Final[int] = 7


def sqrt(x: int) -> int:
    """
    floor(sqrt(x)) для неотрицательного целого x.

    Raises:
        InvalidArgument: Если x < 0

    Examples:
        >>> sqrt(16)
        4
        >>> sqrt(15)
        3
    """
    require_signed(x, "x", "sqrt")
    if x < 0:
        raise InvalidArgument(
            f"sqrt: square root of negative value x={x}", operation="sqrt", operands=(x,)
        )
    if x == 0:
        return 0

    x_aux = x
    guess = 1
    for threshold, x_shift, guess_shift in _SEED_STEPS:
        if x_aux >= threshold:
            x_aux >>= x_shift
            guess <<= guess_shift
    if x_aux >= 8:
        guess <<= 1

    for _ in range(NEWTON_ITERATIONS):
        guess = (guess + x // guess) >> 1

    rounded_down = x // guess
    return rounded_down if guess >= rounded_down else guess


def sqrt_fixed(x: int) -> int:
    """
    Квадратный корень SD59x18 значения: sqrt(x * SCALE).

    Raises:
        InvalidArgument: Если x < 0
        FixedPointOverflow: Если x > MAX / SCALE

    Examples:
        >>> sqrt_fixed(4 * 10**18)
        2000000000000000000
    """
    require_signed(x, "x", "sqrt_fixed")
    if x < 0:
        raise InvalidArgument(
            f"sqrt_fixed: square root of negative value x={x}",
            operation="sqrt_fixed",
            operands=(x,),
        )
    if x > MAX // SCALE:
        raise FixedPointOverflow(
            f"sqrt_fixed: x={x} * SCALE does not fit", operation="sqrt_fixed", operands=(x,)
        )
    return sqrt(x * SCALE)


def gm(x: int, y: int) -> int:
    """
    Геометрическое среднее sqrt(x * y) двух SD59x18 значений.

    Произведение двух значений со scale 10^18 имеет scale 10^36, поэтому
    "сырой" корень из него снова имеет scale 10^18.

    Raises:
        InvalidArgument: Если x * y < 0
        FixedPointOverflow: Если x * y вне [MIN, MAX]
    """
    require_signed(x, "x", "gm")
    require_signed(y, "y", "gm")
    if x == 0 or y == 0:
        return 0

    xy = checked_signed(x * y, "gm", (x, y))
    if xy < 0:
        raise InvalidArgument(
            "gm: geometric mean of a negative product is undefined",
            operation="gm",
            operands=(x, y),
        )
    return sqrt(xy)
