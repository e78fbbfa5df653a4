"""
Logarithms — log2, ln, log10 в SD59x18

log2 считается итеративным делением пополам (binary logarithm by
repeated squaring):

    x = 2^n * y,  y ∈ [1, 2)
    log2(x) = n + log2(y)

Дробная часть log2(y) набирается по одному биту: y возводится в квадрат,
и если y^2 >= 2, текущий бит (delta) равен 1, а y делится на 2.
delta стартует с 0.5 и уменьшается вдвое до нуля (~59 итераций).

Для x < 1 используется log2(x) = -log2(1/x).

ln и log10 получаются из log2 делением на log2(e) и log2(10);
log10 возвращает точный результат для всех представимых степеней 10.
"""

from typing import Final

from src.core.math.bits import most_significant_bit
from src.core.math.constants import HALF_SCALE, LOG2_10, LOG2_E, SCALE
from src.core.math.errors import InvalidArgument
from src.core.math.safeguards import require_signed, sdiv

# Точные log10 для степеней десяти: raw 10^j → (j - 18) * SCALE, j ∈ [0, 76]
_POWERS_OF_TEN_LOG10: Final[dict[int, int]] = {
    10**j: (j - 18) * SCALE for j in range(77)
}


def _require_positive(x: int, operation: str) -> None:
    require_signed(x, "x", operation)
    if x <= 0:
        raise InvalidArgument(
            f"{operation}: logarithm of non-positive value x={x} is undefined",
            operation=operation,
            operands=(x,),
        )


def log2(x: int) -> int:
    """
    Двоичный логарифм SD59x18 значения.

    Args:
        x: Аргумент (SD59x18), x > 0

    Returns:
        log2(x) в SD59x18

    Raises:
        InvalidArgument: Если x <= 0

    Examples:
        >>> log2(8 * 10**18)
        3000000000000000000
        >>> log2(5 * 10**17)
        -1000000000000000000
    """
    _require_positive(x, "log2")

    if x >= SCALE:
        sign = 1
    else:
        sign = -1
        # Инверсия в fixed point: 1 / x = SCALE^2 / x
        x = SCALE * SCALE // x

    # Целая часть: номер старшего бита x / SCALE
    n = most_significant_bit(x // SCALE)
    result = n * SCALE

    # y = x / 2^n ∈ [1, 2)
    y = x >> n
    if y == SCALE:
        return result * sign

    delta = HALF_SCALE
    while delta > 0:
        y = y * y // SCALE
        if y >= 2 * SCALE:
            result += delta
            y >>= 1
        delta >>= 1

    return result * sign


def ln(x: int) -> int:
    """
    Натуральный логарифм: log2(x) * SCALE / LOG2_E (усечение к нулю).

    Raises:
        InvalidArgument: Если x <= 0
    """
    _require_positive(x, "ln")
    return sdiv(log2(x) * SCALE, LOG2_E)


def log10(x: int) -> int:
    """
    Десятичный логарифм.

    Для точных степеней десяти (SCALE * 10^k, k ∈ [-18, 58]) результат
    берётся из таблицы; иначе log2(x) * SCALE / LOG2_10 (усечение к нулю).

    Raises:
        InvalidArgument: Если x <= 0

    Examples:
        >>> log10(10**19)
        1000000000000000000
        >>> log10(1)
        -18000000000000000000
    """
    _require_positive(x, "log10")

    exact = _POWERS_OF_TEN_LOG10.get(x)
    if exact is not None:
        return exact
    return sdiv(log2(x) * SCALE, LOG2_10)
