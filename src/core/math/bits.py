"""
BitScanner — позиция старшего установленного бита
"""

from typing import Final

from src.core.math.errors import InvalidArgument
from src.core.math.safeguards import require_unsigned

# Шаги бинарного поиска для 256-битного слова
_MSB_SHIFTS: Final[tuple[int, ...]] = (128, 64, 32, 16, 8, 4, 2, 1)


def most_significant_bit(x: int) -> int:
    """
    Индекс старшего установленного бита (0-based).

    Бинарный поиск: на каждом шаге проверяется, что оставшееся значение
    >= 2^k, k = 128, 64, ..., 1; без деления, O(log W) сравнений.

    Args:
        x: Unsigned W-bit целое, x > 0

    Returns:
        Индекс в [0, 255]

    Raises:
        InvalidArgument: Если x == 0 или x вне [0, UINT_MAX]

    Examples:
        >>> most_significant_bit(1)
        0
        >>> most_significant_bit(256)
        8
    """
    require_unsigned(x, "x", "most_significant_bit")
    if x == 0:
        raise InvalidArgument(
            "most_significant_bit: x must be positive, got 0",
            operation="most_significant_bit",
            operands=(x,),
        )

    msb = 0
    for shift in _MSB_SHIFTS:
        if x >= 1 << shift:
            x >>= shift
            msb += shift
    return msb
