"""
ScaleConstants — таблица констант SD59x18

Signed 59.18-decimal fixed point: вещественное число хранится как целое,
умноженное на SCALE = 10^18. Ширина слова W = 256 бит, поэтому диапазон
представимых значений — [MIN, MAX] = [-2^255, 2^255 - 1] в "сырых" единицах.

Python int не ограничен по ширине, поэтому W соблюдается явными проверками
диапазона (см. safeguards.py), а не переполнением машинного слова.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все константы вычисляются один раз при импорте и далее только читаются
2. Никаких float: все значения — точные целые
"""

import math
from typing import Final

# =============================================================================
# МАСШТАБ И ШИРИНА СЛОВА
# =============================================================================

# Единица fixed-point (1.0 в SD59x18)
SCALE: Final[int] = 10**18

# 0.5 в SD59x18, используется для округления к ближайшему
HALF_SCALE: Final[int] = SCALE // 2

# Ширина "felt-эквивалентного" целого в битах
BIT_WIDTH: Final[int] = 256

# Границы signed W-bit
MAX: Final[int] = 2 ** (BIT_WIDTH - 1) - 1
MIN: Final[int] = -(2 ** (BIT_WIDTH - 1))

# Граница unsigned W-bit (для модулей и промежуточных произведений)
UINT_MAX: Final[int] = 2**BIT_WIDTH - 1

# MAX/MIN, усечённые до ближайшего кратного SCALE (в сторону нуля)
MAX_WHOLE: Final[int] = MAX - MAX % SCALE
MIN_WHOLE: Final[int] = -((-MIN) // SCALE * SCALE)


# =============================================================================
# МАТЕМАТИЧЕСКИЕ КОНСТАНТЫ (SD59x18)
# =============================================================================

# round(log2(e) * 10^18)
LOG2_E: Final[int] = 1_442695040888963407

# round(log2(10) * 10^18)
LOG2_10: Final[int] = 3_321928094887362348

# Число Эйлера
E: Final[int] = 2_718281828459045235

# Число пи
PI: Final[int] = 3_141592653589793238


# =============================================================================
# ГРАНИЦЫ ОБЛАСТИ ОПРЕДЕЛЕНИЯ exp2 / exp
# =============================================================================

# exp2(x) при x >= 192 не помещается в 192.64 аккумулятор
EXP2_MAX_INPUT: Final[int] = 192 * SCALE

# exp2(x) при x < log2(10^-18) меньше одной единицы SD59x18 → 0
EXP2_MIN_INPUT: Final[int] = -59_794705707972522261

# ln(MAX / SCALE): выше этого exp(x) переполняет SD59x18
EXP_MAX_INPUT: Final[int] = 133_084258667509499441

# ln(10^-18): ниже этого exp(x) меньше одной единицы → 0
EXP_MIN_INPUT: Final[int] = -41_446531673892822322


# =============================================================================
# МНОЖИТЕЛИ exp2 (64.64 binary fixed point)
# =============================================================================

# Число дробных бит 192.64 представления
EXP2_FRACTION_BITS: Final[int] = 64

# 0.5 в 192.64 (начальное значение аккумулятора exp2)
EXP2_ACCUMULATOR_SEED: Final[int] = 1 << 191


def _exp2_multipliers(fraction_bits: int = EXP2_FRACTION_BITS) -> tuple[int, ...]:
    """
    Таблица 2^(2^-k) для k = 1..64 в формате 64.64, округление к ближайшему.

    Каждый элемент — целочисленный квадратный корень предыдущего,
    посчитанный с 64 защитными битами, поэтому таблица детерминирована
    и не зависит от платформенного float.

    Returns:
        Кортеж из 64 множителей; индекс i соответствует биту 2^(63 - i)
        дробной части показателя.
    """
    guard_bits = 64
    precision = fraction_bits + guard_bits

    root = 2 << precision  # 2.0
    multipliers = []
    for _ in range(fraction_bits):
        root = math.isqrt(root << precision)
        multipliers.append((root + (1 << (guard_bits - 1))) >> guard_bits)
    return tuple(multipliers)


EXP2_MULTIPLIERS: Final[tuple[int, ...]] = _exp2_multipliers()
