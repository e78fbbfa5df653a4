"""
Exponentials — exp2 и exp в SD59x18

exp2 использует побитовое разложение показателя в 192.64 binary fixed
point:

    2^x = 2^floor(x) * Π 2^(2^-k)   по установленным дробным битам k

Аккумулятор стартует с 0.5 (2^191 в 192.64) и умножается на
предвычисленные множители EXP2_MULTIPLIERS; в конце результат
масштабируется в SD59x18 сдвигом на (191 - floor(x)).

exp(x) = exp2(x * log2(e)) с округлением показателя к ближайшему.

Underflow (результат меньше одной единицы 10^-18) не является ошибкой:
возвращается 0.
"""

import logging

from src.core.math.constants import (
    EXP2_ACCUMULATOR_SEED,
    EXP2_FRACTION_BITS,
    EXP2_MAX_INPUT,
    EXP2_MIN_INPUT,
    EXP2_MULTIPLIERS,
    EXP_MAX_INPUT,
    EXP_MIN_INPUT,
    HALF_SCALE,
    LOG2_E,
    SCALE,
)
from src.core.math.errors import FixedPointOverflow
from src.core.math.safeguards import require_signed, require_unsigned, sdiv

logger = logging.getLogger(__name__)


def exp2_192x64(x: int) -> int:
    """
    Ядро exp2: 2^x для неотрицательного x в формате 192.64.

    Args:
        x: Показатель в 192.64 (целая часть < 192)

    Returns:
        2^x в SD59x18

    Raises:
        FixedPointOverflow: Если целая часть x >= 192
    """
    require_unsigned(x, "x", "exp2_192x64")
    integer_part = x >> EXP2_FRACTION_BITS
    if integer_part >= 192:
        raise FixedPointOverflow(
            f"exp2_192x64: integer part {integer_part} must be below 192",
            operation="exp2_192x64",
            operands=(x,),
        )

    result = EXP2_ACCUMULATOR_SEED
    for index, multiplier in enumerate(EXP2_MULTIPLIERS):
        if x & (1 << (EXP2_FRACTION_BITS - 1 - index)):
            result = (result * multiplier) >> EXP2_FRACTION_BITS

    # 0.5 * 2^frac в 192.64 → SD59x18 с учётом целой части
    result *= SCALE
    result >>= 191 - integer_part
    return result


def exp2(x: int) -> int:
    """
    Двоичная экспонента 2^x.

    Args:
        x: Показатель (SD59x18)

    Returns:
        2^x в SD59x18; 0 если x < EXP2_MIN_INPUT (underflow)

    Raises:
        FixedPointOverflow: Если x >= 192

    Examples:
        >>> exp2(0)
        1000000000000000000
        >>> exp2(10 * 10**18)
        1024000000000000000000
        >>> exp2(-1 * 10**18)
        500000000000000000
    """
    require_signed(x, "x", "exp2")

    if x < 0:
        if x < EXP2_MIN_INPUT:
            logger.debug("exp2: x=%d below %d, result underflows to 0", x, EXP2_MIN_INPUT)
            return 0
        # 2^x = 1 / 2^-x
        return SCALE * SCALE // exp2(-x)

    if x >= EXP2_MAX_INPUT:
        raise FixedPointOverflow(
            f"exp2: x={x} must be below {EXP2_MAX_INPUT}",
            operation="exp2",
            operands=(x,),
        )

    # SD59x18 → 192.64
    x_192x64 = (x << EXP2_FRACTION_BITS) // SCALE
    return exp2_192x64(x_192x64)


def exp(x: int) -> int:
    """
    Натуральная экспонента e^x через exp2(x * log2(e)).

    Raises:
        FixedPointOverflow: Если x >= EXP_MAX_INPUT (~133.08)

    Examples:
        >>> exp(0)
        1000000000000000000
    """
    require_signed(x, "x", "exp")

    if x < EXP_MIN_INPUT:
        logger.debug("exp: x=%d below %d, result underflows to 0", x, EXP_MIN_INPUT)
        return 0

    if x >= EXP_MAX_INPUT:
        raise FixedPointOverflow(
            f"exp: x={x} must be below {EXP_MAX_INPUT}",
            operation="exp",
            operands=(x,),
        )

    double_scale_product = x * LOG2_E
    return exp2(sdiv(double_scale_product + HALF_SCALE, SCALE))
