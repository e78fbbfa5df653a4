"""
Core math modules для SD59x18

Integer-only fixed-point арифметика (signed 59.18-decimal, W = 256 бит)
с детерминированными, побитово воспроизводимыми результатами.
"""

# Scale constants
from src.core.math.constants import (
    BIT_WIDTH,
    E,
    EXP2_MAX_INPUT,
    EXP2_MIN_INPUT,
    EXP_MAX_INPUT,
    EXP_MIN_INPUT,
    HALF_SCALE,
    LOG2_10,
    LOG2_E,
    MAX,
    MAX_WHOLE,
    MIN,
    MIN_WHOLE,
    PI,
    SCALE,
    UINT_MAX,
)

# Errors
from src.core.math.errors import (
    DivisionByZero,
    FixedPointError,
    FixedPointOverflow,
    InvalidArgument,
)

# Bit scanner
from src.core.math.bits import most_significant_bit

# Wide multiply / divide
from src.core.math.mul_div import (
    add,
    div,
    inv,
    mul,
    mul_div,
    mul_div_fixed_point,
    sub,
)

# Rounding
from src.core.math.rounding import (
    abs,
    avg,
    ceil,
    floor,
    frac,
    from_int,
    to_int,
)

# Logarithms
from src.core.math.logarithms import ln, log2, log10

# Exponentials
from src.core.math.exponentials import exp, exp2, exp2_192x64

# Powers
from src.core.math.powers import pow, powu

# Square root
from src.core.math.sqrt import gm, sqrt, sqrt_fixed

__all__ = [
    # Constants
    "BIT_WIDTH",
    "E",
    "EXP2_MAX_INPUT",
    "EXP2_MIN_INPUT",
    "EXP_MAX_INPUT",
    "EXP_MIN_INPUT",
    "HALF_SCALE",
    "LOG2_10",
    "LOG2_E",
    "MAX",
    "MAX_WHOLE",
    "MIN",
    "MIN_WHOLE",
    "PI",
    "SCALE",
    "UINT_MAX",
    # Errors
    "FixedPointError",
    "InvalidArgument",
    "DivisionByZero",
    "FixedPointOverflow",
    # Bit scanner
    "most_significant_bit",
    # Multiply / divide
    "mul_div_fixed_point",
    "mul_div",
    "mul",
    "div",
    "inv",
    "add",
    "sub",
    # Rounding
    "from_int",
    "to_int",
    "floor",
    "ceil",
    "frac",
    "abs",
    "avg",
    # Logarithms
    "log2",
    "ln",
    "log10",
    # Exponentials
    "exp2",
    "exp",
    "exp2_192x64",
    # Powers
    "pow",
    "powu",
    # Square root
    "sqrt",
    "sqrt_fixed",
    "gm",
]
