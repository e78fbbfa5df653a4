"""
SD59x18 — неизменяемый value object fixed-point числа

Immutable Pydantic модель поверх "сырого" целого из арифметического ядра.
Все операции делегируются функциям src.core.math и возвращают новый
экземпляр; исходный объект никогда не изменяется.

Текстовое представление — точная десятичная запись (без float):
    SD59x18.parse("1.5").raw == 1_500000000000000000
    str(SD59x18(raw=-1)) == "-0.000000000000000001"
"""

import re
from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.math.constants import MAX, MIN, SCALE
from src.core.math.exponentials import exp, exp2
from src.core.math.logarithms import ln, log2, log10
from src.core.math.mul_div import add, div, inv, mul, sub
from src.core.math.powers import pow as fixed_pow
from src.core.math.powers import powu
from src.core.math.rounding import abs as fixed_abs
from src.core.math.rounding import avg, ceil, floor, frac, from_int, to_int
from src.core.math.safeguards import checked_signed
from src.core.math.sqrt import gm, sqrt_fixed

# Количество дробных десятичных цифр
DECIMALS: Final[int] = 18

_DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"^([+-]?)(\d+)(?:\.(\d{1,18}))?$")


class SD59x18(BaseModel):
    """
    Signed 59.18-decimal fixed-point число.

    Immutable модель (frozen=True): raw — целое, интерпретируемое как
    raw / 10^18, всегда в [MIN, MAX].
    """

    raw: int = Field(..., strict=True, description="Значение * 10^18")

    model_config = {"frozen": True}  # Immutable

    @field_validator("raw")
    @classmethod
    def validate_range(cls, v: int) -> int:
        """Проверка диапазона signed 256-bit."""
        if v < MIN or v > MAX:
            raise ValueError(f"raw {v} outside [MIN, MAX]")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, n: int) -> "SD59x18":
        """Конверсия целого: SD59x18.from_int(3) == 3.0"""
        return cls(raw=from_int(n))

    @classmethod
    def parse(cls, text: str) -> "SD59x18":
        """
        Разбор десятичной строки без использования float.

        Args:
            text: Строка вида "-12.345"; не более 18 дробных цифр

        Raises:
            ValueError: Если строка не является десятичным числом
            FixedPointOverflow: Если значение вне [MIN, MAX]
        """
        match = _DECIMAL_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"Not a decimal with at most {DECIMALS} fractional digits: {text!r}")

        sign, whole, fraction = match.groups()
        magnitude = int(whole) * SCALE + int((fraction or "").ljust(DECIMALS, "0"))
        raw = -magnitude if sign == "-" else magnitude
        return cls(raw=checked_signed(raw, "parse", (raw,)))

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        magnitude = -self.raw if self.raw < 0 else self.raw
        whole, fraction = divmod(magnitude, SCALE)
        sign = "-" if self.raw < 0 else ""
        if fraction == 0:
            return f"{sign}{whole}"
        digits = str(fraction).rjust(DECIMALS, "0").rstrip("0")
        return f"{sign}{whole}.{digits}"

    def __int__(self) -> int:
        return to_int(self.raw)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SD59x18):
            return NotImplemented
        return self.raw < other.raw

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SD59x18):
            return NotImplemented
        return self.raw <= other.raw

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SD59x18):
            return NotImplemented
        return self.raw > other.raw

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SD59x18):
            return NotImplemented
        return self.raw >= other.raw

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: "SD59x18") -> "SD59x18":
        if not isinstance(other, SD59x18):
            return NotImplemented
        return SD59x18(raw=add(self.raw, other.raw))

    def __sub__(self, other: "SD59x18") -> "SD59x18":
        if not isinstance(other, SD59x18):
            return NotImplemented
        return SD59x18(raw=sub(self.raw, other.raw))

    def __mul__(self, other: "SD59x18") -> "SD59x18":
        if not isinstance(other, SD59x18):
            return NotImplemented
        return SD59x18(raw=mul(self.raw, other.raw))

    def __truediv__(self, other: "SD59x18") -> "SD59x18":
        if not isinstance(other, SD59x18):
            return NotImplemented
        return SD59x18(raw=div(self.raw, other.raw))

    def __pow__(self, exponent: "int | SD59x18") -> "SD59x18":
        # int → целый показатель (powu), SD59x18 → fixed-point показатель (pow)
        if isinstance(exponent, SD59x18):
            return SD59x18(raw=fixed_pow(self.raw, exponent.raw))
        if isinstance(exponent, int) and not isinstance(exponent, bool):
            return SD59x18(raw=powu(self.raw, exponent))
        return NotImplemented

    def __neg__(self) -> "SD59x18":
        return SD59x18(raw=sub(0, self.raw))

    def __abs__(self) -> "SD59x18":
        return SD59x18(raw=fixed_abs(self.raw))

    # -------------------------------------------------------------------------
    # Округление и функции
    # -------------------------------------------------------------------------

    def to_int(self) -> int:
        return to_int(self.raw)

    def floor(self) -> "SD59x18":
        return SD59x18(raw=floor(self.raw))

    def ceil(self) -> "SD59x18":
        return SD59x18(raw=ceil(self.raw))

    def frac(self) -> "SD59x18":
        return SD59x18(raw=frac(self.raw))

    def avg(self, other: "SD59x18") -> "SD59x18":
        return SD59x18(raw=avg(self.raw, other.raw))

    def inv(self) -> "SD59x18":
        return SD59x18(raw=inv(self.raw))

    def log2(self) -> "SD59x18":
        return SD59x18(raw=log2(self.raw))

    def ln(self) -> "SD59x18":
        return SD59x18(raw=ln(self.raw))

    def log10(self) -> "SD59x18":
        return SD59x18(raw=log10(self.raw))

    def exp2(self) -> "SD59x18":
        return SD59x18(raw=exp2(self.raw))

    def exp(self) -> "SD59x18":
        return SD59x18(raw=exp(self.raw))

    def sqrt(self) -> "SD59x18":
        """Fixed-point корень (sqrt_fixed), а не корень из raw."""
        return SD59x18(raw=sqrt_fixed(self.raw))

    def gm(self, other: "SD59x18") -> "SD59x18":
        return SD59x18(raw=gm(self.raw, other.raw))
