"""
Тесты для SD59x18 value object

Покрывает:
- Создание и валидация (диапазон, strict int)
- Разбор и форматирование десятичных строк
- Immutability (frozen=True)
- Арифметические операторы и сравнение
- JSON сериализация/десериализация
"""

import pytest
from pydantic import ValidationError

from src.core.domain import SD59x18
from src.core.math.constants import MAX, MIN, SCALE
from src.core.math.errors import DivisionByZero, FixedPointOverflow, InvalidArgument


def d(text: str) -> SD59x18:
    return SD59x18.parse(text)


# =============================================================================
# СОЗДАНИЕ И ВАЛИДАЦИЯ
# =============================================================================


class TestCreation:
    """Тесты создания"""

    def test_from_raw(self) -> None:
        assert SD59x18(raw=SCALE).raw == SCALE
        assert SD59x18(raw=MAX).raw == MAX
        assert SD59x18(raw=MIN).raw == MIN

    def test_from_int(self) -> None:
        assert SD59x18.from_int(3).raw == 3 * SCALE
        assert SD59x18.from_int(-3).to_int() == -3

    def test_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SD59x18(raw=MAX + 1)
        with pytest.raises(ValidationError):
            SD59x18(raw=MIN - 1)

    def test_float_rejected(self) -> None:
        """Strict int: float не приводится"""
        with pytest.raises(ValidationError):
            SD59x18(raw=1.5)  # type: ignore[arg-type]

    def test_immutable(self) -> None:
        value = SD59x18.from_int(1)
        with pytest.raises(ValidationError):
            value.raw = 2  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({SD59x18.from_int(1), SD59x18.from_int(1), SD59x18.from_int(2)}) == 2


# =============================================================================
# ДЕСЯТИЧНЫЕ СТРОКИ
# =============================================================================


class TestDecimalText:
    """Тесты parse / __str__"""

    @pytest.mark.parametrize(
        "text, raw",
        [
            ("0", 0),
            ("1.5", 1_500000000000000000),
            ("-2.25", -2_250000000000000000),
            ("+7", 7 * SCALE),
            ("-0.000000000000000001", -1),
            ("  42.1  ", 42_100000000000000000),
        ],
    )
    def test_parse(self, text: str, raw: int) -> None:
        assert d(text).raw == raw

    @pytest.mark.parametrize(
        "text",
        ["0", "1.5", "-2.25", "123456789.000000000000000001", "-0.000000000000000001", "1000"],
    )
    def test_str_roundtrip(self, text: str) -> None:
        assert str(d(text)) == text

    def test_str_trims_trailing_zeros(self) -> None:
        assert str(SD59x18(raw=1_250000000000000000)) == "1.25"
        assert str(SD59x18(raw=-3 * SCALE)) == "-3"

    @pytest.mark.parametrize("text", ["abc", "1e5", "1.", ".5", "1.0000000000000000001", "--1", ""])
    def test_malformed_rejected(self, text: str) -> None:
        with pytest.raises(ValueError, match="Not a decimal"):
            d(text)

    def test_out_of_range_rejected(self) -> None:
        with pytest.raises(FixedPointOverflow):
            d("1" + "0" * 60)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestOperators:
    """Тесты операторов"""

    def test_add_sub(self) -> None:
        assert d("1.5") + d("2.25") == d("3.75")
        assert d("1.5") - d("2.25") == d("-0.75")

    def test_mul_div(self) -> None:
        assert d("1.5") * d("2.25") == d("3.375")
        assert d("3") / d("2") == d("1.5")

    def test_div_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            d("1") / d("0")

    def test_neg_abs(self) -> None:
        assert -d("1.5") == d("-1.5")
        assert abs(d("-1.5")) == d("1.5")
        with pytest.raises(FixedPointOverflow):
            -SD59x18(raw=MIN)
        with pytest.raises(InvalidArgument):
            abs(SD59x18(raw=MIN))

    def test_pow(self) -> None:
        """int показатель → powu, SD59x18 показатель → pow"""
        assert SD59x18.from_int(2) ** 10 == SD59x18.from_int(1024)
        assert SD59x18.from_int(2) ** SD59x18.from_int(10) == SD59x18.from_int(1024)
        assert d("-2") ** 3 == d("-8")

    def test_ordering(self) -> None:
        values = [d("2"), d("-1.5"), d("0.1"), d("0")]
        assert sorted(values) == [d("-1.5"), d("0"), d("0.1"), d("2")]
        assert d("1") <= d("1")
        assert d("2") > d("1")
        assert d("1") >= d("0.999999999999999999")

    def test_foreign_operand(self) -> None:
        with pytest.raises(TypeError):
            d("1") + 1  # type: ignore[operator]


class TestFunctions:
    """Тесты методов-обёрток"""

    def test_rounding(self) -> None:
        assert d("-1.5").floor() == d("-2")
        assert d("-1.5").ceil() == d("-1")
        assert d("-1.25").frac() == d("-0.25")
        assert int(d("-1.5")) == -1
        assert d("1").avg(d("2")) == d("1.5")

    def test_transcendental(self) -> None:
        assert d("8").log2() == d("3")
        assert d("1").ln() == d("0")
        assert d("1000").log10() == d("3")
        assert d("10").exp2() == d("1024")
        assert d("0").exp() == d("1")
        assert d("4").inv() == d("0.25")

    def test_sqrt_is_fixed_point(self) -> None:
        assert d("4").sqrt() == d("2")
        assert d("2").gm(d("8")) == d("4")


# =============================================================================
# JSON
# =============================================================================


class TestJson:
    """JSON сериализация/десериализация"""

    def test_roundtrip(self) -> None:
        value = d("2.5")
        restored = SD59x18.model_validate_json(value.model_dump_json())
        assert restored == value

    def test_dump(self) -> None:
        assert d("2.5").model_dump() == {"raw": 2_500000000000000000}
