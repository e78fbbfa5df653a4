"""
Тесты для Sqrt (sqrt, sqrt_fixed, gm)

ВАЖНО: sqrt работает с сырыми целыми: sqrt(16) == 4,
а sqrt(from_int(4)) == 2 * 10^9, а не from_int(2).
"""

import math

import pytest

from src.core.math.constants import MAX, SCALE
from src.core.math.errors import FixedPointOverflow, InvalidArgument
from src.core.math.rounding import from_int
from src.core.math.sqrt import gm, sqrt, sqrt_fixed


class TestSqrt:
    """Тесты целочисленного sqrt"""

    def test_raw_integers(self) -> None:
        """sqrt оперирует сырыми целыми"""
        assert sqrt(16) == 4
        assert sqrt(15) == 3
        assert sqrt(0) == 0
        assert sqrt(1) == 1

    def test_not_rescaled(self) -> None:
        """sqrt(4.0 в SD59x18) — это sqrt(4 * 10^18), а не 2.0"""
        assert sqrt(from_int(4)) == 2 * 10**9
        assert sqrt(from_int(4)) != from_int(2)

    @pytest.mark.parametrize(
        "y",
        [1, 2, 3, 7, 10**9, 10**18, 2**64 - 1, 2**127, 2**127 + 12345, math.isqrt(MAX)],
    )
    def test_exact_squares(self, y: int) -> None:
        """sqrt(y * y) == y"""
        assert sqrt(y * y) == y

    @pytest.mark.parametrize(
        "x",
        [2, 3, 8, 99, 10**30 - 1, 2**200 + 1, 3**150, MAX, MAX - 1, 2**254 - 1],
    )
    def test_floor_of_root(self, x: int) -> None:
        """Результат — ровно floor(sqrt(x)), не на единицу больше"""
        assert sqrt(x) == math.isqrt(x)

    def test_small_range(self) -> None:
        for x in range(0, 2000):
            assert sqrt(x) == math.isqrt(x)

    def test_negative_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="negative"):
            sqrt(-1)


class TestSqrtFixed:
    """Тесты fixed-point корня"""

    def test_values(self) -> None:
        assert sqrt_fixed(from_int(4)) == from_int(2)
        assert sqrt_fixed(from_int(2)) == 1_414213562373095048
        assert sqrt_fixed(SCALE // 4) == SCALE // 2
        assert sqrt_fixed(0) == 0

    def test_upper_bound(self) -> None:
        assert sqrt_fixed(MAX // SCALE) == math.isqrt(MAX // SCALE * SCALE)
        with pytest.raises(FixedPointOverflow):
            sqrt_fixed(MAX // SCALE + 1)

    def test_negative_raises(self) -> None:
        with pytest.raises(InvalidArgument):
            sqrt_fixed(-1)


class TestGm:
    """Тесты геометрического среднего"""

    def test_values(self) -> None:
        assert gm(from_int(2), from_int(8)) == from_int(4)
        assert gm(from_int(-2), from_int(-8)) == from_int(4)

    @pytest.mark.parametrize("x", [SCALE, 3 * SCALE, 1_500000000000000000, 10**30])
    def test_same_operands(self, x: int) -> None:
        assert gm(x, x) == x

    def test_zero(self) -> None:
        assert gm(0, from_int(5)) == 0
        assert gm(from_int(5), 0) == 0

    def test_negative_product_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="negative product"):
            gm(-SCALE, SCALE)

    def test_overflow(self) -> None:
        with pytest.raises(FixedPointOverflow):
            gm(MAX, MAX)
