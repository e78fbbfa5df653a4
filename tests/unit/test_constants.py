"""
Тесты для ScaleConstants

Проверяет:
1. Согласованность SCALE / HALF_SCALE / MAX / MIN
2. MAX_WHOLE / MIN_WHOLE кратны SCALE и ближайшие к границам
3. Таблицу множителей exp2 (64.64)
"""

from src.core.math.constants import (
    BIT_WIDTH,
    EXP2_MULTIPLIERS,
    HALF_SCALE,
    MAX,
    MAX_WHOLE,
    MIN,
    MIN_WHOLE,
    SCALE,
    UINT_MAX,
)


class TestScale:
    """Тесты масштаба и ширины слова"""

    def test_scale_is_ten_to_eighteen(self) -> None:
        """SCALE = 10^18, HALF_SCALE = SCALE / 2"""
        assert SCALE == 10**18
        assert HALF_SCALE * 2 == SCALE

    def test_signed_bounds(self) -> None:
        """MAX/MIN — границы signed 256-bit"""
        assert BIT_WIDTH == 256
        assert MAX == 2**255 - 1
        assert MIN == -(2**255)
        assert UINT_MAX == 2**256 - 1
        assert MAX - MIN == UINT_MAX


class TestWholeBounds:
    """Тесты MAX_WHOLE / MIN_WHOLE"""

    def test_max_whole_is_largest_multiple(self) -> None:
        """MAX_WHOLE — наибольшее кратное SCALE, не превышающее MAX"""
        assert MAX_WHOLE % SCALE == 0
        assert MAX_WHOLE <= MAX
        assert MAX - MAX_WHOLE < SCALE

    def test_min_whole_is_smallest_multiple(self) -> None:
        """MIN_WHOLE — наименьшее кратное SCALE, не меньшее MIN"""
        assert MIN_WHOLE % SCALE == 0
        assert MIN_WHOLE >= MIN
        assert MIN_WHOLE - MIN < SCALE

    def test_bounds_are_not_whole(self) -> None:
        """Сами MAX/MIN не кратны SCALE"""
        assert MAX != MAX_WHOLE
        assert MIN != MIN_WHOLE


class TestExp2Multipliers:
    """Тесты таблицы 2^(2^-k) в формате 64.64"""

    def test_table_size(self) -> None:
        """По одному множителю на каждый дробный бит"""
        assert len(EXP2_MULTIPLIERS) == 64

    def test_first_multipliers(self) -> None:
        """sqrt(2) и 2^(1/4), округлённые к ближайшему"""
        assert EXP2_MULTIPLIERS[0] == 0x16A09E667F3BCC909
        assert EXP2_MULTIPLIERS[1] == 0x1306FE0A31B7152DF

    def test_multipliers_decrease_towards_one(self) -> None:
        """Множители строго убывают и остаются > 1.0"""
        one = 1 << 64
        for previous, current in zip(EXP2_MULTIPLIERS, EXP2_MULTIPLIERS[1:]):
            assert previous >= current
        assert all(m > one for m in EXP2_MULTIPLIERS[:60])
        assert all(one <= m < one * 2 for m in EXP2_MULTIPLIERS)
