"""
Liquidity Math 테스트

유동성 계산 함수들을 테스트합니다.
"""

import pytest

from ..errors import (
    DivisionByZeroError,
    LiquidityOverflowError,
    LiquidityUnderflowError,
    MathOverflowError,
)
from ..math.liquidity_math import (
    add_delta,
    get_amount0_for_liquidity,
    get_amount1_for_liquidity,
    get_liquidity_for_amount0,
    get_liquidity_for_amount1,
    get_liquidity_for_amounts,
    get_amounts_for_liquidity
)
from ..math.tick_math import get_sqrt_ratio_at_tick
from ..constants import INT128_MAX, INT128_MIN, Q96, UINT128_MAX


class TestAddDelta:
    """add_delta 테스트"""

    def test_add_zero(self):
        assert add_delta(1, 0) == 1

    def test_add_negative(self):
        assert add_delta(1, -1) == 0

    def test_add_positive(self):
        assert add_delta(1, 1) == 2

    def test_overflow(self):
        """2^128 - 15 + 15 은 uint128 초과"""
        with pytest.raises(LiquidityOverflowError):
            add_delta(2 ** 128 - 15, 15)

    def test_max_without_overflow(self):
        assert add_delta(UINT128_MAX - 15, 15) == UINT128_MAX

    def test_underflow_from_zero(self):
        with pytest.raises(LiquidityUnderflowError):
            add_delta(0, -1)

    def test_underflow(self):
        with pytest.raises(LiquidityUnderflowError):
            add_delta(3, -4)

    @pytest.mark.parametrize("x,y", [
        (0, 0),
        (12345, 0),
        (0, 5),
        (5, -5),
        (10**18, -(10**18 - 1)),
        (1, 2**120),
        (2**127, INT128_MIN),
        (UINT128_MAX, INT128_MIN),
        (UINT128_MAX - 10, 10),
        (UINT128_MAX - INT128_MAX, INT128_MAX),
    ])
    def test_roundtrip(self, x, y):
        """경계를 넘지 않으면 y를 더한 뒤 -y를 더하면 원래 값"""
        z = add_delta(x, y)
        assert z == x + y
        assert add_delta(z, -y) == x


class TestGetAmountsFromLiquidity:
    """get_amount0_for_liquidity, get_amount1_for_liquidity 테스트"""

    def test_amount0_basic(self):
        """amount0 기본 테스트"""
        sqrt_a = get_sqrt_ratio_at_tick(0)
        sqrt_b = get_sqrt_ratio_at_tick(100)
        liquidity = 10**18

        assert get_amount0_for_liquidity(sqrt_a, sqrt_b, liquidity) > 0

    def test_amount1_basic(self):
        """amount1 기본 테스트"""
        sqrt_a = get_sqrt_ratio_at_tick(0)
        sqrt_b = get_sqrt_ratio_at_tick(100)
        liquidity = 10**18

        assert get_amount1_for_liquidity(sqrt_a, sqrt_b, liquidity) > 0

    def test_known_values(self):
        """가격 1 -> 1.21 구간, 유동성 1e18 (내림)"""
        sqrt_b = 87150978765690771352898345369
        assert get_amount0_for_liquidity(Q96, sqrt_b, 10**18) == 90909090909090909
        assert get_amount1_for_liquidity(Q96, sqrt_b, 10**18) == 99999999999999999

    def test_swap_order(self):
        """sqrt 순서가 바뀌어도 결과 동일"""
        sqrt_a = get_sqrt_ratio_at_tick(0)
        sqrt_b = get_sqrt_ratio_at_tick(100)
        liquidity = 10**18

        assert (
            get_amount0_for_liquidity(sqrt_a, sqrt_b, liquidity)
            == get_amount0_for_liquidity(sqrt_b, sqrt_a, liquidity)
        )
        assert (
            get_amount1_for_liquidity(sqrt_a, sqrt_b, liquidity)
            == get_amount1_for_liquidity(sqrt_b, sqrt_a, liquidity)
        )

    def test_zero_liquidity(self):
        """유동성 0일 때"""
        sqrt_a = get_sqrt_ratio_at_tick(0)
        sqrt_b = get_sqrt_ratio_at_tick(100)

        assert get_amount0_for_liquidity(sqrt_a, sqrt_b, 0) == 0
        assert get_amount1_for_liquidity(sqrt_a, sqrt_b, 0) == 0


class TestGetLiquidityForAmounts:
    """get_liquidity_for_amount0, get_liquidity_for_amount1, get_liquidity_for_amounts 테스트"""

    def test_liquidity_for_amount0(self):
        """amount0에서 유동성 계산"""
        sqrt_a = get_sqrt_ratio_at_tick(0)
        sqrt_b = get_sqrt_ratio_at_tick(100)

        assert get_liquidity_for_amount0(sqrt_a, sqrt_b, 10**18) > 0

    def test_liquidity_for_amount1(self):
        """amount1에서 유동성 계산"""
        sqrt_a = get_sqrt_ratio_at_tick(0)
        sqrt_b = get_sqrt_ratio_at_tick(100)

        assert get_liquidity_for_amount1(sqrt_a, sqrt_b, 10**18) > 0

    def test_liquidity_for_amount1_exact(self):
        """Δy / (√P_b - √P_a)"""
        assert get_liquidity_for_amount1(Q96, 2 * Q96, 10**18) == 10**18

    def test_same_price_range(self):
        """범위 폭이 0이면 0으로 나누기"""
        sqrt_a = get_sqrt_ratio_at_tick(0)
        with pytest.raises(DivisionByZeroError):
            get_liquidity_for_amount1(sqrt_a, sqrt_a, 10**18)

    def test_liquidity_overflow(self):
        """결과가 uint128을 초과"""
        with pytest.raises(MathOverflowError):
            get_liquidity_for_amount1(Q96, Q96 + 1, 2 ** 100)

    def test_liquidity_for_amounts_below_range(self):
        """가격이 범위 아래일 때: token0만 사용"""
        sqrt_current = get_sqrt_ratio_at_tick(-200)
        sqrt_a = get_sqrt_ratio_at_tick(0)
        sqrt_b = get_sqrt_ratio_at_tick(100)
        amount0 = 10**18
        amount1 = 10**18

        liquidity = get_liquidity_for_amounts(sqrt_current, sqrt_a, sqrt_b, amount0, amount1)
        expected = get_liquidity_for_amount0(sqrt_a, sqrt_b, amount0)
        assert liquidity == expected

    def test_liquidity_for_amounts_above_range(self):
        """가격이 범위 위일 때: token1만 사용"""
        sqrt_current = get_sqrt_ratio_at_tick(200)
        sqrt_a = get_sqrt_ratio_at_tick(0)
        sqrt_b = get_sqrt_ratio_at_tick(100)
        amount0 = 10**18
        amount1 = 10**18

        liquidity = get_liquidity_for_amounts(sqrt_current, sqrt_a, sqrt_b, amount0, amount1)
        expected = get_liquidity_for_amount1(sqrt_a, sqrt_b, amount1)
        assert liquidity == expected

    def test_liquidity_for_amounts_in_range(self):
        """가격이 범위 내일 때: 둘 다 사용, 작은 값 반환"""
        sqrt_current = get_sqrt_ratio_at_tick(50)
        sqrt_a = get_sqrt_ratio_at_tick(0)
        sqrt_b = get_sqrt_ratio_at_tick(100)
        amount0 = 10**18
        amount1 = 10**18

        liquidity = get_liquidity_for_amounts(sqrt_current, sqrt_a, sqrt_b, amount0, amount1)

        liq0 = get_liquidity_for_amount0(sqrt_current, sqrt_b, amount0)
        liq1 = get_liquidity_for_amount1(sqrt_a, sqrt_current, amount1)
        assert liquidity == min(liq0, liq1)


class TestGetAmountsForLiquidity:
    """get_amounts_for_liquidity 테스트"""

    def test_amounts_below_range(self):
        """가격이 범위 아래일 때: token0만 반환"""
        sqrt_current = get_sqrt_ratio_at_tick(-200)
        sqrt_a = get_sqrt_ratio_at_tick(0)
        sqrt_b = get_sqrt_ratio_at_tick(100)

        amount0, amount1 = get_amounts_for_liquidity(sqrt_current, sqrt_a, sqrt_b, 10**18)
        assert amount0 > 0
        assert amount1 == 0

    def test_amounts_above_range(self):
        """가격이 범위 위일 때: token1만 반환"""
        sqrt_current = get_sqrt_ratio_at_tick(200)
        sqrt_a = get_sqrt_ratio_at_tick(0)
        sqrt_b = get_sqrt_ratio_at_tick(100)

        amount0, amount1 = get_amounts_for_liquidity(sqrt_current, sqrt_a, sqrt_b, 10**18)
        assert amount0 == 0
        assert amount1 > 0

    def test_amounts_in_range(self):
        """가격이 범위 내일 때: 둘 다 반환"""
        sqrt_current = get_sqrt_ratio_at_tick(50)
        sqrt_a = get_sqrt_ratio_at_tick(0)
        sqrt_b = get_sqrt_ratio_at_tick(100)

        amount0, amount1 = get_amounts_for_liquidity(sqrt_current, sqrt_a, sqrt_b, 10**18)
        assert amount0 > 0
        assert amount1 > 0

    def test_roundtrip(self):
        """유동성 -> 토큰 -> 유동성 왕복 테스트"""
        sqrt_current = get_sqrt_ratio_at_tick(50)
        sqrt_a = get_sqrt_ratio_at_tick(0)
        sqrt_b = get_sqrt_ratio_at_tick(100)
        original_liquidity = 10**18

        amount0, amount1 = get_amounts_for_liquidity(sqrt_current, sqrt_a, sqrt_b, original_liquidity)
        result_liquidity = get_liquidity_for_amounts(sqrt_current, sqrt_a, sqrt_b, amount0, amount1)

        # 내림으로 인해 원래 값을 넘지 않음
        assert result_liquidity <= original_liquidity
        assert abs(result_liquidity - original_liquidity) < original_liquidity * 0.01


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
