"""
Liquidity Math - 유동성 계산

Uniswap V3의 집중화된 유동성(Concentrated Liquidity) 계산.
특정 가격 범위에서의 토큰 수량과 유동성 간의 변환.

References:
- Uniswap V3 Core: contracts/libraries/LiquidityMath.sol
- Uniswap V3 Periphery: contracts/libraries/LiquidityAmounts.sol
- 백서 Section 6.2.1: Concentrated Liquidity

핵심 공식:
    L = Δy / (√P_upper - √P_lower)  # token1 기준
    L = Δx / (1/√P_lower - 1/√P_upper)  # token0 기준
"""

from typing import Tuple

from ..constants import Q96, RESOLUTION
from ..errors import LiquidityOverflowError, LiquidityUnderflowError, MathOverflowError
from .full_math import mul_div
from .word_math import is_uint, shl, to_unsigned


def add_delta(x: int, y: int) -> int:
    """uint128 유동성에 int128 변화량 적용

    128비트로 감싼 뒤 결과를 원래 값과 비교해 오버/언더플로우를 검출합니다.

    Args:
        x: 현재 유동성 (uint128)
        y: 유동성 변화량 (int128)

    Returns:
        x + y

    Raises:
        LiquidityUnderflowError: y < 0 이고 |y| > x ("LS")
        LiquidityOverflowError: y >= 0 이고 x + y > 2^128 - 1 ("LA")
    """
    z = to_unsigned(x + y, 128)
    if y < 0:
        if z >= x:
            raise LiquidityUnderflowError()
    elif z < x:
        raise LiquidityOverflowError()
    return z


def _to_uint128(value: int) -> int:
    if not is_uint(value, 128):
        raise MathOverflowError("유동성이 uint128을 초과합니다")
    return value


def _sort(sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int) -> Tuple[int, int]:
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        return sqrt_ratio_b_x96, sqrt_ratio_a_x96
    return sqrt_ratio_a_x96, sqrt_ratio_b_x96


def get_liquidity_for_amount0(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount0: int
) -> int:
    """amount0에서 유동성 계산

    공식: L = Δx * √P_a * √P_b / (√P_b - √P_a)

    Args:
        sqrt_ratio_a_x96: 범위 경계 sqrtPriceX96
        sqrt_ratio_b_x96: 범위 경계 sqrtPriceX96
        amount0: token0 수량

    Returns:
        유동성 (uint128)

    Raises:
        DivisionByZeroError: 두 가격이 같은 경우
        MathOverflowError: 결과가 uint128을 초과하는 경우
    """
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _sort(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    intermediate = mul_div(sqrt_ratio_a_x96, sqrt_ratio_b_x96, Q96)
    return _to_uint128(mul_div(amount0, intermediate, sqrt_ratio_b_x96 - sqrt_ratio_a_x96))


def get_liquidity_for_amount1(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount1: int
) -> int:
    """amount1에서 유동성 계산

    공식: L = Δy / (√P_b - √P_a)
    """
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _sort(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    return _to_uint128(mul_div(amount1, Q96, sqrt_ratio_b_x96 - sqrt_ratio_a_x96))


def get_liquidity_for_amounts(
    sqrt_ratio_x96: int,
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount0: int,
    amount1: int
) -> int:
    """토큰 수량에서 유동성 계산

    현재 가격과 범위, 두 토큰 수량이 주어졌을 때
    민트 가능한 최대 유동성을 계산합니다.

    Args:
        sqrt_ratio_x96: 현재 sqrtPriceX96
        sqrt_ratio_a_x96: 범위 경계 sqrtPriceX96
        sqrt_ratio_b_x96: 범위 경계 sqrtPriceX96
        amount0: token0 수량
        amount1: token1 수량

    Returns:
        유동성 (범위 내일 때는 두 제약 조건 중 작은 값)
    """
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _sort(sqrt_ratio_a_x96, sqrt_ratio_b_x96)

    if sqrt_ratio_x96 <= sqrt_ratio_a_x96:
        # 가격이 범위 아래: token0만 사용
        return get_liquidity_for_amount0(sqrt_ratio_a_x96, sqrt_ratio_b_x96, amount0)

    if sqrt_ratio_x96 < sqrt_ratio_b_x96:
        # 가격이 범위 내: 양쪽 토큰 사용, 작은 값 반환
        liquidity0 = get_liquidity_for_amount0(sqrt_ratio_x96, sqrt_ratio_b_x96, amount0)
        liquidity1 = get_liquidity_for_amount1(sqrt_ratio_a_x96, sqrt_ratio_x96, amount1)
        return min(liquidity0, liquidity1)

    # 가격이 범위 위: token1만 사용
    return get_liquidity_for_amount1(sqrt_ratio_a_x96, sqrt_ratio_b_x96, amount1)


def get_amount0_for_liquidity(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int
) -> int:
    """유동성에서 amount0 계산 (내림)

    공식: Δx = L * 2^96 * (√P_b - √P_a) / √P_b / √P_a
    """
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _sort(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    return mul_div(
        shl(liquidity, RESOLUTION),
        sqrt_ratio_b_x96 - sqrt_ratio_a_x96,
        sqrt_ratio_b_x96
    ) // sqrt_ratio_a_x96


def get_amount1_for_liquidity(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int
) -> int:
    """유동성에서 amount1 계산 (내림)

    공식: Δy = L * (√P_b - √P_a) / 2^96
    """
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _sort(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    return mul_div(liquidity, sqrt_ratio_b_x96 - sqrt_ratio_a_x96, Q96)


def get_amounts_for_liquidity(
    sqrt_ratio_x96: int,
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int
) -> Tuple[int, int]:
    """유동성에서 토큰 수량 계산

    현재 가격과 범위, 유동성이 주어졌을 때
    포지션이 보유한 토큰 수량을 계산합니다.

    Returns:
        (amount0, amount1) 튜플
    """
    sqrt_ratio_a_x96, sqrt_ratio_b_x96 = _sort(sqrt_ratio_a_x96, sqrt_ratio_b_x96)

    if sqrt_ratio_x96 <= sqrt_ratio_a_x96:
        # 가격이 범위 아래: token0만 보유
        return get_amount0_for_liquidity(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity), 0

    if sqrt_ratio_x96 < sqrt_ratio_b_x96:
        # 가격이 범위 내: 양쪽 토큰 보유
        amount0 = get_amount0_for_liquidity(sqrt_ratio_x96, sqrt_ratio_b_x96, liquidity)
        amount1 = get_amount1_for_liquidity(sqrt_ratio_a_x96, sqrt_ratio_x96, liquidity)
        return amount0, amount1

    # 가격이 범위 위: token1만 보유
    return 0, get_amount1_for_liquidity(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity)
