"""
Sqrt Price Math - sqrtPriceX96 관련 계산

Uniswap V3의 가격은 sqrtPriceX96 형식으로 저장됩니다.
sqrtPriceX96 = sqrt(price) * 2^96

References:
- Uniswap V3 Core: contracts/libraries/SqrtPriceMath.sol

핵심 공식:
    Δx = L * (√P_b - √P_a) / (√P_a * √P_b)
    Δy = L * (√P_b - √P_a)
"""

import math

from ..constants import Q96, Q192, RESOLUTION, UINT160_MAX, UINT256_MAX
from ..errors import (
    LiquidityIsZeroError,
    MathOverflowError,
    PriceIsZeroError,
    PriceNotAboveQuotientError,
    ProductOverflowError,
)
from .full_math import mul_div, mul_div_rounding_up
from .unsafe_math import div_rounding_up
from .word_math import is_int, is_uint, shl, wrapping_add, wrapping_mul


def _to_uint160(value: int) -> int:
    if not is_uint(value, 160):
        raise MathOverflowError("sqrtPriceX96이 uint160을 초과합니다")
    return value


def _to_int256(value: int) -> int:
    if not is_int(value):
        raise MathOverflowError("amount가 int256을 초과합니다")
    return value


def get_next_sqrt_price_from_amount_0_rounding_up(
    sqrt_price_x96: int,
    liquidity: int,
    amount: int,
    add: bool
) -> int:
    """amount0 변화에 따른 다음 sqrtPriceX96 계산 (올림)

    공식: √P' = L * √P / (L ± Δx * √P)
    오버플로우 시 대체 공식: √P' = L / (L / √P + Δx)

    Args:
        sqrt_price_x96: 현재 sqrtPriceX96
        liquidity: 유동성
        amount: amount0 변화량
        add: True면 추가, False면 제거

    Returns:
        새로운 sqrtPriceX96

    Raises:
        ProductOverflowError: 제거 시 amount * √P 오버플로우 또는 numerator1 <= product
    """
    # 0이면 가격 변화 없음
    if amount == 0:
        return sqrt_price_x96

    numerator1 = shl(liquidity, RESOLUTION)
    product = wrapping_mul(amount, sqrt_price_x96)
    product_fits = product // amount == sqrt_price_x96

    if add:
        if product_fits:
            denominator = wrapping_add(numerator1, product)
            if denominator >= numerator1:
                # 항상 160비트에 들어감
                return mul_div_rounding_up(numerator1, sqrt_price_x96, denominator)

        denominator = numerator1 // sqrt_price_x96 + amount
        if denominator > UINT256_MAX:
            raise MathOverflowError("numerator1 / sqrtPX96 + amount 오버플로우")
        return div_rounding_up(numerator1, denominator)

    if not (product_fits and numerator1 > product):
        raise ProductOverflowError()
    denominator = numerator1 - product
    return _to_uint160(mul_div_rounding_up(numerator1, sqrt_price_x96, denominator))


def get_next_sqrt_price_from_amount_1_rounding_down(
    sqrt_price_x96: int,
    liquidity: int,
    amount: int,
    add: bool
) -> int:
    """amount1 변화에 따른 다음 sqrtPriceX96 계산 (내림)

    공식: √P' = √P ± Δy / L

    Args:
        sqrt_price_x96: 현재 sqrtPriceX96
        liquidity: 유동성
        amount: amount1 변화량
        add: True면 추가, False면 제거

    Returns:
        새로운 sqrtPriceX96

    Raises:
        MathOverflowError: 추가 시 결과가 uint160을 초과
        PriceNotAboveQuotientError: 제거 시 √P <= Δy / L
    """
    if add:
        if amount <= UINT160_MAX:
            quotient = shl(amount, RESOLUTION) // liquidity
        else:
            quotient = mul_div(amount, Q96, liquidity)

        return _to_uint160(sqrt_price_x96 + quotient)

    if amount <= UINT160_MAX:
        quotient = div_rounding_up(shl(amount, RESOLUTION), liquidity)
    else:
        quotient = mul_div_rounding_up(amount, Q96, liquidity)

    if sqrt_price_x96 <= quotient:
        raise PriceNotAboveQuotientError()
    return sqrt_price_x96 - quotient


def get_next_sqrt_price_from_input(
    sqrt_price_x96: int,
    liquidity: int,
    amount_in: int,
    zero_for_one: bool
) -> int:
    """입력 토큰 양에 따른 다음 sqrtPriceX96

    token0 입력 시 가격이 목표 가격을 넘어가지 않도록 올림,
    token1 입력 시 내림합니다.

    Raises:
        PriceIsZeroError, LiquidityIsZeroError
    """
    if sqrt_price_x96 == 0:
        raise PriceIsZeroError()
    if liquidity == 0:
        raise LiquidityIsZeroError()

    if zero_for_one:
        return get_next_sqrt_price_from_amount_0_rounding_up(
            sqrt_price_x96, liquidity, amount_in, True
        )
    return get_next_sqrt_price_from_amount_1_rounding_down(
        sqrt_price_x96, liquidity, amount_in, True
    )


def get_next_sqrt_price_from_output(
    sqrt_price_x96: int,
    liquidity: int,
    amount_out: int,
    zero_for_one: bool
) -> int:
    """출력 토큰 양에 따른 다음 sqrtPriceX96

    Raises:
        PriceIsZeroError, LiquidityIsZeroError
    """
    if sqrt_price_x96 == 0:
        raise PriceIsZeroError()
    if liquidity == 0:
        raise LiquidityIsZeroError()

    if zero_for_one:
        return get_next_sqrt_price_from_amount_1_rounding_down(
            sqrt_price_x96, liquidity, amount_out, False
        )
    return get_next_sqrt_price_from_amount_0_rounding_up(
        sqrt_price_x96, liquidity, amount_out, False
    )


def _get_amount_0_delta(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int,
    round_up: bool
) -> int:
    """두 가격 사이의 amount0 (부호 없음)

    공식: Δx = L * 2^96 * (√P_b - √P_a) / √P_b / √P_a

    Raises:
        PriceIsZeroError: 하한 가격이 0
    """
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        sqrt_ratio_a_x96, sqrt_ratio_b_x96 = sqrt_ratio_b_x96, sqrt_ratio_a_x96

    if sqrt_ratio_a_x96 == 0:
        raise PriceIsZeroError()

    numerator1 = shl(liquidity, RESOLUTION)
    numerator2 = sqrt_ratio_b_x96 - sqrt_ratio_a_x96

    if round_up:
        return div_rounding_up(
            mul_div_rounding_up(numerator1, numerator2, sqrt_ratio_b_x96),
            sqrt_ratio_a_x96
        )
    return mul_div(numerator1, numerator2, sqrt_ratio_b_x96) // sqrt_ratio_a_x96


def _get_amount_1_delta(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity: int,
    round_up: bool
) -> int:
    """두 가격 사이의 amount1 (부호 없음)

    공식: Δy = L * (√P_b - √P_a) / 2^96
    """
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        sqrt_ratio_a_x96, sqrt_ratio_b_x96 = sqrt_ratio_b_x96, sqrt_ratio_a_x96

    if round_up:
        return mul_div_rounding_up(liquidity, sqrt_ratio_b_x96 - sqrt_ratio_a_x96, Q96)
    return mul_div(liquidity, sqrt_ratio_b_x96 - sqrt_ratio_a_x96, Q96)


get_amount_0_delta_unsigned = _get_amount_0_delta
get_amount_1_delta_unsigned = _get_amount_1_delta


def get_amount_0_delta(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity_delta: int
) -> int:
    """유동성 변화량에 대한 부호 있는 amount0

    양수 = 풀로 들어가는 토큰 (올림), 음수 = 풀에서 나가는 토큰 (내림).
    """
    if liquidity_delta < 0:
        return -_to_int256(_get_amount_0_delta(sqrt_ratio_b_x96, sqrt_ratio_a_x96, -liquidity_delta, False))
    return _to_int256(_get_amount_0_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity_delta, True))


def get_amount_1_delta(
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    liquidity_delta: int
) -> int:
    """유동성 변화량에 대한 부호 있는 amount1"""
    if liquidity_delta < 0:
        return -_to_int256(_get_amount_1_delta(sqrt_ratio_b_x96, sqrt_ratio_a_x96, -liquidity_delta, False))
    return _to_int256(_get_amount_1_delta(sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity_delta, True))


def sqrt_price_x96_to_price(
    sqrt_price_x96: int,
    decimal0: int = 18,
    decimal1: int = 18
) -> float:
    """sqrtPriceX96을 human-readable 가격으로 변환

    가격 = (sqrtPriceX96 / 2^96)^2 / 10^(decimal1 - decimal0)
    """
    sqrt_price = sqrt_price_x96 / Q96
    return sqrt_price ** 2 / (10 ** (decimal1 - decimal0))


def sqrt_price_x96_to_price_int(
    sqrt_price_x96: int,
    decimal0: int = 18,
    decimal1: int = 18,
    precision: int = 18
) -> int:
    """sqrtPriceX96을 precision 자릿수의 고정소수점 정수 가격으로 변환"""
    decimal_diff = decimal1 - decimal0

    numerator = sqrt_price_x96 ** 2 * (10 ** precision)
    denominator = Q192
    if decimal_diff >= 0:
        denominator *= 10 ** decimal_diff
    else:
        numerator *= 10 ** (-decimal_diff)

    return numerator // denominator


def price_to_sqrt_price_x96(
    price: float,
    decimal0: int = 18,
    decimal1: int = 18
) -> int:
    """Human-readable 가격을 sqrtPriceX96으로 변환

    sqrtPriceX96 = sqrt(price * 10^(decimal1 - decimal0)) * 2^96

    Raises:
        ValueError: 가격이 0 이하이거나 결과가 uint256을 넘는 경우
    """
    if price <= 0:
        raise ValueError("가격은 양수여야 합니다")

    adjusted_price = price * (10 ** (decimal1 - decimal0))
    sqrt_price_x96 = int(math.sqrt(adjusted_price) * Q96)
    if sqrt_price_x96 > UINT256_MAX:
        raise ValueError(f"sqrtPriceX96이 uint256을 초과합니다: {sqrt_price_x96}")
    return sqrt_price_x96
