"""
Tick Math - Tick ↔ sqrtPriceX96 변환

Uniswap V3의 틱 수학 함수들. 온체인 컨트랙트와 동일한 정밀도로 구현.

References:
- Uniswap V3 Core: contracts/libraries/TickMath.sol
- 백서 Section 6.1: Ticks and Tick Spacing

핵심 공식:
    price = 1.0001^tick
    tick = log₁.₀₀₀₁(price)
    sqrtPriceX96 = sqrt(price) * 2^96
"""

import math

from ..constants import (
    MAX_SQRT_RATIO,
    MAX_TICK,
    MIN_SQRT_RATIO,
    MIN_TICK,
    TICK_SPACINGS,
    UINT128_MAX,
    UINT256_MAX,
)
from ..errors import PriceOutOfRangeError, TickOutOfRangeError
from .bit_math import most_significant_bit
from .word_math import shl, shr, to_signed, wrapping_sub

# abs_tick 비트 0의 seed: 1 / sqrt(1.0001) (Q128.128), 비트가 꺼져 있으면 1.0
_RATIO_ONE: int = 0x100000000000000000000000000000000
_RATIO_BIT0: int = 0xfffcb933bd6fad37aa2d162d1a594001

# (비트, 1 / sqrt(1.0001)^(2^i) in Q128.128), i = 1..19
_RATIO_MULTIPLIERS = (
    (0x2, 0xfff97272373d413259a46990580e213a),
    (0x4, 0xfff2e50f5f656932ef12357cf3c7fdcc),
    (0x8, 0xffe5caca7e10e4e61c3624eaa0941cd0),
    (0x10, 0xffcb9843d60f6159c9db58835c926644),
    (0x20, 0xff973b41fa98c081472e6896dfb254c0),
    (0x40, 0xff2ea16466c96a3843ec78b326b52861),
    (0x80, 0xfe5dee046a99a2a811c461f1969c3053),
    (0x100, 0xfcbe86c7900a88aedcffc83b479aa3a4),
    (0x200, 0xf987a7253ac413176f2b074cf7815e54),
    (0x400, 0xf3392b0822b70005940c7a398e4b70f3),
    (0x800, 0xe7159475a2c29b7443b29c7fa6e889d9),
    (0x1000, 0xd097f3bdfd2022b8845ad8f792aa5825),
    (0x2000, 0xa9f746462d870fdf8a65dc1f90e061e5),
    (0x4000, 0x70d869a156d2a1b890bb3df62baf32f7),
    (0x8000, 0x31be135f97d08fd981231505542fcfa6),
    (0x10000, 0x9aa508b5b7a84e1c677de54f3e99bc9),
    (0x20000, 0x5d6af8dedb81196699c329225ee604),
    (0x40000, 0x2216e584f5fa1ea926041bedfe98),
    (0x80000, 0x48a170391f7dc42444e8fa2),
)

# log_sqrt(1.0001)(2) in Q128.128 기준 배율
LOG_SQRT_10001: int = 255738958999603826347141
# log2 근사 오차 한계 (Q128.128)
TICK_LOW_ERROR: int = 3402992956809132418596140100660247210
TICK_HIGH_ERROR: int = 291339464771989622907027621153398088495


def get_sqrt_ratio_at_tick(tick: int) -> int:
    """틱에서 sqrtPriceX96 계산

    Solidity TickMath.getSqrtRatioAtTick()과 동일한 구현.
    sqrt(1.0001)^tick 을 abs(tick)의 비트 분해로 거듭제곱하여 계산합니다.

    Args:
        tick: 틱 인덱스 (-887272 ~ 887272)

    Returns:
        sqrtPriceX96 (Q64.96 형식)

    Raises:
        TickOutOfRangeError: 틱이 유효 범위를 벗어난 경우
    """
    abs_tick = abs(tick)
    if abs_tick > MAX_TICK:
        raise TickOutOfRangeError(tick)

    ratio = _RATIO_BIT0 if abs_tick & 0x1 else _RATIO_ONE
    for bit, multiplier in _RATIO_MULTIPLIERS:
        if abs_tick & bit:
            ratio = (ratio * multiplier) >> 128

    if tick > 0:
        ratio = UINT256_MAX // ratio

    # Q128.128 -> Q64.96, 올림하여 get_tick_at_sqrt_ratio와 일관성 유지
    return (ratio >> 32) + (1 if ratio % (1 << 32) != 0 else 0)


def get_tick_at_sqrt_ratio(sqrt_price_x96: int) -> int:
    """sqrtPriceX96에서 틱 계산

    Solidity TickMath.getTickAtSqrtRatio()과 동일한 구현.
    get_sqrt_ratio_at_tick(tick) <= sqrt_price_x96 를 만족하는 최대 틱을 반환합니다.

    Args:
        sqrt_price_x96: sqrtPriceX96 (Q64.96 형식)

    Returns:
        틱 인덱스

    Raises:
        PriceOutOfRangeError: sqrtPriceX96이 [MIN_SQRT_RATIO, MAX_SQRT_RATIO) 밖인 경우
    """
    if sqrt_price_x96 < MIN_SQRT_RATIO or sqrt_price_x96 >= MAX_SQRT_RATIO:
        raise PriceOutOfRangeError(sqrt_price_x96)

    ratio = shl(sqrt_price_x96, 32)
    msb = most_significant_bit(ratio)

    if msb >= 128:
        r = shr(ratio, msb - 127)
    else:
        r = shl(ratio, 127 - msb)

    # 정수부 (int256)
    log_2 = to_signed(shl(wrapping_sub(msb, 128), 64))

    # 소수부: 제곱 후 2 이상이면 해당 비트를 세우고 정규화 (2^-1 ~ 2^-14)
    for i in range(63, 49, -1):
        r = (r * r) >> 127
        f = r >> 128
        log_2 |= f << i
        r >>= f

    log_sqrt10001 = log_2 * LOG_SQRT_10001

    tick_low = (log_sqrt10001 - TICK_LOW_ERROR) >> 128
    tick_high = (log_sqrt10001 + TICK_HIGH_ERROR) >> 128

    if tick_low == tick_high:
        return tick_low

    if get_sqrt_ratio_at_tick(tick_high) <= sqrt_price_x96:
        return tick_high
    return tick_low


def get_min_tick(tick_spacing: int) -> int:
    """틱 간격에서 사용 가능한 최소 틱"""
    return -(MAX_TICK // tick_spacing) * tick_spacing


def get_max_tick(tick_spacing: int) -> int:
    """틱 간격에서 사용 가능한 최대 틱"""
    return (MAX_TICK // tick_spacing) * tick_spacing


def tick_spacing_to_max_liquidity_per_tick(tick_spacing: int) -> int:
    """틱 하나가 가질 수 있는 최대 유동성

    Tick.tickSpacingToMaxLiquidityPerTick()과 동일:
    uint128 최대값을 사용 가능한 틱 개수로 나눈 값.
    """
    num_ticks = (get_max_tick(tick_spacing) - get_min_tick(tick_spacing)) // tick_spacing + 1
    return UINT128_MAX // num_ticks


def tick_to_price(tick: int, token0_decimals: int = 18, token1_decimals: int = 6) -> float:
    """틱을 human-readable 가격으로 변환

    price = 1.0001^tick × 10^(token0_decimals - token1_decimals)

    Example:
        >>> tick_to_price(-196256, 18, 6)  # WETH/USDT
        3000.10
    """
    return 1.0001 ** tick * (10 ** (token0_decimals - token1_decimals))


def price_to_tick(price: float, token0_decimals: int = 18, token1_decimals: int = 6) -> int:
    """Human-readable 가격을 틱으로 변환 (0 방향으로 절사)

    tick = log₁.₀₀₀₁(price × 10^(token1_decimals - token0_decimals))

    Raises:
        ValueError: 가격이 0 이하인 경우
    """
    if price <= 0:
        raise ValueError("가격은 양수여야 합니다")

    ratio = price * (10 ** (token1_decimals - token0_decimals))
    return int(math.log(ratio) / math.log(1.0001))


def round_tick_to_spacing(tick: int, tick_spacing: int) -> int:
    """틱을 가장 가까운 유효 틱으로 반올림 (같은 거리면 위쪽)"""
    lower = (tick // tick_spacing) * tick_spacing
    upper = lower + tick_spacing
    return upper if upper - tick <= tick - lower else lower


def get_tick_spacing_for_fee(fee_tier: int) -> int:
    """수수료 티어에 해당하는 틱 간격 반환

    Raises:
        ValueError: 지원하지 않는 수수료 티어
    """
    if fee_tier not in TICK_SPACINGS:
        raise ValueError(f"지원하지 않는 수수료 티어: {fee_tier}")
    return TICK_SPACINGS[fee_tier]
