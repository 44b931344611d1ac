"""
Math layer for Uniswap V3 fixed-point arithmetic

온체인 라이브러리와 비트 단위로 동일한 정수 연산:
- word_math: uint256 감싸기 연산
- bit_math: 최상위/최하위 비트
- unsafe_math: 올림 나눗셈
- full_math: 512비트 중간값 mul_div
- tick_math: Tick ↔ sqrtPriceX96 변환
- sqrt_price_math: sqrtPriceX96 이동 및 토큰 변화량
- liquidity_math: 유동성 변화 적용 및 유동성 ↔ 토큰 수량
- tick_bitmap: 초기화된 틱 비트맵
- swap_math: 단일 스왑 스텝
"""

from .bit_math import most_significant_bit, least_significant_bit
from .unsafe_math import div_rounding_up
from .full_math import mul_mod, mul_div, mul_div_rounding_up
from .tick_math import (
    get_sqrt_ratio_at_tick,
    get_tick_at_sqrt_ratio,
    get_min_tick,
    get_max_tick,
    tick_spacing_to_max_liquidity_per_tick,
    tick_to_price,
    price_to_tick,
    round_tick_to_spacing,
)
from .sqrt_price_math import (
    get_next_sqrt_price_from_input,
    get_next_sqrt_price_from_output,
    get_next_sqrt_price_from_amount_0_rounding_up,
    get_next_sqrt_price_from_amount_1_rounding_down,
    get_amount_0_delta,
    get_amount_1_delta,
    get_amount_0_delta_unsigned,
    get_amount_1_delta_unsigned,
    sqrt_price_x96_to_price,
    price_to_sqrt_price_x96,
)
from .liquidity_math import (
    add_delta,
    get_liquidity_for_amount0,
    get_liquidity_for_amount1,
    get_liquidity_for_amounts,
    get_amount0_for_liquidity,
    get_amount1_for_liquidity,
    get_amounts_for_liquidity,
)
from .tick_bitmap import (
    position,
    flip_tick,
    is_initialized,
    next_initialized_tick_within_one_word,
    next_initialized_tick_within_one_word_from_reader,
    next_initialized_tick_within_one_word_from_provider,
)
from .swap_math import SwapStepResult, compute_swap_step
