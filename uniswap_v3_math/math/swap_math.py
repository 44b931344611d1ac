"""
Swap Math - 단일 스왑 스텝 계산

References:
- Uniswap V3 Core: contracts/libraries/SwapMath.sol
- 백서 Section 6.2.3: Swapping Within a Single Tick

스왑은 초기화된 틱 사이 구간마다 compute_swap_step을 한 번씩 호출하여
진행됩니다. 각 스텝은 목표 가격까지 이동하거나 남은 수량을 모두 소진합니다.
"""

from typing import NamedTuple

from ..constants import FEE_DENOMINATOR
from .full_math import mul_div, mul_div_rounding_up
from .sqrt_price_math import (
    _get_amount_0_delta,
    _get_amount_1_delta,
    get_next_sqrt_price_from_input,
    get_next_sqrt_price_from_output,
)


class SwapStepResult(NamedTuple):
    """스왑 스텝 결과"""
    sqrt_ratio_next_x96: int  # 스텝 이후 sqrtPriceX96
    amount_in: int  # 수수료 제외 입력 수량
    amount_out: int  # 출력 수량
    fee_amount: int  # 입력 토큰으로 지불되는 수수료


def compute_swap_step(
    sqrt_ratio_current_x96: int,
    sqrt_ratio_target_x96: int,
    liquidity: int,
    amount_remaining: int,
    fee_pips: int
) -> SwapStepResult:
    """현재 가격에서 목표 가격 방향으로 한 스텝 스왑

    Args:
        sqrt_ratio_current_x96: 현재 sqrtPriceX96
        sqrt_ratio_target_x96: 목표 sqrtPriceX96 (넘어갈 수 없음)
        liquidity: 활성 유동성
        amount_remaining: 남은 수량. 양수면 exact input, 음수면 exact output
        fee_pips: 수수료 (1e6 = 100%)

    Returns:
        SwapStepResult(sqrt_ratio_next_x96, amount_in, amount_out, fee_amount)
    """
    zero_for_one = sqrt_ratio_current_x96 >= sqrt_ratio_target_x96
    exact_in = amount_remaining >= 0

    amount_in = 0
    amount_out = 0

    if exact_in:
        amount_remaining_less_fee = mul_div(
            amount_remaining, FEE_DENOMINATOR - fee_pips, FEE_DENOMINATOR
        )
        if zero_for_one:
            amount_in = _get_amount_0_delta(
                sqrt_ratio_target_x96, sqrt_ratio_current_x96, liquidity, True
            )
        else:
            amount_in = _get_amount_1_delta(
                sqrt_ratio_current_x96, sqrt_ratio_target_x96, liquidity, True
            )

        if amount_remaining_less_fee >= amount_in:
            sqrt_ratio_next_x96 = sqrt_ratio_target_x96
        else:
            sqrt_ratio_next_x96 = get_next_sqrt_price_from_input(
                sqrt_ratio_current_x96, liquidity, amount_remaining_less_fee, zero_for_one
            )
    else:
        if zero_for_one:
            amount_out = _get_amount_1_delta(
                sqrt_ratio_target_x96, sqrt_ratio_current_x96, liquidity, False
            )
        else:
            amount_out = _get_amount_0_delta(
                sqrt_ratio_current_x96, sqrt_ratio_target_x96, liquidity, False
            )

        if -amount_remaining >= amount_out:
            sqrt_ratio_next_x96 = sqrt_ratio_target_x96
        else:
            sqrt_ratio_next_x96 = get_next_sqrt_price_from_output(
                sqrt_ratio_current_x96, liquidity, -amount_remaining, zero_for_one
            )

    reached_target = sqrt_ratio_target_x96 == sqrt_ratio_next_x96

    # 목표 가격에 도달했고 이미 계산된 방향이면 재사용, 아니면 실제 이동 구간으로 재계산
    if zero_for_one:
        if not (reached_target and exact_in):
            amount_in = _get_amount_0_delta(
                sqrt_ratio_next_x96, sqrt_ratio_current_x96, liquidity, True
            )
        if not (reached_target and not exact_in):
            amount_out = _get_amount_1_delta(
                sqrt_ratio_next_x96, sqrt_ratio_current_x96, liquidity, False
            )
    else:
        if not (reached_target and exact_in):
            amount_in = _get_amount_1_delta(
                sqrt_ratio_current_x96, sqrt_ratio_next_x96, liquidity, True
            )
        if not (reached_target and not exact_in):
            amount_out = _get_amount_0_delta(
                sqrt_ratio_current_x96, sqrt_ratio_next_x96, liquidity, False
            )

    # exact output은 요청한 수량을 넘지 않음
    if not exact_in and amount_out > -amount_remaining:
        amount_out = -amount_remaining

    if exact_in and sqrt_ratio_next_x96 != sqrt_ratio_target_x96:
        # 목표 가격에 도달하지 못했으면 남은 입력은 전부 수수료
        fee_amount = amount_remaining - amount_in
    else:
        fee_amount = mul_div_rounding_up(amount_in, fee_pips, FEE_DENOMINATOR - fee_pips)

    return SwapStepResult(sqrt_ratio_next_x96, amount_in, amount_out, fee_amount)
