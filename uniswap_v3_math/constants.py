"""
Uniswap V3 상수 정의

온체인 수준 정밀도를 위한 상수들:
- Q96 / Q128: 고정소수점 인코딩 (Q64.96, Q128.128)
- 정수 폭 상한: uint256 / uint160 / uint128 / int128 / int16
- 틱 및 sqrtPriceX96 범위
- FEE_TIERS / TICK_SPACINGS: 수수료 티어별 틱 간격
"""

from typing import Dict

# Fixed-point 인코딩 상수
RESOLUTION: int = 96
Q96: int = 2 ** 96
Q128: int = 2 ** 128
Q192: int = 2 ** 192

# EVM 정수 폭
UINT256_MAX: int = 2 ** 256 - 1
UINT160_MAX: int = 2 ** 160 - 1
UINT128_MAX: int = 2 ** 128 - 1
INT256_MIN: int = -(2 ** 255)
INT256_MAX: int = 2 ** 255 - 1
INT128_MIN: int = -(2 ** 127)
INT128_MAX: int = 2 ** 127 - 1
INT16_MIN: int = -(2 ** 15)
INT16_MAX: int = 2 ** 15 - 1

# 틱 범위 상수 (log_1.0001(2^-128) ~ log_1.0001(2^128))
MIN_TICK: int = -887272
MAX_TICK: int = 887272

# get_sqrt_ratio_at_tick(MIN_TICK), get_sqrt_ratio_at_tick(MAX_TICK)
MIN_SQRT_RATIO: int = 4295128739
MAX_SQRT_RATIO: int = 1461446703485210103287273052203988822378723970342

# 수수료 단위: 1e6 pips = 100%
FEE_DENOMINATOR: int = 1_000_000

# 수수료 티어 (pips)
# 500 = 0.05%, 3000 = 0.30%, 10000 = 1.00%
FEE_TIERS: Dict[int, str] = {
    100: "0.01%",    # 1 bps
    500: "0.05%",    # 5 bps
    3000: "0.30%",   # 30 bps
    10000: "1.00%",  # 100 bps
}

# 각 수수료 티어별 틱 간격
TICK_SPACINGS: Dict[int, int] = {
    100: 1,
    500: 10,
    3000: 60,
    10000: 200,
}
