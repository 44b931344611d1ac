"""
Uniswap V3 Fixed-Point Math

온체인 라이브러리(TickMath, SqrtPriceMath, SwapMath 등)와 비트 단위로 동일한
정수 연산을 제공하는 라이브러리. 스왑/유동성 시뮬레이션에 사용합니다.
"""

__version__ = "0.1.0"

from .constants import (
    Q96,
    Q128,
    MIN_TICK,
    MAX_TICK,
    MIN_SQRT_RATIO,
    MAX_SQRT_RATIO,
    FEE_TIERS,
    TICK_SPACINGS,
)
from .errors import (
    UniswapV3MathError,
    ZeroValueError,
    DivisionByZeroError,
    MathOverflowError,
    InvalidPreconditionError,
    ProductOverflowError,
    PriceNotAboveQuotientError,
    TickOutOfRangeError,
    PriceOutOfRangeError,
    PriceIsZeroError,
    LiquidityIsZeroError,
    LiquidityUnderflowError,
    LiquidityOverflowError,
    TickSpacingMismatchError,
    MiddlewareError,
)
