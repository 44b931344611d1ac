"""
오류 타입 정의

온체인 라이브러리의 revert 조건을 Python 예외로 표현.
Solidity에서 메시지 없이 require()로만 검사하던 조건들도 호출자가
구분할 수 있도록 개별 클래스로 유지합니다.
"""


class UniswapV3MathError(Exception):
    """uniswap_v3_math 오류의 기본 클래스"""
    pass


class ZeroValueError(UniswapV3MathError):
    """0에 대한 비트 스캔 (MSB/LSB 정의되지 않음)"""

    def __init__(self, message: str = "0에서는 최상위/최하위 비트를 구할 수 없습니다"):
        super().__init__(message)


class DivisionByZeroError(UniswapV3MathError, ZeroDivisionError):
    """분모가 0"""

    def __init__(self, message: str = "분모가 0입니다"):
        super().__init__(message)


class MathOverflowError(UniswapV3MathError, OverflowError):
    """결과가 256비트(또는 160비트) 범위를 초과"""

    def __init__(self, message: str = "결과가 정수 폭을 초과합니다"):
        super().__init__(message)


class InvalidPreconditionError(UniswapV3MathError):
    """메시지 없는 require() 조건 실패"""
    pass


class ProductOverflowError(InvalidPreconditionError):
    """require((product = amount * sqrtPX96) / amount == sqrtPX96 && numerator1 > product)"""

    def __init__(self, message: str = "amount * sqrtPX96 오버플로우 또는 numerator1 <= product"):
        super().__init__(message)


class PriceNotAboveQuotientError(InvalidPreconditionError):
    """require(sqrtPX96 > quotient)"""

    def __init__(self, message: str = "sqrtPX96 <= quotient"):
        super().__init__(message)


class TickOutOfRangeError(UniswapV3MathError, ValueError):
    """|tick| > MAX_TICK ("T")"""

    def __init__(self, tick: int):
        self.tick = tick
        super().__init__(f"틱이 유효 범위를 벗어났습니다: {tick}")


class PriceOutOfRangeError(UniswapV3MathError, ValueError):
    """sqrtPriceX96이 [MIN_SQRT_RATIO, MAX_SQRT_RATIO) 밖 ("R")"""

    def __init__(self, sqrt_price_x96: int):
        self.sqrt_price_x96 = sqrt_price_x96
        super().__init__(f"sqrtPriceX96이 유효 범위를 벗어났습니다: {sqrt_price_x96}")


class PriceIsZeroError(UniswapV3MathError):
    """sqrtPriceX96 == 0"""

    def __init__(self, message: str = "sqrtPriceX96이 0입니다"):
        super().__init__(message)


class LiquidityIsZeroError(UniswapV3MathError):
    """liquidity == 0"""

    def __init__(self, message: str = "유동성이 0입니다"):
        super().__init__(message)


class LiquidityUnderflowError(UniswapV3MathError):
    """add_delta 결과가 0 미만 ("LS")"""

    def __init__(self, message: str = "유동성 언더플로우 (LS)"):
        super().__init__(message)


class LiquidityOverflowError(UniswapV3MathError):
    """add_delta 결과가 uint128 초과 ("LA")"""

    def __init__(self, message: str = "유동성 오버플로우 (LA)"):
        super().__init__(message)


class TickSpacingMismatchError(UniswapV3MathError, ValueError):
    """tick % tick_spacing != 0"""

    def __init__(self, tick: int, tick_spacing: int):
        self.tick = tick
        self.tick_spacing = tick_spacing
        super().__init__(f"틱 {tick}이 틱 간격 {tick_spacing}의 배수가 아닙니다")


class MiddlewareError(UniswapV3MathError):
    """외부 데이터 제공자(노드/RPC) 오류"""

    def __init__(self, description: str):
        self.description = description
        super().__init__(description)
