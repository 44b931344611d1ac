"""
Unsafe Math - 검사 없는 나눗셈

References:
- Uniswap V3 Core: contracts/libraries/UnsafeMath.sol
"""


def div_rounding_up(x: int, y: int) -> int:
    """ceil(x / y)

    y == 0 검사를 하지 않습니다. 호출자가 y != 0을 보장해야 합니다.
    """
    return x // y + (1 if x % y != 0 else 0)
