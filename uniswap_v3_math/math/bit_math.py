"""
Bit Math - 최상위/최하위 비트 위치

References:
- Uniswap V3 Core: contracts/libraries/BitMath.sol

두 함수 모두 이진 탐색으로 비트 위치(0~255)를 찾습니다.
"""

from ..errors import ZeroValueError


def most_significant_bit(x: int) -> int:
    """x의 최상위 1 비트 인덱스

    x >= 2**msb 이고 x < 2**(msb+1)

    Raises:
        ZeroValueError: x == 0
    """
    if x == 0:
        raise ZeroValueError()

    r = 0
    if x >= 0x100000000000000000000000000000000:
        x >>= 128
        r += 128
    if x >= 0x10000000000000000:
        x >>= 64
        r += 64
    if x >= 0x100000000:
        x >>= 32
        r += 32
    if x >= 0x10000:
        x >>= 16
        r += 16
    if x >= 0x100:
        x >>= 8
        r += 8
    if x >= 0x10:
        x >>= 4
        r += 4
    if x >= 0x4:
        x >>= 2
        r += 2
    if x >= 0x2:
        r += 1

    return r


def least_significant_bit(x: int) -> int:
    """x의 최하위 1 비트 인덱스

    (x & 2**lsb) != 0 이고 (x & (2**lsb - 1)) == 0

    Raises:
        ZeroValueError: x == 0
    """
    if x == 0:
        raise ZeroValueError()

    r = 255
    if x & 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF:
        r -= 128
    else:
        x >>= 128
    if x & 0xFFFFFFFFFFFFFFFF:
        r -= 64
    else:
        x >>= 64
    if x & 0xFFFFFFFF:
        r -= 32
    else:
        x >>= 32
    if x & 0xFFFF:
        r -= 16
    else:
        x >>= 16
    if x & 0xFF:
        r -= 8
    else:
        x >>= 8
    if x & 0xF:
        r -= 4
    else:
        x >>= 4
    if x & 0x3:
        r -= 2
    else:
        x >>= 2
    if x & 0x1:
        r -= 1

    return r
