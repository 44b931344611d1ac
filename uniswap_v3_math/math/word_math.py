"""
Word Math - 256비트 워드 연산

EVM의 uint256은 오버플로우 시 revert하지 않고 2^256으로 나눈 나머지로
감싸집니다 (unchecked 블록, assembly). Python int는 크기 제한이 없으므로
상위 라이브러리는 이 모듈의 함수를 통해서만 감싸기 연산을 수행합니다.
"""

from ..constants import UINT256_MAX

WORD_BITS: int = 256


def wrapping_add(a: int, b: int) -> int:
    """(a + b) mod 2^256"""
    return (a + b) & UINT256_MAX


def wrapping_sub(a: int, b: int) -> int:
    """(a - b) mod 2^256"""
    return (a - b) & UINT256_MAX


def wrapping_mul(a: int, b: int) -> int:
    """(a * b) mod 2^256"""
    return (a * b) & UINT256_MAX


def wrapping_neg(a: int) -> int:
    """0 - a mod 2^256 (2의 보수)"""
    return -a & UINT256_MAX


def shl(a: int, n: int) -> int:
    """왼쪽 시프트. 255번 비트를 넘어간 비트는 버림"""
    if n >= WORD_BITS:
        return 0
    return (a << n) & UINT256_MAX


def shr(a: int, n: int) -> int:
    """논리 오른쪽 시프트"""
    if n >= WORD_BITS:
        return 0
    return a >> n


def bit_not(a: int) -> int:
    return a ^ UINT256_MAX


def to_signed(a: int, bits: int = WORD_BITS) -> int:
    """uint 비트 패턴을 2의 보수 int로 해석"""
    a &= (1 << bits) - 1
    if a >> (bits - 1):
        return a - (1 << bits)
    return a


def to_unsigned(a: int, bits: int = WORD_BITS) -> int:
    """int를 2의 보수 uint 비트 패턴으로 변환"""
    return a & ((1 << bits) - 1)


def is_uint(a: int, bits: int = WORD_BITS) -> bool:
    return 0 <= a < (1 << bits)


def is_int(a: int, bits: int = WORD_BITS) -> bool:
    return -(1 << (bits - 1)) <= a < (1 << (bits - 1))
