"""
Full Math - 512비트 중간값을 사용하는 곱셈-나눗셈

References:
- Uniswap V3 Core: contracts/libraries/FullMath.sol
- Remco Bloemen, "Mathemagic: Full Multiply" / "Mathemagic: 512-bit division"

a * b가 256비트를 넘어도 floor(a * b / denominator)를 정확하게 계산합니다.
곱은 두 개의 256비트 limb (prod1, prod0)로만 다루며, 결과는 온체인
구현과 비트 단위로 동일합니다.
"""

from ..constants import UINT256_MAX
from ..errors import DivisionByZeroError, MathOverflowError
from .word_math import wrapping_add, wrapping_mul, wrapping_neg, wrapping_sub


def mul_mod(a: int, b: int, modulus: int) -> int:
    """(a * b) mod modulus, 중간값 오버플로우 없음

    EVM mulmod와 같이 modulus == 0이면 0을 반환합니다.
    """
    if modulus == 0:
        return 0
    return (a * b) % modulus


def _mul_512(a: int, b: int):
    """a * b = prod1 * 2^256 + prod0

    mm = a * b mod (2^256 - 1) 과 prod0 = a * b mod 2^256 으로부터
    중국인의 나머지 정리를 이용해 상위 limb를 복원합니다.
    """
    prod0 = wrapping_mul(a, b)
    mm = mul_mod(a, b, UINT256_MAX)
    prod1 = wrapping_sub(wrapping_sub(mm, prod0), 1 if mm < prod0 else 0)
    return prod1, prod0


def mul_div(a: int, b: int, denominator: int) -> int:
    """floor(a * b / denominator), 256비트 정밀도

    Args:
        a: 피승수 (uint256)
        b: 승수 (uint256)
        denominator: 제수 (uint256)

    Returns:
        256비트 결과

    Raises:
        DivisionByZeroError: denominator == 0 (곱이 256비트 이내일 때)
        MathOverflowError: 결과가 256비트를 넘거나, 곱이 256비트를 넘는데
            denominator == 0인 경우
    """
    prod1, prod0 = _mul_512(a, b)

    # 256비트 / 256비트 나눗셈
    if prod1 == 0:
        if denominator == 0:
            raise DivisionByZeroError()
        return prod0 // denominator

    # 결과가 2^256 미만이어야 하며 denominator == 0도 여기서 걸러짐
    if denominator <= prod1:
        raise MathOverflowError("mul_div 결과가 256비트를 초과합니다")

    # [prod1 prod0]에서 나머지를 빼서 나눗셈을 정확하게 만듦
    remainder = mul_mod(a, b, denominator)
    prod1 = wrapping_sub(prod1, 1 if remainder > prod0 else 0)
    prod0 = wrapping_sub(prod0, remainder)

    # denominator의 2의 거듭제곱 인수를 제거
    twos = denominator & wrapping_neg(denominator)
    denominator //= twos
    prod0 //= twos

    # twos = 2^256 / twos (twos == 1이면 0으로 감싸짐)
    twos = wrapping_add(wrapping_sub(0, twos) // twos, 1)
    prod0 |= wrapping_mul(prod1, twos)

    # 홀수 denominator의 mod 2^256 역원 (Newton-Raphson)
    # seed는 mod 2^4까지 정확하고, 매 반복마다 정확한 비트 수가 두 배가 됨
    inv = wrapping_mul(3, denominator) ^ 2
    for _ in range(6):  # 8, 16, 32, 64, 128, 256 비트
        inv = wrapping_mul(inv, wrapping_sub(2, wrapping_mul(denominator, inv)))

    return wrapping_mul(prod0, inv)


def mul_div_rounding_up(a: int, b: int, denominator: int) -> int:
    """ceil(a * b / denominator), 256비트 정밀도

    Raises:
        DivisionByZeroError, MathOverflowError: mul_div와 동일하며,
            올림 결과가 2^256 - 1을 넘는 경우도 MathOverflowError
    """
    result = mul_div(a, b, denominator)
    if mul_mod(a, b, denominator) > 0:
        if result == UINT256_MAX:
            raise MathOverflowError("mul_div_rounding_up 결과가 256비트를 초과합니다")
        result += 1
    return result
