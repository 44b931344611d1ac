"""
Bit Math / Word Math 테스트
"""

import pytest

from ..constants import UINT256_MAX
from ..errors import ZeroValueError
from ..math.bit_math import most_significant_bit, least_significant_bit
from ..math.unsafe_math import div_rounding_up
from ..math.word_math import (
    wrapping_add,
    wrapping_sub,
    wrapping_mul,
    wrapping_neg,
    shl,
    shr,
    bit_not,
    to_signed,
    to_unsigned,
    is_uint,
    is_int,
)


class TestMostSignificantBit:
    """most_significant_bit 테스트"""

    def test_zero(self):
        """0은 정의되지 않음"""
        with pytest.raises(ZeroValueError):
            most_significant_bit(0)

    def test_one(self):
        assert most_significant_bit(1) == 0

    def test_two(self):
        assert most_significant_bit(2) == 1

    def test_powers_of_two(self):
        """2^i의 최상위 비트는 i"""
        for i in range(256):
            assert most_significant_bit(2 ** i) == i

    def test_all_ones(self):
        """uint256 최대값"""
        assert most_significant_bit(UINT256_MAX) == 255

    def test_matches_bit_length(self):
        """int.bit_length와 일치"""
        for x in (3, 255, 256, 12345678901234567890, 2 ** 200 + 7):
            assert most_significant_bit(x) == x.bit_length() - 1


class TestLeastSignificantBit:
    """least_significant_bit 테스트"""

    def test_zero(self):
        """0은 정의되지 않음"""
        with pytest.raises(ZeroValueError):
            least_significant_bit(0)

    def test_one(self):
        assert least_significant_bit(1) == 0

    def test_two(self):
        assert least_significant_bit(2) == 1

    def test_powers_of_two(self):
        """2^i의 최하위 비트는 i"""
        for i in range(256):
            assert least_significant_bit(2 ** i) == i

    def test_all_ones(self):
        """uint256 최대값"""
        assert least_significant_bit(UINT256_MAX) == 0

    def test_mixed_bits(self):
        """상위 비트는 무시"""
        assert least_significant_bit(2 ** 255 + 2 ** 17) == 17
        assert least_significant_bit(0b101000) == 3


class TestDivRoundingUp:
    """div_rounding_up 테스트"""

    def test_exact(self):
        assert div_rounding_up(10, 5) == 2

    def test_remainder(self):
        assert div_rounding_up(11, 5) == 3
        assert div_rounding_up(1, UINT256_MAX) == 1

    def test_zero_numerator(self):
        assert div_rounding_up(0, 7) == 0


class TestWordMath:
    """uint256 감싸기 연산 테스트"""

    def test_wrapping_add(self):
        assert wrapping_add(UINT256_MAX, 1) == 0
        assert wrapping_add(UINT256_MAX, 2) == 1

    def test_wrapping_sub(self):
        assert wrapping_sub(0, 1) == UINT256_MAX
        assert wrapping_sub(5, 3) == 2

    def test_wrapping_mul(self):
        assert wrapping_mul(2 ** 255, 2) == 0
        assert wrapping_mul(UINT256_MAX, UINT256_MAX) == 1

    def test_wrapping_neg(self):
        assert wrapping_neg(1) == UINT256_MAX
        assert wrapping_neg(0) == 0

    def test_shifts(self):
        """256 이상 시프트는 0"""
        assert shl(1, 255) == 2 ** 255
        assert shl(1, 256) == 0
        assert shl(3, 255) == 2 ** 255
        assert shr(2 ** 255, 255) == 1
        assert shr(UINT256_MAX, 256) == 0

    def test_bit_not(self):
        assert bit_not(0) == UINT256_MAX
        assert bit_not(UINT256_MAX) == 0

    def test_signed_conversion(self):
        """2의 보수 해석"""
        assert to_signed(UINT256_MAX) == -1
        assert to_signed(2 ** 255) == -(2 ** 255)
        assert to_signed(0xFFFF, 16) == -1
        assert to_unsigned(-1) == UINT256_MAX
        assert to_unsigned(-1, 128) == 2 ** 128 - 1

    def test_width_checks(self):
        assert is_uint(UINT256_MAX)
        assert not is_uint(UINT256_MAX + 1)
        assert not is_uint(-1)
        assert is_uint(2 ** 160 - 1, 160)
        assert is_int(-(2 ** 15), 16)
        assert not is_int(2 ** 15, 16)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
