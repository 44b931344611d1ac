"""
Tick Bitmap - 초기화된 틱의 희소 비트맵

References:
- Uniswap V3 Core: contracts/libraries/TickBitmap.sol

비트맵은 {word_pos (int16): word (uint256)} 매핑이며, word의 i번째 비트는
압축 틱 (word_pos * 256 + i)의 초기화 여부입니다. 없는 키는 0으로 취급합니다.
매핑은 호출자가 소유하고, flip_tick만 이를 변경합니다.
"""

from typing import Callable, Mapping, MutableMapping, Optional, Tuple

from ..errors import MiddlewareError, TickSpacingMismatchError, UniswapV3MathError
from .bit_math import least_significant_bit, most_significant_bit
from .word_math import bit_not

WordReader = Callable[[int], int]


def position(tick: int) -> Tuple[int, int]:
    """압축 틱의 비트맵 위치

    Returns:
        (word_pos, bit_pos) = (tick >> 8, tick % 256)
    """
    return tick >> 8, tick % 256


def compress(tick: int, tick_spacing: int) -> int:
    """틱을 틱 간격으로 압축 (음의 무한대 방향 내림)"""
    return tick // tick_spacing


def _truncated_mod(tick: int, tick_spacing: int) -> int:
    # Solidity의 % 는 0 방향 절사 나눗셈의 나머지
    return abs(tick) % abs(tick_spacing) * (1 if tick >= 0 else -1)


def flip_tick(
    tick_bitmap: MutableMapping[int, int],
    tick: int,
    tick_spacing: int
) -> None:
    """틱의 초기화 상태를 반전

    Args:
        tick_bitmap: 호출자 소유의 비트맵 매핑
        tick: 반전할 틱
        tick_spacing: 틱 간격

    Raises:
        TickSpacingMismatchError: tick이 tick_spacing의 배수가 아닌 경우 (매핑 변경 없음)
    """
    if _truncated_mod(tick, tick_spacing) != 0:
        raise TickSpacingMismatchError(tick, tick_spacing)

    word_pos, bit_pos = position(tick // tick_spacing)
    mask = 1 << bit_pos
    tick_bitmap[word_pos] = tick_bitmap.get(word_pos, 0) ^ mask


def is_initialized(tick_bitmap: Mapping[int, int], tick: int, tick_spacing: int) -> bool:
    """틱이 비트맵에서 초기화되어 있는지 여부"""
    word_pos, bit_pos = position(compress(tick, tick_spacing))
    return bool(tick_bitmap.get(word_pos, 0) & (1 << bit_pos))


def next_initialized_tick_within_one_word_from_reader(
    word_at: WordReader,
    tick: int,
    tick_spacing: int,
    lte: bool
) -> Tuple[int, bool]:
    """같은 word(또는 인접 word) 안에서 다음 초기화된 틱 탐색

    word_at(word_pos)로 word를 얻은 뒤 비트 스캔합니다.
    reader가 던진 예외 중 UniswapV3MathError가 아닌 것은 MiddlewareError로 감쌉니다.

    Args:
        word_at: word_pos -> uint256 word
        tick: 시작 틱
        tick_spacing: 틱 간격
        lte: True면 tick 이하(왼쪽), False면 tick 초과(오른쪽) 탐색

    Returns:
        (next_tick, initialized). initialized가 False면 next_tick은 word 경계
    """
    compressed = compress(tick, tick_spacing)

    if lte:
        word_pos, bit_pos = position(compressed)
        # 현재 bit_pos와 그 오른쪽 모든 비트
        mask = (1 << bit_pos) - 1 + (1 << bit_pos)
        masked = _read_word(word_at, word_pos) & mask

        if masked != 0:
            return (compressed - (bit_pos - most_significant_bit(masked))) * tick_spacing, True
        return (compressed - bit_pos) * tick_spacing, False

    # 다음 틱의 word에서 시작
    word_pos, bit_pos = position(compressed + 1)
    # bit_pos와 그 왼쪽 모든 비트
    mask = bit_not((1 << bit_pos) - 1)
    masked = _read_word(word_at, word_pos) & mask

    if masked != 0:
        return (compressed + 1 + (least_significant_bit(masked) - bit_pos)) * tick_spacing, True
    return (compressed + 1 + (255 - bit_pos)) * tick_spacing, False


def next_initialized_tick_within_one_word(
    tick_bitmap: Mapping[int, int],
    tick: int,
    tick_spacing: int,
    lte: bool
) -> Tuple[int, bool]:
    """메모리 비트맵에서 다음 초기화된 틱 탐색

    Example:
        >>> bitmap = {}
        >>> for t in (70, 78, 84):
        ...     flip_tick(bitmap, t, 1)
        >>> next_initialized_tick_within_one_word(bitmap, 78, 1, False)
        (84, True)
    """
    return next_initialized_tick_within_one_word_from_reader(
        lambda word_pos: tick_bitmap.get(word_pos, 0), tick, tick_spacing, lte
    )


def next_initialized_tick_within_one_word_from_provider(
    tick: int,
    tick_spacing: int,
    lte: bool,
    pool_address: str,
    provider,
    block_number: Optional[int] = None
) -> Tuple[int, bool]:
    """온체인 풀의 tickBitmap을 조회하며 다음 초기화된 틱 탐색

    Args:
        provider: get_word(pool_address, word_pos, block_number) -> int 를 제공하는 객체
            (예: data.bitmap_provider.Web3BitmapProvider)
        block_number: 조회 블록. None이면 최신 블록
    """
    return next_initialized_tick_within_one_word_from_reader(
        lambda word_pos: provider.get_word(pool_address, word_pos, block_number),
        tick,
        tick_spacing,
        lte
    )


def _read_word(word_at: WordReader, word_pos: int) -> int:
    try:
        return word_at(word_pos)
    except UniswapV3MathError:
        raise
    except Exception as e:
        raise MiddlewareError(str(e)) from e
