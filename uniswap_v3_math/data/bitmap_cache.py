"""
tickBitmap word 캐시

하나의 풀과 블록에 대해 조회한 word를 메모이즈합니다.
같은 블록 안에서 word는 바뀌지 않으므로 스왑 시뮬레이션 동안 재사용할 수 있습니다.
"""

import logging
from typing import Dict, Optional

from .bitmap_provider import BitmapProvider

logger = logging.getLogger(__name__)


class CachedBitmapReader:
    """고정된 (pool, block)의 word reader

    next_initialized_tick_within_one_word_from_reader에 그대로 전달할 수 있습니다:

        reader = CachedBitmapReader(provider, pool_address, block_number=19000000)
        next_initialized_tick_within_one_word_from_reader(reader, tick, 60, True)
    """

    def __init__(
        self,
        provider: BitmapProvider,
        pool_address: str,
        block_number: Optional[int] = None
    ):
        self.provider = provider
        self.pool_address = pool_address
        self.block_number = block_number
        self._words: Dict[int, int] = {}

    def __call__(self, word_pos: int) -> int:
        return self.word_at(word_pos)

    def word_at(self, word_pos: int) -> int:
        """word 조회 (캐시 우선)"""
        if word_pos in self._words:
            return self._words[word_pos]

        word = self.provider.get_word(self.pool_address, word_pos, self.block_number)
        self._words[word_pos] = word
        logger.debug("word %d 캐시 저장 (총 %d개)", word_pos, len(self._words))
        return word

    def clear(self) -> None:
        self._words.clear()

    def __len__(self) -> int:
        return len(self._words)
