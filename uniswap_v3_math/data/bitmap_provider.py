"""
온체인 tickBitmap 조회

풀 컨트랙트의 tickBitmap(int16) view 함수를 web3로 호출합니다.
노드/전송 오류는 모두 MiddlewareError로 전달됩니다.

사용법:
    provider = Web3BitmapProvider.from_config(ProviderConfig.from_env())
    word = provider.get_word("0x...", -58)
"""

import logging
from typing import Optional, Protocol

from web3 import Web3

from ..config import RPC_URL_ENV, ProviderConfig
from ..errors import MiddlewareError

logger = logging.getLogger(__name__)

TICK_BITMAP_ABI = [
    {
        "inputs": [{"internalType": "int16", "name": "", "type": "int16"}],
        "name": "tickBitmap",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    }
]


class BitmapProvider(Protocol):
    """tickBitmap word 제공자"""

    def get_word(self, pool_address: str, word_index: int, block_number: Optional[int] = None) -> int:
        ...


class Web3BitmapProvider:
    """web3 기반 tickBitmap 제공자"""

    def __init__(self, w3: Web3, default_block: Optional[int] = None):
        """
        Args:
            w3: 연결된 Web3 인스턴스
            default_block: get_word에 블록이 주어지지 않을 때 조회할 블록.
                None이면 최신 블록
        """
        self.w3 = w3
        self.default_block = default_block

    @classmethod
    def from_config(cls, config: ProviderConfig) -> "Web3BitmapProvider":
        """설정에서 HTTP provider 생성

        Raises:
            MiddlewareError: RPC URL이 설정되지 않은 경우
        """
        if not config.rpc_url:
            raise MiddlewareError(
                f"RPC URL이 필요합니다. {RPC_URL_ENV} 환경변수를 설정하거나 "
                "ProviderConfig(rpc_url=...)로 전달하세요."
            )
        w3 = Web3(Web3.HTTPProvider(config.rpc_url, request_kwargs={"timeout": config.timeout}))
        return cls(w3, default_block=config.block_number)

    def _pool_contract(self, pool_address: str):
        return self.w3.eth.contract(
            address=Web3.to_checksum_address(pool_address),
            abi=TICK_BITMAP_ABI
        )

    def get_word(self, pool_address: str, word_index: int, block_number: Optional[int] = None) -> int:
        """tickBitmap[word_index] 조회

        Args:
            pool_address: 풀 컨트랙트 주소
            word_index: word 위치 (int16)
            block_number: 조회 블록. None이면 default_block, 그것도 None이면 최신 블록

        Returns:
            256비트 word

        Raises:
            MiddlewareError: 노드 호출 실패
        """
        if block_number is None:
            block_number = self.default_block

        logger.debug("tickBitmap(%d) 조회: pool=%s block=%s", word_index, pool_address, block_number)
        try:
            call = self._pool_contract(pool_address).functions.tickBitmap(word_index)
            if block_number is None:
                return int(call.call())
            return int(call.call(block_identifier=block_number))
        except Exception as e:
            logger.warning("tickBitmap(%d) 조회 실패: %s", word_index, e)
            raise MiddlewareError(str(e)) from e
