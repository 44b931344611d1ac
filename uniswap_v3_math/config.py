"""
Provider 설정

온체인 tickBitmap 조회에 사용하는 RPC 설정.
환경변수 또는 .env 파일에서 로드합니다:

    UNISWAP_V3_RPC_URL=https://...
    UNISWAP_V3_RPC_TIMEOUT=30
    UNISWAP_V3_BLOCK_NUMBER=19000000   # 선택, 없으면 최신 블록
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

RPC_URL_ENV: str = "UNISWAP_V3_RPC_URL"
RPC_TIMEOUT_ENV: str = "UNISWAP_V3_RPC_TIMEOUT"
BLOCK_NUMBER_ENV: str = "UNISWAP_V3_BLOCK_NUMBER"


@dataclass
class ProviderConfig:
    """RPC provider 설정"""
    rpc_url: Optional[str] = None
    timeout: int = 30
    block_number: Optional[int] = None

    @classmethod
    def from_env(cls) -> "ProviderConfig":
        """.env 및 환경변수에서 설정 로드"""
        load_dotenv()

        block_number = os.getenv(BLOCK_NUMBER_ENV)
        return cls(
            rpc_url=os.getenv(RPC_URL_ENV) or None,
            timeout=int(os.getenv(RPC_TIMEOUT_ENV, 30)),
            block_number=int(block_number) if block_number else None,
        )
