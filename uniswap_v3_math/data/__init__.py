"""
Data layer for Uniswap V3 Math

온체인 tickBitmap 조회 및 캐시
"""

from .bitmap_provider import BitmapProvider, Web3BitmapProvider
from .bitmap_cache import CachedBitmapReader
