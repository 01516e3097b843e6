"""ホテル一覧キャッシュ"""

import json
from typing import Any, Callable, Optional

from ..domain.models import Hotel
from ...storage.domain.ports import KeyValueStorage
from ....shared.exceptions.errors import SerializationError
from ....shared.logging.config import get_logger
from ....shared.utils.datetime_utils import now_ms

logger = get_logger(__name__)

HOTELS_CACHE_KEY = "hotels_cache"

# 15分（ミリ秒）
CACHE_EXPIRY_MS = 15 * 60 * 1000


class HotelCache:
    """
    取得済みホテル一覧の短期キャッシュ

    保存データ: {"hotels": [...], "timestamp": ミリ秒, "expiry": ミリ秒}
    期限切れのデータは読み込み時に削除する。
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = HOTELS_CACHE_KEY,
        ttl_ms: int = CACHE_EXPIRY_MS,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        """
        Args:
            storage: キー・バリューストレージ
            key: 保存先のキー
            ttl_ms: 有効期間（ミリ秒）
            clock: 現在時刻（エポックミリ秒）を返す関数
        """
        self.storage = storage
        self.key = key
        self.ttl_ms = ttl_ms
        self.clock = clock

    async def save_hotels(self, hotels: list[Hotel]) -> None:
        """
        ホテル一覧を保存

        Args:
            hotels: ホテルのリスト
        """
        try:
            timestamp = self.clock()
            cache_data = {
                "hotels": [hotel.to_dict() for hotel in hotels],
                "timestamp": timestamp,
                "expiry": timestamp + self.ttl_ms,
            }
            await self.storage.set(self.key, json.dumps(cache_data, allow_nan=False))
            logger.info(f"Cached {len(hotels)} hotels")

        except Exception as e:
            logger.error(f"Error saving hotels to cache: {e}")

    async def get_hotels(self) -> Optional[list[Hotel]]:
        """
        キャッシュからホテル一覧を取得

        Returns:
            Optional[list[Hotel]]: ホテル一覧（未保存・期限切れ・読み込み失敗はNone）
        """
        try:
            cache_data = await self._read()
            if cache_data is None:
                return None

            if self.clock() > cache_data["expiry"]:
                await self.storage.remove(self.key)
                logger.info("Hotel cache expired, removed")
                return None

            hotels = [Hotel.from_dict(item) for item in cache_data["hotels"]]
            logger.info(f"Retrieved {len(hotels)} hotels from cache")
            return hotels

        except Exception as e:
            logger.error(f"Error getting hotels from cache: {e}")
            return None

    async def clear(self) -> None:
        """キャッシュを削除"""
        try:
            await self.storage.remove(self.key)
            logger.info("Hotel cache cleared")

        except Exception as e:
            logger.error(f"Error clearing hotel cache: {e}")

    async def is_valid(self) -> bool:
        """
        有効なキャッシュが存在するか

        Returns:
            bool: 保存済みかつ期限内ならTrue
        """
        try:
            cache_data = await self._read()
            if cache_data is None:
                return False
            return self.clock() < cache_data["expiry"]

        except Exception as e:
            logger.error(f"Error checking cache validity: {e}")
            return False

    async def _read(self) -> Optional[dict[str, Any]]:
        """
        保存データを読み込んで形式を検証

        Raises:
            SerializationError: 形式が不正な場合
            StorageError: ストレージの読み込みに失敗した場合
        """
        raw = await self.storage.get(self.key)
        if raw is None:
            return None

        try:
            cache_data = json.loads(raw)
        except ValueError as e:
            raise SerializationError(f"Hotel cache is not valid JSON: {e}") from e

        if (
            not isinstance(cache_data, dict)
            or not isinstance(cache_data.get("hotels"), list)
            or not isinstance(cache_data.get("expiry"), (int, float))
        ):
            raise SerializationError("Hotel cache has an unexpected shape")

        return cache_data
