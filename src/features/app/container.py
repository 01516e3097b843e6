"""アプリケーションコンテナ"""

from typing import Optional

from ...infrastructure.config.settings import Settings
from ...shared.logging.config import get_logger
from ..hotels.services.hotel_cache import HotelCache
from ..location.services.location_cache import LocationCache
from ..storage.domain.ports import KeyValueStorage
from ..storage.factory import create_storage

logger = get_logger(__name__)


class AppContainer:
    """
    アプリケーションコンテナ

    設定からストレージと各キャッシュを組み立て、依存性注入を行う
    """

    def __init__(self, settings: Settings, storage: Optional[KeyValueStorage] = None) -> None:
        """
        Args:
            settings: アプリケーション設定
            storage: 使用するストレージ（省略時は設定から生成）
        """
        self.settings = settings

        # ストレージを初期化
        self.storage = storage if storage is not None else create_storage(settings)

        # キャッシュを初期化（同じストレージを共有）
        self.location_cache = LocationCache(
            storage=self.storage,
            key=settings.location_storage_key,
            recent_threshold_ms=settings.location_recent_ms,
        )
        self.hotel_cache = HotelCache(
            storage=self.storage,
            key=settings.hotels_cache_key,
            ttl_ms=settings.hotels_cache_ttl_ms,
        )

        logger.info(
            f"AppContainer initialized: backend={type(self.storage).__name__}, "
            f"location_key={settings.location_storage_key}"
        )
