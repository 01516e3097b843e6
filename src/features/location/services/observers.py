"""ロケーションキャッシュのイベント通知"""
from typing import Protocol

from ..domain.models import StoredLocation
from ....shared.logging.config import get_logger

logger = get_logger(__name__)


class CacheObserver(Protocol):
    """キャッシュ操作の結果を受け取るオブザーバー"""

    def on_saved(self, key: str, location: StoredLocation) -> None: ...

    def on_loaded(self, key: str, location: StoredLocation) -> None: ...

    def on_missing(self, key: str) -> None: ...

    def on_cleared(self, key: str) -> None: ...

    def on_error(self, operation: str, key: str, error: Exception) -> None: ...


class LoggingCacheObserver:
    """ロガーに出力するデフォルトのオブザーバー"""

    def on_saved(self, key: str, location: StoredLocation) -> None:
        logger.info(
            f"Location saved: key={key}, place_id={location.place_id}, "
            f"description={location.description!r}"
        )

    def on_loaded(self, key: str, location: StoredLocation) -> None:
        logger.info(f"Location retrieved: key={key}, place_id={location.place_id}")

    def on_missing(self, key: str) -> None:
        logger.debug(f"No location stored: key={key}")

    def on_cleared(self, key: str) -> None:
        logger.info(f"Location cleared: key={key}")

    def on_error(self, operation: str, key: str, error: Exception) -> None:
        logger.error(f"Error during location {operation} (key={key}): {error}")
