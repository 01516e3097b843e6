"""インメモリストレージ"""
from typing import Optional

from ....shared.logging.config import get_logger

logger = get_logger(__name__)


class InMemoryStorage:
    """
    dictを使ったキー・バリューストレージ

    プロセス終了で内容は失われる。テストや一時利用向け。
    """

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        """
        Args:
            initial: 初期データ
        """
        self._data: dict[str, str] = dict(initial or {})
        logger.debug(f"InMemoryStorage initialized with {len(self._data)} keys")

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        """保存されているキーの一覧"""
        return sorted(self._data)
