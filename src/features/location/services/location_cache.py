"""選択中ロケーションのキャッシュ"""
from typing import Callable, Optional

from ..domain.models import LocationInput, StoredLocation
from ..domain.results import CacheResult, ErrorKind, LoadResult
from ...storage.domain.ports import KeyValueStorage
from ....shared.exceptions.errors import SerializationError, StorageError
from ....shared.utils.datetime_utils import now_ms
from .observers import CacheObserver, LoggingCacheObserver

SELECTED_LOCATION_KEY = "selected_location"

# 24時間（ミリ秒）
RECENT_THRESHOLD_MS = 24 * 60 * 60 * 1000


def is_location_recent(
    location: StoredLocation,
    now: Optional[int] = None,
    threshold_ms: int = RECENT_THRESHOLD_MS,
) -> bool:
    """
    ロケーションが最新かどうか（I/Oなし）

    経過時間は単純な差分で計算する。未来のタイムスタンプは
    経過時間が負になるため最新とみなされる。

    Args:
        location: 保存済みロケーション
        now: 現在時刻（エポックミリ秒、省略時は現在時刻）
        threshold_ms: しきい値（ミリ秒）

    Returns:
        bool: しきい値未満の経過時間ならTrue
    """
    current = now_ms() if now is None else now
    return current - location.timestamp < threshold_ms


class LocationCache:
    """
    ユーザーが最後に選択したロケーションを1スロットで永続化する

    保存先は固定キー1つのみで、保存のたびに上書きされる。
    ストレージやシリアライズの失敗は例外として送出せず、
    オブザーバーに通知したうえで結果型として返す。

    同時実行の制御は行わない。save と clear を並行して呼んだ場合の
    順序はストレージ側の書き込み順に従う（後勝ち）。
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = SELECTED_LOCATION_KEY,
        recent_threshold_ms: int = RECENT_THRESHOLD_MS,
        clock: Callable[[], int] = now_ms,
        observer: Optional[CacheObserver] = None,
    ) -> None:
        """
        Args:
            storage: キー・バリューストレージ
            key: 保存先のキー
            recent_threshold_ms: 最新とみなす経過時間（ミリ秒）
            clock: 現在時刻（エポックミリ秒）を返す関数
            observer: 操作結果の通知先（省略時はロガーに出力）
        """
        self.storage = storage
        self.key = key
        self.recent_threshold_ms = recent_threshold_ms
        self.clock = clock
        self.observer = observer or LoggingCacheObserver()

    async def save_result(self, location: LocationInput) -> CacheResult:
        """
        ロケーションを保存し、結果を返す

        Args:
            location: 保存するロケーション

        Returns:
            CacheResult: 保存結果
        """
        try:
            stored = location.stamp(self.clock())
            await self.storage.set(self.key, stored.to_json())
        except SerializationError as e:
            return self._failed("save", ErrorKind.SERIALIZATION, e)
        except StorageError as e:
            return self._failed("save", ErrorKind.STORAGE, e)
        except Exception as e:
            return self._failed("save", ErrorKind.UNEXPECTED, e)

        self.observer.on_saved(self.key, stored)
        return CacheResult.success()

    async def load_result(self) -> LoadResult:
        """
        保存済みロケーションを読み込み、結果を返す

        未保存と破損データを区別して返す。

        Returns:
            LoadResult: FOUND / ABSENT / CORRUPTED / STORAGE_ERROR
        """
        try:
            raw = await self.storage.get(self.key)
        except Exception as e:
            self.observer.on_error("load", self.key, e)
            return LoadResult.storage_error(e)

        if raw is None:
            self.observer.on_missing(self.key)
            return LoadResult.absent()

        try:
            location = StoredLocation.from_json(raw)
        except Exception as e:
            self.observer.on_error("load", self.key, e)
            return LoadResult.corrupted(e)

        self.observer.on_loaded(self.key, location)
        return LoadResult.hit(location)

    async def clear_result(self) -> CacheResult:
        """
        保存済みロケーションを削除し、結果を返す

        未保存の状態で呼んでも成功として扱う。

        Returns:
            CacheResult: 削除結果
        """
        try:
            await self.storage.remove(self.key)
        except StorageError as e:
            return self._failed("clear", ErrorKind.STORAGE, e)
        except Exception as e:
            return self._failed("clear", ErrorKind.UNEXPECTED, e)

        self.observer.on_cleared(self.key)
        return CacheResult.success()

    async def save(self, location: LocationInput) -> None:
        """ロケーションを保存（失敗はログのみ）"""
        await self.save_result(location)

    async def load(self) -> Optional[StoredLocation]:
        """保存済みロケーションを取得（未保存・破損・読み込み失敗はすべてNone）"""
        result = await self.load_result()
        return result.location

    async def clear(self) -> None:
        """保存済みロケーションを削除（失敗はログのみ）"""
        await self.clear_result()

    def is_recent(self, location: StoredLocation) -> bool:
        """ロケーションが最新かどうか（キャッシュの時計としきい値を使用）"""
        return is_location_recent(
            location, now=self.clock(), threshold_ms=self.recent_threshold_ms
        )

    def age_ms(self, location: StoredLocation) -> int:
        """保存からの経過時間（ミリ秒、未来の場合は負）"""
        return self.clock() - location.timestamp

    def _failed(self, operation: str, kind: ErrorKind, error: Exception) -> CacheResult:
        self.observer.on_error(operation, self.key, error)
        return CacheResult.failure(kind, error)
