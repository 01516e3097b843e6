"""キャッシュ操作の結果型"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .models import StoredLocation


class ErrorKind(str, Enum):
    """失敗の種類"""

    STORAGE = "storage"  # ストレージI/Oの失敗
    SERIALIZATION = "serialization"  # シリアライズ・デシリアライズの失敗
    UNEXPECTED = "unexpected"  # 想定外の例外


class LoadStatus(str, Enum):
    """読み込み結果の状態"""

    FOUND = "found"  # 保存済み
    ABSENT = "absent"  # 未保存（またはクリア済み）
    CORRUPTED = "corrupted"  # 保存データが壊れている
    STORAGE_ERROR = "storage_error"  # ストレージの読み込みに失敗


@dataclass(frozen=True)
class CacheResult:
    """書き込み系操作（save/clear）の結果"""

    ok: bool
    error_kind: Optional[ErrorKind] = None
    error: Optional[Exception] = None

    @classmethod
    def success(cls) -> "CacheResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, kind: ErrorKind, error: Exception) -> "CacheResult":
        return cls(ok=False, error_kind=kind, error=error)


@dataclass(frozen=True)
class LoadResult:
    """読み込み操作（load）の結果"""

    status: LoadStatus
    location: Optional[StoredLocation] = None
    error: Optional[Exception] = None

    @property
    def found(self) -> bool:
        return self.status is LoadStatus.FOUND

    @property
    def ok(self) -> bool:
        """エラーでないか（ABSENTも正常な結果とみなす）"""
        return self.status in (LoadStatus.FOUND, LoadStatus.ABSENT)

    @classmethod
    def hit(cls, location: StoredLocation) -> "LoadResult":
        return cls(status=LoadStatus.FOUND, location=location)

    @classmethod
    def absent(cls) -> "LoadResult":
        return cls(status=LoadStatus.ABSENT)

    @classmethod
    def corrupted(cls, error: Exception) -> "LoadResult":
        return cls(status=LoadStatus.CORRUPTED, error=error)

    @classmethod
    def storage_error(cls, error: Exception) -> "LoadResult":
        return cls(status=LoadStatus.STORAGE_ERROR, error=error)
