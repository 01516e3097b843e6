"""テスト共通のフィクスチャ"""

from typing import Optional

import pytest

from src.features.location.domain.models import StoredLocation
from src.features.storage.clients.memory_storage import InMemoryStorage
from src.shared.exceptions.errors import StorageError

# 2023-11-14 22:13:20 UTC
BASE_NOW_MS = 1_700_000_000_000


class FakeClock:
    """テスト用の時計（エポックミリ秒）"""

    def __init__(self, now: int = BASE_NOW_MS) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class FailingStorage(InMemoryStorage):
    """指定した操作で StorageError を送出するストレージ"""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        super().__init__(initial)
        self.fail_get = False
        self.fail_set = False
        self.fail_remove = False

    async def get(self, key: str) -> Optional[str]:
        if self.fail_get:
            raise StorageError("disk read failed")
        return await super().get(key)

    async def set(self, key: str, value: str) -> None:
        if self.fail_set:
            raise StorageError("quota exceeded")
        await super().set(key, value)

    async def remove(self, key: str) -> None:
        if self.fail_remove:
            raise StorageError("disk delete failed")
        await super().remove(key)


class RecordingObserver:
    """通知されたイベントを記録するオブザーバー"""

    def __init__(self) -> None:
        self.events: list[tuple] = []

    def on_saved(self, key: str, location: StoredLocation) -> None:
        self.events.append(("saved", key, location.place_id))

    def on_loaded(self, key: str, location: StoredLocation) -> None:
        self.events.append(("loaded", key, location.place_id))

    def on_missing(self, key: str) -> None:
        self.events.append(("missing", key))

    def on_cleared(self, key: str) -> None:
        self.events.append(("cleared", key))

    def on_error(self, operation: str, key: str, error: Exception) -> None:
        self.events.append(("error", operation, type(error).__name__))

    def names(self) -> list[str]:
        return [event[0] for event in self.events]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def failing_storage() -> FailingStorage:
    return FailingStorage()


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()
