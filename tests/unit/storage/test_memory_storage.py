"""InMemoryStorageのテスト"""

import pytest

from src.features.storage.clients.memory_storage import InMemoryStorage
from src.features.storage.domain.ports import KeyValueStorage


def test_implements_port() -> None:
    assert isinstance(InMemoryStorage(), KeyValueStorage)


@pytest.mark.asyncio
async def test_set_overwrites_and_remove_is_idempotent() -> None:
    storage = InMemoryStorage({"a": "1"})

    await storage.set("a", "2")
    assert await storage.get("a") == "2"

    await storage.remove("a")
    await storage.remove("a")
    assert storage.keys() == []


def test_initial_data_is_copied() -> None:
    initial = {"a": "1"}
    storage = InMemoryStorage(initial)
    initial["b"] = "2"

    assert storage.keys() == ["a"]
