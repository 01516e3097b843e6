"""create_storageのテスト"""

import pytest

from src.features.storage.clients.json_file_storage import JsonFileStorage
from src.features.storage.clients.memory_storage import InMemoryStorage
from src.features.storage.factory import create_storage
from src.infrastructure.config.settings import Settings
from src.shared.exceptions.errors import ConfigurationError


def test_memory_backend() -> None:
    storage = create_storage(Settings(storage_backend="memory"))

    assert isinstance(storage, InMemoryStorage)


def test_file_backend_uses_configured_path(tmp_path) -> None:
    path = tmp_path / "storage.json"

    storage = create_storage(Settings(storage_backend="file", storage_file_path=str(path)))

    assert isinstance(storage, JsonFileStorage)
    assert storage.path == path


def test_firestore_backend_requires_project_id() -> None:
    with pytest.raises(ConfigurationError):
        create_storage(Settings(storage_backend="firestore", gcp_project_id=None))


def test_unknown_backend_raises_configuration_error() -> None:
    settings = Settings.model_construct(storage_backend="redis")

    with pytest.raises(ConfigurationError):
        create_storage(settings)
