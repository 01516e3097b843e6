"""設定に応じたストレージの生成"""
import os

from ...infrastructure.config.settings import Settings
from ...shared.exceptions.errors import ConfigurationError
from ...shared.logging.config import get_logger
from .clients.json_file_storage import JsonFileStorage
from .clients.memory_storage import InMemoryStorage
from .domain.ports import KeyValueStorage

logger = get_logger(__name__)


def create_storage(settings: Settings) -> KeyValueStorage:
    """
    設定されたバックエンドのストレージを生成

    Args:
        settings: アプリケーション設定

    Returns:
        KeyValueStorage: ストレージ実装

    Raises:
        ConfigurationError: バックエンドが不明、または必要な設定が欠けている場合
    """
    backend = settings.storage_backend
    logger.info(f"Creating storage backend: {backend}")

    if backend == "memory":
        return InMemoryStorage()

    if backend == "file":
        return JsonFileStorage(settings.storage_file_path)

    if backend == "firestore":
        if not settings.gcp_project_id:
            raise ConfigurationError("gcp_project_id is required for the firestore backend")

        # Firestoreエミュレータの設定を環境変数に反映
        if settings.firestore_emulator_host:
            os.environ["FIRESTORE_EMULATOR_HOST"] = settings.firestore_emulator_host

        from .clients.firestore_storage import FirestoreStorage

        return FirestoreStorage(
            project_id=settings.gcp_project_id,
            database_id=settings.firestore_database_id,
            collection=settings.firestore_storage_collection,
            namespace=settings.storage_namespace,
        )

    raise ConfigurationError(f"Unknown storage backend: {backend}")
