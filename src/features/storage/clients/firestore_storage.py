"""Firestoreキー・バリューストレージ"""
import os
from typing import Any, Optional

from google.cloud import firestore

from ....shared.exceptions.errors import StorageError
from ....shared.logging.config import get_logger

logger = get_logger(__name__)


class FirestoreStorage:
    """
    Firestoreをキー・バリューストレージとして使うクライアント

    1キー = 1ドキュメント。ドキュメントIDはキー（namespace指定時は
    "{namespace}:{key}"）、値は "value" フィールドに文字列で保存する。
    """

    VALUE_FIELD = "value"

    def __init__(
        self,
        project_id: Optional[str] = None,
        database_id: str = "(default)",
        collection: str = "client_storage",
        namespace: Optional[str] = None,
        client: Optional[Any] = None,
    ) -> None:
        """
        Firestoreクライアントを初期化

        Args:
            project_id: GCPプロジェクトID
            database_id: データベースID（デフォルトは"(default)"）
            collection: 保存先コレクション名
            namespace: ドキュメントIDの接頭辞
            client: 既存のAsyncClient（テスト用に差し替え可能）

        Raises:
            StorageError: クライアントの初期化に失敗した場合
        """
        self.project_id = project_id
        self.database_id = database_id
        self.collection = collection
        self.namespace = namespace

        if client is not None:
            self.client = client
            return

        # エミュレータモードの検出
        emulator_host = os.environ.get("FIRESTORE_EMULATOR_HOST")

        try:
            self.client = firestore.AsyncClient(project=project_id, database=database_id)

            if emulator_host:
                logger.info(
                    f"Firestore storage initialized (EMULATOR MODE): "
                    f"host={emulator_host}, project={project_id}, collection={collection}"
                )
            else:
                logger.info(
                    f"Firestore storage initialized: project={project_id}, "
                    f"database={database_id}, collection={collection}"
                )
        except Exception as e:
            raise StorageError(f"Failed to initialize Firestore client: {e}") from e

    def document_id(self, key: str) -> str:
        """キーからドキュメントIDを生成"""
        if self.namespace:
            return f"{self.namespace}:{key}"
        return key

    def _document(self, key: str) -> Any:
        return self.client.collection(self.collection).document(self.document_id(key))

    async def get(self, key: str) -> Optional[str]:
        try:
            doc = await self._document(key).get()
        except Exception as e:
            raise StorageError(f"Failed to get {key} from {self.collection}: {e}") from e

        if not doc.exists:
            return None

        value = (doc.to_dict() or {}).get(self.VALUE_FIELD)
        if value is not None and not isinstance(value, str):
            raise StorageError(
                f"Document {self.document_id(key)} has a non-string value field"
            )
        return value

    async def set(self, key: str, value: str) -> None:
        try:
            await self._document(key).set(
                {
                    self.VALUE_FIELD: value,
                    "updated_at": firestore.SERVER_TIMESTAMP,
                }
            )
        except Exception as e:
            raise StorageError(f"Failed to set {key} in {self.collection}: {e}") from e

        logger.debug(f"Document {self.document_id(key)} written to {self.collection}")

    async def remove(self, key: str) -> None:
        # Firestoreは存在しないドキュメントの削除でもエラーにならない
        try:
            await self._document(key).delete()
        except Exception as e:
            raise StorageError(
                f"Failed to delete {key} from {self.collection}: {e}"
            ) from e

        logger.debug(f"Document {self.document_id(key)} deleted from {self.collection}")
