"""アプリケーション設定（Pydantic Settings）"""
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

StorageBackend = Literal["memory", "file", "firestore"]


class Settings(BaseSettings):
    """アプリケーション設定"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Project
    project_name: str = Field(
        default="helpkey-client-cache",
        description="プロジェクト名",
    )
    environment: str = Field(
        default="development",
        description="環境 (development, staging, production)",
    )

    # Storage
    storage_backend: StorageBackend = Field(
        default="file",
        description="キー・バリューストレージの種類 (memory, file, firestore)",
    )
    storage_file_path: str = Field(
        default=".helpkey/storage.json",
        description="ローカルJSONストレージのファイルパス",
    )
    storage_namespace: Optional[str] = Field(
        default=None,
        description="Firestoreドキュメントキーの接頭辞（端末ID・ユーザーIDなど）",
    )

    # GCP / Firestore
    gcp_project_id: Optional[str] = Field(
        default=None,
        description="GCPプロジェクトID（firestoreバックエンド時に必須）",
    )
    firestore_database_id: str = Field(
        default="(default)",
        description="FirestoreデータベースID",
    )
    firestore_emulator_host: Optional[str] = Field(
        default=None,
        description="Firestoreエミュレータのホスト（例: localhost:8080）。設定された場合はエミュレータに接続",
    )
    firestore_storage_collection: str = Field(
        default="client_storage",
        description="キー・バリューを保存するコレクション名",
    )

    # Location cache
    location_storage_key: str = Field(
        default="selected_location",
        description="選択中のロケーションを保存するキー",
    )
    location_recent_hours: int = Field(
        default=24,
        description="保存済みロケーションを最新とみなす時間（時間）",
    )

    # Hotel cache
    hotels_cache_key: str = Field(
        default="hotels_cache",
        description="ホテル一覧キャッシュのキー",
    )
    hotels_cache_ttl_minutes: int = Field(
        default=15,
        description="ホテル一覧キャッシュの有効期間（分）",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    gcp_logging_enabled: bool = Field(
        default=False,
        description="Cloud Loggingを有効にするか",
    )

    # HTTP server
    port: int = Field(
        default=8080,
        description="HTTPサーバーのポート番号",
    )

    @property
    def location_recent_ms(self) -> int:
        """ロケーションの鮮度しきい値（ミリ秒）"""
        return self.location_recent_hours * 60 * 60 * 1000

    @property
    def hotels_cache_ttl_ms(self) -> int:
        """ホテル一覧キャッシュの有効期間（ミリ秒）"""
        return self.hotels_cache_ttl_minutes * 60 * 1000

    @property
    def is_production(self) -> bool:
        """本番環境かどうか"""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """開発環境かどうか"""
        return self.environment.lower() == "development"
