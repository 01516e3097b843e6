"""カスタム例外定義"""


class ClientCacheError(Exception):
    """クライアントキャッシュ基底例外"""

    pass


class StorageError(ClientCacheError):
    """ストレージ関連のエラー"""

    pass


class SerializationError(ClientCacheError):
    """シリアライズ・デシリアライズのエラー"""

    pass


class ConfigurationError(ClientCacheError):
    """設定エラー"""

    pass


class ValidationError(ClientCacheError):
    """バリデーションエラー"""

    pass
