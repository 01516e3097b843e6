"""キー・バリューストレージのポート定義"""
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class KeyValueStorage(Protocol):
    """
    永続キー・バリューストレージ

    値は常に文字列（JSONシリアライズ済み）として扱う。
    I/Oに失敗した場合、実装は StorageError を送出する。
    """

    async def get(self, key: str) -> Optional[str]:
        """キーの値を取得（存在しない場合はNone）"""
        ...

    async def set(self, key: str, value: str) -> None:
        """キーに値を書き込む（既存の値は上書き）"""
        ...

    async def remove(self, key: str) -> None:
        """キーを削除（存在しなくてもエラーにしない）"""
        ...
