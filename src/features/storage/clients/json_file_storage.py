"""ローカルJSONファイルストレージ"""
import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from ....shared.exceptions.errors import StorageError
from ....shared.logging.config import get_logger

logger = get_logger(__name__)


class JsonFileStorage:
    """
    1つのJSONファイルに全キーを保存する永続ストレージ

    ファイルの中身は {key: 文字列値} のオブジェクト。
    書き込みは一時ファイル経由で置き換えるため、途中で中断されても
    壊れたファイルは残らない。
    """

    def __init__(self, path: Union[str, Path]) -> None:
        """
        Args:
            path: JSONファイルのパス（存在しない場合は空として扱う）
        """
        self.path = Path(path)
        # 異なるキーへの同時書き込みで更新が失われないよう、読み書きを直列化
        self._lock = asyncio.Lock()

        logger.info(f"JsonFileStorage initialized: path={self.path}")

    async def get(self, key: str) -> Optional[str]:
        data = await asyncio.to_thread(self._read_all)
        return data.get(key)

    async def set(self, key: str, value: str) -> None:
        async with self._lock:
            data = await asyncio.to_thread(self._read_all)
            data[key] = value
            await asyncio.to_thread(self._write_all, data)
        logger.debug(f"Key written: {key}")

    async def remove(self, key: str) -> None:
        async with self._lock:
            data = await asyncio.to_thread(self._read_all)
            if key not in data:
                return
            del data[key]
            await asyncio.to_thread(self._write_all, data)
        logger.debug(f"Key removed: {key}")

    def _read_all(self) -> dict[str, str]:
        """
        ファイル全体を読み込む

        Returns:
            dict[str, str]: 保存済みデータ（ファイルが存在しない場合は空）

        Raises:
            StorageError: 読み込みに失敗した場合、またはJSONオブジェクトでない場合
        """
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to read {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(
                f"Storage file {self.path} does not contain a JSON object"
            )

        return data

    def _write_all(self, data: dict[str, str]) -> None:
        """
        ファイル全体を置き換える

        Raises:
            StorageError: 書き込みに失敗した場合
        """
        tmp_path: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)

            fd, tmp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)

            os.replace(tmp_path, self.path)
            tmp_path = None

        except OSError as e:
            raise StorageError(f"Failed to write {self.path}: {e}") from e
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
