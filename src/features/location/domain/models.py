"""ロケーション機能のドメインモデル"""
import json
import math
from dataclasses import dataclass
from typing import Any, Optional

from .geo import calculate_distance
from ....shared.exceptions.errors import SerializationError, ValidationError


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite_number(value: Any) -> bool:
    return _is_number(value) and math.isfinite(value)


@dataclass(frozen=True)
class LocationInput:
    """
    ユーザーが選択したロケーション（保存前、タイムスタンプなし）

    Raises:
        ValidationError: description または place_id が空の場合
    """

    description: str  # 表示用の地名
    place_id: str  # ジオコーディングプロバイダーのPlace ID
    latitude: Optional[float] = None  # 緯度
    longitude: Optional[float] = None  # 経度

    def __post_init__(self) -> None:
        if not isinstance(self.description, str) or not self.description.strip():
            raise ValidationError("description must be a non-empty string")
        if not isinstance(self.place_id, str) or not self.place_id.strip():
            raise ValidationError("place_id must be a non-empty string")
        for name in ("latitude", "longitude"):
            value = getattr(self, name)
            if value is not None and not _is_number(value):
                raise ValidationError(f"{name} must be a number")

    def stamp(self, timestamp: int) -> "StoredLocation":
        """保存時刻を付与してStoredLocationにする"""
        return StoredLocation(
            description=self.description,
            place_id=self.place_id,
            latitude=self.latitude,
            longitude=self.longitude,
            timestamp=timestamp,
        )


@dataclass(frozen=True)
class StoredLocation:
    """保存済みロケーション"""

    description: str
    place_id: str
    timestamp: int  # 保存時刻（エポックミリ秒）
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def has_coordinates(self) -> bool:
        """緯度・経度が両方そろっているか"""
        return self.latitude is not None and self.longitude is not None

    def distance_to(self, latitude: float, longitude: float) -> Optional[float]:
        """
        指定座標までの距離（km）

        Returns:
            Optional[float]: 距離（座標を持たない場合はNone）
        """
        if not self.has_coordinates:
            return None
        return calculate_distance(self.latitude, self.longitude, latitude, longitude)

    def to_storage_dict(self) -> dict[str, Any]:
        """保存用の辞書に変換（座標がない場合はキーを省略）"""
        data: dict[str, Any] = {
            "description": self.description,
            "placeId": self.place_id,
        }
        if self.latitude is not None:
            data["latitude"] = self.latitude
        if self.longitude is not None:
            data["longitude"] = self.longitude
        data["timestamp"] = self.timestamp
        return data

    @classmethod
    def from_storage_dict(cls, data: Any) -> "StoredLocation":
        """
        保存データからStoredLocationを生成

        Raises:
            SerializationError: 期待する形式でない場合
        """
        if not isinstance(data, dict):
            raise SerializationError("Stored location is not a JSON object")

        description = data.get("description")
        place_id = data.get("placeId")
        timestamp = data.get("timestamp")
        latitude = data.get("latitude")
        longitude = data.get("longitude")

        if not isinstance(description, str) or not isinstance(place_id, str):
            raise SerializationError("Stored location is missing description or placeId")
        if not _is_finite_number(timestamp):
            raise SerializationError("Stored location has no finite numeric timestamp")
        for name, value in (("latitude", latitude), ("longitude", longitude)):
            if value is not None and not _is_finite_number(value):
                raise SerializationError(f"Stored location has a non-finite {name}")

        return cls(
            description=description,
            place_id=place_id,
            timestamp=int(timestamp),
            latitude=latitude,
            longitude=longitude,
        )

    def to_json(self) -> str:
        """
        JSON文字列にシリアライズ

        Raises:
            SerializationError: NaN/Infinityなど、JSONで表現できない値を含む場合
        """
        try:
            return json.dumps(self.to_storage_dict(), allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize location: {e}") from e

    @classmethod
    def from_json(cls, raw: str) -> "StoredLocation":
        """
        JSON文字列からデシリアライズ

        Raises:
            SerializationError: JSONとして不正、または形式が異なる場合
        """
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Stored location is not valid JSON: {e}") from e
        return cls.from_storage_dict(data)
