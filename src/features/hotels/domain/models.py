"""ホテル一覧キャッシュのドメインモデル"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ....shared.exceptions.errors import SerializationError

# 型付きフィールドとAPIキーの対応（id / name 以外は任意項目）
_OPTIONAL_KEYS = {
    "location": "location",
    "address": "address",
    "city": "city",
    "price": "price",
    "original_price": "originalPrice",
    "rating": "rating",
    "stars": "stars",
    "images": "images",
    "amenities": "amenities",
    "latitude": "latitude",
    "longitude": "longitude",
}


@dataclass
class Hotel:
    """
    ホテル一覧画面で使うホテル情報

    APIレスポンスのうち一覧表示に必要な項目のみを型付きで保持し、
    残りの項目（rooms, policiesなど）は extra_fields にそのまま保持する。
    任意項目はAPIに存在した場合のみ出力するため、キャッシュの
    読み書きで内容は変わらない。
    """

    # ID
    id: str

    # 基本情報
    name: str  # ホテル名
    location: Optional[str] = None  # エリア名
    address: Optional[str] = None  # 住所
    city: Optional[str] = None  # 都市

    # 料金・評価
    price: Optional[float] = None  # 料金
    original_price: Optional[float] = None  # 割引前料金
    rating: Optional[float] = None  # 評価
    stars: Optional[int] = None  # 星の数

    images: Optional[list[str]] = None
    amenities: Optional[list[str]] = None

    # 位置情報
    latitude: Optional[float] = None  # 緯度
    longitude: Optional[float] = None  # 経度

    # その他のAPI項目（JSON格納）
    extra_fields: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """キャッシュ保存用の辞書に変換（APIと同じcamelCase、未設定の項目は省略）"""
        data = dict(self.extra_fields)
        data["id"] = self.id
        data["name"] = self.name
        for attr, key in _OPTIONAL_KEYS.items():
            value = getattr(self, attr)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "Hotel":
        """
        辞書からホテルオブジェクトを生成

        Raises:
            SerializationError: id / name が欠けている場合
        """
        if not isinstance(data, dict):
            raise SerializationError("Hotel entry is not a JSON object")

        try:
            hotel_id = data["id"]
            name = data["name"]
        except KeyError as e:
            raise SerializationError(f"Hotel entry is missing {e}") from e

        typed_keys = set(_OPTIONAL_KEYS.values())

        # 明示的なnullは型付きフィールドにせず、そのままextra_fieldsに残す
        extra_fields = {
            k: v
            for k, v in data.items()
            if k not in ("id", "name") and (k not in typed_keys or v is None)
        }

        return cls(
            id=hotel_id,
            name=name,
            extra_fields=extra_fields,
            **{attr: data.get(key) for attr, key in _OPTIONAL_KEYS.items()},
        )
