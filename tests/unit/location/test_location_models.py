"""ロケーションのドメインモデルのテスト"""

import pytest

from src.features.location.domain.models import LocationInput, StoredLocation
from src.shared.exceptions.errors import SerializationError, ValidationError


@pytest.mark.parametrize(
    "description,place_id",
    [
        ("", "p1"),
        ("   ", "p1"),
        ("Goa", ""),
        (None, "p1"),
    ],
)
def test_location_input_rejects_empty_fields(description, place_id) -> None:
    """description / place_id が空の場合はValidationError"""
    with pytest.raises(ValidationError):
        LocationInput(description=description, place_id=place_id)


def test_location_input_rejects_non_numeric_coordinates() -> None:
    with pytest.raises(ValidationError):
        LocationInput(description="Goa", place_id="p1", latitude="15.2")


def test_partial_coordinates_are_allowed() -> None:
    """片方だけの座標は拒否しないが、座標ありとはみなさない"""
    location = LocationInput(description="Goa", place_id="p1", latitude=15.3).stamp(1)

    assert location.latitude == 15.3
    assert not location.has_coordinates
    assert location.distance_to(15.3, 74.0) is None


def test_json_round_trip() -> None:
    """シリアライズ→デシリアライズで元の値に戻ること"""
    location = StoredLocation(
        description="Mumbai, Maharashtra, India",
        place_id="ChIJwe1EZjDG5zsRaYxkjY_tpF0",
        timestamp=1_700_000_000_123,
        latitude=19.0760,
        longitude=72.8777,
    )

    assert StoredLocation.from_json(location.to_json()) == location


def test_reads_record_written_by_mobile_app() -> None:
    """モバイルアプリが保存した形式（camelCase）を読み込めること"""
    raw = '{"description":"Delhi, India","placeId":"abc","latitude":28.6,"longitude":77.2,"timestamp":1700000000000}'

    location = StoredLocation.from_json(raw)

    assert location.place_id == "abc"
    assert location.timestamp == 1_700_000_000_000
    assert location.to_storage_dict()["placeId"] == "abc"


def test_float_timestamp_is_truncated_to_int() -> None:
    location = StoredLocation.from_storage_dict(
        {"description": "Pune", "placeId": "p", "timestamp": 1700000000000.0}
    )

    assert location.timestamp == 1_700_000_000_000
    assert isinstance(location.timestamp, int)


@pytest.mark.parametrize(
    "data",
    [
        "string",
        {"placeId": "p", "timestamp": 1},
        {"description": "Pune", "timestamp": 1},
        {"description": "Pune", "placeId": "p"},
        {"description": "Pune", "placeId": "p", "timestamp": True},
        {"description": "Pune", "placeId": "p", "timestamp": 1, "longitude": [73.8]},
        {"description": "Pune", "placeId": "p", "timestamp": float("inf")},
        {"description": "Pune", "placeId": "p", "timestamp": 1, "latitude": float("nan"), "longitude": 73.8},
    ],
)
def test_from_storage_dict_rejects_invalid_shape(data) -> None:
    with pytest.raises(SerializationError):
        StoredLocation.from_storage_dict(data)


def test_to_json_rejects_infinite_coordinates() -> None:
    location = StoredLocation(description="x", place_id="p", timestamp=1, latitude=float("inf"), longitude=0.0)

    with pytest.raises(SerializationError):
        location.to_json()


def test_distance_to() -> None:
    """座標がある場合は距離（km）を返すこと"""
    delhi = StoredLocation(description="Delhi", place_id="p", timestamp=1, latitude=28.6139, longitude=77.2090)

    # デリー〜ジャイプール間は約240km
    assert delhi.distance_to(26.9124, 75.7873) == pytest.approx(234, abs=10)
