"""地理計算ユーティリティのテスト"""

import pytest

from src.features.location.domain.geo import calculate_distance


def test_same_point_is_zero() -> None:
    assert calculate_distance(19.076, 72.8777, 19.076, 72.8777) == pytest.approx(0.0)


def test_distance_is_symmetric() -> None:
    a = calculate_distance(12.9716, 77.5946, 13.0827, 80.2707)
    b = calculate_distance(13.0827, 80.2707, 12.9716, 77.5946)

    assert a == pytest.approx(b)


@pytest.mark.parametrize(
    "lat1,lon1,lat2,lon2,expected_km",
    [
        # 赤道上の経度1度
        (0.0, 0.0, 0.0, 1.0, 111.19),
        # ムンバイ〜デリー
        (19.0760, 72.8777, 28.6139, 77.2090, 1148.0),
        # バンガロール〜チェンナイ
        (12.9716, 77.5946, 13.0827, 80.2707, 290.2),
    ],
)
def test_known_distances(lat1, lon1, lat2, lon2, expected_km) -> None:
    assert calculate_distance(lat1, lon1, lat2, lon2) == pytest.approx(expected_km, rel=0.01)
