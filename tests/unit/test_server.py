"""HTTPサーバーのテスト"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from src.features.hotels.domain.models import Hotel
from src.features.location.services.location_cache import SELECTED_LOCATION_KEY
from src.features.storage.clients.memory_storage import InMemoryStorage
from src.infrastructure.config.settings import Settings
from src.server import create_app


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def app(storage):
    return create_app(Settings(storage_backend="memory"), storage=storage)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "healthy"}


def test_location_lifecycle(client) -> None:
    assert client.get("/location").status_code == 404

    response = client.put(
        "/location",
        json={"description": "Varanasi, India", "placeId": "p-vns", "latitude": 25.3176, "longitude": 82.9739},
    )
    assert response.status_code == 200
    assert response.json() == {"status": "saved", "placeId": "p-vns"}

    body = client.get("/location").json()
    assert body["location"]["description"] == "Varanasi, India"
    assert body["location"]["latitude"] == 25.3176
    assert body["is_recent"] is True
    assert body["age_ms"] >= 0

    assert client.delete("/location").json() == {"status": "cleared"}
    assert client.get("/location").status_code == 404


def test_put_accepts_snake_case_place_id(client) -> None:
    response = client.put("/location", json={"description": "Ooty", "place_id": "p-ooty"})

    assert response.status_code == 200


@pytest.mark.parametrize(
    "payload",
    [
        {"description": "", "placeId": "p"},
        {"description": "Goa"},
        {"description": "   ", "placeId": "p"},
    ],
)
def test_put_rejects_invalid_payload(client, payload) -> None:
    assert client.put("/location", json=payload).status_code == 422


def test_corrupted_location_returns_500(client, storage) -> None:
    storage._data[SELECTED_LOCATION_KEY] = "not json"

    response = client.get("/location")

    assert response.status_code == 500
    assert "corrupted" in response.json()["detail"]


def test_hotel_cache_endpoints(app, client) -> None:
    assert client.get("/hotels/cache").json() == {"valid": False, "hotels": []}

    asyncio.run(app.state.container.hotel_cache.save_hotels([Hotel(id="h1", name="Palace")]))

    body = client.get("/hotels/cache").json()
    assert body["valid"] is True
    assert body["hotels"][0]["name"] == "Palace"

    assert client.delete("/hotels/cache").json() == {"status": "cleared"}
    assert client.get("/hotels/cache").json()["valid"] is False


def test_non_finite_coordinate_is_reported_as_corrupted(client, storage) -> None:
    storage._data[SELECTED_LOCATION_KEY] = (
        '{"description": "Goa", "placeId": "p", "latitude": NaN, "longitude": 74.1, "timestamp": 1}'
    )

    response = client.get("/location")

    assert response.status_code == 500
    assert "corrupted" in response.json()["detail"]
