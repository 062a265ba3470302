"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from tests.conftest import API_HEADERS
from trail_kitchen.api.app import create_app


def _client(container) -> TestClient:
    return TestClient(create_app(container))


def _create_food(client: TestClient, **overrides) -> dict:
    payload = {
        "brand": "Mountain House",
        "name": "Chili Mac",
        "pack_weight": 150,
        "calories": 620,
        "servings_per_pack": 2,
        "meal_types": ["dinner"],
        **overrides,
    }
    response = client.post("/foods", json=payload, headers=API_HEADERS)
    assert response.status_code == 201
    return response.json()


def _create_trip(client: TestClient, name: str = "Teton Crest") -> dict:
    response = client.post(
        "/trips",
        json={"name": name, "start_date": "2024-08-01", "end_date": "2024-08-03"},
        headers=API_HEADERS,
    )
    assert response.status_code == 201
    return response.json()


def test_health_endpoint(container) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_requires_api_token(container) -> None:
    client = _client(container)

    assert client.get("/trips").status_code == 401
    assert client.get("/trips", headers={"X-Api-Token": "wrong"}).status_code == 401


def test_trip_crud(container) -> None:
    client = _client(container)
    trip = _create_trip(client)

    listed = client.get("/trips", headers=API_HEADERS).json()
    renamed = client.patch(
        f"/trips/{trip['id']}", json={"name": "Teton Loop"}, headers=API_HEADERS
    )
    deleted = client.delete(f"/trips/{trip['id']}", headers=API_HEADERS)
    missing = client.get(f"/trips/{trip['id']}", headers=API_HEADERS)

    assert [item["id"] for item in listed["trips"]] == [trip["id"]]
    assert len(trip["days"]) == 3
    assert renamed.json()["name"] == "Teton Loop"
    assert deleted.json() == {"status": "deleted"}
    assert missing.status_code == 404


def test_invalid_date_range_is_unprocessable(container) -> None:
    response = _client(container).post(
        "/trips",
        json={
            "name": "Backwards",
            "start_date": "2024-08-03",
            "end_date": "2024-08-01",
        },
        headers=API_HEADERS,
    )

    assert response.status_code == 422
    assert "end date" in response.json()["detail"]


def test_meal_planning_and_stats(container) -> None:
    client = _client(container)
    food = _create_food(client)
    trip = _create_trip(client)
    day_id = trip["days"][0]["id"]

    added = client.post(
        f"/trips/{trip['id']}/days/{day_id}/meals/dinner",
        json={"food_item_id": food["id"], "servings": 2},
        headers=API_HEADERS,
    )
    stats = client.get(f"/trips/{trip['id']}/stats", headers=API_HEADERS).json()

    assert added.status_code == 201
    meal = added.json()["days"][0]["meals"]["dinner"][0]
    assert meal["calories"] == 1240
    assert meal["description"] == "Mountain House - 2 servings"
    assert stats["total_calories"] == 1240
    assert stats["avg_daily_calories"] == 413


def test_meal_for_missing_food_is_not_found(container) -> None:
    client = _client(container)
    trip = _create_trip(client)
    day_id = trip["days"][0]["id"]

    response = client.post(
        f"/trips/{trip['id']}/days/{day_id}/meals/dinner",
        json={"food_item_id": "food-missing"},
        headers=API_HEADERS,
    )

    assert response.status_code == 404


def test_favorite_toggle_reports_trip_writes(container) -> None:
    client = _client(container)
    food = _create_food(client)
    trip = _create_trip(client)
    day_id = trip["days"][0]["id"]
    client.post(
        f"/trips/{trip['id']}/days/{day_id}/meals/dinner",
        json={"food_item_id": food["id"]},
        headers=API_HEADERS,
    )

    response = client.post(f"/foods/{food['id']}/favorite", headers=API_HEADERS)

    body = response.json()
    assert response.status_code == 200
    assert body["food_item"]["isFavorite"] is True
    assert body["trips"] == [{"id": trip["id"], "ok": True, "error": None}]


def test_food_search_endpoint(container) -> None:
    client = _client(container)
    _create_food(client)
    _create_food(client, name="Oatmeal", brand="Jetboil", meal_types=["breakfast"])

    response = client.get(
        "/foods", params={"meal_type": "breakfast"}, headers=API_HEADERS
    )

    assert [item["name"] for item in response.json()["food_items"]] == ["Oatmeal"]


def test_failed_persistence_is_bad_gateway(container, trip_repository) -> None:
    trip_repository.fail_all = True

    response = _client(container).post(
        "/trips",
        json={"name": "Offline", "start_date": "2024-08-01", "end_date": "2024-08-01"},
        headers=API_HEADERS,
    )

    assert response.status_code == 502


def test_status_toggle_and_analytics(container) -> None:
    client = _client(container)
    empty = client.get("/analytics", headers=API_HEADERS).json()
    trip = _create_trip(client)

    toggled = client.post(
        f"/trips/{trip['id']}/status", json={}, headers=API_HEADERS
    ).json()
    analytics = client.get("/analytics", headers=API_HEADERS).json()

    assert empty == {"has_data": False}
    assert toggled["status"] == "completed"
    assert analytics["has_data"] is True
    assert analytics["trip_count"] == 1
    assert analytics["avg_duration_display"] == "3.0"


def test_unit_settings_and_export(container) -> None:
    client = _client(container)
    trip = _create_trip(client)

    toggled = client.post("/settings/units/toggle", headers=API_HEADERS).json()
    export = client.get(f"/trips/{trip['id']}/export", headers=API_HEADERS)
    rejected = client.put(
        "/settings/units", json={"unit_system": "cubits"}, headers=API_HEADERS
    )

    assert toggled == {"unit_system": "imperial"}
    assert export.status_code == 200
    assert export.headers["content-type"].startswith("text/html")
    assert "Teton Crest" in export.text
    assert rejected.status_code == 422


def test_average_duration_display_rounds_half_up(container) -> None:
    client = _client(container)
    for index, end_day in enumerate(("02", "02", "02", "03")):
        response = client.post(
            "/trips",
            json={
                "name": f"Loop {index}",
                "start_date": "2024-08-01",
                "end_date": f"2024-08-{end_day}",
            },
            headers=API_HEADERS,
        )
        client.post(
            f"/trips/{response.json()['id']}/status",
            json={"status": "completed"},
            headers=API_HEADERS,
        )

    analytics = client.get("/analytics", headers=API_HEADERS).json()

    assert analytics["total_days"] == 9
    assert analytics["avg_duration"] == 2.25
    assert analytics["avg_duration_display"] == "2.3"
