"""Tests for stored document conversion."""

from tests.conftest import SequentialIds, make_food_item, make_trip
from trail_kitchen.adapters.documents import (
    food_item_from_document,
    trip_from_document,
    trip_to_document,
)
from trail_kitchen.domain.meal_types import MEAL_TYPES
from trail_kitchen.domain.trips import build_meal, with_meal_added


def test_trip_document_uses_camel_case_and_all_meal_types() -> None:
    ids = SequentialIds()
    trip = make_trip(ids=ids)
    meal = build_meal(ids("meal"), "lunch", make_food_item(), servings=2)
    trip = with_meal_added(trip, trip.days[0].id, "lunch", meal)

    document = trip_to_document(trip)

    assert document["startDate"] == "2024-07-01"
    assert list(document["days"][0]["meals"]) == list(MEAL_TYPES)
    stored_meal = document["days"][0]["meals"]["lunch"][0]
    assert stored_meal["foodItems"][0]["packWeight"] == 150
    assert trip_from_document(document) == trip


def test_trip_from_document_fills_missing_groups() -> None:
    document = {
        "id": "trip-9",
        "name": "Legacy",
        "startDate": "2023-05-01T00:00:00.000Z",
        "endDate": "2023-05-01",
        "status": "completed",
        "days": [{"id": "day-1", "date": "2023-05-01", "meals": {"dinner": []}}],
    }

    trip = trip_from_document(document)

    assert trip.is_completed
    assert set(trip.days[0].meals) == set(MEAL_TYPES)
    assert trip.notes is None


def test_food_item_from_document_defaults() -> None:
    item = food_item_from_document({"id": "food-7", "name": "Ramen"})

    assert item.meal_types == ()
    assert not item.is_favorite
