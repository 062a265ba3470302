"""Tests for the food catalog service."""

from datetime import date

import pytest

from trail_kitchen.domain.errors import ValidationError


@pytest.fixture
def catalog(container):
    service = container.food_service
    items = [
        ("Jetboil", "Oatmeal", 80, 300, ["breakfast"]),
        ("Mountain House", "Chili Mac", 150, 640, ["dinner", "lunch"]),
        ("Clif", "Builder Bar", 68, 280, ["snack"]),
        ("Nuun", "Electrolyte Tabs", 54, 60, ["drink"]),
    ]
    for brand, name, weight, calories, meal_types in items:
        result = service.create_food_item(
            brand=brand,
            name=name,
            pack_weight=weight,
            calories=calories,
            servings_per_pack=2,
            meal_types=meal_types,
        )
        assert result.ok
    return service


def test_search_matches_name_or_brand(catalog) -> None:
    assert [item.name for item in catalog.search("chili")] == ["Chili Mac"]
    assert [item.name for item in catalog.search("CLIF")] == ["Builder Bar"]


def test_search_filters_by_meal_type(catalog) -> None:
    assert [item.name for item in catalog.search(meal_type="lunch")] == ["Chili Mac"]


def test_search_sorts_by_field(catalog) -> None:
    by_weight = catalog.search(sort="weight", descending=True)
    by_name = catalog.search()

    assert [item.pack_weight for item in by_weight] == [150, 80, 68, 54]
    assert [item.name for item in by_name] == [
        "Builder Bar",
        "Chili Mac",
        "Electrolyte Tabs",
        "Oatmeal",
    ]


def test_search_rejects_unknown_sort(catalog) -> None:
    with pytest.raises(ValidationError):
        catalog.search(sort="protein")


def test_search_sorts_by_brand(catalog) -> None:
    by_brand = catalog.search(sort="brand")

    assert [item.brand for item in by_brand] == [
        "Clif",
        "Jetboil",
        "Mountain House",
        "Nuun",
    ]


def test_search_sorts_favorites_first_then_by_name(catalog) -> None:
    for query in ("oatmeal", "tabs"):
        catalog.toggle_favorite(catalog.search(query)[0].id)

    ordered = catalog.search(sort="favorite")

    assert [item.name for item in ordered] == [
        "Electrolyte Tabs",
        "Oatmeal",
        "Builder Bar",
        "Chili Mac",
    ]


def test_favorites_filter(catalog) -> None:
    oatmeal = catalog.search("oatmeal")[0]
    catalog.toggle_favorite(oatmeal.id)

    assert [item.id for item in catalog.search(favorites_only=True)] == [oatmeal.id]
    assert [item.id for item in catalog.list_favorites()] == [oatmeal.id]


def test_update_food_item_recomputes_servings(catalog, food_item_repository) -> None:
    bar = catalog.search("builder")[0]

    result = catalog.update_food_item(
        bar.id, {"calories": 290, "servings_per_pack": 4}
    )

    assert result is not None
    assert result.ok
    assert result.item.calories_per_serving == 73
    assert food_item_repository.items[bar.id] == result.item


def test_update_food_item_keeps_planned_meal_snapshot(container, catalog) -> None:
    bar = catalog.search("builder")[0]
    trip = container.trip_service.create_trip(
        name="Overnight",
        start_date=date(2024, 9, 1),
        end_date=date(2024, 9, 1),
    ).trip
    container.trip_service.add_meal(trip.id, trip.days[0].id, "snack", bar.id, 1)

    catalog.update_food_item(bar.id, {"name": "Builder Bar XL"})

    meal = container.trip_service.get_trip(trip.id).days[0].meals["snack"][0]
    assert meal.name == "Builder Bar"


def test_update_food_item_rejects_unknown_fields(catalog) -> None:
    bar = catalog.search("builder")[0]

    with pytest.raises(ValidationError):
        catalog.update_food_item(bar.id, {"is_favorite": True})


def test_update_missing_food_item_returns_none(catalog) -> None:
    assert catalog.update_food_item("food-missing", {"name": "x"}) is None


def test_create_failure_leaves_catalog_unchanged(
    container, food_item_repository
) -> None:
    food_item_repository.fail_all = True

    result = container.food_service.create_food_item(
        brand="",
        name="Tortillas",
        pack_weight=200,
        calories=600,
        servings_per_pack=6,
        meal_types=["lunch"],
    )

    assert not result.ok
    assert container.food_service.search() == []


def test_delete_food_item(catalog, food_item_repository) -> None:
    tabs = catalog.search("tabs")[0]

    outcome = catalog.delete_food_item(tabs.id)

    assert outcome is not None
    assert outcome.ok
    assert catalog.get_food_item(tabs.id) is None
    assert tabs.id not in food_item_repository.items
    assert catalog.delete_food_item(tabs.id) is None
