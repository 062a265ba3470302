"""Conversion between domain objects and stored documents.

Documents use the camelCase field names of the stored collections.
"""

from datetime import date

from trail_kitchen.domain.foods import FoodItem
from trail_kitchen.domain.meal_types import MEAL_TYPES
from trail_kitchen.domain.trips import ACTIVE, DayPlan, Meal, Trip


def food_item_to_document(item: FoodItem) -> dict[str, object]:
    return {
        "id": item.id,
        "brand": item.brand,
        "name": item.name,
        "packWeight": item.pack_weight,
        "calories": item.calories,
        "servingsPerPack": item.servings_per_pack,
        "caloriesPerServing": item.calories_per_serving,
        "mealTypes": list(item.meal_types),
        "isFavorite": item.is_favorite,
        "isCustom": item.is_custom,
    }


def food_item_from_document(doc: dict[str, object]) -> FoodItem:
    """Parse a stored food item; derived fields are taken as stored."""
    return FoodItem(
        id=str(doc["id"]),
        brand=str(doc.get("brand") or ""),
        name=str(doc.get("name") or ""),
        pack_weight=int(doc.get("packWeight", 0)),
        calories=int(doc.get("calories", 0)),
        servings_per_pack=int(doc.get("servingsPerPack", 1)),
        calories_per_serving=int(doc.get("caloriesPerServing", 0)),
        meal_types=tuple(doc.get("mealTypes") or ()),
        is_favorite=bool(doc.get("isFavorite", False)),
        is_custom=bool(doc.get("isCustom", False)),
    )


def meal_to_document(meal: Meal) -> dict[str, object]:
    return {
        "id": meal.id,
        "type": meal.type,
        "name": meal.name,
        "calories": meal.calories,
        "weight": meal.weight,
        "description": meal.description,
        "foodItems": [food_item_to_document(item) for item in meal.food_items],
        "isFavorite": meal.is_favorite,
        "servings": meal.servings,
    }


def meal_from_document(doc: dict[str, object], meal_type: str) -> Meal:
    return Meal(
        id=str(doc["id"]),
        type=str(doc.get("type") or meal_type),
        name=str(doc.get("name") or ""),
        calories=int(doc.get("calories", 0)),
        weight=int(doc.get("weight", 0)),
        description=str(doc.get("description") or ""),
        food_items=tuple(
            food_item_from_document(item) for item in doc.get("foodItems") or []
        ),
        is_favorite=bool(doc.get("isFavorite", False)),
        servings=int(doc.get("servings", 1)),
    )


def trip_to_document(trip: Trip) -> dict[str, object]:
    return {
        "id": trip.id,
        "name": trip.name,
        "startDate": trip.start_date.isoformat(),
        "endDate": trip.end_date.isoformat(),
        "notes": trip.notes,
        "status": trip.status,
        "days": [
            {
                "id": day.id,
                "date": day.date.isoformat(),
                "meals": {
                    meal_type: [meal_to_document(meal) for meal in day.meals[meal_type]]
                    for meal_type in MEAL_TYPES
                },
            }
            for day in trip.days
        ],
    }


def trip_from_document(doc: dict[str, object]) -> Trip:
    """Parse a stored trip, filling in any missing meal-type groups."""
    days = []
    for day in doc.get("days") or []:
        meals = day.get("meals") or {}
        days.append(
            DayPlan(
                id=str(day["id"]),
                date=date.fromisoformat(str(day["date"])[:10]),
                meals={
                    meal_type: tuple(
                        meal_from_document(meal, meal_type)
                        for meal in meals.get(meal_type) or []
                    )
                    for meal_type in MEAL_TYPES
                },
            )
        )
    return Trip(
        id=str(doc["id"]),
        name=str(doc.get("name") or ""),
        start_date=date.fromisoformat(str(doc["startDate"])[:10]),
        end_date=date.fromisoformat(str(doc["endDate"])[:10]),
        status=str(doc.get("status") or ACTIVE),
        days=tuple(days),
        notes=doc.get("notes") or None,
    )
