"""Domain models for trips, day plans and meals.

Meals embed copies of the food items they were built from. Every mutation
helper here returns a new object and leaves its input untouched, so callers
can keep the previous snapshot around for rollback.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import date, timedelta

from trail_kitchen.domain.errors import ValidationError
from trail_kitchen.domain.foods import FoodItem
from trail_kitchen.domain.ids import IdFactory
from trail_kitchen.domain.meal_types import MEAL_TYPES, MealType, is_meal_type

ACTIVE = "active"
COMPLETED = "completed"
TRIP_STATUSES = (ACTIVE, COMPLETED)

_COPY_SUFFIX = re.compile(r"\s*\(Copy\)$")


@dataclass(frozen=True)
class Meal:
    """Snapshot of a food selection attached to a day and meal type."""

    id: str
    type: MealType
    name: str
    calories: int
    weight: int
    description: str
    food_items: tuple[FoodItem, ...]
    is_favorite: bool
    servings: int


@dataclass(frozen=True)
class DayPlan:
    """One calendar day of a trip with meals grouped by type."""

    id: str
    date: date
    meals: dict[str, tuple[Meal, ...]]

    def all_meals(self) -> list[Meal]:
        """Return every meal of the day in meal-type order."""
        return [meal for meal_type in MEAL_TYPES for meal in self.meals[meal_type]]


@dataclass(frozen=True)
class Trip:
    """A planned outing with one day plan per calendar day."""

    id: str
    name: str
    start_date: date
    end_date: date
    status: str
    days: tuple[DayPlan, ...]
    notes: str | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == COMPLETED


def days_between(start: date, end: date) -> int:
    """Return the whole-day difference between two dates."""
    return (end - start).days


def duration_days(start: date, end: date) -> int:
    """Return the inclusive number of days between two dates."""
    return days_between(start, end) + 1


def empty_meals() -> dict[str, tuple[Meal, ...]]:
    return {meal_type: () for meal_type in MEAL_TYPES}


def build_meal(
    meal_id: str, meal_type: str, food_item: FoodItem, servings: int
) -> Meal:
    """Build a meal snapshot from a catalog food item."""
    _require_meal_type(meal_type)
    if servings <= 0:
        raise ValidationError("servings must be positive")
    plural = "s" if servings > 1 else ""
    return Meal(
        id=meal_id,
        type=meal_type,  # type: ignore[arg-type]
        name=food_item.name,
        calories=food_item.calories * servings,
        weight=food_item.pack_weight * servings,
        description=f"{food_item.brand} - {servings} serving{plural}",
        food_items=(food_item,),
        is_favorite=food_item.is_favorite,
        servings=servings,
    )


def create_trip(
    *,
    name: str,
    start_date: date,
    end_date: date,
    notes: str | None,
    id_factory: IdFactory,
) -> Trip:
    """Validate input and create an active trip with empty day plans."""
    cleaned = _validate_trip_fields(name, start_date, end_date)
    return Trip(
        id=id_factory("trip"),
        name=cleaned,
        start_date=start_date,
        end_date=end_date,
        status=ACTIVE,
        days=_empty_days(start_date, end_date, id_factory),
        notes=notes or None,
    )


def duplicate_trip(
    source: Trip,
    *,
    start_date: date | None,
    end_date: date | None,
    id_factory: IdFactory,
    name: str | None = None,
) -> Trip:
    """Deep-copy a trip with fresh ids onto a possibly different date range.

    Source days are mapped positionally, wrapping around when the new range is
    longer than the source.
    """
    start = start_date or source.start_date
    end = end_date or source.end_date
    base_name = _COPY_SUFFIX.sub("", source.name)
    cleaned = _validate_trip_fields(name or f"{base_name} (Copy)", start, end)
    days = []
    for index in range(duration_days(start, end)):
        meals = empty_meals()
        if source.days:
            original = source.days[index % len(source.days)]
            meals = {
                meal_type: tuple(
                    replace(meal, id=id_factory("meal"))
                    for meal in original.meals.get(meal_type, ())
                )
                for meal_type in MEAL_TYPES
            }
        days.append(
            DayPlan(
                id=id_factory("day"),
                date=start + timedelta(days=index),
                meals=meals,
            )
        )
    return Trip(
        id=id_factory("trip"),
        name=cleaned,
        start_date=start,
        end_date=end,
        status=ACTIVE,
        days=tuple(days),
        notes=source.notes,
    )


def edit_trip(  # noqa: PLR0913
    trip: Trip,
    *,
    name: str | None,
    start_date: date | None,
    end_date: date | None,
    notes: str | None,
    id_factory: IdFactory,
) -> Trip:
    """Return a trip with new details, keeping day plans whose date survives."""
    start = start_date or trip.start_date
    end = end_date or trip.end_date
    cleaned = _validate_trip_fields(name if name is not None else trip.name, start, end)
    days = trip.days
    if (start, end) != (trip.start_date, trip.end_date):
        existing = {day.date: day for day in trip.days}
        days = tuple(
            existing.get(day_date)
            or DayPlan(id=id_factory("day"), date=day_date, meals=empty_meals())
            for day_date in _date_range(start, end)
        )
    return replace(
        trip,
        name=cleaned,
        start_date=start,
        end_date=end,
        notes=trip.notes if notes is None else (notes or None),
        days=days,
    )


def with_status(trip: Trip, status: str) -> Trip:
    if status not in TRIP_STATUSES:
        raise ValidationError(f"Unknown trip status: {status}")
    return replace(trip, status=status)


def toggled_status(trip: Trip) -> str:
    return ACTIVE if trip.is_completed else COMPLETED


def find_day(trip: Trip, day_id: str) -> DayPlan | None:
    for day in trip.days:
        if day.id == day_id:
            return day
    return None


def find_meal(trip: Trip, day_id: str, meal_type: str, meal_id: str) -> Meal | None:
    day = find_day(trip, day_id)
    if day is None:
        return None
    for meal in day.meals.get(meal_type, ()):
        if meal.id == meal_id:
            return meal
    return None


def with_meal_added(trip: Trip, day_id: str, meal_type: str, meal: Meal) -> Trip:
    """Append a meal to a day's meal-type group."""
    _require_meal_type(meal_type)
    return _map_day(
        trip,
        day_id,
        lambda day: _replace_group(day, meal_type, (*day.meals[meal_type], meal)),
    )


def with_meal_replaced(
    trip: Trip, day_id: str, meal_type: str, meal_id: str, meal: Meal
) -> Trip:
    """Swap the meal with ``meal_id`` for ``meal`` in place."""
    _require_meal_type(meal_type)
    return _map_day(
        trip,
        day_id,
        lambda day: _replace_group(
            day,
            meal_type,
            tuple(
                meal if item.id == meal_id else item
                for item in day.meals[meal_type]
            ),
        ),
    )


def with_meal_removed(trip: Trip, day_id: str, meal_type: str, meal_id: str) -> Trip:
    _require_meal_type(meal_type)
    return _map_day(
        trip,
        day_id,
        lambda day: _replace_group(
            day,
            meal_type,
            tuple(item for item in day.meals[meal_type] if item.id != meal_id),
        ),
    )


def _map_day(
    trip: Trip, day_id: str, update: Callable[[DayPlan], DayPlan]
) -> Trip:
    return replace(
        trip,
        days=tuple(update(day) if day.id == day_id else day for day in trip.days),
    )


def _replace_group(day: DayPlan, meal_type: str, meals: tuple[Meal, ...]) -> DayPlan:
    return replace(day, meals={**day.meals, meal_type: meals})


def _empty_days(start: date, end: date, id_factory: IdFactory) -> tuple[DayPlan, ...]:
    return tuple(
        DayPlan(id=id_factory("day"), date=day_date, meals=empty_meals())
        for day_date in _date_range(start, end)
    )


def _date_range(start: date, end: date) -> list[date]:
    return [
        start + timedelta(days=offset)
        for offset in range(duration_days(start, end))
    ]


def _validate_trip_fields(name: str, start: date, end: date) -> str:
    cleaned = name.strip()
    if not cleaned:
        raise ValidationError("Trip name must not be empty")
    if end < start:
        raise ValidationError("Trip end date must not be before its start date")
    return cleaned


def _require_meal_type(meal_type: str) -> None:
    if not is_meal_type(meal_type):
        raise ValidationError(f"Unknown meal type: {meal_type}")
