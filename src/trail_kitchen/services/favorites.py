"""Propagation of catalog favorite flags into planned meals.

Meals hold copies of food items, so a favorite toggle on the catalog does not
reach them on its own. This module rewrites the copies explicitly.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from trail_kitchen.domain.results import PersistOutcome
from trail_kitchen.domain.trips import DayPlan, Meal, Trip
from trail_kitchen.services.trips import TripService

_logger = logging.getLogger(__name__)


def propagate_favorite(
    trips: Iterable[Trip], food_item_id: str, is_favorite: bool
) -> list[tuple[str, Trip]]:
    """Return ``(trip_id, updated_trip)`` for every trip whose meals changed.

    Trips where every matching meal already carries the flag are left out.
    """
    updates = []
    for trip in trips:
        touched = False
        days = []
        for day in trip.days:
            meals = {}
            for meal_type, group in day.meals.items():
                rewritten = []
                for meal in group:
                    updated = _with_favorite(meal, food_item_id, is_favorite)
                    touched = touched or updated is not meal
                    rewritten.append(updated)
                meals[meal_type] = tuple(rewritten)
            days.append(DayPlan(id=day.id, date=day.date, meals=meals))
        if touched:
            updates.append((trip.id, replace(trip, days=tuple(days))))
    return updates


def _with_favorite(meal: Meal, food_item_id: str, is_favorite: bool) -> Meal:
    if not any(item.id == food_item_id for item in meal.food_items):
        return meal
    food_items = tuple(
        replace(item, is_favorite=is_favorite) if item.id == food_item_id else item
        for item in meal.food_items
    )
    if meal.is_favorite == is_favorite and food_items == meal.food_items:
        return meal
    return replace(meal, is_favorite=is_favorite, food_items=food_items)


@dataclass
class FavoriteService:
    """Applies favorite fan-out to the trip snapshot and persists each trip."""

    trip_service: TripService

    def propagate(self, food_item_id: str, is_favorite: bool) -> list[PersistOutcome]:
        """Rewrite and persist every affected trip.

        Each trip is written on its own; a failed write is reported for that
        trip and the remaining trips are still processed.
        """
        updates = propagate_favorite(
            self.trip_service.store.list_trips(), food_item_id, is_favorite
        )
        outcomes = []
        for _trip_id, trip in updates:
            previous = self.trip_service.stage(trip)
            result = self.trip_service.persist(trip, previous)
            outcomes.append(result.outcome)
        failed = sum(1 for outcome in outcomes if not outcome.ok)
        _logger.info(
            "Favorite propagation: food_item=%s trips=%s failed=%s",
            food_item_id,
            len(outcomes),
            failed,
        )
        return outcomes
