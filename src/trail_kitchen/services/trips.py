"""Trip planning service.

Mutations run in two phases: the new trip is staged into the local snapshot,
then written through the repository. A failed write puts the previous trip
back into the snapshot and is reported as a failed outcome.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol

from trail_kitchen.domain import trips as trip_rules
from trail_kitchen.domain.ids import IdFactory, new_id
from trail_kitchen.domain.results import PersistOutcome, TripResult
from trail_kitchen.domain.trips import Trip
from trail_kitchen.services.store import AppStore

_logger = logging.getLogger(__name__)


class TripRepository(Protocol):
    """Persistence interface for trip documents."""

    def list_trips(self) -> list[Trip]:
        """Return every stored trip."""

    def save_trip(self, trip: Trip) -> None:
        """Create or overwrite a trip document."""

    def delete_trip(self, trip_id: str) -> None:
        """Delete a trip document."""


@dataclass
class TripService:
    """Application service for trip and meal plan changes."""

    repository: TripRepository
    store: AppStore
    id_factory: IdFactory = new_id

    def sync(self) -> PersistOutcome:
        """Reload every trip from the repository into the snapshot."""
        try:
            trips = self.repository.list_trips()
        except Exception as exc:
            _logger.exception("Failed to load trips")
            return PersistOutcome(entity_id="trips", ok=False, error=str(exc))
        self.store.replace_trips(trips)
        return PersistOutcome(entity_id="trips", ok=True)

    def list_trips(self, status: str | None = None) -> list[Trip]:
        trips = self.store.list_trips()
        if status is None:
            return trips
        return [trip for trip in trips if trip.status == status]

    def get_trip(self, trip_id: str) -> Trip | None:
        return self.store.get_trip(trip_id)

    def create_trip(
        self,
        name: str,
        start_date: date,
        end_date: date,
        notes: str | None = None,
    ) -> TripResult:
        """Create an active trip with one empty day plan per day."""
        trip = trip_rules.create_trip(
            name=name,
            start_date=start_date,
            end_date=end_date,
            notes=notes,
            id_factory=self.id_factory,
        )
        return self._commit(trip)

    def update_trip(
        self,
        trip_id: str,
        *,
        name: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        notes: str | None = None,
    ) -> TripResult | None:
        """Edit name, dates or notes of a trip."""
        trip = self.store.get_trip(trip_id)
        if trip is None:
            return None
        updated = trip_rules.edit_trip(
            trip,
            name=name,
            start_date=start_date,
            end_date=end_date,
            notes=notes,
            id_factory=self.id_factory,
        )
        return self._commit(updated)

    def set_status(self, trip_id: str, status: str) -> TripResult | None:
        trip = self.store.get_trip(trip_id)
        if trip is None:
            return None
        return self._commit(trip_rules.with_status(trip, status))

    def toggle_status(self, trip_id: str) -> TripResult | None:
        """Flip a trip between active and completed."""
        trip = self.store.get_trip(trip_id)
        if trip is None:
            return None
        return self._commit(
            trip_rules.with_status(trip, trip_rules.toggled_status(trip))
        )

    def duplicate_trip(
        self,
        trip_id: str,
        *,
        start_date: date | None = None,
        end_date: date | None = None,
        name: str | None = None,
    ) -> TripResult | None:
        """Copy a trip with fresh ids onto a new or identical date range."""
        source = self.store.get_trip(trip_id)
        if source is None:
            return None
        copy = trip_rules.duplicate_trip(
            source,
            start_date=start_date,
            end_date=end_date,
            name=name,
            id_factory=self.id_factory,
        )
        return self._commit(copy)

    def delete_trip(self, trip_id: str) -> PersistOutcome | None:
        previous = self.store.remove_trip(trip_id)
        if previous is None:
            return None
        try:
            self.repository.delete_trip(trip_id)
        except Exception as exc:
            _logger.exception("Failed to delete trip %s", trip_id)
            self.store.put_trip(previous)
            return PersistOutcome(entity_id=trip_id, ok=False, error=str(exc))
        return PersistOutcome(entity_id=trip_id, ok=True)

    def add_meal(  # noqa: PLR0913
        self,
        trip_id: str,
        day_id: str,
        meal_type: str,
        food_item_id: str,
        servings: int,
    ) -> TripResult | None:
        """Append a meal built from a catalog food item to a day."""
        trip = self.store.get_trip(trip_id)
        food_item = self.store.get_food_item(food_item_id)
        if trip is None or food_item is None:
            return None
        if trip_rules.find_day(trip, day_id) is None:
            return None
        meal = trip_rules.build_meal(
            self.id_factory("meal"), meal_type, food_item, servings
        )
        return self._commit(
            trip_rules.with_meal_added(trip, day_id, meal_type, meal)
        )

    def update_meal(  # noqa: PLR0913
        self,
        trip_id: str,
        day_id: str,
        meal_type: str,
        meal_id: str,
        food_item_id: str,
        servings: int,
    ) -> TripResult | None:
        """Rebuild a meal from a food item and serving count, keeping its id."""
        trip = self.store.get_trip(trip_id)
        food_item = self.store.get_food_item(food_item_id)
        if trip is None or food_item is None:
            return None
        existing = trip_rules.find_meal(trip, day_id, meal_type, meal_id)
        if existing is None:
            return None
        rebuilt = trip_rules.build_meal(meal_id, meal_type, food_item, servings)
        meal = replace(rebuilt, is_favorite=existing.is_favorite)
        return self._commit(
            trip_rules.with_meal_replaced(trip, day_id, meal_type, meal_id, meal)
        )

    def remove_meal(
        self, trip_id: str, day_id: str, meal_type: str, meal_id: str
    ) -> TripResult | None:
        trip = self.store.get_trip(trip_id)
        if trip is None:
            return None
        if trip_rules.find_meal(trip, day_id, meal_type, meal_id) is None:
            return None
        return self._commit(
            trip_rules.with_meal_removed(trip, day_id, meal_type, meal_id)
        )

    def stage(self, trip: Trip) -> Trip | None:
        """Apply a trip to the local snapshot and return the one it replaced."""
        previous = self.store.get_trip(trip.id)
        self.store.put_trip(trip)
        return previous

    def persist(self, trip: Trip, previous: Trip | None) -> TripResult:
        """Write a staged trip, restoring ``previous`` locally if the write fails."""
        try:
            self.repository.save_trip(trip)
        except Exception as exc:
            _logger.exception("Failed to persist trip %s", trip.id)
            if previous is None:
                self.store.remove_trip(trip.id)
                restored = trip
            else:
                self.store.put_trip(previous)
                restored = previous
            return TripResult(
                trip=restored,
                outcome=PersistOutcome(entity_id=trip.id, ok=False, error=str(exc)),
            )
        return TripResult(trip=trip, outcome=PersistOutcome(entity_id=trip.id, ok=True))

    def _commit(self, trip: Trip) -> TripResult:
        previous = self.stage(trip)
        return self.persist(trip, previous)
