"""In-memory application state shared by the services."""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from trail_kitchen.domain.foods import FoodItem
from trail_kitchen.domain.trips import Trip
from trail_kitchen.domain.units import METRIC

_logger = logging.getLogger(__name__)

TripsListener = Callable[[list[Trip]], None]
FoodItemsListener = Callable[[list[FoodItem]], None]


@dataclass
class AppStore:
    """Owns the current trip collection, food catalog and unit preference.

    Subscribers receive the full collection every time it changes.
    """

    unit_system: str = METRIC
    _trips: dict[str, Trip] = field(default_factory=dict)
    _food_items: dict[str, FoodItem] = field(default_factory=dict)
    _trip_listeners: list[TripsListener] = field(default_factory=list)
    _food_listeners: list[FoodItemsListener] = field(default_factory=list)

    def list_trips(self) -> list[Trip]:
        return list(self._trips.values())

    def get_trip(self, trip_id: str) -> Trip | None:
        return self._trips.get(trip_id)

    def replace_trips(self, trips: Iterable[Trip]) -> None:
        """Replace the whole trip snapshot."""
        self._trips = {trip.id: trip for trip in trips}
        self._notify_trips()

    def put_trip(self, trip: Trip) -> None:
        self._trips[trip.id] = trip
        self._notify_trips()

    def remove_trip(self, trip_id: str) -> Trip | None:
        removed = self._trips.pop(trip_id, None)
        if removed is not None:
            self._notify_trips()
        return removed

    def list_food_items(self) -> list[FoodItem]:
        return list(self._food_items.values())

    def get_food_item(self, food_item_id: str) -> FoodItem | None:
        return self._food_items.get(food_item_id)

    def replace_food_items(self, items: Iterable[FoodItem]) -> None:
        """Replace the whole food catalog snapshot."""
        self._food_items = {item.id: item for item in items}
        self._notify_food_items()

    def put_food_item(self, item: FoodItem) -> None:
        self._food_items[item.id] = item
        self._notify_food_items()

    def remove_food_item(self, food_item_id: str) -> FoodItem | None:
        removed = self._food_items.pop(food_item_id, None)
        if removed is not None:
            self._notify_food_items()
        return removed

    def subscribe_trips(self, listener: TripsListener) -> Callable[[], None]:
        """Register a trip listener and return a function that removes it."""
        self._trip_listeners.append(listener)
        listener(self.list_trips())
        return lambda: self._unsubscribe(self._trip_listeners, listener)

    def subscribe_food_items(self, listener: FoodItemsListener) -> Callable[[], None]:
        """Register a food catalog listener and return its unsubscribe function."""
        self._food_listeners.append(listener)
        listener(self.list_food_items())
        return lambda: self._unsubscribe(self._food_listeners, listener)

    def _notify_trips(self) -> None:
        trips = self.list_trips()
        for listener in list(self._trip_listeners):
            try:
                listener(trips)
            except Exception:
                _logger.exception("Trip listener failed")

    def _notify_food_items(self) -> None:
        items = self.list_food_items()
        for listener in list(self._food_listeners):
            try:
                listener(items)
            except Exception:
                _logger.exception("Food item listener failed")

    @staticmethod
    def _unsubscribe(listeners: list, listener: object) -> None:  # type: ignore[type-arg]
        if listener in listeners:
            listeners.remove(listener)
