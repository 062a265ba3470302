"""Services for managing the food catalog."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Protocol

from trail_kitchen.domain.errors import ValidationError
from trail_kitchen.domain.foods import FoodItem, create_food_item
from trail_kitchen.domain.ids import IdFactory, new_id
from trail_kitchen.domain.results import (
    FavoriteToggleResult,
    FoodItemResult,
    PersistOutcome,
)
from trail_kitchen.services.favorites import FavoriteService
from trail_kitchen.services.store import AppStore

_logger = logging.getLogger(__name__)

_SORT_KEYS: dict[str, Callable[[FoodItem], object]] = {
    "name": lambda item: item.name.casefold(),
    "brand": lambda item: item.brand.casefold(),
    "favorite": lambda item: (not item.is_favorite, item.name.casefold()),
    "weight": lambda item: item.pack_weight,
    "calories_per_serving": lambda item: item.calories_per_serving,
}
SORT_FIELDS = tuple(_SORT_KEYS)
_EDITABLE_FIELDS = (
    "brand",
    "name",
    "pack_weight",
    "calories",
    "servings_per_pack",
    "meal_types",
)


class FoodItemRepository(Protocol):
    """Persistence interface for the food catalog."""

    def list_food_items(self) -> list[FoodItem]:
        """Return every catalog entry."""

    def save_food_item(self, item: FoodItem) -> None:
        """Create or overwrite a catalog entry."""

    def delete_food_item(self, food_item_id: str) -> None:
        """Delete a catalog entry."""


@dataclass
class FoodService:
    """Application service for catalog operations."""

    repository: FoodItemRepository
    store: AppStore
    favorite_service: FavoriteService
    id_factory: IdFactory = new_id

    def sync(self) -> PersistOutcome:
        """Reload the catalog from the repository into the snapshot."""
        try:
            items = self.repository.list_food_items()
        except Exception as exc:
            _logger.exception("Failed to load food items")
            return PersistOutcome(entity_id="food_items", ok=False, error=str(exc))
        self.store.replace_food_items(items)
        return PersistOutcome(entity_id="food_items", ok=True)

    def get_food_item(self, food_item_id: str) -> FoodItem | None:
        return self.store.get_food_item(food_item_id)

    def create_food_item(  # noqa: PLR0913
        self,
        *,
        brand: str,
        name: str,
        pack_weight: int,
        calories: int,
        servings_per_pack: int,
        meal_types: list[str],
        is_custom: bool = False,
    ) -> FoodItemResult:
        """Validate and add a catalog entry."""
        item = create_food_item(
            id=self.id_factory("food"),
            brand=brand,
            name=name,
            pack_weight=pack_weight,
            calories=calories,
            servings_per_pack=servings_per_pack,
            meal_types=meal_types,
            is_custom=is_custom,
        )
        return self._commit(item)

    def update_food_item(
        self, food_item_id: str, updates: dict[str, object]
    ) -> FoodItemResult | None:
        """Edit a catalog entry.

        Meals already planned keep their snapshot of the old values.
        """
        current = self.store.get_food_item(food_item_id)
        if current is None:
            return None
        unknown = set(updates) - set(_EDITABLE_FIELDS)
        if unknown:
            raise ValidationError(
                f"Fields cannot be edited: {', '.join(sorted(unknown))}"
            )
        fields = {name: getattr(current, name) for name in _EDITABLE_FIELDS}
        fields.update(updates)
        item = create_food_item(
            id=current.id,
            is_favorite=current.is_favorite,
            is_custom=current.is_custom,
            **fields,  # type: ignore[arg-type]
        )
        return self._commit(item)

    def delete_food_item(self, food_item_id: str) -> PersistOutcome | None:
        previous = self.store.remove_food_item(food_item_id)
        if previous is None:
            return None
        try:
            self.repository.delete_food_item(food_item_id)
        except Exception as exc:
            _logger.exception("Failed to delete food item %s", food_item_id)
            self.store.put_food_item(previous)
            return PersistOutcome(entity_id=food_item_id, ok=False, error=str(exc))
        return PersistOutcome(entity_id=food_item_id, ok=True)

    def toggle_favorite(self, food_item_id: str) -> FavoriteToggleResult | None:
        """Flip the favorite flag and carry it into every planned meal copy."""
        current = self.store.get_food_item(food_item_id)
        if current is None:
            return None
        result = self._commit(replace(current, is_favorite=not current.is_favorite))
        if not result.ok:
            return FavoriteToggleResult(
                item=result.item, outcome=result.outcome, trip_outcomes=[]
            )
        trip_outcomes = self.favorite_service.propagate(
            food_item_id, result.item.is_favorite
        )
        return FavoriteToggleResult(
            item=result.item, outcome=result.outcome, trip_outcomes=trip_outcomes
        )

    def search(  # noqa: PLR0913
        self,
        query: str | None = None,
        *,
        meal_type: str | None = None,
        favorites_only: bool = False,
        sort: str = "name",
        descending: bool = False,
    ) -> list[FoodItem]:
        """Filter the catalog by text, meal type and favorite flag, then sort."""
        items = self.store.list_food_items()
        if query:
            needle = query.lower()
            items = [
                item
                for item in items
                if needle in item.name.lower() or needle in item.brand.lower()
            ]
        if meal_type:
            items = [item for item in items if meal_type in item.meal_types]
        if favorites_only:
            items = [item for item in items if item.is_favorite]
        return self._sort(items, sort, descending)

    def list_favorites(self) -> list[FoodItem]:
        return [item for item in self.store.list_food_items() if item.is_favorite]

    @staticmethod
    def _sort(items: list[FoodItem], field: str, descending: bool) -> list[FoodItem]:
        """Sort foods by one of ``SORT_FIELDS``; ``favorite`` puts favorites first."""
        if field not in SORT_FIELDS:
            raise ValidationError(f"Unknown sort field: {field}")
        return sorted(items, key=_SORT_KEYS[field], reverse=descending)

    def _commit(self, item: FoodItem) -> FoodItemResult:
        previous = self.store.get_food_item(item.id)
        self.store.put_food_item(item)
        try:
            self.repository.save_food_item(item)
        except Exception as exc:
            _logger.exception("Failed to persist food item %s", item.id)
            if previous is None:
                self.store.remove_food_item(item.id)
                restored = item
            else:
                self.store.put_food_item(previous)
                restored = previous
            return FoodItemResult(
                item=restored,
                outcome=PersistOutcome(entity_id=item.id, ok=False, error=str(exc)),
            )
        return FoodItemResult(
            item=item, outcome=PersistOutcome(entity_id=item.id, ok=True)
        )
