"""Outcomes of local mutations and their persistence."""

from dataclasses import dataclass

from trail_kitchen.domain.foods import FoodItem
from trail_kitchen.domain.trips import Trip


@dataclass(frozen=True)
class PersistOutcome:
    """Result of one write to the persistence collaborator."""

    entity_id: str
    ok: bool
    error: str | None = None


@dataclass(frozen=True)
class TripResult:
    """Trip as held in the snapshot after a mutation was persisted or rolled back."""

    trip: Trip
    outcome: PersistOutcome

    @property
    def ok(self) -> bool:
        return self.outcome.ok


@dataclass(frozen=True)
class FoodItemResult:
    """Food item as held in the snapshot after a persisted or rolled back change."""

    item: FoodItem
    outcome: PersistOutcome

    @property
    def ok(self) -> bool:
        return self.outcome.ok


@dataclass(frozen=True)
class FavoriteToggleResult:
    """Catalog write plus the per-trip writes of the favorite fan-out."""

    item: FoodItem
    outcome: PersistOutcome
    trip_outcomes: list[PersistOutcome]

    @property
    def ok(self) -> bool:
        return self.outcome.ok and all(result.ok for result in self.trip_outcomes)
