"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from trail_kitchen.adapters.supabase_food_item_repository import (
    SupabaseFoodItemRepository,
)
from trail_kitchen.adapters.supabase_trip_repository import SupabaseTripRepository
from trail_kitchen.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from trail_kitchen.config import Settings, parse_unit_system
from trail_kitchen.services.export import ExportService
from trail_kitchen.services.favorites import FavoriteService
from trail_kitchen.services.foods import FoodItemRepository, FoodService
from trail_kitchen.services.stats import StatsService
from trail_kitchen.services.store import AppStore
from trail_kitchen.services.trips import TripRepository, TripService
from trail_kitchen.services.user_settings import (
    UserSettingsRepository,
    UserSettingsService,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: AppStore
    trip_service: TripService
    food_service: FoodService
    favorite_service: FavoriteService
    stats_service: StatsService
    export_service: ExportService
    user_settings_service: UserSettingsService

    def sync(self) -> list[str]:
        """Reload every collection from persistence and return failure messages."""
        outcomes = [
            self.user_settings_service.load(),
            self.food_service.sync(),
            self.trip_service.sync(),
        ]
        return [
            f"{outcome.entity_id}: {outcome.error}"
            for outcome in outcomes
            if not outcome.ok
        ]


def wire_container(
    settings: Settings,
    trip_repository: TripRepository,
    food_item_repository: FoodItemRepository,
    user_settings_repository: UserSettingsRepository,
) -> AppContainer:
    """Build services around the given repositories and one shared store."""
    default_unit_system = parse_unit_system(settings.default_unit_system)
    store = AppStore(unit_system=default_unit_system)
    trip_service = TripService(repository=trip_repository, store=store)
    favorite_service = FavoriteService(trip_service=trip_service)
    food_service = FoodService(
        repository=food_item_repository,
        store=store,
        favorite_service=favorite_service,
    )
    return AppContainer(
        settings=settings,
        store=store,
        trip_service=trip_service,
        food_service=food_service,
        favorite_service=favorite_service,
        stats_service=StatsService(store),
        export_service=ExportService(store),
        user_settings_service=UserSettingsService(
            repository=user_settings_repository,
            store=store,
            default_unit_system=default_unit_system,
        ),
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    return wire_container(
        resolved_settings,
        trip_repository=SupabaseTripRepository(
            supabase_client,
            owner_id=resolved_settings.owner_id,
            table_name=resolved_settings.trips_table,
        ),
        food_item_repository=SupabaseFoodItemRepository(
            supabase_client,
            owner_id=resolved_settings.owner_id,
            table_name=resolved_settings.food_items_table,
        ),
        user_settings_repository=SupabaseUserSettingsRepository(
            supabase_client,
            owner_id=resolved_settings.owner_id,
            table_name=resolved_settings.user_settings_table,
        ),
    )
