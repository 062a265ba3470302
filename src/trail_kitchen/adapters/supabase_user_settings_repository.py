"""Supabase repository for user settings."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from trail_kitchen.services.user_settings import UserSettingsRepository


@dataclass
class SupabaseUserSettingsRepository(UserSettingsRepository):
    """Supabase implementation for user settings."""

    client: Client
    owner_id: str
    table_name: str = "user_settings"

    def get_unit_system(self) -> str | None:
        """Return the stored unit system for the owner."""
        response = (
            self.client.table(self.table_name)
            .select("unit_system")
            .eq("user_id", self.owner_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("unit_system")

    def set_unit_system(self, unit_system: str) -> None:
        """Store the owner's unit system."""
        response = (
            self.client.table(self.table_name)
            .upsert(
                {
                    "user_id": self.owner_id,
                    "unit_system": unit_system,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save unit system")
