"""Supabase repository for the food catalog."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from trail_kitchen.adapters.documents import (
    food_item_from_document,
    food_item_to_document,
)
from trail_kitchen.domain.foods import FoodItem
from trail_kitchen.services.foods import FoodItemRepository


@dataclass
class SupabaseFoodItemRepository(FoodItemRepository):
    """Supabase-backed repository for catalog entries."""

    client: Client
    owner_id: str
    table_name: str = "food_items"

    def list_food_items(self) -> list[FoodItem]:
        """Return every catalog entry for the owner."""
        response = (
            self.client.table(self.table_name)
            .select("document")
            .eq("user_id", self.owner_id)
            .execute()
        )
        return [
            food_item_from_document(row["document"]) for row in response.data or []
        ]

    def save_food_item(self, item: FoodItem) -> None:
        """Create or overwrite a catalog entry."""
        response = (
            self.client.table(self.table_name)
            .upsert(
                {
                    "id": item.id,
                    "user_id": self.owner_id,
                    "document": food_item_to_document(item),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError(f"Failed to save food item {item.id}")

    def delete_food_item(self, food_item_id: str) -> None:
        self.client.table(self.table_name).delete().eq("id", food_item_id).eq(
            "user_id", self.owner_id
        ).execute()
