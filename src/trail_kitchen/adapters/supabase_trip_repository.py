"""Supabase repository for trip documents."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from trail_kitchen.adapters.documents import trip_from_document, trip_to_document
from trail_kitchen.domain.trips import Trip
from trail_kitchen.services.trips import TripRepository


@dataclass
class SupabaseTripRepository(TripRepository):
    """Stores each trip as one JSON document row scoped to its owner."""

    client: Client
    owner_id: str
    table_name: str = "trips"

    def list_trips(self) -> list[Trip]:
        """Return every trip owned by the configured owner."""
        response = (
            self.client.table(self.table_name)
            .select("document")
            .eq("user_id", self.owner_id)
            .execute()
        )
        return [trip_from_document(row["document"]) for row in response.data or []]

    def save_trip(self, trip: Trip) -> None:
        """Create or overwrite a trip document."""
        response = (
            self.client.table(self.table_name)
            .upsert(
                {
                    "id": trip.id,
                    "user_id": self.owner_id,
                    "document": trip_to_document(trip),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError(f"Failed to save trip {trip.id}")

    def delete_trip(self, trip_id: str) -> None:
        """Delete a trip document."""
        self.client.table(self.table_name).delete().eq("id", trip_id).eq(
            "user_id", self.owner_id
        ).execute()
